"""Validated runtime options for the calculator shell and entry point."""
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_MAX_EXPONENT = 10_000


class CalculatorSettings(BaseModel):
    """Options shared by the interactive shell and one-shot evaluation."""

    # Settings are read-only once the program has started
    model_config = ConfigDict(frozen=True)

    log_level: LogLevel = Field(default="WARNING", description="Logging level of the package logger")
    max_exponent: int = Field(
        default=DEFAULT_MAX_EXPONENT,
        ge=0,
        description="Largest exponent magnitude accepted from user input for power requests",
    )

    @field_validator("log_level", mode="before")
    def normalize_log_level(cls, v: object) -> object:
        """Accept log level names in any case."""
        if isinstance(v, str):
            return v.upper()
        return v


class CliArgs(CalculatorSettings):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    tokens : List[str]
        Either empty (interactive mode) or exactly ``<a> <operation> <b>``.
    """

    tokens: List[str] = Field(default_factory=list, description="One-shot request tokens")

    @field_validator("tokens")
    def tokens_form_one_request(cls, v: List[str]) -> List[str]:
        """Ensure tokens are either absent or a full ``a op b`` request."""
        if v and len(v) != 3:
            raise ValueError("expected no arguments or exactly three: <a> <operation> <b>")
        return v

    def settings(self) -> CalculatorSettings:
        """Return the shared settings without the request tokens."""
        return CalculatorSettings(log_level=self.log_level, max_exponent=self.max_exponent)
