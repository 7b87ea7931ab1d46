"""Pydantic models for arithmetic operation requests and results."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class OperationRequest(BaseModel):
    """Represents a single binary operation request: two operands and one operator."""

    model_config = ConfigDict(frozen=True)

    a: float = Field(..., description="First operand")
    b: float = Field(..., description="Second operand")
    operation: str = Field(..., description="Operator symbol or word alias, e.g. '+' or 'add'")


class OperationResult(BaseModel):
    """
    Represents the outcome of a dispatched operation.

    Exactly one of ``result`` and ``error`` is set: a numeric value on success,
    an error description on failure.
    """

    model_config = ConfigDict(frozen=True)

    a: float = Field(..., description="First operand")
    b: float = Field(..., description="Second operand")
    operation: str = Field(..., description="Operation identifier as requested")
    result: Optional[float] = Field(default=None, description="Computed value on success")
    error: Optional[str] = Field(default=None, description="Error description on failure")

    @model_validator(mode="after")
    def result_xor_error(self) -> "OperationResult":
        """Ensure the result carries either a value or an error, never both or neither."""
        if (self.result is None) == (self.error is None):
            raise ValueError("exactly one of 'result' and 'error' must be set")
        return self

    @property
    def ok(self) -> bool:
        """True when the operation produced a value."""
        return self.error is None
