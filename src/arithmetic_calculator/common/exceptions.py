"""Exceptions raised by the calculator and its interactive shell."""
from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class UnsupportedOperationError(CalculatorError):
    """Raised when an operation identifier matches no known operation."""

    def __init__(self, identifier: str) -> None:
        super().__init__("unsupported operation", identifier)
        self.identifier = identifier


class DivisionByZeroError(CalculatorError):
    """Raised when the divisor of a division is exactly zero."""

    def __init__(self, numerator: float) -> None:
        super().__init__("division by zero is not allowed")
        self.numerator = numerator


class InvalidNumberError(CalculatorError):
    """Raised when an operand token cannot be converted to a float."""

    def __init__(self, token: str, reason: str = "invalid number format") -> None:
        super().__init__(reason, repr(token) if token else None)
        self.token = token
        self.reason = reason


class ExponentTooLargeError(CalculatorError):
    """Raised when a power request exceeds the configured exponent bound."""

    def __init__(self, exponent: float, limit: int) -> None:
        super().__init__(f"exponent magnitude exceeds {limit}", exponent)
        self.exponent = exponent
        self.limit = limit
