"""Resolve operation identifiers and evaluate binary arithmetic operations."""
from enum import Enum
import math
import operator
from typing import Callable, Dict, List

from arithmetic_calculator.common.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    ExponentTooLargeError,
    UnsupportedOperationError,
)
from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.operations import OperationRequest, OperationResult


# Type alias for operation functions (taking two floats, returning a float)
OperatorFn = Callable[[float, float], float]


class Operation(Enum):
    """Closed set of supported binary operations: (symbol, word alias, description)."""

    ADD = ("+", "add", "Addition")
    SUBTRACT = ("-", "subtract", "Subtraction")
    MULTIPLY = ("*", "multiply", "Multiplication")
    DIVIDE = ("/", "divide", "Division")
    POWER = ("^", "power", "Power (exponentiation)")

    def __init__(self, symbol: str, alias: str, description: str) -> None:
        self.symbol = symbol
        self.alias = alias
        self.description = description


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    :raises DivisionByZeroError: If b is exactly zero (``-0.0`` included)
    """
    if b == 0.0:
        raise DivisionByZeroError(a)
    return a / b


def power(base: float, exponent: float) -> float:
    """
    Raise base to the exponent truncated toward zero.

    The base is multiplied into the result once per unit of the truncated
    exponent. A count of zero or less gives 1.0 for every base, so negative,
    fractional below one, and non-finite exponents all yield 1.0. The loop is
    linear in the exponent; callers taking untrusted input bound it first
    with :func:`check_exponent`.
    """
    if not math.isfinite(exponent):
        return 1.0

    result: float = 1.0
    for _ in range(int(exponent)):
        result *= base
    return result


def check_exponent(op: Operation, exponent: float, limit: int) -> None:
    """
    Refuse power requests whose exponent magnitude exceeds ``limit``.

    Other operations and NaN exponents pass unchanged.

    :raises ExponentTooLargeError: If the exponent is out of bounds
    """
    if op is Operation.POWER and abs(exponent) > limit:
        raise ExponentTooLargeError(exponent, limit)


# Mapping of each operation to its implementation
OPERATIONS: Dict[Operation, OperatorFn] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: divide,
    Operation.POWER: power,
}

# Mapping of every accepted identifier (symbol and word alias) to its operation
ALIASES: Dict[str, Operation] = {
    identifier: op for op in Operation for identifier in (op.symbol, op.alias)
}

if set(OPERATIONS) != set(Operation):
    raise RuntimeError("Every Operation member must have an implementation")


def supported_operations() -> List[str]:
    """Return the canonical operator symbols in menu order."""
    return [op.symbol for op in Operation]


def describe_operations() -> List[str]:
    """Return one help line per operation, e.g. ``'+ or add      : Addition'``."""
    width: int = max(len(f"{op.symbol} or {op.alias}") for op in Operation)
    return [f"{op.symbol + ' or ' + op.alias:<{width}} : {op.description}" for op in Operation]


class Dispatcher:
    """
    Stateless lookup-and-invoke entry point for binary arithmetic operations.

    The dispatcher holds no fields: independent instances behave identically
    and may be shared between threads without coordination.

    Examples:
        >>> Dispatcher().dispatch(2.0, 3.0, "^")
        8.0
        >>> Dispatcher().dispatch(5.0, 3.0, "add")
        8.0
    """

    __slots__ = ()

    @staticmethod
    def resolve(identifier: str) -> Operation:
        """
        Resolve an operation identifier, matched case-sensitively.

        :param str identifier: Operator symbol or word alias

        :return: The matching operation
        :rtype: Operation
        :raises UnsupportedOperationError: If no operation matches
        """
        try:
            return ALIASES[identifier]
        except KeyError:
            raise UnsupportedOperationError(identifier) from None

    def dispatch(self, a: float, b: float, identifier: str) -> float:
        """
        Evaluate ``a <identifier> b``.

        :param float a: First operand
        :param float b: Second operand
        :param str identifier: Operator symbol or word alias

        :return: Computed result
        :rtype: float
        :raises UnsupportedOperationError: If the identifier is unknown
        :raises DivisionByZeroError: If dividing by exactly zero
        """
        op: Operation = self.resolve(identifier)
        result: float = OPERATIONS[op](a, b)
        logger.debug("Dispatched %r %s %r = %r", a, op.symbol, b, result)
        return result

    def evaluate(self, request: OperationRequest) -> OperationResult:
        """
        Evaluate a request, returning failures as values instead of raising.

        :param OperationRequest request: Operands and operation identifier

        :return: Result holding either the computed value or the error message
        :rtype: OperationResult
        """
        try:
            value: float = self.dispatch(request.a, request.b, request.operation)
        except CalculatorError as exc:
            logger.warning("Rejected %r %s %r: %s", request.a, request.operation, request.b, exc)
            return OperationResult(
                a=request.a, b=request.b, operation=request.operation, error=str(exc)
            )
        return OperationResult(a=request.a, b=request.b, operation=request.operation, result=value)


def dispatch(a: float, b: float, identifier: str) -> float:
    """Evaluate ``a <identifier> b`` with a fresh :class:`Dispatcher`."""
    return Dispatcher().dispatch(a, b, identifier)
