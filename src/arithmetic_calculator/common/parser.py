"""Convert user-supplied tokens into operands and operation requests."""
from typing import List

from arithmetic_calculator.common.exceptions import InvalidNumberError
from arithmetic_calculator.common.operations import OperationRequest


class InputParser:
    """
    Parse operand tokens and single-operation lines.

    Design constraints:
        - No eval(), no dynamic code execution
        - Exactly one operator and two operands per request (no precedence, no chaining)

    Examples:
        - Operand token: " 3.5 " -> 3.5
        - Request line: "10 / 3" -> OperationRequest(a=10.0, b=3.0, operation="/")
    """

    @staticmethod
    def tokenize(line: str) -> List[str]:
        """
        Split a request line into tokens.

        Tokens must be space-separated (e.g., "3 + 4").

        :param str line: Request line as a string

        :return: List of tokens
        :rtype: List[str]
        """
        return line.split()

    @staticmethod
    def _is_number(token: str) -> bool:
        """
        Determine if a token represents a numeric value.

        :param str token: Token string

        :return: True if token can be converted to float, else False
        :rtype: bool
        """
        try:
            float(token)
            return True
        except ValueError:
            return False

    @staticmethod
    def parse_number(token: str) -> float:
        """
        Convert an operand token to a float.

        Surrounding whitespace is ignored. Anything ``float()`` accepts is valid,
        including exponents and ``inf``/``nan``.

        :param str token: Operand token

        :return: Parsed operand
        :rtype: float
        :raises InvalidNumberError: If the token is empty or not numeric
        """
        token = token.strip()
        if not token:
            raise InvalidNumberError(token, "input cannot be empty")
        if not InputParser._is_number(token):
            raise InvalidNumberError(token)
        return float(token)

    @staticmethod
    def parse_request(line: str) -> OperationRequest:
        """
        Parse a line of the form ``<a> <operation> <b>``.

        :param str line: Request line

        :return: The parsed request
        :rtype: OperationRequest
        :raises ValueError: If the line does not hold exactly three tokens
        :raises InvalidNumberError: If an operand is not numeric
        """
        tokens: List[str] = InputParser.tokenize(line)
        if len(tokens) != 3:
            raise ValueError(f"Expected '<a> <operation> <b>', got {len(tokens)} token(s): {line!r}")

        first, operation, second = tokens
        return OperationRequest(
            a=InputParser.parse_number(first),
            b=InputParser.parse_number(second),
            operation=operation,
        )
