"""Menu-driven interactive shell around the operation dispatcher."""
import io
import sys

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_calculator.common.exceptions import CalculatorError, InvalidNumberError
from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.parser import InputParser
from arithmetic_calculator.common.settings import CalculatorSettings
from arithmetic_calculator.core.dispatcher import (
    Dispatcher,
    check_exponent,
    describe_operations,
    supported_operations,
)

BANNER = "Welcome to the Arithmetic Calculator!"
MENU = (
    "\nChoose an option:\n"
    "1. Perform calculation\n"
    "2. View supported operations\n"
    "3. Exit"
)
GOODBYE = "Thank you for using the Arithmetic Calculator! Goodbye!"
INVALID_CHOICE = "Invalid choice. Please enter 1, 2, or 3."
INVALID_NUMBER = "Invalid number. Please enter a valid number."
DIVISION_NOTE = "\nNote: Division by zero is not allowed and will return an error."


class CalculatorShell(BaseModel):
    """
    Interactive read-eval-print loop for single binary operations.

    The shell:
    - shows a menu: perform a calculation, list supported operations, exit
    - reads two operands and one operator per calculation
    - refuses power requests whose exponent exceeds ``settings.max_exponent``
    - prints the result or the error, then returns to the menu

    End of input at any prompt ends the session like the exit option.
    """

    # Allow arbitrary types like text streams and the dispatcher
    model_config = ConfigDict(arbitrary_types_allowed=True)

    stdin: io.TextIOBase = Field(default_factory=lambda: sys.stdin, description="Stream user input is read from")
    stdout: io.TextIOBase = Field(default_factory=lambda: sys.stdout, description="Stream prompts and results go to")
    dispatcher: Dispatcher = Field(default_factory=Dispatcher, description="Operation dispatcher")
    settings: CalculatorSettings = Field(default_factory=CalculatorSettings, description="Runtime options")

    def _write(self, text: str = "") -> None:
        """Write a line to the output stream."""
        self.stdout.write(f"{text}\n")

    def _prompt(self, message: str) -> str:
        """
        Show a prompt and read one stripped line.

        :param str message: Prompt text, written without a trailing newline

        :return: The line read, without surrounding whitespace
        :rtype: str
        :raises EOFError: If the input stream is exhausted
        """
        self.stdout.write(message)
        self.stdout.flush()
        line: str = self.stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    def calculate_once(self) -> bool:
        """
        Read one calculation from the user, dispatch it and print the outcome.

        :return: True if a result was printed, False if input or dispatch failed
        :rtype: bool
        :raises EOFError: If the input stream is exhausted
        """
        try:
            a: float = InputParser.parse_number(self._prompt("Enter first number: "))
        except InvalidNumberError as exc:
            logger.info(f"Rejected first operand: {exc}")
            self._write(INVALID_NUMBER)
            return False

        symbols: str = ", ".join(supported_operations())
        identifier: str = self._prompt(f"Enter operation ({symbols}): ")

        try:
            b: float = InputParser.parse_number(self._prompt("Enter second number: "))
        except InvalidNumberError as exc:
            logger.info(f"Rejected second operand: {exc}")
            self._write(INVALID_NUMBER)
            return False

        try:
            check_exponent(self.dispatcher.resolve(identifier), b, self.settings.max_exponent)
            result: float = self.dispatcher.dispatch(a, b, identifier)
        except CalculatorError as exc:
            logger.warning(f"Calculation {a!r} {identifier} {b!r} failed: {exc}")
            self._write(f"Error: {exc}")
            return False

        self._write(f"Result: {a:.2f} {identifier} {b:.2f} = {result:.2f}")
        return True

    def perform_calculation(self) -> None:
        """
        Run calculations until one fails or the user declines another.

        :raises EOFError: If the input stream is exhausted
        """
        while self.calculate_once():
            answer: str = self._prompt("\nWould you like to perform another calculation? (y/n): ")
            if answer.lower() not in ("y", "yes"):
                return

    def show_supported_operations(self) -> None:
        """Print every operation with its symbol and word alias."""
        self._write("\nSupported Operations:")
        for line in describe_operations():
            self._write(line)
        self._write(DIVISION_NOTE)

    def run(self) -> int:
        """
        Run the menu loop until the user exits or input ends.

        :return: Process exit status
        :rtype: int
        """
        logger.info("Interactive session started")
        self._write(BANNER)
        self._write("=" * len(BANNER))

        try:
            while True:
                self._write(MENU)
                choice: str = self._prompt("Enter your choice (1-3): ")

                if choice == "1":
                    self.perform_calculation()
                elif choice == "2":
                    self.show_supported_operations()
                elif choice == "3":
                    break
                else:
                    self._write(INVALID_CHOICE)
        except EOFError:
            # Terminate the pending prompt line
            self._write()
            logger.info("Input ended, leaving interactive session")

        self._write(GOODBYE)
        return 0
