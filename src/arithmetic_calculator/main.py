"""
Command-line entrypoint of the arithmetic calculator.

This script either:
- Starts the interactive menu shell (no positional arguments)
- Evaluates a single ``<a> <operation> <b>`` request and prints the result

Examples
--------
arithmetic-calculator
arithmetic-calculator 10 / 3
arithmetic-calculator --log-level debug 2 power 8
"""

import argparse
from itertools import islice
import sys
from typing import List, Optional

from pydantic import ValidationError

from arithmetic_calculator.cli.shell import CalculatorShell
from arithmetic_calculator.common.exceptions import CalculatorError
from arithmetic_calculator.common.logger import configure_logging
from arithmetic_calculator.common.operations import OperationRequest, OperationResult
from arithmetic_calculator.common.parser import InputParser
from arithmetic_calculator.common.settings import DEFAULT_MAX_EXPONENT, CliArgs
from arithmetic_calculator.core.dispatcher import Dispatcher, check_exponent, describe_operations


# Options that consume the following argument as their value
VALUE_OPTIONS = ("--log-level", "--max-exponent")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser; help lists the supported operations."""
    parser = argparse.ArgumentParser(
        prog="arithmetic-calculator",
        description="Interactive calculator for one binary operation at a time",
        epilog=(
            "operands may be negative or use exponent notation, e.g. -1e5 + 1\n\n"
            "supported operations:\n  " + "\n  ".join(describe_operations())
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "tokens",
        nargs="*",
        metavar="a op b",
        help="Evaluate a single request instead of starting the interactive shell",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    parser.add_argument(
        "--max-exponent",
        type=int,
        default=DEFAULT_MAX_EXPONENT,
        help="Largest exponent magnitude accepted for power requests",
    )
    return parser


def separate_request_tokens(argv: List[str]) -> List[str]:
    """
    Move request tokens behind a ``--`` separator.

    argparse reads operands such as ``-1e5`` or ``-inf`` and the ``-`` operator
    as options. Every argument that is not an option (or an option's value) is
    kept in order after ``--`` so it reaches the ``tokens`` positional.

    Examples
    --------
    ["2", "-", "-1e3"] -> ["--", "2", "-", "-1e3"]
    ["--log-level", "debug", "-inf", "*", "2"] -> ["--log-level", "debug", "--", "-inf", "*", "2"]

    :param argv: Raw command-line arguments
    :return: Arguments safe to hand to argparse
    """
    options: List[str] = []
    tokens: List[str] = []
    args = iter(argv)
    for arg in args:
        if arg == "--":
            tokens.extend(args)
            break
        if arg.startswith("-") and arg != "-" and not InputParser._is_number(arg):
            options.append(arg)
            if arg in VALUE_OPTIONS:
                options.extend(islice(args, 1))
        else:
            tokens.append(arg)

    if not tokens:
        return options
    return options + ["--"] + tokens


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to ``sys.argv[1:]``

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(separate_request_tokens(argv))

    try:
        return CliArgs(tokens=args.tokens, log_level=args.log_level, max_exponent=args.max_exponent)
    except ValidationError as exc:
        parser.error(str(exc))


def evaluate_once(tokens: List[str], max_exponent: int = DEFAULT_MAX_EXPONENT) -> int:
    """
    Evaluate a single request given as three tokens and print the result.

    The result is printed at full precision; errors go to stderr.

    :param tokens: ``[a, operation, b]``
    :param max_exponent: Largest exponent magnitude accepted for power requests

    :return: Process exit status, 0 on success and 1 on failure
    :rtype: int
    """
    try:
        request: OperationRequest = InputParser.parse_request(" ".join(tokens))
        check_exponent(Dispatcher.resolve(request.operation), request.b, max_exponent)
    except (CalculatorError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    outcome: OperationResult = Dispatcher().evaluate(request)
    if not outcome.ok:
        print(f"Error: {outcome.error}", file=sys.stderr)
        return 1

    print(outcome.result)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function of the console script.
    """
    cli_args = parse_args(argv)
    configure_logging(cli_args.log_level)

    if cli_args.tokens:
        return evaluate_once(cli_args.tokens, cli_args.max_exponent)

    shell = CalculatorShell(settings=cli_args.settings())
    return shell.run()


if __name__ == "__main__":
    sys.exit(main())
