"""
Command-line entry point.

This script:
- Parses the operation and operands from the command line
- Validates them into a CalculationRequest
- Runs a single Calculation and prints its outcome

Exit status is 0 on success, 1 when the calculation fails and
2 for usage errors reported by argparse.
"""

import argparse
import sys
from typing import List, Optional, Tuple

from pydantic import ValidationError

from arithmetic_cli.common.errors import CalcError
from arithmetic_cli.common.logger import configure_logging, logger
from arithmetic_cli.common.models import CalculationRequest
from arithmetic_cli.common.operations import Operation
from arithmetic_cli.engine.evaluator import Calculation

__version__ = "1.0.1"


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser.

    :return: Configured parser
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="calc",
        description="A custom command-line app for mathematical operations",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-o",
        "--operation",
        required=True,
        choices=Operation.names(),
        help="Specify the operation: " + ", ".join(Operation.names()),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress to stderr",
    )
    parser.add_argument("operand1", help="The first operand")
    # No option looks like a number, so argparse keeps "-4" as a positional
    parser.add_argument("operand2", nargs="?", default=None, help="The second operand")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> Tuple[CalculationRequest, bool]:
    """
    Parse and validate command-line arguments.

    :param Optional[List[str]] argv: Arguments, ``sys.argv[1:]`` when None

    :return: Validated request and the verbose flag
    :rtype: Tuple[CalculationRequest, bool]
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        request = CalculationRequest(
            operation=args.operation,
            operand1=args.operand1,
            operand2=args.operand2,
        )
    except ValidationError as exc:
        parser.error(str(exc))

    return request, args.verbose


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run one calculation and print ``Result: <value>`` or ``Error: <message>``.

    :param Optional[List[str]] argv: Arguments, ``sys.argv[1:]`` when None

    :return: Process exit status
    :rtype: int
    """
    request, verbose = parse_args(argv)
    configure_logging(verbose)

    try:
        result = Calculation(request=request).run()
    except CalcError as exc:
        print(f"Error: {exc}")
        return 1

    print(result.render())
    logger.info("Result printed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
