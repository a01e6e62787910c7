"""Command-line calculator for NonSmallInt values.

Usage:
    nonsmallint add 123456789012345678901234567890 1
    nonsmallint divmod 100 7
    nonsmallint pow 2 200 --verbose

Exit codes:
    0 - Result printed
    1 - Arithmetic failure (division by zero, underflow)
    2 - Invalid arguments or operands
"""

import argparse
import logging
import sys

import structlog

from nonsmallint.core import NonSmallInt
from nonsmallint.errors import NonSmallIntError

logger = structlog.get_logger()

OPERATIONS = ("add", "sub", "checked_sub", "mul", "div", "rem", "divmod", "pow", "cmp", "len")

# Operations that take a single operand
UNARY_OPERATIONS = {"len"}


def evaluate(op: str, lhs: NonSmallInt, rhs: NonSmallInt | None) -> str:
    """Apply op and render the result as text.

    Raises:
        DivisionByZero: For div, rem and divmod by zero
        Underflow: For sub with rhs > lhs
    """
    if op == "len":
        return str(lhs.length())

    assert rhs is not None
    if op == "add":
        return str(lhs + rhs)
    if op == "sub":
        return str(lhs - rhs)
    if op == "checked_sub":
        result = lhs.checked_sub(rhs)
        return "none" if result is None else str(result)
    if op == "mul":
        return str(lhs * rhs)
    if op == "div":
        return str(lhs // rhs)
    if op == "rem":
        return str(lhs % rhs)
    if op == "divmod":
        quotient, remainder = divmod(lhs, rhs)
        return f"{quotient} {remainder}"
    if op == "pow":
        return str(lhs ** int(rhs))
    if op == "cmp":
        return str(lhs.compare(rhs))
    raise ValueError(f"Unknown operation: {op}")


def configure_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="nonsmallint",
        description="Arbitrary-precision unsigned integer calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("op", choices=OPERATIONS, help="Operation to apply")
    parser.add_argument("lhs", help="Left operand (decimal)")
    parser.add_argument("rhs", nargs="?", help="Right operand (decimal)")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log arithmetic dispatch decisions",
    )

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.op not in UNARY_OPERATIONS and args.rhs is None:
        parser.error(f"{args.op} requires two operands")

    lhs = NonSmallInt.parse(args.lhs)
    if lhs is None:
        parser.error(f"not a decimal integer: {args.lhs!r}")
    rhs = None
    if args.rhs is not None:
        rhs = NonSmallInt.parse(args.rhs)
        if rhs is None:
            parser.error(f"not a decimal integer: {args.rhs!r}")

    logger.debug("cli_evaluate", op=args.op, lhs_length=lhs.length())

    try:
        output = evaluate(args.op, lhs, rhs)
    except NonSmallIntError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
