"""CLI entry point for gcd-tool.

Reads unsigned integers from the command line and prints their greatest
common divisor.
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.table import Table

from gcd_tool import __version__
from gcd_tool.core.collector import collect_arguments
from gcd_tool.core.config import GcdConfig
from gcd_tool.core.reducer import fold_steps, gcd_fold
from gcd_tool.core.types import USAGE_MESSAGE, FoldStep, GcdReport

logger = logging.getLogger(__name__)

# Exit statuses
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_PARSE_ERROR = 2


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="gcd",
        description="Print the greatest common divisor of unsigned 64-bit integers.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Two numbers
  gcd 14 15

  # Any number of values, folded left to right
  gcd 330 2431 121

  # Show each step of the fold
  gcd --trace 2 4 6

  # Treat 0 as the identity instead of failing
  gcd --zero-identity 0 5

Environment Variables:
  GCD_ZERO_IDENTITY: Same as --zero-identity when set to 1/true/yes/on
  GCD_LOG_LEVEL: Logging level (default: WARNING)
        """,
    )

    parser.add_argument(
        "numbers",
        nargs="*",
        metavar="UINT",
        help="Unsigned 64-bit integers",
    )

    parser.add_argument(
        "--zero-identity", "-z",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Treat 0 as the identity element (gcd(0, b) = b); overrides GCD_ZERO_IDENTITY",
    )

    parser.add_argument(
        "--trace", "-t",
        action="store_true",
        help="Print each fold step as a table on stderr",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def _configure_logging(config: GcdConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.log_level)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("gcd_tool").setLevel(level)


def print_fold_table(numbers: tuple[int, ...], steps: list[FoldStep]) -> None:
    """Render the fold steps as a table on stderr."""
    console = Console(stderr=True)
    table = Table(title="gcd fold", border_style="blue")
    table.add_column("Step", justify="right", style="dim")
    table.add_column("Accumulator", justify="right")
    table.add_column("Operand", justify="right")
    table.add_column("gcd", justify="right", style="bold cyan")

    table.add_row("0", "", str(numbers[0]), str(numbers[0]))
    for i, step in enumerate(steps, start=1):
        table.add_row(str(i), str(step.accumulator), str(step.operand), str(step.result))

    console.print(table)


def _in_argument_order(argv: list[str], numbers: list[str], unknown: list[str]) -> list[str]:
    """Merge positional and unrecognized tokens back into command-line order."""
    numbers_left = list(numbers)
    unknown_left = list(unknown)
    ordered: list[str] = []

    for token in argv:
        if unknown_left and token == unknown_left[0]:
            ordered.append(unknown_left.pop(0))
        elif numbers_left and token == numbers_left[0]:
            ordered.append(numbers_left.pop(0))

    # Anything argparse rewrote is kept at the end rather than dropped
    return ordered + numbers_left + unknown_left


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    if argv is None:
        argv = sys.argv[1:]
    parser = create_parser()
    # Unknown dash-prefixed tokens are bad numbers, not bad options
    args, unknown = parser.parse_known_intermixed_args(argv)

    config = GcdConfig.from_env()
    if args.zero_identity is not None:
        config = config.model_copy(update={"zero_as_identity": args.zero_identity})
    _configure_logging(config, args.verbose)

    # Every argument is parsed before anything else happens
    collected = collect_arguments(_in_argument_order(argv, args.numbers, unknown))
    if not collected.ok:
        print(collected.message, file=sys.stderr)
        return EXIT_PARSE_ERROR

    numbers = collected.numbers
    if not numbers:
        print(USAGE_MESSAGE, file=sys.stderr)
        return EXIT_USAGE

    if args.trace:
        steps = fold_steps(numbers, zero_as_identity=config.zero_as_identity)
        print_fold_table(numbers, steps)
        divisor = steps[-1].result if steps else numbers[0]
    else:
        divisor = gcd_fold(numbers, zero_as_identity=config.zero_as_identity)

    report = GcdReport(numbers=numbers, divisor=divisor)
    logger.debug("Reporting gcd=%d for %d value(s)", divisor, len(numbers))
    print(report)
    return EXIT_OK


def run() -> None:
    """Console script entry point."""
    try:
        raise SystemExit(main())
    except Exception as e:
        # Contract violations halt the process with a traceback
        print(f"Error: {e}", file=sys.stderr)
        raise


if __name__ == "__main__":  # pragma: no cover
    run()
