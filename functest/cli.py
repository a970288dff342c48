"""
Demonstration entry point for the function test harness.

Runs the example series from the harness documentation: a list-returning
function tested with an element-wise comparator, and an integer division
tested with the minimal profile. Two of the runs are meant to fail; the
exit status reports whether every run ended the way it was meant to.
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence, TextIO

from .comparator import sequences_equal
from .config import HarnessSettings
from .exceptions import ConfigurationError
from .harness import FunctionTest
from .utils.constants import LOG_FORMAT
from .utils.formatting import join_to_string

logger = logging.getLogger(__name__)


def make_triple(i: int, j: int) -> List[int]:
    return [1, i, j]


def divide_ten_by(x: int) -> int:
    return 10 // x


def run_demo(settings: HarnessSettings, output: Optional[TextIO] = None) -> bool:
    """
    Run the example series.

    Args:
        settings: Harness settings applied to both testers
        output: Report stream (defaults to sys.stdout)

    Returns:
        True if every run succeeded or failed as anticipated
    """
    series = FunctionTest.from_settings(make_triple, settings, sequences_equal, join_to_string, output)
    division = FunctionTest.from_settings(divide_ten_by, settings, output=output)

    checks = [
        ("Run 1", series.test("Run 1", [1, 13, 15], 13, 15).success, True),
        ("Run 2", series.test("Run 2", [1, 13, 15], 13, 99).success, False),
        ("divide", division.test("divide", 5, 2).success, True),
        ("div by zero", division.test("div by zero", 0, 0).success, False),
    ]

    unexpected = [name for name, success, anticipated in checks if success != anticipated]
    for name in unexpected:
        logger.error(f"Run '{name}' did not end as anticipated")
    return not unexpected


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Function Test Harness demonstration")
    parser.add_argument("--config", help="Harness settings file (YAML)")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print result details for failed runs")
    parser.add_argument("--line-length", type=int,
                        help="Width the test name column is padded to")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level")

    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    try:
        settings = HarnessSettings.load_from_file(args.config) if args.config else HarnessSettings()
        if args.line_length is not None:
            settings = HarnessSettings(
                verbose=settings.verbose,
                output_line_length=args.line_length,
                fill_char=settings.fill_char
            )
    except (ConfigurationError, ValueError) as e:
        logger.error(f"Invalid settings: {e}")
        sys.exit(2)

    if args.quiet:
        settings = settings.model_copy(update={"verbose": False})

    sys.exit(0 if run_demo(settings) else 1)


if __name__ == "__main__":
    main()
