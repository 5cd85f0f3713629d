"""
Command-Line Interface for the GPA engine.

Reads a transcript file, validates it and prints every GPA view.

    python -m gpa_engine transcript.csv --scale vmcas --window 45
    python -m gpa_engine transcript.json --json
    python -m gpa_engine transcript.csv --target 3.5 --planned-credits 30

EXIT STATUS:
    0  report printed
    1  the transcript has validation issues
    2  the transcript or scale could not be read
"""

import argparse
import json
import logging
import sys
from decimal import Decimal, InvalidOperation

from .config import DEFAULT_SCALE, DEFAULT_WINDOW_CREDITS
from .calculator import GPACalculator
from .exceptions import TranscriptFormatError

logger = logging.getLogger(__name__)


def _decimal_arg(text: str) -> Decimal:
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if not value.is_finite():
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gpa-engine",
        description="Compute cumulative, category, windowed and prerequisite GPAs from a transcript.",
    )
    parser.add_argument("transcript", nargs="?", help="Transcript file (.json or .csv)")
    parser.add_argument("--scale", default=DEFAULT_SCALE,
                        help=f"Grade scale name (default: {DEFAULT_SCALE})")
    parser.add_argument("--window", type=_decimal_arg, default=DEFAULT_WINDOW_CREDITS,
                        help="Credits in the most-recent-credits view (default: 45)")
    parser.add_argument("--valid-only", action="store_true",
                        help="Compute from the valid records instead of stopping on issues")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--target", type=_decimal_arg,
                        help="Target cumulative GPA for a planning projection")
    parser.add_argument("--planned-credits", type=_decimal_arg, default=Decimal("15"),
                        help="Future credits used by --target (default: 15)")
    parser.add_argument("--list-scales", action="store_true", help="List bundled grade scales")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    """
    Command-line interface for the GPA engine.

    Returns:
        Process exit status (see module docstring)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    calculator = GPACalculator()

    if args.list_scales:
        for name in calculator.list_scales():
            print(name)
        return 0

    if not args.transcript:
        parser.error("a transcript file is required")

    try:
        report = calculator.run(
            args.transcript,
            scale_name=args.scale,
            window_credits=args.window,
            valid_only=args.valid_only,
            display=not args.json,
        )
    except (FileNotFoundError, TranscriptFormatError) as e:
        logger.debug("Could not read input", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        # e.g. a non-positive --window
        print(f"error: {e}", file=sys.stderr)
        return 2

    projection = None
    if args.target is not None:
        if "cumulative" in report.views:
            scale = calculator.loader.load_scale(args.scale)
            try:
                projection = calculator.project(report, scale, args.target, args.planned_credits)
            except ValueError as e:
                print(f"error: {e}", file=sys.stderr)
                return 2
        else:
            print("warning: no cumulative GPA, skipping --target projection", file=sys.stderr)

    if args.json:
        data = report.to_dict()
        if projection is not None:
            data["projection"] = projection.to_dict()
        print(json.dumps(data, indent=2))
    elif projection is not None:
        calculator.display.print_projection(projection)

    return 0 if report.is_valid else 1


if __name__ == "__main__":
    sys.exit(main())
