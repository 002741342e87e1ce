"""
ChronoParts - Main Entry Point.

Inspects the calendar fields of an instant and generates calendar
workbooks.

Usage:
    python main.py inspect [--timestamp <ms>] [--offset <hours>] [--json]
                           [--output-dir <dir>]
    python main.py load <json_file>
    python main.py calendar <year> [--offset <hours>] [--output-dir <dir>]

Example:
    python main.py inspect --timestamp 1709164800000 --offset 0
    python main.py calendar 2026 --output-dir reports/
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from chronoparts import __version__
from chronoparts.calendar_report import WEEK_DAY_NAMES, CalendarReporter
from chronoparts.date_time import DateTime
from chronoparts.serialiser import DateTimeSerialiser
from chronoparts.validator import InvalidDateTime

logger = logging.getLogger(__name__)


def print_header() -> None:
    """Prints the application header."""
    print("=" * 60)
    print("  ChronoParts - Calendar Arithmetic")
    print(f"  Version: {__version__}")
    print("=" * 60)
    print()


def print_fields(date_time: DateTime) -> None:
    """
    Prints every calendar field of a DateTime to the console.

    Args:
        date_time: DateTime to describe.
    """
    print(f"  {date_time.to_iso_string()}")
    print("  " + "-" * 40)
    print(f"  Timestamp:         {date_time.timestamp}")
    print(f"  Time Zone Offset:  {date_time.time_zone_offset:+g} h")
    print()

    print("  GREGORIAN")
    print("  " + "-" * 40)
    print(f"  Year:              {date_time.year}"
          f"{' (leap)' if date_time.is_leap_year else ''}")
    print(f"  Month / Day:       {date_time.month} / {date_time.month_day}")
    print(f"  Ordinal Day:       {date_time.ordinal_day}")
    print()

    print("  ISO 8601")
    print("  " + "-" * 40)
    print(f"  Week Date:         {date_time.to_iso_week_string()}")
    print(f"  ISO Year:          {date_time.iso_year}"
          f"{' (53 weeks)' if date_time.is_long_iso_year else ''}")
    print(f"  Week Day:          {WEEK_DAY_NAMES[date_time.week_day - 1]}")
    print()

    print("  CLOCK")
    print("  " + "-" * 40)
    meridiem = "PM" if date_time.meridiem else "AM"
    print(f"  24-hour:           {date_time.hour24:02d}:{date_time.minute:02d}"
          f":{date_time.second:02d}.{date_time.millisecond:03d}")
    print(f"  12-hour:           {date_time.hour12:02d}:{date_time.minute:02d} {meridiem}")
    print()


def run_inspect(
    timestamp: Optional[int],
    time_zone_offset: Optional[float],
    as_json: bool,
    output_dir: Optional[Path]
) -> int:
    """
    Prints the fields of an instant, the current one by default.

    Args:
        timestamp: Milliseconds since the epoch, or None for now.
        time_zone_offset: Offset in hours, or None for the default.
        as_json: Print the JSON document instead of the field list.
        output_dir: If set, also save the JSON document there.

    Returns:
        Exit code (0 for success, 1 for errors).
    """
    if timestamp is None:
        result = DateTime.now(time_zone_offset)
    else:
        result = DateTime.from_timestamp(timestamp, time_zone_offset)

    if not result.is_ok:
        print(f"  ❌ ERROR: {result.error}")
        return 1

    date_time = result.value
    serialiser = DateTimeSerialiser()

    if as_json:
        print(serialiser.serialise(date_time))
    else:
        print_header()
        print_fields(date_time)

    if output_dir is not None:
        json_path = output_dir / serialiser.generate_filename()
        try:
            serialiser.save_to_file(date_time, json_path)
        except OSError as e:
            print(f"  ❌ ERROR: Cannot write {json_path}: {e}")
            return 1
        print(f"  ✓ Saved: {json_path}")

    return 0


def run_load(json_path: Path) -> int:
    """
    Loads a saved DateTime document and prints its fields.

    Args:
        json_path: Path to the JSON document.

    Returns:
        Exit code (0 for success, 1 for errors).
    """
    print_header()
    print(f"  Loading: {json_path}")

    try:
        result = DateTimeSerialiser().load_from_file(json_path)
    except FileNotFoundError:
        print(f"\n  ❌ ERROR: File not found: {json_path}")
        return 1
    except (json.JSONDecodeError, KeyError, TypeError) as e:
        print(f"\n  ❌ ERROR: Malformed document: {e}")
        return 1

    if not result.is_ok:
        print(f"\n  ❌ REJECTED: {result.error}")
        return 1

    print()
    print_fields(result.value)
    return 0


def run_calendar(year: int, time_zone_offset: float, output_dir: Path) -> int:
    """
    Generates the calendar workbook of a year.

    Args:
        year: Gregorian year.
        time_zone_offset: Offset in hours the days are expressed in.
        output_dir: Directory for the workbook.

    Returns:
        Exit code (0 for success, 1 for errors).
    """
    print_header()

    reporter = CalendarReporter()
    excel_path = output_dir / reporter.generate_filename(year)

    try:
        day_count = reporter.generate_report(year, excel_path, time_zone_offset)
    except InvalidDateTime as e:
        print(f"  ❌ ERROR: {e}")
        return 1
    except OSError as e:
        print(f"  ❌ ERROR: Cannot write {excel_path}: {e}")
        return 1

    print(f"  ✓ {day_count} days written")
    print(f"  ✓ Calendar saved: {excel_path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Builds the command line parser."""
    parser = argparse.ArgumentParser(
        description="ChronoParts - Gregorian and ISO 8601 calendar arithmetic"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Print the calendar fields of an instant"
    )
    inspect_parser.add_argument(
        "--timestamp",
        type=int,
        default=None,
        help="Milliseconds since 1970-01-01T00:00:00Z (default: now)"
    )
    inspect_parser.add_argument(
        "--offset",
        type=float,
        default=None,
        help="Time zone offset in hours (default: local offset)"
    )
    inspect_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the JSON document instead of the field list"
    )
    inspect_parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Also save the JSON document in this directory"
    )

    load_parser = subparsers.add_parser(
        "load",
        help="Load and validate a saved JSON document"
    )
    load_parser.add_argument(
        "json_file",
        type=Path,
        help="Path to the JSON document"
    )

    calendar_parser = subparsers.add_parser(
        "calendar",
        help="Generate the Excel calendar of a year"
    )
    calendar_parser.add_argument(
        "year",
        type=int,
        help="Gregorian year"
    )
    calendar_parser.add_argument(
        "--offset",
        type=float,
        default=0.0,
        help="Time zone offset in hours (default: 0)"
    )
    calendar_parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("output"),
        help="Output directory for reports (default: output/)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command line arguments. Defaults to sys.argv[1:].

    Returns:
        Exit code.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )
    logger.debug("Running %s", args.command)

    if args.command == "inspect":
        return run_inspect(args.timestamp, args.offset, args.json, args.output_dir)
    if args.command == "load":
        return run_load(args.json_file)
    return run_calendar(args.year, args.offset, args.output_dir)


if __name__ == "__main__":
    sys.exit(main())
