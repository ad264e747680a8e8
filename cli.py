"""Lightweight CLI for the mountain huts report.

Usage:
    huts report                          # report for the region in settings.toml
    huts report data/huts.csv --name Piemonte --ranges 0-1000 1000-2000
    huts range 1500 --ranges 0-1000 1000-2000
    huts log-level DEBUG                 # set log level in settings.toml
"""

import argparse
import logging
import re
import sys
from pathlib import Path

from settings_service import SETTINGS_PATH, SettingsService, clear_settings_cache

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load_settings_or_none(path: Path) -> SettingsService | None:
    """Settings are optional for report/range: CLI flags can supply everything."""
    if not path.exists():
        return None
    return SettingsService(path)


def cmd_report(args: argparse.Namespace) -> int:
    """Load a huts data file and print every aggregation query."""
    if not args.verbose:
        # Keep load summaries off the console
        logging.disable(logging.INFO)

    from domain import ParseError
    from facades import Region
    from ui import render_region_report

    settings = _load_settings_or_none(SETTINGS_PATH)
    name = args.name or (settings.region_name if settings else "Region")
    data_file = args.file or (settings.data_file if settings else None)
    ranges = args.ranges if args.ranges is not None else (settings.altitude_ranges if settings else [])

    if not data_file:
        print("no data file given and none configured in settings.toml")
        return 1

    try:
        region = Region.from_file(name, data_file)
        region.set_altitude_ranges(*ranges)
    except ParseError as e:
        print(f"error: {e}")
        return 1

    print(render_region_report(region))
    return 0


def cmd_range(args: argparse.Namespace) -> int:
    """Print the altitude range label for an altitude."""
    from domain import ParseError
    from facades import Region

    settings = _load_settings_or_none(SETTINGS_PATH)
    ranges = args.ranges if args.ranges is not None else (settings.altitude_ranges if settings else [])

    region = Region(settings.region_name if settings else "Region")
    try:
        region.set_altitude_ranges(*ranges)
    except ParseError as e:
        print(f"error: {e}")
        return 1
    print(region.get_altitude_range(args.altitude))
    return 0


def cmd_log_level(args: argparse.Namespace) -> int:
    """Get or set the log level in settings.toml."""
    try:
        current = SettingsService(SETTINGS_PATH).log_level
    except OSError as e:
        print(f"cannot read {SETTINGS_PATH}: {e}")
        return 1

    if args.level is None:
        print(current)
        return 0

    level = args.level.upper()
    if level not in VALID_LOG_LEVELS:
        print(f"invalid level: {args.level} (expected one of {', '.join(VALID_LOG_LEVELS)})")
        return 1

    if level == current:
        print(f"already {level}")
        return 0

    content = SETTINGS_PATH.read_text()
    updated = re.sub(
        r'(log_level\s*=\s*)"[^"]*"',
        rf'\1"{level}"',
        content,
    )
    SETTINGS_PATH.write_text(updated)
    clear_settings_cache()
    print(f"{current} → {level}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="huts", description="Mountain huts statistics")
    sub = parser.add_subparsers(dest="command")

    report_parser = sub.add_parser("report", help="Print the statistics of a huts data file")
    report_parser.add_argument("file", nargs="?", default=None, help="';'-separated data file (default: settings.toml)")
    report_parser.add_argument("--name", default=None, help="Region name")
    report_parser.add_argument("--ranges", nargs="*", default=None, help="Altitude ranges such as 0-1000 1000-2000")
    report_parser.add_argument("-v", "--verbose", action="store_true", help="Show load logs")

    range_parser = sub.add_parser("range", help="Print the altitude range of an altitude")
    range_parser.add_argument("altitude", type=int, help="Altitude in meters")
    range_parser.add_argument("--ranges", nargs="*", default=None, help="Altitude ranges such as 0-1000 1000-2000")

    ll_parser = sub.add_parser("log-level", help="Get or set the log level in settings.toml")
    ll_parser.add_argument("level", nargs="?", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "report":
        return cmd_report(args)
    if args.command == "range":
        return cmd_range(args)
    if args.command == "log-level":
        return cmd_log_level(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
