"""Main entry point for kyujitsu."""

import logging
import os
import sys
from datetime import date, datetime

from kyujitsu.config import Config
from kyujitsu.dates import JST
from kyujitsu.errors import KyujitsuError
from kyujitsu.holiday_calendar import Calendar
from kyujitsu.models import Holiday

USAGE = """\
Usage: kyujitsu <command> [args]

  check [DATE]         holiday / business day status (default: today)
  year YEAR            list holidays in a year
  month YEAR MONTH     list holidays in a month
  next DATE            next holiday and business day after DATE
  previous DATE        previous holiday and business day before DATE
  count FROM TO        business days in [FROM, TO]

Dates are YYYY-MM-DD.
"""


class UsageError(KyujitsuError):
    """Raised when the command line cannot be understood."""


def _parse_date(raw: str) -> date:
    try:
        return date.fromisoformat(raw)
    except ValueError as e:
        msg = f"invalid date: {raw}"
        raise UsageError(msg) from e


def _parse_int(raw: str) -> int:
    try:
        return int(raw)
    except ValueError as e:
        msg = f"invalid number: {raw}"
        raise UsageError(msg) from e


def _write_holidays(holidays: list[Holiday]) -> None:
    for holiday in holidays:
        sys.stdout.write(f"{holiday}\n")


def _check(calendar: Calendar, args: list[str]) -> None:
    target = _parse_date(args[0]) if args else datetime.now(JST).date()
    name = calendar.holiday_name(target)
    status = "business day" if calendar.is_business_day(target) else "non-business day"
    sys.stdout.write(f"{target.isoformat()} ({target.strftime('%a')}): {status}")
    sys.stdout.write(f", {name}\n" if name else "\n")


def _search(calendar: Calendar, args: list[str], forward: bool) -> None:
    target = _parse_date(args[0])
    if forward:
        holiday = calendar.next_holiday(target)
        business_day = calendar.next_business_day(target)
    else:
        holiday = calendar.previous_holiday(target)
        business_day = calendar.previous_business_day(target)
    sys.stdout.write(f"holiday: {holiday if holiday else 'none'}\n")
    sys.stdout.write(f"business day: {business_day.isoformat() if business_day else 'none'}\n")


def run(calendar: Calendar, argv: list[str]) -> None:
    """Execute one command against ``calendar``."""
    if not argv:
        _check(calendar, [])
        return

    command, args = argv[0], argv[1:]
    if command == "check" and len(args) <= 1:
        _check(calendar, args)
    elif command == "year" and len(args) == 1:
        _write_holidays(calendar.holidays_in_year(_parse_int(args[0])))
    elif command == "month" and len(args) == 2:
        _write_holidays(calendar.holidays_in_month(_parse_int(args[0]), _parse_int(args[1])))
    elif command in ("next", "previous") and len(args) == 1:
        _search(calendar, args, forward=command == "next")
    elif command == "count" and len(args) == 2:
        count = calendar.business_days_between(_parse_date(args[0]), _parse_date(args[1]))
        sys.stdout.write(f"{count}\n")
    else:
        msg = f"unknown command: {' '.join(argv)}"
        raise UsageError(msg)


def main() -> None:
    """Main entry point."""
    if os.environ.get("KYUJITSU_DEBUG"):
        logging.basicConfig(level=logging.DEBUG)

    if len(sys.argv) > 1 and sys.argv[1] in ("-h", "--help", "help"):
        sys.stdout.write(USAGE)
        return

    try:
        config = Config.from_env() or Config.load()
        calendar = Calendar.from_config(config) if config else Calendar()
        run(calendar, sys.argv[1:])
    except KyujitsuError as e:
        sys.stderr.write(f"error: {e}\n\n{USAGE}")
        sys.exit(2)


if __name__ == "__main__":
    main()
