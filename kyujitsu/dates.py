"""Date normalization to the Japanese calendar."""

from calendar import monthrange
from collections.abc import Iterator
from datetime import date, datetime, timedelta, timezone

from kyujitsu.errors import InvalidMonthError

JST = timezone(timedelta(hours=9), "JST")  # Fixed UTC+9, no DST
ONE_DAY = timedelta(days=1)

DateLike = date | datetime


def to_jst_date(value: DateLike) -> date:
    """
    Return the calendar date of ``value`` as observed in Japan.

    - Aware datetimes are converted to UTC+9 first, whatever their offset.
    - Naive datetimes are read as JST wall-clock time.
    - Plain dates are returned unchanged.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None and value.utcoffset() is not None:
            value = value.astimezone(JST)
        return value.date()
    if isinstance(value, date):
        return value
    msg = f"expected date or datetime, got {type(value).__name__}"
    raise TypeError(msg)


def is_weekend(target_date: date) -> bool:
    """Check if a date falls on Saturday or Sunday."""
    # 5 = Saturday, 6 = Sunday
    return target_date.weekday() >= 5


def year_bounds(year: int) -> tuple[date, date]:
    """First and last day of a year."""
    return date(year, 1, 1), date(year, 12, 31)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last day of a month, leap-year aware."""
    if not 1 <= month <= 12:
        msg = f"month must be in 1..12, got {month}"
        raise InvalidMonthError(msg)
    _, last_day = monthrange(year, month)
    return date(year, month, 1), date(year, month, last_day)


def step(target_date: date, days: int) -> date | None:
    """Shift a date by ``days``, or None when that leaves the supported range."""
    try:
        return target_date + timedelta(days=days)
    except OverflowError:
        return None


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every date in ``[start, end]`` inclusive."""
    current = start
    while current <= end:
        yield current
        if current == date.max:
            return
        current += ONE_DAY
