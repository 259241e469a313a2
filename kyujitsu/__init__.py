"""Japanese national holidays and business days.

Module-level functions use the process-wide default calendar::

    >>> from datetime import date
    >>> import kyujitsu
    >>> kyujitsu.holiday_name(date(2026, 1, 1))
    '元日'

For an isolated overlay of custom holidays, create a ``Calendar``::

    >>> calendar = kyujitsu.Calendar()
    >>> calendar.add_custom_holiday(date(2026, 6, 15), "会社記念日")
"""

from datetime import date

from kyujitsu.config import Config
from kyujitsu.dates import JST, DateLike, to_jst_date
from kyujitsu.default import get_default_calendar
from kyujitsu.errors import (
    ConfigNotFoundError,
    InvalidConfigError,
    InvalidMonthError,
    KyujitsuError,
)
from kyujitsu.holiday_calendar import MAX_BUSINESS_DAY_SEARCH, Calendar
from kyujitsu.models import Holiday

__all__ = [
    "JST",
    "MAX_BUSINESS_DAY_SEARCH",
    "Calendar",
    "Config",
    "ConfigNotFoundError",
    "Holiday",
    "InvalidConfigError",
    "InvalidMonthError",
    "KyujitsuError",
    "add_business_days",
    "add_custom_holiday",
    "all_holidays",
    "business_days_between",
    "business_days_in_month",
    "get_default_calendar",
    "holiday_name",
    "holidays_between",
    "holidays_in_month",
    "holidays_in_year",
    "is_business_day",
    "is_holiday",
    "next_business_day",
    "next_holiday",
    "previous_business_day",
    "previous_holiday",
    "remove_custom_holiday",
    "remove_holiday",
    "restore_holiday",
    "to_jst_date",
]


def is_holiday(value: DateLike) -> bool:
    return get_default_calendar().is_holiday(value)


def holiday_name(value: DateLike) -> str:
    return get_default_calendar().holiday_name(value)


def holidays_in_year(year: int) -> list[Holiday]:
    return get_default_calendar().holidays_in_year(year)


def holidays_in_month(year: int, month: int) -> list[Holiday]:
    return get_default_calendar().holidays_in_month(year, month)


def holidays_between(start: DateLike, end: DateLike) -> list[Holiday]:
    return get_default_calendar().holidays_between(start, end)


def all_holidays() -> list[Holiday]:
    return get_default_calendar().all_holidays()


def add_custom_holiday(value: DateLike, name: str) -> None:
    get_default_calendar().add_custom_holiday(value, name)


def remove_custom_holiday(value: DateLike) -> None:
    get_default_calendar().remove_custom_holiday(value)


def remove_holiday(value: DateLike) -> None:
    get_default_calendar().remove_holiday(value)


def restore_holiday(value: DateLike) -> None:
    get_default_calendar().restore_holiday(value)


def is_business_day(value: DateLike) -> bool:
    return get_default_calendar().is_business_day(value)


def next_holiday(value: DateLike) -> Holiday | None:
    return get_default_calendar().next_holiday(value)


def previous_holiday(value: DateLike) -> Holiday | None:
    return get_default_calendar().previous_holiday(value)


def next_business_day(value: DateLike) -> date | None:
    return get_default_calendar().next_business_day(value)


def previous_business_day(value: DateLike) -> date | None:
    return get_default_calendar().previous_business_day(value)


def business_days_between(start: DateLike, end: DateLike) -> int:
    return get_default_calendar().business_days_between(start, end)


def business_days_in_month(year: int, month: int) -> list[date]:
    return get_default_calendar().business_days_in_month(year, month)


def add_business_days(value: DateLike, days: int) -> date | None:
    return get_default_calendar().add_business_days(value, days)
