"""Holiday calendar engine.

A Calendar answers holiday and business-day questions against the built-in
dataset, with a per-instance overlay of custom and suppressed holidays.
Every input is normalized to its JST calendar date first.
"""

import logging
from bisect import bisect_left, bisect_right
from collections.abc import Iterator
from datetime import date
from typing import TYPE_CHECKING

from kyujitsu.dataset import BUILTIN_DATES, BUILTIN_HOLIDAYS
from kyujitsu.dates import (
    DateLike,
    is_weekend,
    iter_days,
    month_bounds,
    step,
    to_jst_date,
    year_bounds,
)
from kyujitsu.models import Holiday
from kyujitsu.rwlock import ReadWriteLock

if TYPE_CHECKING:
    from kyujitsu.config import Config

logger = logging.getLogger(__name__)

# Upper bound on days examined when searching for a business day
MAX_BUSINESS_DAY_SEARCH = 366


class Calendar:
    """
    Japanese holiday calendar with a caller-owned overlay.

    Custom holidays always win over built-in ones on the same date.
    Removed dates only suppress built-in holidays, never custom ones.
    All methods are safe to call from multiple threads.
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._custom: dict[date, str] = {}
        self._removed: set[date] = set()

    @classmethod
    def from_config(cls, config: "Config") -> "Calendar":
        """Create a calendar with the overlay described by ``config``."""
        calendar = cls()
        config.apply_to(calendar)
        return calendar

    def __repr__(self) -> str:
        with self._lock.read_locked():
            return f"Calendar(custom={len(self._custom)}, removed={len(self._removed)})"

    # --- Lookup ---

    def _lookup(self, target_date: date) -> str | None:
        """Resolve a date to a holiday name. Caller holds the read lock."""
        if target_date in self._custom:
            return self._custom[target_date]
        if target_date in self._removed:
            return None
        return BUILTIN_HOLIDAYS.get(target_date)

    def is_holiday(self, value: DateLike) -> bool:
        """Check if a date is a holiday (built-in or custom)."""
        target_date = to_jst_date(value)
        with self._lock.read_locked():
            return self._lookup(target_date) is not None

    def holiday_name(self, value: DateLike) -> str:
        """Get the holiday name for a date, or an empty string if it is not a holiday."""
        target_date = to_jst_date(value)
        with self._lock.read_locked():
            return self._lookup(target_date) or ""

    # --- Enumeration ---

    def _scan(self, start: date, end: date) -> list[Holiday]:
        """Collect holidays in ``[start, end]``. Caller holds the read lock."""
        result = [
            Holiday(date=holiday_date, name=BUILTIN_HOLIDAYS[holiday_date])
            for holiday_date in BUILTIN_DATES[
                bisect_left(BUILTIN_DATES, start) : bisect_right(BUILTIN_DATES, end)
            ]
            if holiday_date not in self._removed and holiday_date not in self._custom
        ]
        result.extend(
            Holiday(date=holiday_date, name=name)
            for holiday_date, name in self._custom.items()
            if start <= holiday_date <= end
        )
        result.sort(key=lambda holiday: holiday.date)
        return result

    def holidays_between(self, start: DateLike, end: DateLike) -> list[Holiday]:
        """
        All holidays in ``[start, end]`` inclusive, sorted by date.

        Returns an empty list if start is after end.
        """
        start_date = to_jst_date(start)
        end_date = to_jst_date(end)
        if end_date < start_date:
            return []
        with self._lock.read_locked():
            return self._scan(start_date, end_date)

    def holidays_in_year(self, year: int) -> list[Holiday]:
        """All holidays in a year, sorted by date."""
        start, end = year_bounds(year)
        with self._lock.read_locked():
            return self._scan(start, end)

    def holidays_in_month(self, year: int, month: int) -> list[Holiday]:
        """All holidays in a month, sorted by date."""
        start, end = month_bounds(year, month)
        with self._lock.read_locked():
            return self._scan(start, end)

    def all_holidays(self) -> list[Holiday]:
        """
        Every holiday known to this calendar, sorted by date.

        A built-in holiday overridden by a custom one appears once, with the custom name.
        """
        with self._lock.read_locked():
            return self._scan(date.min, date.max)

    # --- Overlay ---

    def add_custom_holiday(self, value: DateLike, name: str) -> None:
        """Register a custom holiday, overwriting any custom holiday on that date."""
        target_date = to_jst_date(value)
        with self._lock.write_locked():
            self._custom[target_date] = name
        logger.debug("Added custom holiday %s: %s", target_date, name)

    def remove_custom_holiday(self, value: DateLike) -> None:
        """Remove a custom holiday. No effect if none exists on that date."""
        target_date = to_jst_date(value)
        with self._lock.write_locked():
            self._custom.pop(target_date, None)
        logger.debug("Removed custom holiday %s", target_date)

    def remove_holiday(self, value: DateLike) -> None:
        """Suppress a built-in holiday. Custom holidays are not affected."""
        target_date = to_jst_date(value)
        with self._lock.write_locked():
            self._removed.add(target_date)
        logger.debug("Suppressed built-in holiday %s", target_date)

    def restore_holiday(self, value: DateLike) -> None:
        """Undo ``remove_holiday`` for a date."""
        target_date = to_jst_date(value)
        with self._lock.write_locked():
            self._removed.discard(target_date)
        logger.debug("Restored built-in holiday %s", target_date)

    def clear_overlay(self) -> None:
        """Drop every custom holiday and every suppression."""
        with self._lock.write_locked():
            self._custom.clear()
            self._removed.clear()
        logger.debug("Cleared holiday overlay")

    def custom_holidays(self) -> list[Holiday]:
        """Snapshot of the custom holidays, sorted by date."""
        with self._lock.read_locked():
            return sorted(Holiday(date=d, name=name) for d, name in self._custom.items())

    def removed_holidays(self) -> list[date]:
        """Snapshot of the suppressed built-in dates, sorted."""
        with self._lock.read_locked():
            return sorted(self._removed)

    # --- Holiday search ---

    def _next_builtin(self, target_date: date) -> date | None:
        for index in range(bisect_right(BUILTIN_DATES, target_date), len(BUILTIN_DATES)):
            if BUILTIN_DATES[index] not in self._removed:
                return BUILTIN_DATES[index]
        return None

    def _previous_builtin(self, target_date: date) -> date | None:
        for index in range(bisect_left(BUILTIN_DATES, target_date) - 1, -1, -1):
            if BUILTIN_DATES[index] not in self._removed:
                return BUILTIN_DATES[index]
        return None

    def next_holiday(self, value: DateLike) -> Holiday | None:
        """The first holiday strictly after a date, or None if there is none."""
        target_date = to_jst_date(value)
        with self._lock.read_locked():
            candidates = [d for d in self._custom if d > target_date]
            builtin = self._next_builtin(target_date)
            if builtin is not None:
                candidates.append(builtin)
            if not candidates:
                return None
            found = min(candidates)
            return Holiday(date=found, name=self._lookup(found))

    def previous_holiday(self, value: DateLike) -> Holiday | None:
        """The last holiday strictly before a date, or None if there is none."""
        target_date = to_jst_date(value)
        with self._lock.read_locked():
            candidates = [d for d in self._custom if d < target_date]
            builtin = self._previous_builtin(target_date)
            if builtin is not None:
                candidates.append(builtin)
            if not candidates:
                return None
            found = max(candidates)
            return Holiday(date=found, name=self._lookup(found))

    # --- Business days ---

    def _is_business_day(self, target_date: date) -> bool:
        return not is_weekend(target_date) and self._lookup(target_date) is None

    def _search_business_day(self, start: date, direction: int) -> date | None:
        """Walk from ``start`` one day at a time. Caller holds the read lock."""
        current: date | None = start
        for _ in range(MAX_BUSINESS_DAY_SEARCH):
            if current is None:
                return None
            if self._is_business_day(current):
                return current
            current = step(current, direction)
        return None

    def is_business_day(self, value: DateLike) -> bool:
        """
        Check if a date is a business day.

        A business day is:
        - Not a weekend (Saturday/Sunday)
        - Not a holiday (built-in or custom)
        """
        target_date = to_jst_date(value)
        with self._lock.read_locked():
            return self._is_business_day(target_date)

    def next_business_day(self, value: DateLike) -> date | None:
        """
        The first business day on or after a date.

        Returns None when no business day is found within 366 days.
        """
        target_date = to_jst_date(value)
        with self._lock.read_locked():
            return self._search_business_day(target_date, 1)

    def previous_business_day(self, value: DateLike) -> date | None:
        """
        The last business day on or before a date.

        Returns None when no business day is found within 366 days.
        """
        target_date = to_jst_date(value)
        with self._lock.read_locked():
            return self._search_business_day(target_date, -1)

    def _business_days(self, start: date, end: date) -> Iterator[date]:
        return (day for day in iter_days(start, end) if self._is_business_day(day))

    def business_days_between(self, start: DateLike, end: DateLike) -> int:
        """Count business days in ``[start, end]`` inclusive. Zero if end precedes start."""
        start_date = to_jst_date(start)
        end_date = to_jst_date(end)
        if end_date < start_date:
            return 0
        with self._lock.read_locked():
            return sum(1 for _ in self._business_days(start_date, end_date))

    def business_days_in_month(self, year: int, month: int) -> list[date]:
        """Every business day of a month."""
        start, end = month_bounds(year, month)
        with self._lock.read_locked():
            return list(self._business_days(start, end))

    def add_business_days(self, value: DateLike, days: int) -> date | None:
        """
        Move ``days`` business days away from a date (backwards when negative).

        Zero returns the date itself when it is a business day, otherwise the
        next one. Returns None if any single move exhausts the 366 day search.
        """
        current: date | None = to_jst_date(value)
        direction = -1 if days < 0 else 1
        with self._lock.read_locked():
            if days == 0:
                return self._search_business_day(current, 1)
            for _ in range(abs(days)):
                current = step(current, direction)
                if current is None:
                    return None
                current = self._search_business_day(current, direction)
                if current is None:
                    return None
            return current
