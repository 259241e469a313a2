"""Built-in Japanese national holiday dataset.

The table is computed once per process from ``jpholiday`` and is never
mutated afterwards, so it can be read from any thread without locking.
"""

import logging
from collections.abc import Mapping
from datetime import date
from types import MappingProxyType

import jpholiday

logger = logging.getLogger(__name__)

FIRST_DATE = date(1955, 1, 1)
LAST_DATE = date(2027, 12, 31)

# The Cabinet Office table lists both of these simply as 休日
SUBSTITUTE_HOLIDAY_NAME = "休日"
_SUBSTITUTE_MARKERS = ("振替休日", "国民の休日")


def _normalize_name(name: str) -> str:
    if any(marker in name for marker in _SUBSTITUTE_MARKERS):
        return SUBSTITUTE_HOLIDAY_NAME
    return name.strip()


def _build(first: date, last: date) -> dict[date, str]:
    table = {}
    for holiday_date, name in jpholiday.between(first, last):
        table[holiday_date] = _normalize_name(name)
    logger.debug("Built holiday dataset: %d entries (%s to %s)", len(table), first, last)
    return table


BUILTIN_HOLIDAYS: Mapping[date, str] = MappingProxyType(_build(FIRST_DATE, LAST_DATE))
BUILTIN_DATES: tuple[date, ...] = tuple(sorted(BUILTIN_HOLIDAYS))


def covers(target_date: date) -> bool:
    """Check if a date lies inside the span the dataset was built for."""
    return FIRST_DATE <= target_date <= LAST_DATE
