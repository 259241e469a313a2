"""Data models for holiday lookups."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, order=True)
class Holiday:
    """A single holiday: its calendar date and Japanese name (e.g. 元日)."""

    date: date
    name: str

    def __str__(self) -> str:
        return f"{self.date.isoformat()} {self.name}"
