"""Configuration management for holiday overlays."""

import configparser
import logging
import os
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING

from kyujitsu.errors import ConfigNotFoundError, InvalidConfigError

if TYPE_CHECKING:
    from kyujitsu.holiday_calendar import Calendar

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "kyujitsu" / "config.ini"

CUSTOM_ENV = "KYUJITSU_CUSTOM_HOLIDAYS"
REMOVED_ENV = "KYUJITSU_REMOVED_HOLIDAYS"
CUSTOM_SECTION = "custom"
REMOVED_SECTION = "removed"


def _parse_date(raw: str) -> date:
    try:
        return date.fromisoformat(raw.strip())
    except ValueError as e:
        msg = f"invalid date {raw!r}, expected YYYY-MM-DD"
        raise InvalidConfigError(msg) from e


def _parse_name(raw: str | None, holiday_date: date) -> str:
    name = (raw or "").strip()
    if not name:
        msg = f"custom holiday on {holiday_date} has no name"
        raise InvalidConfigError(msg)
    return name


@dataclass
class Config:
    """Custom and suppressed holidays to layer over the built-in dataset."""

    custom_holidays: dict[date, str] = field(default_factory=dict)
    removed_holidays: set[date] = field(default_factory=set)

    @classmethod
    def from_env(cls) -> "Config | None":
        """
        Load configuration from environment variables.

        ``KYUJITSU_CUSTOM_HOLIDAYS`` holds ``YYYY-MM-DD=name`` pairs and
        ``KYUJITSU_REMOVED_HOLIDAYS`` holds dates, both separated by ``;``.
        """
        custom_raw = os.environ.get(CUSTOM_ENV)
        removed_raw = os.environ.get(REMOVED_ENV)
        if custom_raw is None and removed_raw is None:
            return None

        config = cls()
        for item in (custom_raw or "").split(";"):
            if not item.strip():
                continue
            raw_date, sep, raw_name = item.partition("=")
            if not sep:
                msg = f"invalid entry {item!r} in {CUSTOM_ENV}, expected YYYY-MM-DD=name"
                raise InvalidConfigError(msg)
            holiday_date = _parse_date(raw_date)
            config.custom_holidays[holiday_date] = _parse_name(raw_name, holiday_date)
        for item in (removed_raw or "").split(";"):
            if item.strip():
                config.removed_holidays.add(_parse_date(item))
        return config

    @classmethod
    def load(cls, path: Path | None = None) -> "Config | None":
        """
        Load configuration from file.

        A missing default file means "no configuration"; a missing file that
        was asked for explicitly is an error.
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH
            if not path.is_file():
                return None
        elif not path.is_file():
            msg = f"config file not found: {path}"
            raise ConfigNotFoundError(msg)

        parser = configparser.ConfigParser(interpolation=None, allow_no_value=True)
        parser.read(path, encoding="utf-8")

        config = cls()
        if parser.has_section(CUSTOM_SECTION):
            for raw_date, raw_name in parser.items(CUSTOM_SECTION):
                holiday_date = _parse_date(raw_date)
                config.custom_holidays[holiday_date] = _parse_name(raw_name, holiday_date)
        if parser.has_section(REMOVED_SECTION):
            for raw_date in parser.options(REMOVED_SECTION):
                config.removed_holidays.add(_parse_date(raw_date))
        logger.debug(
            "Loaded config from %s: %d custom, %d removed",
            path,
            len(config.custom_holidays),
            len(config.removed_holidays),
        )
        return config

    @classmethod
    def from_calendar(cls, calendar: "Calendar") -> "Config":
        """Snapshot the overlay of an existing calendar."""
        return cls(
            custom_holidays={holiday.date: holiday.name for holiday in calendar.custom_holidays()},
            removed_holidays=set(calendar.removed_holidays()),
        )

    def save(self, path: Path = DEFAULT_CONFIG_PATH) -> None:
        """Save configuration to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        parser = configparser.ConfigParser(interpolation=None, allow_no_value=True)
        parser[CUSTOM_SECTION] = {
            holiday_date.isoformat(): name
            for holiday_date, name in sorted(self.custom_holidays.items())
        }
        parser.add_section(REMOVED_SECTION)
        for holiday_date in sorted(self.removed_holidays):
            parser.set(REMOVED_SECTION, holiday_date.isoformat(), None)
        with path.open("w", encoding="utf-8") as config_file:
            parser.write(config_file)
        logger.debug("Saved config to %s", path)

    def apply_to(self, calendar: "Calendar") -> None:
        """Write this overlay into a calendar."""
        for holiday_date, name in self.custom_holidays.items():
            calendar.add_custom_holiday(holiday_date, name)
        for holiday_date in self.removed_holidays:
            calendar.remove_holiday(holiday_date)
