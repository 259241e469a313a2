"""Custom exceptions."""


class KyujitsuError(Exception):
    """Base exception for kyujitsu."""


class ConfigNotFoundError(KyujitsuError):
    """Raised when an explicitly requested configuration file does not exist."""


class InvalidConfigError(KyujitsuError, ValueError):
    """Raised when a configuration entry cannot be turned into an overlay entry."""


class InvalidMonthError(KyujitsuError, ValueError):
    """Raised when a month number is outside 1..12."""
