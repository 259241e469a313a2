"""Process-wide default calendar."""

from kyujitsu.holiday_calendar import Calendar

_default_calendar = Calendar()


def get_default_calendar() -> Calendar:
    """
    Return the calendar shared by the module-level functions.

    It is created once at import. Code that needs an isolated overlay should
    build its own ``Calendar()`` and pass it around instead.
    """
    return _default_calendar
