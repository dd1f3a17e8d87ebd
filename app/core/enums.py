from enum import Enum


class Weekday(str, Enum):
    """School week days, Sunday through Thursday."""

    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"

    @property
    def ordinal(self) -> int:
        return list(Weekday).index(self)


MIN_PERIOD = 1
MAX_PERIOD = 7
PERIODS = tuple(range(MIN_PERIOD, MAX_PERIOD + 1))

GRADES = (10, 11, 12)
SECTIONS = tuple(range(1, 9))


def day_ordinal(day: str) -> int:
    """Position of a day name in the school week; unknown names sort last."""
    try:
        return Weekday(day).ordinal
    except ValueError:
        return len(Weekday)
