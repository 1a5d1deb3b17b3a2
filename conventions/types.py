"""
Basic types and enums used across the fiscal calendar.
"""

from enum import Enum, IntEnum


class Weekday(IntEnum):
    """Day of week, numbered from Sunday."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


class PeriodStyle(Enum):
    """String encodings of a fiscal period."""

    DASHED = "YYYY-WW"
    LABEL = "YYYY Week WW"
    COMPACT = "YYYYWW"


class PeriodConvention(Enum):
    """How dates in the June rollover week are assigned a fiscal period."""

    SPLIT = "SPLIT"  # year of the ending FY, week 1 of the next
    UNIFIED = "UNIFIED"  # week 1 of the next FY


DEFAULT_WEEK_START = Weekday.SATURDAY
FISCAL_YEAR_START_MONTH = 7
WEEKS_PER_YEAR = 52
