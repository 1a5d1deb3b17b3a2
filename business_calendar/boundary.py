"""
Week boundary helpers: locating week-start days around the fiscal year start.

Weekdays are numbered from Sunday (0) to Saturday (6). Arithmetic runs on
proleptic ordinals so fiscal years that began before 0001-07-01 still resolve.
"""

from datetime import date
from typing import Union

from fiscalweek.conventions.types import FISCAL_YEAR_START_MONTH, Weekday
from fiscalweek.utils.date import add_days, day_of_week

WeekdayArg = Union[Weekday, int]

# Year 0 (proleptic) has no date(); July 1 of year 0 is 365 days before July 1 of year 1
_JULY_FIRST_YEAR_ONE = date(1, FISCAL_YEAR_START_MONTH, 1).toordinal()


def _weekday_value(weekday: WeekdayArg) -> int:
    return int(Weekday(weekday))


def _ordinal_day_of_week(ordinal: int) -> int:
    # ordinal 1 (0001-01-01) is a Monday
    return ordinal % 7


def fiscal_start_ordinal(start_year: int) -> int:
    """Ordinal of July 1 of ``start_year`` (year 0 allowed)."""
    if start_year >= 1:
        return date(start_year, FISCAL_YEAR_START_MONTH, 1).toordinal()
    return _JULY_FIRST_YEAR_ONE - 365


def first_week_start_ordinal(start_year: int, weekday: WeekdayArg) -> int:
    """Ordinal of the first ``weekday`` on or after July 1 of ``start_year``."""
    july_first = fiscal_start_ordinal(start_year)
    offset = (_weekday_value(weekday) - _ordinal_day_of_week(july_first)) % 7
    return july_first + offset


def first_occurrence_on_or_after(dt: date, weekday: WeekdayArg) -> date:
    """Earliest date on or after ``dt`` falling on ``weekday``."""
    offset = (_weekday_value(weekday) - day_of_week(dt)) % 7
    return add_days(dt, offset)


def last_occurrence_on_or_before(dt: date, weekday: WeekdayArg) -> date:
    """Latest date on or before ``dt`` falling on ``weekday``."""
    offset = (day_of_week(dt) - _weekday_value(weekday)) % 7
    return add_days(dt, -offset)


def first_week_start(start_year: int, weekday: WeekdayArg) -> date:
    """First ``weekday`` on or after July 1 of ``start_year``: the start of week 2."""
    return first_occurrence_on_or_after(date(start_year, FISCAL_YEAR_START_MONTH, 1), weekday)


def last_week_start_in_june(year: int, weekday: WeekdayArg) -> date:
    """Last ``weekday`` in June of ``year``: the start of the rollover week."""
    return last_occurrence_on_or_before(date(year, 6, 30), weekday)


def in_june_rollover_week(dt: date, weekday: WeekdayArg) -> bool:
    """True if ``dt`` is in June on or after the month's last ``weekday``."""
    return dt.month == 6 and dt >= last_week_start_in_june(dt.year, weekday)
