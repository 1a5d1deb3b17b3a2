"""Fiscal year resolution.

Fiscal years run July 1 to June 30 and are named after the calendar year they
end in, so FY2025 covers July 2024 to June 2025.
"""

from datetime import date
from typing import Optional

from fiscalweek.business_calendar.boundary import WeekdayArg, in_june_rollover_week
from fiscalweek.business_calendar.core import FiscalPeriod
from fiscalweek.business_calendar.week import fiscal_week_number
from fiscalweek.conventions.types import (
    DEFAULT_WEEK_START,
    FISCAL_YEAR_START_MONTH,
    PeriodConvention,
)
from fiscalweek.utils.date import DateLike, to_date


def fiscal_year(dt: DateLike, week_start: WeekdayArg = DEFAULT_WEEK_START) -> int:
    """Return the fiscal year of ``dt``.

    Dates in the June rollover week stay in the fiscal year ending that June
    (an implied week 53), unlike ``fiscal_week_number`` which reports them as
    week 1 of the next fiscal year.

    Examples:
        fiscal_year(date(2024, 8, 15))  # 2025
        fiscal_year(date(2025, 1, 15))  # 2025
        fiscal_year(date(2025, 6, 30))  # 2025, rollover week
        fiscal_year(date(2025, 7, 1))   # 2026
    """
    dt = to_date(dt)
    if in_june_rollover_week(dt, week_start):
        return dt.year
    if dt.month >= FISCAL_YEAR_START_MONTH:
        return dt.year + 1
    return dt.year


def fiscal_period(
    dt: DateLike,
    week_start: WeekdayArg = DEFAULT_WEEK_START,
    convention: PeriodConvention = PeriodConvention.SPLIT,
) -> FiscalPeriod:
    """Return the (fiscal year, week) of ``dt``.

    ``SPLIT`` pairs ``fiscal_year`` with ``fiscal_week_number`` as-is, which is
    how stored period codes were produced. ``UNIFIED`` moves the June rollover
    week into week 1 of the next fiscal year so the result always lies inside
    ``fiscal_week_range`` of the returned period (clamped weeks aside).
    """
    dt = to_date(dt)
    week = fiscal_week_number(dt, week_start)
    year = fiscal_year(dt, week_start)
    if convention is PeriodConvention.UNIFIED and in_june_rollover_week(dt, week_start):
        year = dt.year + 1
    return FiscalPeriod(year, week)


def current_fiscal_week(
    week_start: WeekdayArg = DEFAULT_WEEK_START, today: Optional[date] = None
) -> int:
    """Fiscal week of ``today`` (defaults to the local date)."""
    return fiscal_week_number(today or date.today(), week_start)


def current_fiscal_year(
    week_start: WeekdayArg = DEFAULT_WEEK_START, today: Optional[date] = None
) -> int:
    """Fiscal year of ``today`` (defaults to the local date)."""
    return fiscal_year(today or date.today(), week_start)
