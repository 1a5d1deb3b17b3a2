"""Fiscal week to calendar date range resolution."""

import logging
from datetime import date, timedelta
from typing import List, Tuple

from fiscalweek.business_calendar.boundary import (
    WeekdayArg,
    first_week_start,
    last_week_start_in_june,
)
from fiscalweek.business_calendar.core import (
    FiscalWeekRange,
    validate_fiscal_year,
    validate_week,
)
from fiscalweek.conventions.types import DEFAULT_WEEK_START, WEEKS_PER_YEAR

logger = logging.getLogger(__name__)


def fiscal_week_range(
    fiscal_year: int, week: int, week_start: WeekdayArg = DEFAULT_WEEK_START
) -> FiscalWeekRange:
    """
    Return the inclusive date range of ``week`` in ``fiscal_year``.

    Args:
        fiscal_year: Fiscal year, named after the calendar year it ends in
            (FY2025 starts July 1, 2024)
        week: Fiscal week number (1-52)
        week_start: Weekday fiscal weeks begin on (0=Sunday .. 6=Saturday)

    Returns:
        FiscalWeekRange; unpacks as ``(start, end)``

    Raises:
        RangeError: If the week or fiscal year is out of range
    """
    validate_fiscal_year(fiscal_year)
    validate_week(week)

    first_start = first_week_start(fiscal_year - 1, week_start)

    if week == 1:
        # Week 1 opens on the last week-start day of the preceding June
        start = last_week_start_in_june(fiscal_year - 1, week_start)
        end = first_start - timedelta(days=1)
    else:
        start = first_start + timedelta(days=(week - 2) * 7)
        end = start + timedelta(days=6)

    logger.debug("FY%s week %s: %s to %s", fiscal_year, week, start, end)
    return FiscalWeekRange(fiscal_year=fiscal_year, week=week, start=start, end=end)


def fiscal_year_weeks(
    fiscal_year: int, week_start: WeekdayArg = DEFAULT_WEEK_START
) -> List[FiscalWeekRange]:
    """All weeks of ``fiscal_year`` in order."""
    return [
        fiscal_week_range(fiscal_year, week, week_start)
        for week in range(1, WEEKS_PER_YEAR + 1)
    ]


def fiscal_year_bounds(
    fiscal_year: int, week_start: WeekdayArg = DEFAULT_WEEK_START
) -> Tuple[date, date]:
    """First day of week 1 and last day of week 52 of ``fiscal_year``."""
    return (
        fiscal_week_range(fiscal_year, 1, week_start).start,
        fiscal_week_range(fiscal_year, WEEKS_PER_YEAR, week_start).end,
    )
