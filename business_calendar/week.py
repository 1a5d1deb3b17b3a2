"""Fiscal week number resolution."""

import logging
from datetime import date

from fiscalweek.business_calendar.boundary import (
    WeekdayArg,
    first_week_start_ordinal,
    in_june_rollover_week,
)
from fiscalweek.conventions.types import (
    DEFAULT_WEEK_START,
    FISCAL_YEAR_START_MONTH,
    WEEKS_PER_YEAR,
)
from fiscalweek.utils.date import DateLike, to_date

logger = logging.getLogger(__name__)


def fiscal_start_year(dt: date) -> int:
    """Calendar year of the July 1 that opened the fiscal year containing ``dt``."""
    return dt.year if dt.month >= FISCAL_YEAR_START_MONTH else dt.year - 1


def fiscal_week_number(dt: DateLike, week_start: WeekdayArg = DEFAULT_WEEK_START) -> int:
    """Return the fiscal week (1-52) of ``dt``.

    Week 1 is the partial week before the first ``week_start`` day on or after
    July 1; week 2 begins on that day. Dates in June on or after the month's
    last ``week_start`` day are week 1 of the upcoming fiscal year. Results
    past week 52 are clamped to 52.
    """
    dt = to_date(dt)
    if in_june_rollover_week(dt, week_start):
        logger.debug("%s is in the June rollover week; week 1", dt)
        return 1

    first_start = first_week_start_ordinal(fiscal_start_year(dt), week_start)
    days = dt.toordinal() - first_start
    if days < 0:
        return 1

    week = days // 7 + 2
    if week > WEEKS_PER_YEAR:
        logger.debug("Clamping week %s of %s to %s", week, dt, WEEKS_PER_YEAR)
    return max(1, min(WEEKS_PER_YEAR, week))
