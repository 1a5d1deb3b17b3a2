"""
Inspection number encoding.

Inspection numbers look like ``OQA250809-300001``: station, two-digit fiscal
year, calendar month, fiscal week, ``-``, calendar day, then a four-digit
running number that restarts every day.
"""

import logging
from datetime import date
from typing import Iterable, Optional

from fiscalweek.business_calendar.boundary import WeekdayArg
from fiscalweek.business_calendar.core import validate_week
from fiscalweek.business_calendar.week import fiscal_week_number
from fiscalweek.business_calendar.year import fiscal_year
from fiscalweek.conventions.types import DEFAULT_WEEK_START
from fiscalweek.errors import RangeError
from fiscalweek.utils.date import DateLike, to_date

logger = logging.getLogger(__name__)

RUNNING_NUMBER_WIDTH = 4
MAX_RUNNING_NUMBER = 10 ** RUNNING_NUMBER_WIDTH - 1


def inspection_prefix(
    station: str,
    inspected_on: DateLike,
    week: Optional[int] = None,
    week_start: WeekdayArg = DEFAULT_WEEK_START,
) -> str:
    """Build the per-day inspection number prefix.

    ``week`` defaults to the fiscal week of ``inspected_on``.
    """
    dt: date = to_date(inspected_on)
    if week is None:
        week = fiscal_week_number(dt, week_start)
    validate_week(week)
    fiscal_yy = fiscal_year(dt, week_start) % 100
    return f"{station}{fiscal_yy:02d}{dt.month:02d}{week:02d}-{dt.day:02d}"


def format_inspection_number(prefix: str, running: int) -> str:
    if not 1 <= running <= MAX_RUNNING_NUMBER:
        raise RangeError(
            f"Running number must be between 1 and {MAX_RUNNING_NUMBER}, got {running}"
        )
    return f"{prefix}{running:0{RUNNING_NUMBER_WIDTH}d}"


def next_running_number(existing: Iterable[str]) -> int:
    """Next running number after the highest one found in ``existing``."""
    highest = 0
    for inspection_no in existing:
        suffix = inspection_no[-RUNNING_NUMBER_WIDTH:]
        if not (suffix.isascii() and suffix.isdigit()):
            logger.debug("Skipping inspection number without running suffix: %r", inspection_no)
            continue
        highest = max(highest, int(suffix))
    return highest + 1
