"""Tag tabular records with fiscal periods for report aggregation."""

import logging
from typing import Optional

import pandas as pd

from fiscalweek.business_calendar.boundary import WeekdayArg
from fiscalweek.business_calendar.core import FiscalPeriod
from fiscalweek.business_calendar.year import fiscal_period
from fiscalweek.codec.formats import year_month_code
from fiscalweek.conventions.types import DEFAULT_WEEK_START, PeriodConvention
from fiscalweek.utils.date import to_date

logger = logging.getLogger(__name__)


def _period_or_none(value, week_start, convention) -> Optional[FiscalPeriod]:
    if value is None or pd.isna(value):
        return None
    return fiscal_period(to_date(value), week_start, convention)


def period_series(
    dates: pd.Series,
    week_start: WeekdayArg = DEFAULT_WEEK_START,
    convention: PeriodConvention = PeriodConvention.SPLIT,
) -> pd.Series:
    """Compact ``YYYYWW`` codes for a series of dates; nulls stay null."""
    codes = [
        None if period is None else period.code
        for period in (_period_or_none(v, week_start, convention) for v in dates)
    ]
    return pd.Series(codes, index=dates.index, dtype=object, name=dates.name)


def tag_frame(
    frame: pd.DataFrame,
    date_column: str,
    week_start: WeekdayArg = DEFAULT_WEEK_START,
    convention: PeriodConvention = PeriodConvention.SPLIT,
    prefix: str = "fiscal_",
) -> pd.DataFrame:
    """
    Return a copy of ``frame`` with fiscal period columns derived from ``date_column``.

    Added columns (with the default prefix):
        fiscal_year: nullable integer fiscal year
        fiscal_week: nullable integer fiscal week
        fiscal_period: compact ``YYYYWW`` code
        fiscal_year_month: ``YYMM`` of the week's start date
    """
    if date_column not in frame.columns:
        raise KeyError(f"Column {date_column!r} not found in frame")

    periods = [_period_or_none(v, week_start, convention) for v in frame[date_column]]
    tagged = frame.copy()
    tagged[f"{prefix}year"] = pd.array(
        [None if p is None else p.fiscal_year for p in periods], dtype="Int64"
    )
    tagged[f"{prefix}week"] = pd.array(
        [None if p is None else p.week for p in periods], dtype="Int64"
    )
    tagged[f"{prefix}period"] = pd.Series(
        [None if p is None else p.code for p in periods], index=frame.index, dtype=object
    )
    tagged[f"{prefix}year_month"] = pd.Series(
        [None if p is None else year_month_code(p, week_start) for p in periods],
        index=frame.index,
        dtype=object,
    )
    logger.debug("Tagged %s rows from column %r", len(tagged), date_column)
    return tagged
