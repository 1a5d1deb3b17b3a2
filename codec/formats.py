"""
Fiscal period string encodings.

Three encodings are supported and treated as a stable wire format:

- ``YYYY-WW``       e.g. ``2025-07``
- ``YYYY Week WW``  e.g. ``2025 Week 07``
- ``YYYYWW``        e.g. ``202507``, the lookup key used by report storage

plus the ``YYMM`` year-month code of a week's start date. Any change to these
encodings must bump ``CODEC_VERSION`` and ship as a new codec.
"""

import re
from typing import Union

from fiscalweek.business_calendar.boundary import WeekdayArg
from fiscalweek.business_calendar.core import FiscalPeriod, validate_week
from fiscalweek.business_calendar.range import fiscal_week_range
from fiscalweek.business_calendar.year import fiscal_period
from fiscalweek.conventions.config import parse_style
from fiscalweek.conventions.types import (
    DEFAULT_WEEK_START,
    WEEKS_PER_YEAR,
    PeriodConvention,
    PeriodStyle,
)
from fiscalweek.errors import FormatError, RangeError
from fiscalweek.utils.date import DateLike

CODEC_VERSION = 1

_COMPACT_PATTERN = re.compile(r"(\d{4})(\d{2})", re.ASCII)
_DASHED_PATTERN = re.compile(r"(\d{4})-(\d{2})", re.ASCII)
_LABEL_PATTERN = re.compile(r"(\d{4}) Week (\d{2})", re.ASCII)


def format_period(
    fiscal_year: int, week: int, style: Union[PeriodStyle, str] = PeriodStyle.DASHED
) -> str:
    """Encode a fiscal year and week in ``style``."""
    try:
        style = parse_style(style)
    except ValueError as exc:
        raise FormatError(str(exc)) from exc
    validate_week(week)
    if isinstance(fiscal_year, bool) or not isinstance(fiscal_year, int):
        raise RangeError(f"Fiscal year must be an integer, got {fiscal_year!r}")
    if not 0 <= fiscal_year <= 9999:
        raise RangeError(f"Fiscal year {fiscal_year} does not fit in four digits")

    if style is PeriodStyle.LABEL:
        return f"{fiscal_year:04d} Week {week:02d}"
    if style is PeriodStyle.COMPACT:
        return f"{fiscal_year:04d}{week:02d}"
    return f"{fiscal_year:04d}-{week:02d}"


def format_date(
    dt: DateLike,
    style: Union[PeriodStyle, str] = PeriodStyle.DASHED,
    week_start: WeekdayArg = DEFAULT_WEEK_START,
    convention: PeriodConvention = PeriodConvention.SPLIT,
) -> str:
    """Encode the fiscal period of ``dt`` in ``style``."""
    period = fiscal_period(dt, week_start, convention)
    return format_period(period.fiscal_year, period.week, style)


def _build_period(code: str, year_text: str, week_text: str) -> FiscalPeriod:
    week = int(week_text)
    if not 1 <= week <= WEEKS_PER_YEAR:
        raise FormatError(f"Week number in {code!r} must be between 1 and {WEEKS_PER_YEAR}")
    return FiscalPeriod(int(year_text), week)


def parse_compact(code: str) -> FiscalPeriod:
    """Decode a ``YYYYWW`` code.

    Raises:
        FormatError: If ``code`` is not six digits or the week is not 1-52
    """
    if not isinstance(code, str) or len(code) != 6:
        raise FormatError(f"Invalid fiscal year week format {code!r}. Expected YYYYWW (e.g. '202401')")
    match = _COMPACT_PATTERN.fullmatch(code)
    if match is None:
        raise FormatError(f"Invalid fiscal year week {code!r}. Year and week must be numbers")
    return _build_period(code, *match.groups())


def parse_period(code: str) -> FiscalPeriod:
    """Decode a period code in any of the supported styles."""
    if not isinstance(code, str):
        raise FormatError(f"Fiscal period code must be a string, got {type(code)}")
    for pattern in (_COMPACT_PATTERN, _DASHED_PATTERN, _LABEL_PATTERN):
        match = pattern.fullmatch(code.strip())
        if match is not None:
            return _build_period(code, *match.groups())
    raise FormatError(
        f"Unrecognized fiscal period {code!r}. "
        f"Expected one of {[style.value for style in PeriodStyle]}"
    )


def year_month_code(period: FiscalPeriod, week_start: WeekdayArg = DEFAULT_WEEK_START) -> str:
    """``YYMM`` of the calendar date ``period`` starts on."""
    start = fiscal_week_range(period.fiscal_year, period.week, week_start).start
    return f"{start.year % 100:02d}{start.month:02d}"


def to_year_month_code(code: str, week_start: WeekdayArg = DEFAULT_WEEK_START) -> str:
    """
    Convert a ``YYYYWW`` code to the ``YYMM`` of its week's start date.

    Example:
        to_year_month_code("202401")  # "2306", week 1 of FY2024 opens June 24, 2023
        to_year_month_code("202510")  # "2408"
    """
    return year_month_code(parse_compact(code), week_start)
