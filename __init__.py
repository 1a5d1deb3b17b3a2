"""Fiscal calendar engine.

Maps calendar dates to fiscal years and work-weeks and back. Fiscal years start
July 1 and are named after the calendar year they end in; fiscal weeks start on
a configurable weekday (Saturday by default).

Key modules:
- business_calendar: week/year resolution and week date ranges
- codec: period code formatting and parsing (YYYY-WW, YYYY Week WW, YYYYWW, YYMM)
- conventions: weekday/style enums and configuration
- reports: pandas helpers for tagging records with fiscal periods
"""

__version__ = "1.0.0"

from .business_calendar import (
    FiscalPeriod,
    FiscalWeekRange,
    current_fiscal_week,
    current_fiscal_year,
    first_occurrence_on_or_after,
    fiscal_period,
    fiscal_week_number,
    fiscal_week_range,
    fiscal_year,
    fiscal_year_weeks,
    in_june_rollover_week,
)
from .codec import (
    CODEC_VERSION,
    format_date,
    format_period,
    parse_compact,
    parse_period,
    to_year_month_code,
)
from .conventions import (
    DEFAULT_CONFIG,
    FiscalCalendarConfig,
    PeriodConvention,
    PeriodStyle,
    Weekday,
)
from .errors import FiscalCalendarError, FormatError, RangeError
from .fiscal_calendar import FiscalCalendar

__all__ = [
    "__version__",
    "CODEC_VERSION",
    "DEFAULT_CONFIG",
    "FiscalCalendar",
    "FiscalCalendarConfig",
    "FiscalCalendarError",
    "FiscalPeriod",
    "FiscalWeekRange",
    "FormatError",
    "PeriodConvention",
    "PeriodStyle",
    "RangeError",
    "Weekday",
    "current_fiscal_week",
    "current_fiscal_year",
    "first_occurrence_on_or_after",
    "fiscal_period",
    "fiscal_week_number",
    "fiscal_week_range",
    "fiscal_year",
    "fiscal_year_weeks",
    "format_date",
    "format_period",
    "in_june_rollover_week",
    "parse_compact",
    "parse_period",
    "to_year_month_code",
]
