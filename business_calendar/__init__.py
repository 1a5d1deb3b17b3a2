"""
Fiscal calendar resolution.

Main API:
    fiscal_week_number - date to fiscal week (1-52)
    fiscal_year - date to fiscal year
    fiscal_period - date to (fiscal year, week)
    fiscal_week_range - (fiscal year, week) to inclusive date range
"""

from .boundary import (
    first_occurrence_on_or_after,
    first_week_start,
    in_june_rollover_week,
    last_occurrence_on_or_before,
    last_week_start_in_june,
)
from .core import (
    MAX_FISCAL_YEAR,
    MIN_FISCAL_YEAR,
    FiscalPeriod,
    FiscalWeekRange,
)
from .range import fiscal_week_range, fiscal_year_bounds, fiscal_year_weeks
from .week import fiscal_start_year, fiscal_week_number
from .year import (
    current_fiscal_week,
    current_fiscal_year,
    fiscal_period,
    fiscal_year,
)

__all__ = [
    "FiscalPeriod",
    "FiscalWeekRange",
    "MIN_FISCAL_YEAR",
    "MAX_FISCAL_YEAR",
    "first_occurrence_on_or_after",
    "last_occurrence_on_or_before",
    "first_week_start",
    "last_week_start_in_june",
    "in_june_rollover_week",
    "fiscal_start_year",
    "fiscal_week_number",
    "fiscal_year",
    "fiscal_period",
    "current_fiscal_week",
    "current_fiscal_year",
    "fiscal_week_range",
    "fiscal_year_weeks",
    "fiscal_year_bounds",
]
