"""
Fiscal calendar bound to one configuration.
"""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Union

from fiscalweek.business_calendar import (
    FiscalPeriod,
    FiscalWeekRange,
    fiscal_period,
    fiscal_week_number,
    fiscal_week_range,
    fiscal_year,
    fiscal_year_weeks,
)
from fiscalweek.codec import format_date, format_period, to_year_month_code
from fiscalweek.conventions.config import DEFAULT_CONFIG, FiscalCalendarConfig
from fiscalweek.conventions.types import PeriodStyle
from fiscalweek.utils.date import DateLike


@dataclass(frozen=True)
class FiscalCalendar:
    """Fiscal calendar operations with the week start and formats fixed by ``config``.

    Holds no state beyond the immutable config, so one instance can be shared
    freely between threads.
    """

    config: FiscalCalendarConfig = DEFAULT_CONFIG

    @classmethod
    def from_mapping(cls, mapping) -> "FiscalCalendar":
        return cls(FiscalCalendarConfig.from_mapping(mapping))

    @property
    def week_start(self):
        return self.config.week_start

    def week_number(self, dt: DateLike) -> int:
        return fiscal_week_number(dt, self.week_start)

    def fiscal_year(self, dt: DateLike) -> int:
        return fiscal_year(dt, self.week_start)

    def period(self, dt: DateLike) -> FiscalPeriod:
        return fiscal_period(dt, self.week_start, self.config.convention)

    def week_range(self, fiscal_year: int, week: int) -> FiscalWeekRange:
        return fiscal_week_range(fiscal_year, week, self.week_start)

    def year_weeks(self, fiscal_year: int) -> List[FiscalWeekRange]:
        return fiscal_year_weeks(fiscal_year, self.week_start)

    def format_period(
        self, fiscal_year: int, week: int, style: Optional[Union[PeriodStyle, str]] = None
    ) -> str:
        return format_period(fiscal_year, week, style or self.config.style)

    def format_date(self, dt: DateLike, style: Optional[Union[PeriodStyle, str]] = None) -> str:
        return format_date(
            dt, style or self.config.style, self.week_start, self.config.convention
        )

    def year_month_code(self, code: str) -> str:
        return to_year_month_code(code, self.week_start)

    def current_period(self, today: Optional[date] = None) -> FiscalPeriod:
        """Fiscal period of ``today`` (defaults to the local date)."""
        return self.period(today or date.today())
