# Re-export conventions
from .config import (
    DEFAULT_CONFIG,
    FiscalCalendarConfig,
    parse_convention,
    parse_style,
    parse_weekday,
)
from .types import (
    DEFAULT_WEEK_START,
    FISCAL_YEAR_START_MONTH,
    WEEKS_PER_YEAR,
    PeriodConvention,
    PeriodStyle,
    Weekday,
)
