# Re-export codec functions
from .formats import (
    CODEC_VERSION,
    format_date,
    format_period,
    parse_compact,
    parse_period,
    to_year_month_code,
    year_month_code,
)
from .inspection import (
    format_inspection_number,
    inspection_prefix,
    next_running_number,
)
from .month import month_label, month_trend_label
