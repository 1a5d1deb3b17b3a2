from datetime import date, datetime
from typing import Union

from dateutil.relativedelta import relativedelta
from pandas import Timestamp

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[str, date, datetime, Timestamp]


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, datetime or Timestamp to a plain date (time of day dropped).
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like.strip(), fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def day_of_week(dt: date) -> int:
    """Day of week numbered from Sunday (0=Sunday .. 6=Saturday)."""
    return dt.isoweekday() % 7


def add_days(dt: date, days: int) -> date:
    return dt + relativedelta(days=days)
