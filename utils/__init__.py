from .date import DateLike, add_days, day_of_week, to_date

__all__ = ["DateLike", "add_days", "day_of_week", "to_date"]
