from .tagging import period_series, tag_frame

__all__ = ["period_series", "tag_frame"]
