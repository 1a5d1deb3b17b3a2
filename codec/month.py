"""Display labels for ``YYMM`` year-month and ``YYMMWW`` trend codes."""

import logging
from typing import Union

logger = logging.getLogger(__name__)

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

WHOLE_MONTH_SUFFIX = "99"


def month_label(year_month: Union[str, int]) -> str:
    """
    Convert a ``YYMM`` code to a month label.

    Malformed codes are returned unchanged so report headers still render.

    Examples:
        month_label("2406")  # "Jun`24"
        month_label(2412)    # "Dec`24"
    """
    text = str(year_month)
    if len(text) != 4 or not text.isascii() or not text.isdigit():
        logger.warning("Invalid year-month %r, expected YYMM", year_month)
        return text

    month = int(text[2:])
    if not 1 <= month <= 12:
        logger.warning("Invalid month in year-month %r, expected 01-12", year_month)
        return text

    return f"{MONTH_ABBREVIATIONS[month - 1]}`{text[:2]}"


def month_trend_label(trend_code: Union[str, int]) -> str:
    """
    Convert a ``YYMMWW`` trend code to a label.

    A ``99`` week suffix marks a whole-month bucket.

    Examples:
        month_trend_label("240699")  # "Jun`24"
        month_trend_label("250112")  # "WW12 Jan`25"
    """
    text = str(trend_code)
    if len(text) != 6:
        logger.warning("Invalid trend code %r, expected YYMMWW", trend_code)
        return text

    label = month_label(text[:4])
    suffix = text[4:]
    if suffix == WHOLE_MONTH_SUFFIX:
        return label
    return f"WW{suffix} {label}"
