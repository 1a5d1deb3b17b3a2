"""Exceptions raised by the fiscal calendar engine."""


class FiscalCalendarError(ValueError):
    """Base class for invalid fiscal calendar input."""


class FormatError(FiscalCalendarError):
    """Raised when a fiscal period code cannot be parsed."""


class RangeError(FiscalCalendarError):
    """Raised when a fiscal year or week is outside the supported range."""
