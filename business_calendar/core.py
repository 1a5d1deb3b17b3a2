"""
Core data structures for the fiscal calendar.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator, List

from fiscalweek.conventions.types import WEEKS_PER_YEAR
from fiscalweek.errors import RangeError

MIN_FISCAL_YEAR = 2
MAX_FISCAL_YEAR = 9999


def validate_week(week: int) -> int:
    """Return ``week`` if it is an integer in [1, 52], else raise ``RangeError``."""
    if isinstance(week, bool) or not isinstance(week, int):
        raise RangeError(f"Fiscal week must be an integer, got {week!r}")
    if not 1 <= week <= WEEKS_PER_YEAR:
        raise RangeError(f"Fiscal week must be between 1 and {WEEKS_PER_YEAR}, got {week}")
    return week


def validate_fiscal_year(fiscal_year: int) -> int:
    """Return ``fiscal_year`` if every week of it is a representable date range."""
    if isinstance(fiscal_year, bool) or not isinstance(fiscal_year, int):
        raise RangeError(f"Fiscal year must be an integer, got {fiscal_year!r}")
    if not MIN_FISCAL_YEAR <= fiscal_year <= MAX_FISCAL_YEAR:
        raise RangeError(
            f"Fiscal year must be between {MIN_FISCAL_YEAR} and {MAX_FISCAL_YEAR}, "
            f"got {fiscal_year}"
        )
    return fiscal_year


@dataclass(frozen=True, order=True)
class FiscalPeriod:
    """A (fiscal year, fiscal week) pair."""

    fiscal_year: int
    week: int

    def __post_init__(self):
        validate_week(self.week)

    def __iter__(self) -> Iterator[int]:
        yield self.fiscal_year
        yield self.week

    @property
    def code(self) -> str:
        """Compact ``YYYYWW`` lookup key."""
        return f"{self.fiscal_year:04d}{self.week:02d}"


@dataclass(frozen=True)
class FiscalWeekRange:
    """Inclusive calendar date range covered by one fiscal week."""

    fiscal_year: int
    week: int
    start: date
    end: date

    def __iter__(self) -> Iterator[date]:
        yield self.start
        yield self.end

    @property
    def period(self) -> FiscalPeriod:
        return FiscalPeriod(self.fiscal_year, self.week)

    @property
    def days(self) -> int:
        """Number of calendar days in the week (both ends included)."""
        return (self.end - self.start).days + 1

    def contains(self, dt: date) -> bool:
        return self.start <= dt <= self.end

    def dates(self) -> List[date]:
        return [self.start + timedelta(days=i) for i in range(self.days)]
