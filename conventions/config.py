"""
Fiscal calendar configuration.

The week start, output style and late-June convention are carried in an
immutable ``FiscalCalendarConfig`` that callers build once and pass around.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Union

from fiscalweek.conventions.types import (
    DEFAULT_WEEK_START,
    PeriodConvention,
    PeriodStyle,
    Weekday,
)

WeekdayLike = Union[Weekday, int, str]

# Registry
WEEKDAY_ALIASES = {
    "SUNDAY": Weekday.SUNDAY,
    "SUN": Weekday.SUNDAY,
    "MONDAY": Weekday.MONDAY,
    "MON": Weekday.MONDAY,
    "TUESDAY": Weekday.TUESDAY,
    "TUE": Weekday.TUESDAY,
    "WEDNESDAY": Weekday.WEDNESDAY,
    "WED": Weekday.WEDNESDAY,
    "THURSDAY": Weekday.THURSDAY,
    "THU": Weekday.THURSDAY,
    "FRIDAY": Weekday.FRIDAY,
    "FRI": Weekday.FRIDAY,
    "SATURDAY": Weekday.SATURDAY,
    "SAT": Weekday.SATURDAY,
}


def parse_weekday(value: WeekdayLike) -> Weekday:
    """Convert a weekday name, number (0=Sunday) or ``Weekday`` to ``Weekday``."""
    if isinstance(value, Weekday):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Unsupported weekday: {value!r}")
    if isinstance(value, int):
        try:
            return Weekday(value)
        except ValueError as exc:
            raise ValueError(f"Weekday must be 0 (Sunday) to 6 (Saturday), got {value}") from exc
    if isinstance(value, str):
        key = value.strip().upper()
        if key.isdigit():
            return parse_weekday(int(key))
        if key not in WEEKDAY_ALIASES:
            raise ValueError(
                f"Unknown weekday: {value}. Available: {list(WEEKDAY_ALIASES.keys())}"
            )
        return WEEKDAY_ALIASES[key]
    raise ValueError(f"Unsupported weekday: {value!r}")


def parse_style(value: Union[PeriodStyle, str]) -> PeriodStyle:
    """Convert a style name (``COMPACT``) or pattern (``YYYYWW``) to ``PeriodStyle``."""
    if isinstance(value, PeriodStyle):
        return value
    for style in PeriodStyle:
        if value == style.value or str(value).upper() == style.name:
            return style
    raise ValueError(
        f"Unknown period style: {value}. Available: {[s.value for s in PeriodStyle]}"
    )


def parse_convention(value: Union[PeriodConvention, str]) -> PeriodConvention:
    if isinstance(value, PeriodConvention):
        return value
    try:
        return PeriodConvention(str(value).upper())
    except ValueError as exc:
        raise ValueError(f"Unknown period convention: {value}") from exc


@dataclass(frozen=True)
class FiscalCalendarConfig:
    """Settings shared by every fiscal calendar call.

    Attributes:
        week_start: Weekday fiscal weeks begin on (default Saturday)
        style: Default string encoding for formatted periods
        convention: Fiscal period assignment for the June rollover week
    """

    week_start: Weekday = DEFAULT_WEEK_START
    style: PeriodStyle = PeriodStyle.DASHED
    convention: PeriodConvention = PeriodConvention.SPLIT

    def __post_init__(self):
        # frozen: coerce through object.__setattr__
        object.__setattr__(self, "week_start", parse_weekday(self.week_start))
        object.__setattr__(self, "style", parse_style(self.style))
        object.__setattr__(self, "convention", parse_convention(self.convention))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "FiscalCalendarConfig":
        """Build a config from a settings mapping (e.g. a parsed config file section)."""
        known = {"week_start", "style", "convention"}
        unknown = set(mapping) - known
        if unknown:
            raise ValueError(f"Unknown fiscal calendar settings: {sorted(unknown)}")
        return cls(**dict(mapping))


DEFAULT_CONFIG = FiscalCalendarConfig()
