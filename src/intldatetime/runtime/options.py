"""Formatting option sets requested by legacy format tokens.

A TokenOptionSet is the Python counterpart of an ``Intl.DateTimeFormat``
options object: which date/time fields to show and in which style. Option
sets are frozen dataclasses, so two sets built separately with the same
values are equal and hash equal. The formatter cache relies on that.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Literal

__all__ = [
    "DEFAULT_DATE_SKELETON",
    "HourCycle",
    "NumericStyle",
    "TextStyle",
    "TokenOptionSet",
]

type NumericStyle = Literal["numeric", "2-digit"]
type TextStyle = Literal["long", "short", "narrow"]
type HourCycle = Literal["h11", "h12", "h23", "h24"]

# Fields shown when an option set requests none (Intl default).
DEFAULT_DATE_SKELETON: str = "yMd"

_NUMERIC_WIDTH: dict[str, int] = {"numeric": 1, "2-digit": 2}
_MONTH_WIDTH: dict[str, int] = {
    "numeric": 1,
    "2-digit": 2,
    "short": 3,
    "long": 4,
    "narrow": 5,
}
_WEEKDAY_WIDTH: dict[str, int] = {"short": 3, "long": 4, "narrow": 5}

_FIELD_NAMES: tuple[str, ...] = (
    "year",
    "month",
    "day",
    "weekday",
    "hour",
    "minute",
    "second",
)


@dataclass(frozen=True, slots=True)
class TokenOptionSet:
    """Immutable formatting options for one formatter.

    Attributes:
        year: Year style
        month: Month style (numeric or textual)
        day: Day-of-month style
        weekday: Weekday name style
        hour: Hour style
        minute: Minute style
        second: Second style
        hour12: Force 12-hour (True) or 24-hour (False) clock
        hour_cycle: Explicit hour cycle, consulted when hour12 is unset
        calendar: Calendar identifier the formatter must use

    Example:
        >>> TokenOptionSet(year="numeric") == TokenOptionSet(year="numeric")
        True
        >>> TokenOptionSet(month="long", day="numeric").to_skeleton()
        'MMMMd'
    """

    year: NumericStyle | None = None
    month: NumericStyle | TextStyle | None = None
    day: NumericStyle | None = None
    weekday: TextStyle | None = None
    hour: NumericStyle | None = None
    minute: NumericStyle | None = None
    second: NumericStyle | None = None
    hour12: bool | None = None
    hour_cycle: HourCycle | None = None
    calendar: str | None = None

    def merge(self, other: TokenOptionSet) -> TokenOptionSet:
        """Return a new set where every option other defines wins.

        Mirrors ``Object.assign(options, other)``: unset values in other
        leave this set's values untouched.
        """
        overrides = {
            field.name: getattr(other, field.name)
            for field in fields(other)
            if getattr(other, field.name) is not None
        }
        return replace(self, **overrides)

    def with_calendar(self, calendar: str) -> TokenOptionSet:
        """Return a copy bound to calendar."""
        if self.calendar == calendar:
            return self
        return replace(self, calendar=calendar)

    @property
    def has_fields(self) -> bool:
        """True when at least one date/time field is requested."""
        return any(getattr(self, name) is not None for name in _FIELD_NAMES)

    def uses_12_hour(self) -> bool | None:
        """Resolve the requested clock.

        Returns:
            True for 12-hour, False for 24-hour, None when the locale decides.
        """
        if self.hour12 is not None:
            return self.hour12
        if self.hour_cycle is not None:
            return self.hour_cycle in ("h11", "h12")
        return None

    def to_skeleton(self, hour_char: str = "h") -> str:
        """Convert to a CLDR skeleton.

        Args:
            hour_char: Pattern letter for the hour field ("h" or "H"); the
                caller resolves it because the locale may decide the clock.

        Returns:
            Skeleton string, empty when no field is requested.
        """
        parts: list[str] = []
        if self.year is not None:
            parts.append("y" * _NUMERIC_WIDTH[self.year])
        if self.month is not None:
            parts.append("M" * _MONTH_WIDTH[self.month])
        if self.weekday is not None:
            parts.append("E" * _WEEKDAY_WIDTH[self.weekday])
        if self.day is not None:
            parts.append("d" * _NUMERIC_WIDTH[self.day])
        if self.hour is not None:
            parts.append(hour_char * _NUMERIC_WIDTH[self.hour])
        if self.minute is not None:
            parts.append("m" * _NUMERIC_WIDTH[self.minute])
        if self.second is not None:
            parts.append("s" * _NUMERIC_WIDTH[self.second])
        return "".join(parts)

    def as_dict(self) -> dict[str, str | bool]:
        """Options that are set, keyed by name (for logging and debugging)."""
        return {
            field.name: getattr(self, field.name)
            for field in fields(self)
            if getattr(self, field.name) is not None
        }
