"""Gregorian-only fallback formatter.

Renders legacy format characters with arithmetic and fixed English name
tables, never consulting a locale formatter. Used per token when a locale
formatter fails, and for the whole string when no formatting capability is
usable. Unrecognized characters pass through unchanged.

Pure functions; cannot fail for a valid datetime.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from intldatetime.constants import ESCAPE_CHAR
from intldatetime.syntax import FormatCursor

if TYPE_CHECKING:
    from datetime import datetime

__all__ = [
    "fallback_format",
    "format_all",
    "meridiem",
    "twelve_hour",
    "weekday_number",
]

# Indexed by isoweekday() % 7 (Sunday = 0).
_WEEKDAYS_SHORT: tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
_WEEKDAYS_LONG: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)
_MONTHS_SHORT: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_MONTHS_LONG: tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def weekday_number(value: datetime, char: str) -> str:
    """Numeric day of week.

    ``w``: 0-6 with Sunday = 0. ``N``: 1-7 with Monday = 1, Sunday = 7.

    Example:
        >>> from datetime import datetime
        >>> sunday = datetime(2024, 1, 7)
        >>> weekday_number(sunday, "w"), weekday_number(sunday, "N")
        ('0', '7')
    """
    iso = value.isoweekday()
    return str(iso if char == "N" else iso % 7)


def twelve_hour(value: datetime) -> int:
    """Hour on a 12-hour clock (0 maps to 12)."""
    return value.hour % 12 or 12


def meridiem(value: datetime, *, upper: bool) -> str:
    """am/pm marker for value."""
    marker = "am" if value.hour < 12 else "pm"
    return marker.upper() if upper else marker


def fallback_format(value: datetime, char: str) -> str:
    """Render one legacy format character without locale data.

    Args:
        value: Instant in the display time zone
        char: Single format character

    Returns:
        Rendered text, or char itself when it is not a known token

    Example:
        >>> from datetime import datetime
        >>> fallback_format(datetime(2024, 3, 5, 14, 7), "F")
        'March'
        >>> fallback_format(datetime(2024, 3, 5, 14, 7), "/")
        '/'
    """
    match char:
        # Day
        case "d":
            return f"{value.day:02d}"
        case "j":
            return str(value.day)
        case "D":
            return _WEEKDAYS_SHORT[value.isoweekday() % 7]
        case "l":
            return _WEEKDAYS_LONG[value.isoweekday() % 7]
        case "w" | "N":
            return weekday_number(value, char)
        # Month
        case "m":
            return f"{value.month:02d}"
        case "n":
            return str(value.month)
        case "F":
            return _MONTHS_LONG[value.month - 1]
        case "M":
            return _MONTHS_SHORT[value.month - 1]
        # Year
        case "Y":
            return str(value.year)
        case "y":
            return f"{value.year % 100:02d}"
        # Time
        case "a" | "A":
            return meridiem(value, upper=char == "A")
        case "g":
            return str(twelve_hour(value))
        case "h":
            return f"{twelve_hour(value):02d}"
        case "G":
            return str(value.hour)
        case "H":
            return f"{value.hour:02d}"
        case "i":
            return f"{value.minute:02d}"
        case "s":
            return f"{value.second:02d}"
        case _:
            return char


def format_all(value: datetime, format_string: str) -> str:
    """Render a whole format string with the fallback formatter.

    Escapes are honoured the same way the locale-aware renderer honours
    them; a trailing backslash is kept.

    Example:
        >>> from datetime import datetime
        >>> format_all(datetime(2024, 3, 5), "\\\\Y: Y-m-d")
        'Y: 2024-03-05'
    """
    cursor = FormatCursor(format_string)
    output: list[str] = []
    while not cursor.is_eof:
        char = cursor.current
        if char == ESCAPE_CHAR and not cursor.is_last:
            cursor = cursor.advance()
            output.append(cursor.current)
            cursor = cursor.advance()
            continue
        output.append(fallback_format(value, char))
        cursor = cursor.advance()
    return "".join(output)
