"""Shared constants for intldatetime.

Centralized configuration values used by the runtime and the display layer.
Placing them here avoids circular imports and provides a single source of
truth.

Constants are grouped by domain:
- Era shift: Buddhist Era display rules
- Format defaults: site-level legacy format strings and locale/calendar
- Scanning: special characters of the legacy format alphabet

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Era shift
    "BUDDHIST_ERA_OFFSET",
    "ERA_SHIFT_LOCALE_PREFIX",
    # Format defaults
    "DEFAULT_LOCALE",
    "DEFAULT_CALENDAR",
    "DEFAULT_DATE_FORMAT",
    "DEFAULT_TIME_FORMAT",
    "DATETIME_FORMAT_SEPARATOR",
    # Scanning
    "ESCAPE_CHAR",
    # Capability check
    "CAPABILITY_CHECK_LOCALE",
]

# ============================================================================
# ERA SHIFT
# ============================================================================

# Buddhist Era year = Gregorian year + 543. Fixed civil convention, independent
# of any calendar engine.
BUDDHIST_ERA_OFFSET: int = 543

# Era-shifted year tokens (B/b) are honoured only for locale tags with this
# prefix under the buddhist calendar.
ERA_SHIFT_LOCALE_PREFIX: str = "th"

# ============================================================================
# FORMAT DEFAULTS
# ============================================================================

DEFAULT_LOCALE: str = "en"
DEFAULT_CALENDAR: str = "gregory"

# Legacy format strings used when the host supplies none.
DEFAULT_DATE_FORMAT: str = "F j, Y"
DEFAULT_TIME_FORMAT: str = "g:i a"

# Joins the date and time formats for datetime display.
DATETIME_FORMAT_SEPARATOR: str = " "

# ============================================================================
# SCANNING
# ============================================================================

# Escapes the following character of a legacy format string.
ESCAPE_CHAR: str = "\\"

# ============================================================================
# CAPABILITY CHECK
# ============================================================================

CAPABILITY_CHECK_LOCALE: str = "en"
