"""intldatetime - locale and calendar aware rendering of legacy date formats.

Renders a millisecond timestamp as display text driven by a legacy
single-character format string (``F j, Y g:i a``) in any CLDR locale and
calendar. Non-Gregorian calendars are formatted through PyICU. Thai locales
get Buddhist Era year tokens, and a Gregorian fallback covers everything
locale formatting cannot.

Public API:
    render - Render a timestamp with a legacy format string
    render_fallback_only - Render with the Gregorian fallback only
    Renderer - Renderer with an explicitly owned formatter cache
    FormatRequest - Immutable input of one render call
    FormatterCache - Thread-safe memo of locale formatters
    DisplaySettings - Validated site display configuration
    format_timestamp - One-call display formatting for host elements
    CalendarId - Accepted calendar identifiers

Exceptions:
    IntlDateTimeError - Base exception class
    UnsupportedCapabilityError - No usable locale formatting capability
    FormatterConstructionError - Formatter cannot be built for a key
    InvalidTimestampError - Input is not a valid instant
    InvalidCalendarError - Calendar identifier outside the accepted set

Submodules:
    intldatetime.runtime - Token map, formatters, cache, fallback, renderer
    intldatetime.display - Host-facing display helpers
    intldatetime.diagnostics - Error types and diagnostic codes
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    FormatterConstructionError,
    IntlDateTimeError,
    InvalidCalendarError,
    InvalidTimestampError,
    UnsupportedCapabilityError,
)
from .display import (
    DisplaySettings,
    format_timestamp,
    iso_datetime,
    legacy_format_to_options,
    title_text,
    validate_calendar,
)
from .enums import CalendarId, DisplayType
from .runtime import (
    FormatRequest,
    FormatterCache,
    Renderer,
    is_intl_supported,
    render,
    render_fallback_only,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("intldatetime")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CalendarId",
    "DisplaySettings",
    "DisplayType",
    "FormatRequest",
    "FormatterCache",
    "FormatterConstructionError",
    "IntlDateTimeError",
    "InvalidCalendarError",
    "InvalidTimestampError",
    "Renderer",
    "UnsupportedCapabilityError",
    "__version__",
    "format_timestamp",
    "is_intl_supported",
    "iso_datetime",
    "legacy_format_to_options",
    "render",
    "render_fallback_only",
    "title_text",
    "validate_calendar",
]
