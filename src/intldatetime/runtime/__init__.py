"""Rendering runtime package.

Provides the token map, the Babel and ICU formatters, the formatter cache, the
Gregorian fallback formatter and the Renderer that ties them together.
Depends on syntax package for scanning.

Python 3.13+.
"""

from .cache import FormatterCache, FormatterFactory, build_formatter
from .calendar_formatter import CalendarFormatter
from .capability import is_intl_supported
from .fallback import fallback_format, format_all
from .formatter import GREGORIAN_CALENDARS, DatePart, DateTimeFormatter, LocaleFormatter
from .instant import coerce_timestamp, to_datetime
from .options import TokenOptionSet
from .outcome import Formatted, NeedsFallback, TokenOutcome
from .renderer import (
    FormatRequest,
    Renderer,
    get_default_renderer,
    render,
    render_fallback_only,
)
from .token_map import INTL_TOKEN_OPTIONS, classify, options_for

__all__ = [
    "GREGORIAN_CALENDARS",
    "INTL_TOKEN_OPTIONS",
    "CalendarFormatter",
    "DatePart",
    "DateTimeFormatter",
    "FormatRequest",
    "Formatted",
    "FormatterCache",
    "FormatterFactory",
    "LocaleFormatter",
    "NeedsFallback",
    "Renderer",
    "TokenOptionSet",
    "TokenOutcome",
    "build_formatter",
    "classify",
    "coerce_timestamp",
    "fallback_format",
    "format_all",
    "get_default_renderer",
    "is_intl_supported",
    "options_for",
    "render",
    "render_fallback_only",
    "to_datetime",
]
