"""Host-facing display helpers.

What a page or template layer needs around the renderer: validated site
settings, conversion of a site's legacy date/time format to formatter
options, one-call formatting of a timestamp for display, the machine-readable
ISO string and the tooltip text.

Settings validation happens here, one layer above the renderer, which
assumes a known calendar identifier.

Python 3.13+. Uses Babel (and PyICU for other calendars) through the runtime package.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, tzinfo
from typing import TYPE_CHECKING

from intldatetime.constants import (
    DATETIME_FORMAT_SEPARATOR,
    DEFAULT_CALENDAR,
    DEFAULT_DATE_FORMAT,
    DEFAULT_LOCALE,
    DEFAULT_TIME_FORMAT,
)
from intldatetime.core.babel_compat import get_babel_dates, is_babel_available
from intldatetime.diagnostics import (
    ErrorTemplate,
    IntlDateTimeError,
    InvalidCalendarError,
    InvalidTimestampError,
)
from intldatetime.enums import CalendarId, DisplayType
from intldatetime.locale_utils import normalize_locale
from intldatetime.runtime import (
    INTL_TOKEN_OPTIONS,
    FormatRequest,
    TokenOptionSet,
    get_default_renderer,
    to_datetime,
)
from intldatetime.runtime.token_map import MERIDIEM_TOKENS

if TYPE_CHECKING:
    from datetime import datetime

    from intldatetime.runtime import Renderer

__all__ = [
    "DisplaySettings",
    "format_timestamp",
    "iso_datetime",
    "legacy_format_to_options",
    "title_text",
    "validate_calendar",
]

logger = logging.getLogger(__name__)

# Meridiem only forces the 12-hour clock; it requests no field of its own.
_MERIDIEM_OPTIONS = TokenOptionSet(hour12=True, hour_cycle="h12")

_DATE_DEFAULTS = TokenOptionSet(year="numeric", month="long", day="numeric")
_TIME_DEFAULTS = TokenOptionSet(hour="2-digit", minute="2-digit")

# Locale style used for the tooltip and the last-resort display text.
_MEDIUM_STYLE = "medium"


def validate_calendar(value: str) -> CalendarId:
    """Check a calendar identifier against the accepted set.

    Raises:
        InvalidCalendarError: If value is not a CalendarId

    Example:
        >>> validate_calendar("buddhist")
        <CalendarId.BUDDHIST: 'buddhist'>
    """
    try:
        return CalendarId(value)
    except ValueError:
        raise InvalidCalendarError(ErrorTemplate.invalid_calendar(value)) from None


@dataclass(frozen=True, slots=True)
class DisplaySettings:
    """Site-level display configuration.

    Build with create() (sanitizing) or create_or_raise() (strict) rather
    than the constructor, which performs no validation.

    Attributes:
        locale: Locale tag used for every element
        calendar: Calendar identifier
        date_format: Legacy format for date display
        time_format: Legacy format for time display
    """

    locale: str = DEFAULT_LOCALE
    calendar: str = DEFAULT_CALENDAR
    date_format: str = DEFAULT_DATE_FORMAT
    time_format: str = DEFAULT_TIME_FORMAT

    @classmethod
    def create(
        cls,
        locale: str = "",
        calendar: str = "",
        date_format: str = "",
        time_format: str = "",
    ) -> DisplaySettings:
        """Create settings with graceful fallback for bad values.

        Empty values take the defaults. An unknown calendar is replaced by
        gregory and a warning is logged. Always succeeds; use
        create_or_raise() for strict validation.

        Example:
            >>> DisplaySettings.create(calendar="mayan").calendar
            'gregory'
        """
        resolved = calendar or DEFAULT_CALENDAR
        try:
            resolved = validate_calendar(resolved).value
        except InvalidCalendarError as e:
            logger.warning("%s. Defaulting to %s", e, DEFAULT_CALENDAR)
            resolved = DEFAULT_CALENDAR
        return cls(
            locale=locale.strip() or DEFAULT_LOCALE,
            calendar=resolved,
            date_format=date_format or DEFAULT_DATE_FORMAT,
            time_format=time_format or DEFAULT_TIME_FORMAT,
        )

    @classmethod
    def create_or_raise(
        cls,
        locale: str = "",
        calendar: str = "",
        date_format: str = "",
        time_format: str = "",
    ) -> DisplaySettings:
        """Create settings, raising on an unknown calendar.

        Raises:
            InvalidCalendarError: If calendar is not a CalendarId
        """
        return cls(
            locale=locale.strip() or DEFAULT_LOCALE,
            calendar=validate_calendar(calendar or DEFAULT_CALENDAR).value,
            date_format=date_format or DEFAULT_DATE_FORMAT,
            time_format=time_format or DEFAULT_TIME_FORMAT,
        )

    def site_format(self, display_type: DisplayType) -> str:
        """Legacy format for display_type (datetime joins date and time)."""
        match display_type:
            case DisplayType.DATE:
                return self.date_format
            case DisplayType.TIME:
                return self.time_format
            case _:
                return f"{self.date_format}{DATETIME_FORMAT_SEPARATOR}{self.time_format}"


def legacy_format_to_options(format_string: str, display_type: DisplayType) -> TokenOptionSet:
    """Derive formatter options from a whole legacy format string.

    Starts from the defaults of display_type and applies, in token-map
    order, the options of every token that occurs anywhere in the string.
    Meridiem tokens only force the 12-hour clock.

    Example:
        >>> opts = legacy_format_to_options("M j", DisplayType.DATE)
        >>> opts.month, opts.day, opts.year
        ('short', 'numeric', 'numeric')
    """
    options = TokenOptionSet()
    if display_type in (DisplayType.DATE, DisplayType.DATETIME):
        options = options.merge(_DATE_DEFAULTS)
    if display_type in (DisplayType.TIME, DisplayType.DATETIME):
        options = options.merge(_TIME_DEFAULTS)

    if not format_string:
        logger.warning("%s", ErrorTemplate.empty_format())
        return options

    for char, token_options in INTL_TOKEN_OPTIONS.items():
        if char not in format_string:
            continue
        options = options.merge(_MERIDIEM_OPTIONS if char in MERIDIEM_TOKENS else token_options)
    return options


def format_timestamp(
    timestamp: int | float | str,
    settings: DisplaySettings,
    *,
    display_type: DisplayType = DisplayType.DATETIME,
    custom_format: str | None = None,
    renderer: Renderer | None = None,
    tz: tzinfo = UTC,
) -> str:
    """Format a timestamp for display on a host element.

    A custom format goes through the token renderer. Otherwise the site
    format for display_type is converted to options and formatted in the
    locale's own layout and the settings' calendar. If that formatter cannot be
    built or used, the locale's Gregorian medium date-time is used, then
    the empty string.

    Args:
        timestamp: Milliseconds since the Unix epoch
        settings: Site display settings
        display_type: Components to show
        custom_format: Legacy format overriding the site format
        renderer: Renderer to use (default: the process-wide renderer)
        tz: Display time zone

    Returns:
        Display text; "" for an invalid timestamp
    """
    renderer = renderer or get_default_renderer()
    if custom_format:
        request = FormatRequest(timestamp, custom_format, settings.locale, settings.calendar, tz)
        return renderer.render(request)

    site_format = settings.site_format(display_type)
    if not renderer.intl_supported:
        return renderer.render_fallback_only(FormatRequest(timestamp, site_format, tz=tz))

    try:
        value = to_datetime(timestamp, tz)
    except InvalidTimestampError as e:
        logger.warning("%s", e)
        return ""

    options = legacy_format_to_options(site_format, display_type)
    try:
        formatter = renderer.cache.get(settings.locale, settings.calendar, options)
    except IntlDateTimeError as e:
        # The cache warns once per failing key
        logger.debug("No formatter for %r with %s: %s", site_format, settings, e)
        return _locale_medium(value, settings.locale)
    try:
        return formatter.format(value)
    except IntlDateTimeError as e:
        logger.warning("Error formatting %r for %s: %s", site_format, settings, e)
    return _locale_medium(value, settings.locale)


def iso_datetime(timestamp: int | float | str, tz: tzinfo = UTC) -> str | None:
    """ISO-8601 text for a machine-readable attribute.

    Returns:
        ISO string with offset, or None for an invalid timestamp

    Example:
        >>> iso_datetime(1704067200000)
        '2024-01-01T00:00:00+00:00'
    """
    try:
        return to_datetime(timestamp, tz).isoformat()
    except InvalidTimestampError as e:
        logger.warning("%s", e)
        return None


def title_text(timestamp: int | float | str, locale: str, tz: tzinfo = UTC) -> str:
    """Locale medium date-time, for tooltips.

    Returns:
        Tooltip text; "" when the timestamp or locale is unusable
    """
    try:
        value = to_datetime(timestamp, tz)
    except InvalidTimestampError as e:
        logger.warning("%s", e)
        return ""
    return _locale_medium(value, locale)


def _locale_medium(value: datetime, locale: str) -> str:
    """Gregorian medium date-time in locale, or "" when that fails too."""
    if not is_babel_available():
        logger.warning("%s", ErrorTemplate.capability_unavailable("Tooltip formatting"))
        return ""
    # Lazy import: Babel is optional at import time
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        return str(
            get_babel_dates().format_datetime(
                value,
                format=_MEDIUM_STYLE,
                tzinfo=value.tzinfo,
                locale=normalize_locale(locale),
            )
        )
    except (UnknownLocaleError, LookupError, ValueError, TypeError, AttributeError) as e:
        logger.warning("Even fallback formatting failed for locale %r: %s", locale, e)
        return ""
