"""Legacy format string renderer.

Walks a legacy format string (``F j, Y g:i a``) once, left to right, and
renders every character through one of five handlers chosen by its
TokenKind:

    ERA_YEAR        Buddhist Era year for th-* locales on the buddhist
                    calendar (B = year + 543, b = its last two digits)
    WEEKDAY_NUMBER  w (0-6, Sunday = 0) and N (1-7, Sunday = 7)
    ESCAPE          backslash emits the next character verbatim
    INTL            locale formatter from the FormatterCache; meridiem and
                    12-hour tokens read their part from structured output
    LITERAL         everything else, unchanged

A token whose formatter cannot be built or used is rendered by the
Gregorian fallback formatter; the rest of the string is unaffected. Without
a usable formatting capability the whole string goes through the fallback.
Invalid timestamps render as the empty string.

Thread Safety:
    Renderer holds no per-call state; the FormatterCache it owns is
    lock-protected. One Renderer may serve many threads.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, tzinfo
from threading import Lock
from typing import TYPE_CHECKING

from intldatetime.constants import BUDDHIST_ERA_OFFSET, DEFAULT_CALENDAR, DEFAULT_LOCALE
from intldatetime.diagnostics import (
    ErrorTemplate,
    IntlDateTimeError,
    InvalidTimestampError,
)
from intldatetime.enums import CalendarId, PartType, TokenKind
from intldatetime.locale_utils import is_era_shift_locale
from intldatetime.syntax import FormatCursor

from .cache import FormatterCache
from .capability import is_intl_supported
from .fallback import fallback_format, format_all, meridiem, twelve_hour, weekday_number
from .instant import to_datetime
from .outcome import Formatted, NeedsFallback, TokenOutcome
from .token_map import MERIDIEM_TOKENS, TWELVE_HOUR_TOKENS, classify, options_for

if TYPE_CHECKING:
    from collections.abc import Callable

    from .formatter import DatePart, LocaleFormatter

__all__ = [
    "FormatRequest",
    "Renderer",
    "get_default_renderer",
    "render",
    "render_fallback_only",
]

logger = logging.getLogger(__name__)

type _Handler = Callable[[FormatCursor, _RenderContext], tuple[str, FormatCursor]]


@dataclass(frozen=True, slots=True)
class FormatRequest:
    """One render call's input.

    Attributes:
        timestamp: Milliseconds since the Unix epoch (int, float or numeric str)
        format_string: Legacy format string, e.g. "F j, Y"
        locale: BCP-47 or POSIX locale tag
        calendar: Calendar identifier (see CalendarId)
        tz: Time zone the instant is displayed in
    """

    timestamp: int | float | str
    format_string: str
    locale: str = DEFAULT_LOCALE
    calendar: str = DEFAULT_CALENDAR
    tz: tzinfo = UTC


@dataclass(frozen=True, slots=True)
class _RenderContext:
    """Per-call values every handler needs."""

    value: datetime
    locale: str
    calendar: str
    era_shift: bool


class Renderer:
    """Renders FormatRequests through a cache of locale formatters.

    Example:
        >>> renderer = Renderer()
        >>> renderer.render(FormatRequest(1704067200000, "Y-m-d", "en", "gregory"))
        '2024-01-01'
    """

    __slots__ = ("_cache", "_handlers", "_intl_supported")

    def __init__(
        self,
        cache: FormatterCache | None = None,
        *,
        intl_supported: bool | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            cache: Formatter cache to use (default: a new private cache)
            intl_supported: Force the capability decision; None detects it
                with is_intl_supported() on first use
        """
        self._cache = cache if cache is not None else FormatterCache()
        self._intl_supported = intl_supported
        self._handlers: dict[TokenKind, _Handler] = {
            TokenKind.ERA_YEAR: self._render_era_year,
            TokenKind.WEEKDAY_NUMBER: self._render_weekday_number,
            TokenKind.ESCAPE: self._render_escape,
            TokenKind.INTL: self._render_intl,
            TokenKind.LITERAL: self._render_literal,
        }

    @property
    def cache(self) -> FormatterCache:
        """Formatter cache owned by this renderer."""
        return self._cache

    @property
    def intl_supported(self) -> bool:
        """Whether locale formatters are used at all."""
        if self._intl_supported is None:
            return is_intl_supported()
        return self._intl_supported

    def render(self, request: FormatRequest) -> str:
        """Render request to display text.

        Args:
            request: Timestamp, format string, locale and calendar

        Returns:
            Rendered text; "" when the timestamp is invalid

        Raises:
            TypeError: If format_string is not a str
        """
        value = self._to_datetime(request)
        if value is None:
            return ""
        format_string = _require_str(request.format_string)

        if not self.intl_supported:
            return format_all(value, format_string)

        context = _RenderContext(
            value=value,
            locale=request.locale,
            calendar=request.calendar,
            era_shift=(
                request.calendar == CalendarId.BUDDHIST and is_era_shift_locale(request.locale)
            ),
        )
        try:
            return self._scan(format_string, context)
        except (IntlDateTimeError, LookupError, ValueError) as e:
            logger.warning(
                "Rendering %r failed (%s); using Gregorian fallback for the whole string",
                format_string,
                e,
            )
            return format_all(value, format_string)

    def render_fallback_only(self, request: FormatRequest) -> str:
        """Render request with the Gregorian fallback only.

        Locale and calendar are ignored.

        Returns:
            Rendered text; "" when the timestamp is invalid
        """
        value = self._to_datetime(request)
        if value is None:
            return ""
        return format_all(value, _require_str(request.format_string))

    def _scan(self, format_string: str, context: _RenderContext) -> str:
        """Single forward pass; each handler consumes one or two characters."""
        cursor = FormatCursor(format_string)
        output: list[str] = []
        while not cursor.is_eof:
            handler = self._handlers[classify(cursor.current)]
            text, cursor = handler(cursor, context)
            output.append(text)
        return "".join(output)

    # ------------------------------------------------------------------
    # Handlers: (cursor, context) -> (text, advanced cursor)
    # ------------------------------------------------------------------

    def _render_era_year(
        self, cursor: FormatCursor, context: _RenderContext
    ) -> tuple[str, FormatCursor]:
        char = cursor.current
        if not context.era_shift:
            return char, cursor.advance()
        year = str(context.value.year + BUDDHIST_ERA_OFFSET)
        return (year if char == "B" else year[-2:]), cursor.advance()

    def _render_weekday_number(
        self, cursor: FormatCursor, context: _RenderContext
    ) -> tuple[str, FormatCursor]:
        return weekday_number(context.value, cursor.current), cursor.advance()

    def _render_escape(
        self, cursor: FormatCursor, context: _RenderContext  # noqa: ARG002
    ) -> tuple[str, FormatCursor]:
        if cursor.is_last:
            return cursor.current, cursor.advance()
        escaped = cursor.advance()
        return escaped.current, escaped.advance()

    def _render_intl(
        self, cursor: FormatCursor, context: _RenderContext
    ) -> tuple[str, FormatCursor]:
        char = cursor.current
        match self._invoke(char, context):
            case Formatted(text=text):
                return text, cursor.advance()
            case NeedsFallback(error=error):
                logger.debug("Fallback formatter for %r: %s", char, error)
                return fallback_format(context.value, char), cursor.advance()

    def _render_literal(
        self, cursor: FormatCursor, context: _RenderContext  # noqa: ARG002
    ) -> tuple[str, FormatCursor]:
        return cursor.current, cursor.advance()

    # ------------------------------------------------------------------
    # Formatter invocation
    # ------------------------------------------------------------------

    def _invoke(self, char: str, context: _RenderContext) -> TokenOutcome:
        """Render one INTL token through its cached formatter."""
        options = options_for(char)
        if options is None:
            return Formatted(char)
        try:
            formatter = self._cache.get(context.locale, context.calendar, options)
        except IntlDateTimeError as e:
            # The cache warns once per failing key
            return NeedsFallback(e)
        try:
            if char in MERIDIEM_TOKENS:
                return Formatted(_meridiem_text(formatter, char, context.value))
            if char in TWELVE_HOUR_TOKENS:
                return Formatted(_twelve_hour_text(formatter, char, context.value))
            return Formatted(formatter.format(context.value))
        except IntlDateTimeError as e:
            logger.warning("Error formatting %r with locale formatter: %s", char, e)
            return NeedsFallback(e)

    @staticmethod
    def _to_datetime(request: FormatRequest) -> datetime | None:
        try:
            return to_datetime(request.timestamp, request.tz)
        except InvalidTimestampError as e:
            logger.warning("%s", e)
            return None


def _require_str(format_string: object) -> str:
    if not isinstance(format_string, str):
        msg = f"format_string must be str, got {type(format_string).__name__}"
        raise TypeError(msg)
    return format_string


def _find_part(parts: tuple[DatePart, ...], part_type: PartType) -> str | None:
    for part in parts:
        if part.type == part_type:
            return part.value
    return None


def _meridiem_text(formatter: LocaleFormatter, char: str, value: datetime) -> str:
    """Day period from structured output, derived from the hour if absent."""
    period = _find_part(formatter.format_to_parts(value), PartType.DAY_PERIOD)
    if period is None:
        logger.debug(
            "%s", ErrorTemplate.structured_part_missing(PartType.DAY_PERIOD, formatter.pattern)
        )
        return meridiem(value, upper=char == "A")
    return period.lower() if char == "a" else period.upper()


def _twelve_hour_text(formatter: LocaleFormatter, char: str, value: datetime) -> str:
    """12-hour hour from structured output, derived from the hour if absent."""
    hour = _find_part(formatter.format_to_parts(value), PartType.HOUR)
    if hour is None:
        logger.debug(
            "%s", ErrorTemplate.structured_part_missing(PartType.HOUR, formatter.pattern)
        )
        derived = twelve_hour(value)
        return f"{derived:02d}" if char == "h" else str(derived)
    return hour


# Module-level default renderer for the function API.
# Initialized lazily on first access to avoid import-time side effects.
_DEFAULT_RENDERER: Renderer | None = None
_DEFAULT_RENDERER_LOCK = Lock()


def get_default_renderer() -> Renderer:
    """Get the process-wide Renderer used by render() and render_fallback_only().

    Its FormatterCache lives as long as the process. Create a Renderer
    directly for an isolated cache.
    """
    # pylint: disable=global-statement
    global _DEFAULT_RENDERER  # noqa: PLW0603
    with _DEFAULT_RENDERER_LOCK:
        if _DEFAULT_RENDERER is None:
            _DEFAULT_RENDERER = Renderer()
        return _DEFAULT_RENDERER


def render(
    timestamp: int | float | str,
    format_string: str,
    locale: str = DEFAULT_LOCALE,
    calendar: str = DEFAULT_CALENDAR,
    *,
    tz: tzinfo = UTC,
) -> str:
    """Render a timestamp with a legacy format string.

    Args:
        timestamp: Milliseconds since the Unix epoch
        format_string: Legacy format string, e.g. "F j, Y g:i a"
        locale: BCP-47 or POSIX locale tag
        calendar: Calendar identifier
        tz: Display time zone (default: UTC)

    Returns:
        Rendered text; "" when the timestamp is invalid

    Examples:
        >>> render(1704067200000, "Y-m-d")
        '2024-01-01'
        >>> render(1704067200000, "\\\\Y Y")
        'Y 2024'
        >>> render(1704067200000, "B", "th-TH", "buddhist")
        '2567'
    """
    request = FormatRequest(timestamp, format_string, locale, calendar, tz)
    return get_default_renderer().render(request)


def render_fallback_only(
    timestamp: int | float | str,
    format_string: str,
    *,
    tz: tzinfo = UTC,
) -> str:
    """Render with the Gregorian fallback, without locale or calendar.

    For hosts that know no formatting capability is available.

    Example:
        >>> render_fallback_only(1704067200000, "D, M j")
        'Mon, Jan 1'
    """
    request = FormatRequest(timestamp, format_string, tz=tz)
    return get_default_renderer().render_fallback_only(request)
