"""Babel-backed date/time formatter with structured output.

DateTimeFormatter is the Python counterpart of ``Intl.DateTimeFormat``: it
is built once for a (locale, options) pair, resolves the options to a CLDR
pattern, and then formats any number of instants either to a plain string or
to typed parts (``formatToParts``).

Architecture:
    - Options -> CLDR skeleton (TokenOptionSet.to_skeleton)
    - Skeleton -> locale pattern via Locale.datetime_skeletons, exact key
      first, then babel.dates.match_skeleton
    - Date and time fields matched separately and joined with the locale's
      dateTimeFormat when no single skeleton fits
    - Field widths and hour cycle adjusted back to what was requested
    - Pattern tokenized once; formatting walks the tokens through
      babel.dates.DateTimeFormat

Calendar Support:
    Babel ships the Gregorian CLDR calendar only, so this formatter serves
    ``gregory`` and ``iso8601``. Every other calendar is formatted by
    CalendarFormatter (PyICU); the cache's default factory picks the
    backend per calendar.

Babel is imported lazily so this module stays importable without it.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from intldatetime.constants import DEFAULT_CALENDAR
from intldatetime.core.babel_compat import get_babel_dates, is_babel_available
from intldatetime.core.errors import FormattingError
from intldatetime.diagnostics import (
    ErrorTemplate,
    FormatterConstructionError,
    UnsupportedCapabilityError,
)
from intldatetime.enums import CalendarId, PartType
from intldatetime.locale_utils import get_babel_locale, normalize_locale

from .options import DEFAULT_DATE_SKELETON, TokenOptionSet
from .pattern import adjust_fields, part_type

if TYPE_CHECKING:
    from datetime import datetime

    from babel import Locale

__all__ = [
    "GREGORIAN_CALENDARS",
    "DatePart",
    "DateTimeFormatter",
    "LocaleFormatter",
    "load_locale",
]

logger = logging.getLogger(__name__)

# Calendars Babel has CLDR data for.
GREGORIAN_CALENDARS: frozenset[str] = frozenset({CalendarId.GREGORY, CalendarId.ISO8601})

type _PatternToken = tuple[str, Any]

_DATE_FIELDS: frozenset[str] = frozenset("GyYuQqMLwWdDFgEec")
_TWELVE_HOUR_CHARS: frozenset[str] = frozenset("hK")

# Babel failures while resolving patterns or formatting fields.
_BABEL_ERRORS: tuple[type[Exception], ...] = (
    KeyError,
    ValueError,
    TypeError,
    AttributeError,
    IndexError,
)


@dataclass(frozen=True, slots=True)
class DatePart:
    """One typed component of a formatted instant.

    Attributes:
        type: Part type (year, hour, dayPeriod, literal, ...)
        value: Rendered text
    """

    type: PartType
    value: str


class LocaleFormatter(Protocol):
    """What the renderer and display helpers need from a built formatter."""

    @property
    def locale_code(self) -> str: ...

    @property
    def calendar(self) -> str: ...

    @property
    def pattern(self) -> str: ...

    def format(self, value: datetime) -> str: ...

    def format_to_parts(self, value: datetime) -> tuple[DatePart, ...]: ...


def load_locale(locale_code: str, calendar: str) -> Locale:
    """Load Babel locale data, reporting failures as construction errors.

    Raises:
        UnsupportedCapabilityError: If Babel is not installed
        FormatterConstructionError: If the locale tag is unknown or malformed
    """
    if not is_babel_available():
        raise UnsupportedCapabilityError(
            ErrorTemplate.capability_unavailable("Locale-aware date formatting")
        )
    # Lazy import: Babel is optional at import time
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        return get_babel_locale(locale_code)
    except UnknownLocaleError as e:
        raise FormatterConstructionError(
            ErrorTemplate.unknown_locale(locale_code, str(e)),
            locale_code=locale_code,
            calendar=calendar,
        ) from e
    except (ValueError, TypeError) as e:
        raise FormatterConstructionError(
            ErrorTemplate.formatter_construction_failed(locale_code, calendar, str(e)),
            locale_code=locale_code,
            calendar=calendar,
        ) from e


class DateTimeFormatter:
    """Reusable Gregorian locale formatter for one option set.

    Construction does the expensive work (locale data lookup and pattern
    resolution); format() and format_to_parts() only walk the resolved
    pattern. Instances are immutable after construction and safe to share.

    Example:
        >>> from datetime import datetime, UTC
        >>> fmt = DateTimeFormatter("en", TokenOptionSet(month="long"))
        >>> fmt.format(datetime(2024, 1, 5, tzinfo=UTC))
        'January'
    """

    __slots__ = ("_babel_locale", "_calendar", "_locale_code", "_options", "_pattern", "_tokens")

    def __init__(self, locale_code: str, options: TokenOptionSet) -> None:
        """Resolve options to a CLDR pattern for locale_code.

        Args:
            locale_code: BCP-47 or POSIX locale tag
            options: Requested fields; options.calendar selects the calendar

        Raises:
            UnsupportedCapabilityError: If Babel is not installed
            FormatterConstructionError: If the locale is unknown, the
                calendar is not Gregorian, or the pattern cannot be resolved
        """
        calendar = options.calendar or DEFAULT_CALENDAR
        babel_locale = load_locale(locale_code, calendar)
        if calendar not in GREGORIAN_CALENDARS:
            raise FormatterConstructionError(
                ErrorTemplate.calendar_unsupported(calendar),
                locale_code=locale_code,
                calendar=calendar,
            )

        try:
            pattern = _resolve_pattern(babel_locale, options)
            tokens = tuple(get_babel_dates().tokenize_pattern(pattern))
        except _BABEL_ERRORS as e:
            raise FormatterConstructionError(
                ErrorTemplate.formatter_construction_failed(locale_code, calendar, str(e)),
                locale_code=locale_code,
                calendar=calendar,
            ) from e

        self._locale_code = normalize_locale(locale_code)
        self._calendar = calendar
        self._babel_locale = babel_locale
        self._options = options
        self._pattern = pattern
        self._tokens: tuple[_PatternToken, ...] = tokens
        logger.debug(
            "Built formatter locale=%s calendar=%s options=%s pattern=%r",
            self._locale_code,
            calendar,
            options.as_dict(),
            pattern,
        )

    @property
    def locale_code(self) -> str:
        """Normalized locale code the formatter was built for."""
        return self._locale_code

    @property
    def calendar(self) -> str:
        """Calendar identifier the formatter renders in."""
        return self._calendar

    @property
    def options(self) -> TokenOptionSet:
        """Option set the formatter was built from."""
        return self._options

    @property
    def pattern(self) -> str:
        """Resolved CLDR pattern."""
        return self._pattern

    def format(self, value: datetime) -> str:
        """Format value to a plain string.

        Raises:
            FormattingError: If a pattern field cannot be rendered
        """
        return "".join(part.value for part in self.format_to_parts(value))

    def format_to_parts(self, value: datetime) -> tuple[DatePart, ...]:
        """Format value to typed parts.

        Args:
            value: Instant to format, already in the display time zone

        Returns:
            Parts in pattern order; literal text carries PartType.LITERAL

        Raises:
            FormattingError: If a pattern field cannot be rendered
        """
        # Lazy import: Babel is optional at import time
        from babel.dates import DateTimeFormat  # noqa: PLC0415

        try:
            fields = DateTimeFormat(value, self._babel_locale)
            parts: list[DatePart] = []
            for kind, payload in self._tokens:
                if kind == "field":
                    char, width = payload
                    field = char * width
                    parts.append(DatePart(part_type(field), fields[field]))
                else:
                    parts.append(DatePart(PartType.LITERAL, payload))
        except _BABEL_ERRORS as e:
            raise FormattingError(ErrorTemplate.formatting_failed(self._pattern, str(e))) from e
        return tuple(parts)


def _pattern_text(pattern: object) -> str:
    """Pattern string of a Babel DateTimePattern or a plain string."""
    return str(getattr(pattern, "pattern", pattern))


def _resolve_pattern(locale: Locale, options: TokenOptionSet) -> str:
    """Resolve an option set to a locale pattern with requested widths."""
    if not options.has_fields:
        skeleton = DEFAULT_DATE_SKELETON
    elif options.hour is None:
        skeleton = options.to_skeleton()
    else:
        skeleton = options.to_skeleton(_hour_char(locale, options))

    pattern = _match_skeleton(locale, skeleton)
    if pattern is None:
        date_skeleton = "".join(c for c in skeleton if c in _DATE_FIELDS)
        time_skeleton = "".join(c for c in skeleton if c not in _DATE_FIELDS)
        if date_skeleton and time_skeleton:
            date_pattern = _match_skeleton(locale, date_skeleton) or date_skeleton
            time_pattern = _match_skeleton(locale, time_skeleton) or time_skeleton
            pattern = _join_date_time(locale, date_skeleton, date_pattern, time_pattern)
        else:
            # No locale layout for this field set: the skeleton is the pattern
            pattern = skeleton
    return adjust_fields(pattern, skeleton)


def _hour_char(locale: Locale, options: TokenOptionSet) -> str:
    """Pick h (12-hour) or H (24-hour), asking the locale when unspecified."""
    twelve_hour = options.uses_12_hour()
    if twelve_hour is None:
        time_pattern = _pattern_text(locale.time_formats["short"])
        twelve_hour = any(
            kind == "field" and payload[0] in _TWELVE_HOUR_CHARS
            for kind, payload in get_babel_dates().tokenize_pattern(time_pattern)
        )
    return "h" if twelve_hour else "H"


def _match_skeleton(locale: Locale, skeleton: str) -> str | None:
    """Find the locale pattern for skeleton: exact key, then closest match."""
    skeletons = locale.datetime_skeletons
    if skeleton in skeletons:
        return _pattern_text(skeletons[skeleton])
    matched = get_babel_dates().match_skeleton(skeleton, skeletons)
    if matched is None:
        return None
    return _pattern_text(skeletons[matched])


def _join_date_time(
    locale: Locale, date_skeleton: str, date_pattern: str, time_pattern: str
) -> str:
    """Join date and time patterns with the locale's dateTimeFormat.

    The glue style follows the date part: long month names with a weekday
    use "full", long names "long", abbreviated names "medium", numeric
    months "short". CLDR glue uses {0} for time and {1} for date.
    """
    if "MMMM" in date_skeleton:
        style = "full" if "E" in date_skeleton else "long"
    elif "MMM" in date_skeleton:
        style = "medium"
    else:
        style = "short"
    glue = (
        locale.datetime_formats.get(style)
        or locale.datetime_formats.get("medium")
        or "{1} {0}"
    )
    return _pattern_text(glue).replace("{1}", date_pattern).replace("{0}", time_pattern)
