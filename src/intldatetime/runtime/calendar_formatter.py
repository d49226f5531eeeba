"""ICU-backed formatter for non-Gregorian calendars.

CalendarFormatter has the same surface as DateTimeFormatter but delegates
calendar arithmetic and calendar-specific names to ICU: the buddhist year
2567, Hebrew and Persian month names, Japanese eras and so on.

Architecture:
    - Locale and calendar -> ICU locale from the BCP-47 tag with a
      ``-u-ca-`` extension (``th-TH-u-ca-buddhist``)
    - Options -> skeleton; ``j`` lets the locale pick the hour cycle
    - Skeleton -> pattern via icu.DateTimePatternGenerator, then field
      widths adjusted back to what was requested
    - One icu.SimpleDateFormat per pattern field, so every field's text is
      a typed part without parsing the joined output

Time Zone:
    ICU formats in UTC; the instant's wall-clock time in its display zone is
    what gets formatted, so results agree with the Babel formatter.

Thread Safety:
    ICU date formats are not thread-safe. Each formatter serializes its
    format calls with a Lock.

Python 3.13+. Uses PyICU (optional) and Babel for locale validation.
"""

from __future__ import annotations

import logging
from datetime import UTC
from threading import Lock
from typing import TYPE_CHECKING, Any

from intldatetime.constants import DEFAULT_CALENDAR
from intldatetime.core.errors import FormattingError
from intldatetime.core.icu_compat import get_icu, is_icu_available
from intldatetime.diagnostics import ErrorTemplate, FormatterConstructionError
from intldatetime.enums import PartType
from intldatetime.locale_utils import normalize_locale

from .formatter import DatePart, load_locale
from .options import DEFAULT_DATE_SKELETON, TokenOptionSet
from .pattern import adjust_fields, part_type, split_pattern

if TYPE_CHECKING:
    from datetime import datetime

    from .pattern import PatternToken

__all__ = ["CalendarFormatter", "icu_language_tag"]

logger = logging.getLogger(__name__)

# Skeleton letter for the locale's preferred hour (h, H, K or k).
_LOCALE_HOUR_CHAR = "j"

_ICU_TIME_ZONE = "UTC"


def icu_language_tag(locale_code: str, calendar: str) -> str:
    """BCP-47 tag selecting calendar for locale_code.

    Example:
        >>> icu_language_tag("th_TH", "buddhist")
        'th-TH-u-ca-buddhist'
    """
    return f"{normalize_locale(locale_code).replace('_', '-')}-u-ca-{calendar}"


class CalendarFormatter:
    """Reusable locale formatter for one option set in any CLDR calendar.

    Example:
        >>> from datetime import datetime, UTC
        >>> fmt = CalendarFormatter("th-TH", TokenOptionSet(year="numeric", calendar="buddhist"))
        >>> "2567" in fmt.format(datetime(2024, 1, 1, tzinfo=UTC))
        True
    """

    __slots__ = ("_calendar", "_fields", "_locale_code", "_lock", "_options", "_pattern", "_tokens")

    def __init__(self, locale_code: str, options: TokenOptionSet) -> None:
        """Resolve options to an ICU pattern for locale_code and calendar.

        Args:
            locale_code: BCP-47 or POSIX locale tag
            options: Requested fields; options.calendar selects the calendar

        Raises:
            UnsupportedCapabilityError: If Babel is not installed
            FormatterConstructionError: If PyICU is not installed, the
                locale is unknown, or ICU cannot build the pattern
        """
        calendar = options.calendar or DEFAULT_CALENDAR
        # ICU accepts any tag and falls back to root data; Babel rejects unknown ones
        load_locale(locale_code, calendar)
        if not is_icu_available():
            raise FormatterConstructionError(
                ErrorTemplate.calendar_unsupported(calendar),
                locale_code=locale_code,
                calendar=calendar,
            )

        icu = get_icu()
        try:
            icu_locale = icu.Locale.forLanguageTag(icu_language_tag(locale_code, calendar))
            skeleton = _skeleton(options)
            generator = icu.DateTimePatternGenerator.createInstance(icu_locale)
            pattern = adjust_fields(str(generator.getBestPattern(skeleton)), skeleton)
            tokens = split_pattern(pattern)
            fields = _field_formats(icu, icu_locale, tokens)
        except (icu.ICUError, ValueError, TypeError) as e:
            raise FormatterConstructionError(
                ErrorTemplate.formatter_construction_failed(locale_code, calendar, str(e)),
                locale_code=locale_code,
                calendar=calendar,
            ) from e

        self._locale_code = normalize_locale(locale_code)
        self._calendar = calendar
        self._options = options
        self._pattern = pattern
        self._tokens: tuple[PatternToken, ...] = tokens
        self._fields: dict[str, Any] = fields
        self._lock = Lock()
        logger.debug(
            "Built ICU formatter locale=%s calendar=%s options=%s pattern=%r",
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
        """Resolved ICU pattern."""
        return self._pattern

    def format(self, value: datetime) -> str:
        """Format value to a plain string.

        Raises:
            FormattingError: If ICU cannot format a field
        """
        return "".join(part.value for part in self.format_to_parts(value))

    def format_to_parts(self, value: datetime) -> tuple[DatePart, ...]:
        """Format value to typed parts.

        Args:
            value: Instant to format, already in the display time zone

        Returns:
            Parts in pattern order; literal text carries PartType.LITERAL

        Raises:
            FormattingError: If ICU cannot format a field
        """
        icu = get_icu()
        # Wall-clock time of the display zone, read as UTC milliseconds
        udate = value.replace(tzinfo=UTC).timestamp() * 1000
        parts: list[DatePart] = []
        try:
            with self._lock:
                for kind, text in self._tokens:
                    if kind == "field":
                        parts.append(
                            DatePart(part_type(text), str(self._fields[text].format(udate)))
                        )
                    else:
                        parts.append(DatePart(PartType.LITERAL, text))
        except (icu.ICUError, ValueError, TypeError, OverflowError) as e:
            raise FormattingError(ErrorTemplate.formatting_failed(self._pattern, str(e))) from e
        return tuple(parts)


def _skeleton(options: TokenOptionSet) -> str:
    if not options.has_fields:
        return DEFAULT_DATE_SKELETON
    twelve_hour = options.uses_12_hour()
    if twelve_hour is None:
        return options.to_skeleton(_LOCALE_HOUR_CHAR)
    return options.to_skeleton("h" if twelve_hour else "H")


def _field_formats(icu: Any, icu_locale: Any, tokens: tuple[PatternToken, ...]) -> dict[str, Any]:
    """One UTC SimpleDateFormat per distinct pattern field."""
    time_zone = icu.TimeZone.createTimeZone(_ICU_TIME_ZONE)
    formats: dict[str, Any] = {}
    for kind, text in tokens:
        if kind == "field" and text not in formats:
            field_format = icu.SimpleDateFormat(text, icu_locale)
            field_format.setTimeZone(time_zone)
            formats[text] = field_format
    return formats
