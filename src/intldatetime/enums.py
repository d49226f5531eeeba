"""Enumerations for intldatetime type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class CalendarId(StrEnum):
    """Calendar systems accepted by the display layer.

    Values are the Unicode calendar identifiers (the same names used by
    ``Intl.DateTimeFormat`` and CLDR ``-u-ca-`` extensions).
    """

    GREGORY = "gregory"
    BUDDHIST = "buddhist"
    CHINESE = "chinese"
    COPTIC = "coptic"
    DANGI = "dangi"
    ETHIOAA = "ethioaa"
    ETHIOPIC = "ethiopic"
    HEBREW = "hebrew"
    INDIAN = "indian"
    ISLAMIC = "islamic"
    ISLAMIC_CIVIL = "islamic-civil"
    ISLAMIC_RGSA = "islamic-rgsa"
    ISLAMIC_TBLA = "islamic-tbla"
    ISLAMIC_UMALQURA = "islamic-umalqura"
    ISO8601 = "iso8601"
    JAPANESE = "japanese"
    PERSIAN = "persian"
    ROC = "roc"


class TokenKind(StrEnum):
    """How the renderer treats one character of a legacy format string.

    StrEnum provides automatic string conversion: str(TokenKind.INTL) == "intl"
    """

    ERA_YEAR = "era_year"
    """Buddhist Era year (B full, b two digits)."""

    WEEKDAY_NUMBER = "weekday_number"
    """Numeric day of week (w, N) with no formatter equivalent."""

    ESCAPE = "escape"
    """Backslash: emit the next character verbatim."""

    INTL = "intl"
    """Token rendered through a locale formatter."""

    LITERAL = "literal"
    """Separators, punctuation and free text."""


class PartType(StrEnum):
    """Type of a structured output part (mirrors Intl formatToParts)."""

    ERA = "era"
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    WEEKDAY = "weekday"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    DAY_PERIOD = "dayPeriod"
    TIME_ZONE_NAME = "timeZoneName"
    LITERAL = "literal"


class DisplayType(StrEnum):
    """Which components a host element displays."""

    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"


__all__ = [
    "CalendarId",
    "DisplayType",
    "PartType",
    "TokenKind",
]
