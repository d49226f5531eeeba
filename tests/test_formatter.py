"""Tests for the Babel-backed DateTimeFormatter (Gregorian calendars).

Expected strings use CLDR English data, which is stable for these fields.
"""

from datetime import UTC, datetime
from unittest.mock import patch

import pytest

from intldatetime.core.errors import FormattingError
from intldatetime.diagnostics import (
    DiagnosticCode,
    FormatterConstructionError,
    IntlDateTimeError,
    UnsupportedCapabilityError,
)
from intldatetime.enums import PartType
from intldatetime.runtime.formatter import GREGORIAN_CALENDARS, DateTimeFormatter
from intldatetime.runtime.options import TokenOptionSet
from intldatetime.runtime.token_map import options_for

# Monday
NEW_YEAR = datetime(2024, 1, 1, 0, 0, 0, tzinfo=UTC)
AFTERNOON = datetime(2024, 1, 1, 13, 5, 9, tzinfo=UTC)


def _format(char: str, value: datetime, locale: str = "en") -> str:
    options = options_for(char)
    assert options is not None
    return DateTimeFormatter(locale, options).format(value)


class TestEnglishFields:
    """One field per formatter, as the renderer requests them."""

    @pytest.mark.parametrize(
        ("char", "expected"),
        [
            ("Y", "2024"),
            ("y", "24"),
            ("F", "January"),
            ("M", "Jan"),
            ("m", "01"),
            ("n", "1"),
            ("d", "01"),
            ("j", "1"),
            ("D", "Mon"),
            ("l", "Monday"),
            ("G", "13"),
            ("H", "13"),
            ("i", "05"),
            ("s", "09"),
        ],
    )
    def test_field(self, char: str, expected: str) -> None:
        assert _format(char, AFTERNOON) == expected

    def test_two_digit_24_hour_pads(self) -> None:
        assert _format("H", NEW_YEAR) == "00"
        assert _format("G", NEW_YEAR) == "0"

    def test_default_fields(self) -> None:
        """An option set without fields formats year, month and day."""
        formatter = DateTimeFormatter("en", TokenOptionSet())
        assert formatter.format(NEW_YEAR) == "1/1/2024"


class TestStructuredOutput:
    """format_to_parts typed parts."""

    def test_twelve_hour_parts(self) -> None:
        formatter = DateTimeFormatter("en", TokenOptionSet(hour="numeric", hour12=True))
        parts = formatter.format_to_parts(AFTERNOON)
        by_type = {part.type: part.value for part in parts}
        assert by_type[PartType.HOUR] == "1"
        assert by_type[PartType.DAY_PERIOD] == "PM"

    def test_midnight_is_twelve(self) -> None:
        formatter = DateTimeFormatter("en", TokenOptionSet(hour="2-digit", hour12=True))
        parts = formatter.format_to_parts(NEW_YEAR)
        by_type = {part.type: part.value for part in parts}
        assert by_type[PartType.HOUR] == "12"
        assert by_type[PartType.DAY_PERIOD] == "AM"

    def test_parts_join_to_format(self) -> None:
        formatter = DateTimeFormatter(
            "en", TokenOptionSet(year="numeric", month="long", day="numeric")
        )
        parts = formatter.format_to_parts(NEW_YEAR)
        assert "".join(part.value for part in parts) == formatter.format(NEW_YEAR)
        assert {PartType.YEAR, PartType.MONTH, PartType.DAY} <= {part.type for part in parts}

    def test_twenty_four_hour_has_no_day_period(self) -> None:
        formatter = DateTimeFormatter("en", TokenOptionSet(hour="2-digit", hour12=False))
        types = {part.type for part in formatter.format_to_parts(AFTERNOON)}
        assert PartType.DAY_PERIOD not in types


class TestConstruction:
    """Construction-time validation."""

    def test_properties(self) -> None:
        formatter = DateTimeFormatter("en-US", TokenOptionSet(month="long"))
        assert formatter.locale_code == "en_US"
        assert formatter.calendar == "gregory"
        assert formatter.options == TokenOptionSet(month="long")
        assert formatter.format(NEW_YEAR) == "January"

    @pytest.mark.parametrize("calendar", sorted(GREGORIAN_CALENDARS))
    def test_gregorian_calendars(self, calendar: str) -> None:
        formatter = DateTimeFormatter("en", TokenOptionSet(year="numeric", calendar=calendar))
        assert formatter.calendar == calendar
        assert formatter.format(NEW_YEAR) == "2024"

    @pytest.mark.parametrize("calendar", ["buddhist", "hebrew", "islamic-civil", "japanese"])
    def test_non_gregorian_calendar_rejected(self, calendar: str) -> None:
        """Babel has no data for these; CalendarFormatter serves them."""
        with pytest.raises(FormatterConstructionError) as exc_info:
            DateTimeFormatter("en", TokenOptionSet(year="numeric", calendar=calendar))
        assert exc_info.value.calendar == calendar
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CALENDAR_UNSUPPORTED

    def test_unknown_locale(self) -> None:
        with pytest.raises(FormatterConstructionError) as exc_info:
            DateTimeFormatter("xx", TokenOptionSet(year="numeric"))
        assert exc_info.value.locale_code == "xx"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.UNKNOWN_LOCALE

    def test_without_babel(self) -> None:
        with (
            patch("intldatetime.runtime.formatter.is_babel_available", return_value=False),
            pytest.raises(UnsupportedCapabilityError),
        ):
            DateTimeFormatter("en", TokenOptionSet(year="numeric"))

    def test_errors_share_base(self) -> None:
        assert issubclass(FormatterConstructionError, IntlDateTimeError)
        assert issubclass(FormattingError, IntlDateTimeError)


class TestFormattingFailure:
    """Babel failures while formatting become FormattingError."""

    def test_wrapped(self) -> None:
        formatter = DateTimeFormatter("en", TokenOptionSet(year="numeric"))
        with (
            patch("babel.dates.DateTimeFormat.__getitem__", side_effect=KeyError("y")),
            pytest.raises(FormattingError) as exc_info,
        ):
            formatter.format(NEW_YEAR)
        assert "'y'" in str(exc_info.value)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.FORMATTING_FAILED
