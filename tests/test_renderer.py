"""Tests for the legacy format string Renderer.

Covers the dispatch order (era year, weekday number, escape, formatter
token, literal), per-token and whole-string fallback, invalid input and the
module-level API.
"""

import logging
from datetime import UTC, datetime, timedelta, timezone
from unittest.mock import Mock, patch

import pytest

from intldatetime.core.errors import FormattingError
from intldatetime.diagnostics import FormatterConstructionError, UnsupportedCapabilityError
from intldatetime.enums import CalendarId
from intldatetime.runtime import renderer as renderer_module
from intldatetime.runtime.cache import FormatterCache
from intldatetime.runtime.fallback import format_all
from intldatetime.runtime.formatter import DateTimeFormatter
from intldatetime.runtime.renderer import (
    FormatRequest,
    Renderer,
    get_default_renderer,
    render,
    render_fallback_only,
)

# 2024-01-01T00:00:00Z, a Monday
NEW_YEAR_MS = 1704067200000
# 2024-01-07T13:05:09Z, a Sunday
SUNDAY_PM_MS = 1704632709000


def _request(fmt: str, locale: str = "en", calendar: str = "gregory", ts: object = NEW_YEAR_MS):
    return FormatRequest(ts, fmt, locale, calendar)  # type: ignore[arg-type]


def _failing_cache() -> FormatterCache:
    return FormatterCache(Mock(side_effect=FormatterConstructionError("forced")))


class TestGregorianEnglish:
    """Locale formatter path under gregory/en."""

    def test_iso_like_date(self, renderer: Renderer) -> None:
        assert renderer.render(_request("Y-m-d")) == "2024-01-01"

    def test_site_date_format(self, renderer: Renderer) -> None:
        assert renderer.render(_request("F j, Y")) == "January 1, 2024"

    def test_names(self, renderer: Renderer) -> None:
        assert renderer.render(_request("D, M j")) == "Mon, Jan 1"
        assert renderer.render(_request("l")) == "Monday"

    def test_time_tokens(self, renderer: Renderer) -> None:
        request = _request("g:i:s a | h A | G H", ts=SUNDAY_PM_MS)
        assert renderer.render(request) == "1:05:09 pm | 01 PM | 13 13"

    def test_midnight_meridiem(self, renderer: Renderer) -> None:
        assert renderer.render(_request("g a A")) == "12 am AM"
        assert renderer.render(_request("h")) == "12"

    def test_literals_pass_through(self, renderer: Renderer) -> None:
        assert renderer.render(_request("Y/m")) == "2024/01"
        assert renderer.render(_request("[Y] @ x")) == "[2024] @ x"

    def test_empty_format(self, renderer: Renderer) -> None:
        assert renderer.render(_request("")) == ""

    def test_display_time_zone(self, renderer: Renderer) -> None:
        request = FormatRequest(NEW_YEAR_MS, "Y-m-d H", tz=timezone(timedelta(hours=-5)))
        assert renderer.render(request) == "2023-12-31 19"


class TestStructuralTokens:
    """Tokens computed without a locale formatter."""

    def test_weekday_numbers_sunday(self, renderer: Renderer) -> None:
        assert renderer.render(_request("w N", ts=SUNDAY_PM_MS)) == "0 7"

    def test_weekday_numbers_monday(self, renderer: Renderer) -> None:
        assert renderer.render(_request("w N")) == "1 1"

    def test_weekday_numbers_do_not_touch_cache(self, renderer: Renderer) -> None:
        renderer.render(_request("wN"))
        assert len(renderer.cache) == 0

    @pytest.mark.parametrize("locale", ["en", "th", "th-TH", "de"])
    @pytest.mark.parametrize("calendar", ["gregory", "buddhist", "hebrew"])
    def test_escape_round_trip(self, renderer: Renderer, locale: str, calendar: str) -> None:
        assert renderer.render(_request("\\Y", locale, calendar)) == "Y"

    def test_escape_consumes_two(self, renderer: Renderer) -> None:
        assert renderer.render(_request("\\\\Y")) == "\\2024"
        assert renderer.render(_request("\\w\\N")) == "wN"

    def test_trailing_backslash_literal(self, renderer: Renderer) -> None:
        assert renderer.render(_request("Y\\")) == "2024\\"


class TestEraShift:
    """Buddhist Era year for Thai locales."""

    @pytest.mark.parametrize("locale", ["th", "th-TH", "th_TH"])
    def test_full_and_short(self, renderer: Renderer, locale: str) -> None:
        assert renderer.render(_request("B", locale, "buddhist")) == "2567"
        assert renderer.render(_request("b", locale, "buddhist")) == "67"

    def test_era_year_bypasses_formatter(self, renderer: Renderer) -> None:
        renderer.render(_request("B b", "th-TH", "buddhist"))
        assert len(renderer.cache) == 0

    def test_other_locales_untouched(self, renderer: Renderer) -> None:
        assert renderer.render(_request("B", "en", "buddhist")) == "B"

    def test_other_calendars_untouched(self, renderer: Renderer) -> None:
        assert renderer.render(_request("B b", "th-TH", "gregory")) == "B b"

    def test_era_year_uses_display_time_zone(self, renderer: Renderer) -> None:
        # 2024-12-31T20:00Z is already 2025 in Bangkok
        ts = 1735675200000
        request = FormatRequest(ts, "B", "th-TH", "buddhist", timezone(timedelta(hours=7)))
        assert renderer.render(request) == "2568"


class TestPerTokenFallback:
    """A failing formatter only affects its own token."""

    def test_calendar_without_icu_falls_back(self, renderer: Renderer) -> None:
        with patch(
            "intldatetime.runtime.calendar_formatter.is_icu_available", return_value=False
        ):
            assert renderer.render(_request("F j, Y", "en", "hebrew")) == "January 1, 2024"

    def test_construction_failure_warned_once(
        self, renderer: Renderer, caplog: pytest.LogCaptureFixture
    ) -> None:
        with (
            patch("intldatetime.runtime.calendar_formatter.is_icu_available", return_value=False),
            caplog.at_level(logging.WARNING, logger="intldatetime"),
        ):
            first = renderer.render(_request("Y", "en", "persian"))
            second = renderer.render(_request("Y", "en", "persian"))
        assert first == second == "2024"
        warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "Cannot build formatter" in warnings[0].getMessage()

    def test_buddhist_thai_mixes_era_and_day_month(self, renderer: Renderer) -> None:
        assert renderer.render(_request("j/n/B", "th-TH", "buddhist")) == "1/1/2567"

    def test_forced_construction_failure(self) -> None:
        renderer = Renderer(_failing_cache(), intl_supported=True)
        request = _request("D, F j, Y g:i A (w)", ts=SUNDAY_PM_MS)
        assert renderer.render(request) == "Sun, January 7, 2024 1:05 PM (0)"

    def test_construction_failure_logged_by_cache(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        renderer = Renderer(_failing_cache(), intl_supported=True)
        with caplog.at_level(logging.WARNING, logger="intldatetime"):
            renderer.render(_request("Y"))
        assert "Cannot build formatter" in caplog.text

    def test_formatting_failure_logged_per_call(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        formatter = Mock(spec=DateTimeFormatter)
        formatter.format.side_effect = FormattingError("broken field")
        renderer = Renderer(FormatterCache(Mock(return_value=formatter)), intl_supported=True)
        with caplog.at_level(logging.WARNING, logger="intldatetime.runtime.renderer"):
            assert renderer.render(_request("Y")) == "2024"
            assert renderer.render(_request("Y")) == "2024"
        assert caplog.text.count("Error formatting 'Y'") == 2

    def test_unknown_locale_falls_back(self, renderer: Renderer) -> None:
        assert renderer.render(_request("M j", "xx")) == "Jan 1"

    def test_missing_capability_in_factory(self) -> None:
        cache = FormatterCache(Mock(side_effect=UnsupportedCapabilityError("no babel")))
        renderer = Renderer(cache, intl_supported=True)
        assert renderer.render(_request("Y-m-d")) == "2024-01-01"


class TestMeridiemAcrossCalendars:
    """a/A give am/pm from the hour alone, whatever the calendar."""

    @pytest.mark.parametrize("calendar", list(CalendarId))
    def test_midnight_and_afternoon(self, renderer: Renderer, calendar: str) -> None:
        assert renderer.render(_request("a A", "en", calendar)) == "am AM"
        assert renderer.render(_request("a A", "en", calendar, ts=SUNDAY_PM_MS)) == "pm PM"

    def test_thai_buddhist_day_periods(self, renderer: Renderer) -> None:
        """th-TH names its day periods in Thai; a and A are case variants of them."""
        morning = renderer.render(_request("a|A", "th-TH", "buddhist")).split("|")
        afternoon = renderer.render(_request("a|A", "th-TH", "buddhist", ts=SUNDAY_PM_MS))
        evening = afternoon.split("|")
        assert morning[0].upper() == morning[1]
        assert evening[0].upper() == evening[1]
        assert morning != evening
        assert morning[0] and evening[0]


class TestStructuredExtraction:
    """Meridiem and 12-hour tokens read parts, deriving them when absent."""

    def _renderer_with_parts(self, parts: tuple[object, ...]) -> Renderer:
        formatter = Mock(spec=DateTimeFormatter)
        formatter.format_to_parts.return_value = parts
        formatter.pattern = "HH"
        return Renderer(FormatterCache(Mock(return_value=formatter)), intl_supported=True)

    def test_missing_day_period_derived(self) -> None:
        renderer = self._renderer_with_parts(())
        assert renderer.render(_request("a A", ts=SUNDAY_PM_MS)) == "pm PM"
        assert renderer.render(_request("a A")) == "am AM"

    def test_missing_hour_derived(self) -> None:
        renderer = self._renderer_with_parts(())
        assert renderer.render(_request("g h", ts=SUNDAY_PM_MS)) == "1 01"
        assert renderer.render(_request("g h")) == "12 12"

    def test_missing_part_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        renderer = self._renderer_with_parts(())
        with caplog.at_level(logging.DEBUG, logger="intldatetime.runtime.renderer"):
            renderer.render(_request("a"))
        assert "dayPeriod" in caplog.text


class TestWholeStringFallback:
    """Capability missing or unexpected render failure."""

    @pytest.mark.parametrize("fmt", ["F j, Y g:i a", "D, d M y H:i:s", "\\Y w N", "l jS"])
    def test_unavailable_equals_fallback_only(self, fallback_renderer: Renderer, fmt: str) -> None:
        request = _request(fmt, ts=SUNDAY_PM_MS)
        assert fallback_renderer.render(request) == fallback_renderer.render_fallback_only(request)

    def test_unavailable_never_builds_formatters(self, fallback_renderer: Renderer) -> None:
        fallback_renderer.render(_request("F j, Y"))
        assert len(fallback_renderer.cache) == 0

    def test_unavailable_ignores_era_shift(self, fallback_renderer: Renderer) -> None:
        assert fallback_renderer.render(_request("B", "th-TH", "buddhist")) == "B"

    def test_unexpected_error_renders_whole_string(
        self, renderer: Renderer, caplog: pytest.LogCaptureFixture
    ) -> None:
        with (
            patch.object(Renderer, "_scan", side_effect=ValueError("boom")),
            caplog.at_level(logging.WARNING, logger="intldatetime.runtime.renderer"),
        ):
            result = renderer.render(_request("F j, Y"))
        expected = format_all(datetime(2024, 1, 1, tzinfo=UTC), "F j, Y")
        assert result == expected == "January 1, 2024"
        assert "Gregorian fallback for the whole string" in caplog.text

    def test_capability_detected_when_not_forced(self) -> None:
        with patch.object(renderer_module, "is_intl_supported", return_value=False):
            renderer = Renderer()
            assert renderer.intl_supported is False
            assert renderer.render(_request("F", "en", "gregory")) == "January"
            assert len(renderer.cache) == 0


class TestInvalidInput:
    """Invalid timestamps and format strings."""

    @pytest.mark.parametrize("ts", [None, "abc", "", True, float("nan"), 10**20])
    def test_invalid_timestamp_renders_empty(self, renderer: Renderer, ts: object) -> None:
        assert renderer.render(_request("Y-m-d", ts=ts)) == ""
        assert renderer.render_fallback_only(_request("Y-m-d", ts=ts)) == ""

    def test_invalid_timestamp_logged(
        self, renderer: Renderer, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="intldatetime.runtime.renderer"):
            renderer.render(_request("Y", ts="abc"))
        assert "Invalid timestamp" in caplog.text

    def test_epoch_is_valid(self, renderer: Renderer) -> None:
        assert renderer.render(_request("Y-m-d H:i", ts=0)) == "1970-01-01 00:00"

    def test_numeric_string_timestamp(self, renderer: Renderer) -> None:
        assert renderer.render(_request("Y", ts=str(NEW_YEAR_MS))) == "2024"

    def test_non_str_format_propagates(self, renderer: Renderer) -> None:
        with pytest.raises(TypeError):
            renderer.render(FormatRequest(NEW_YEAR_MS, 123))  # type: ignore[arg-type]


class TestIdempotence:
    """Repeated calls agree and reuse cached formatters."""

    def test_same_output_and_cache_reuse(self, renderer: Renderer) -> None:
        request = _request("F j, Y g:i a", ts=SUNDAY_PM_MS)
        first = renderer.render(request)
        misses = renderer.cache.misses
        second = renderer.render(request)
        assert first == second
        assert renderer.cache.misses == misses
        assert renderer.cache.hits > 0

    def test_repeated_token_reuses_within_call(self, renderer: Renderer) -> None:
        renderer.render(_request("Y Y Y"))
        assert renderer.cache.misses == 1
        assert renderer.cache.hits == 2

    def test_meridiem_and_hour_share_formatter(self, renderer: Renderer) -> None:
        renderer.render(_request("g a A"))
        assert len(renderer.cache) == 1


class TestModuleFunctions:
    """render() and render_fallback_only() on the default renderer."""

    def test_render(self) -> None:
        assert render(NEW_YEAR_MS, "Y-m-d") == "2024-01-01"

    def test_render_era(self) -> None:
        assert render(NEW_YEAR_MS, "B", "th-TH", "buddhist") == "2567"

    def test_render_fallback_only(self) -> None:
        assert render_fallback_only(NEW_YEAR_MS, "D, M j") == "Mon, Jan 1"

    def test_render_time_zone(self) -> None:
        assert render_fallback_only(NEW_YEAR_MS, "G", tz=timezone(timedelta(hours=9))) == "9"

    def test_default_renderer_is_shared(self) -> None:
        assert get_default_renderer() is get_default_renderer()
