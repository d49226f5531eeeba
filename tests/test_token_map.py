"""Tests for the legacy format token table and character classification."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from intldatetime.enums import TokenKind
from intldatetime.runtime.options import TokenOptionSet
from intldatetime.runtime.token_map import (
    ERA_YEAR_TOKENS,
    INTL_TOKEN_OPTIONS,
    MERIDIEM_TOKENS,
    WEEKDAY_NUMBER_TOKENS,
    classify,
    options_for,
)


class TestOptionsFor:
    """Option fragments requested by each legacy token."""

    @pytest.mark.parametrize(
        ("char", "expected"),
        [
            ("Y", TokenOptionSet(year="numeric")),
            ("y", TokenOptionSet(year="2-digit")),
            ("F", TokenOptionSet(month="long")),
            ("M", TokenOptionSet(month="short")),
            ("m", TokenOptionSet(month="2-digit")),
            ("n", TokenOptionSet(month="numeric")),
            ("d", TokenOptionSet(day="2-digit")),
            ("j", TokenOptionSet(day="numeric")),
            ("D", TokenOptionSet(weekday="short")),
            ("l", TokenOptionSet(weekday="long")),
            ("g", TokenOptionSet(hour="numeric", hour12=True)),
            ("h", TokenOptionSet(hour="2-digit", hour12=True)),
            ("G", TokenOptionSet(hour="numeric", hour12=False)),
            ("H", TokenOptionSet(hour="2-digit", hour12=False)),
            ("i", TokenOptionSet(minute="2-digit")),
            ("s", TokenOptionSet(second="2-digit")),
        ],
    )
    def test_token_fragment(self, char: str, expected: TokenOptionSet) -> None:
        """Each token requests exactly its documented fragment."""
        assert options_for(char) == expected

    def test_meridiem_tokens_request_a_12_hour_hour(self) -> None:
        """a/A need an hour field so the formatter emits a day period."""
        for char in MERIDIEM_TOKENS:
            options = options_for(char)
            assert options is not None
            assert options.hour12 is True
            assert options.hour is not None

    @pytest.mark.parametrize("char", ["w", "N", "B", "b", "\\", "/", " ", "x", "T"])
    def test_no_formatter_equivalent(self, char: str) -> None:
        """Structural tokens, escapes and literals have no fragment."""
        assert options_for(char) is None

    def test_token_alphabet(self) -> None:
        """Every recognised formatter token is present."""
        assert set(INTL_TOKEN_OPTIONS) == set("YyFMmndjDlghGHisaA")

    def test_table_is_read_only(self) -> None:
        """The token table cannot be mutated at runtime."""
        with pytest.raises(TypeError):
            INTL_TOKEN_OPTIONS["Q"] = TokenOptionSet(year="numeric")  # type: ignore[index]


class TestClassify:
    """Dispatch classification of format characters."""

    @pytest.mark.parametrize("char", sorted(ERA_YEAR_TOKENS))
    def test_era_year(self, char: str) -> None:
        assert classify(char) == TokenKind.ERA_YEAR

    @pytest.mark.parametrize("char", sorted(WEEKDAY_NUMBER_TOKENS))
    def test_weekday_number(self, char: str) -> None:
        assert classify(char) == TokenKind.WEEKDAY_NUMBER

    def test_escape(self) -> None:
        assert classify("\\") == TokenKind.ESCAPE

    @pytest.mark.parametrize("char", sorted(INTL_TOKEN_OPTIONS))
    def test_intl(self, char: str) -> None:
        assert classify(char) == TokenKind.INTL

    @given(st.characters().filter(lambda c: c not in "YyFMmndjDlghGHisaAwNBb\\"))
    def test_everything_else_is_literal(self, char: str) -> None:
        """Characters outside the alphabet are literals."""
        assert classify(char) == TokenKind.LITERAL
