"""Legacy format token table.

Maps each character of the legacy (PHP ``date()`` style) format alphabet to
the formatting options it requests, and classifies every character for the
renderer's dispatch table. Pure data; no side effects.

Python 3.13+.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from intldatetime.constants import ESCAPE_CHAR
from intldatetime.enums import TokenKind

from .options import TokenOptionSet

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = [
    "ERA_YEAR_TOKENS",
    "INTL_TOKEN_OPTIONS",
    "MERIDIEM_TOKENS",
    "TWELVE_HOUR_TOKENS",
    "WEEKDAY_NUMBER_TOKENS",
    "classify",
    "options_for",
]

_HOUR_12 = TokenOptionSet(hour="numeric", hour12=True)

INTL_TOKEN_OPTIONS: Mapping[str, TokenOptionSet] = MappingProxyType({
    # Year
    "Y": TokenOptionSet(year="numeric"),         # 2024
    "y": TokenOptionSet(year="2-digit"),         # 24
    # Month
    "F": TokenOptionSet(month="long"),           # January
    "M": TokenOptionSet(month="short"),          # Jan
    "m": TokenOptionSet(month="2-digit"),        # 01
    "n": TokenOptionSet(month="numeric"),        # 1
    # Day
    "d": TokenOptionSet(day="2-digit"),          # 01
    "j": TokenOptionSet(day="numeric"),          # 1
    "D": TokenOptionSet(weekday="short"),        # Mon
    "l": TokenOptionSet(weekday="long"),         # Monday
    # Time
    "g": _HOUR_12,                                                # 1-12
    "h": TokenOptionSet(hour="2-digit", hour12=True),             # 01-12
    "G": TokenOptionSet(hour="numeric", hour12=False),            # 0-23
    "H": TokenOptionSet(hour="2-digit", hour12=False),            # 00-23
    "i": TokenOptionSet(minute="2-digit"),                        # 00-59
    "s": TokenOptionSet(second="2-digit"),                        # 00-59
    "a": _HOUR_12,                                                # am/pm
    "A": _HOUR_12,                                                # AM/PM
})

# No formatter field exposes a numeric day of week.
WEEKDAY_NUMBER_TOKENS: frozenset[str] = frozenset({"w", "N"})

ERA_YEAR_TOKENS: frozenset[str] = frozenset({"B", "b"})

MERIDIEM_TOKENS: frozenset[str] = frozenset({"a", "A"})

TWELVE_HOUR_TOKENS: frozenset[str] = frozenset({"g", "h"})


def options_for(char: str) -> TokenOptionSet | None:
    """Get the option fragment a legacy character requests.

    Args:
        char: Single format character

    Returns:
        The option set, or None when the character has no formatter
        equivalent (structural tokens, escapes and literals).

    Example:
        >>> options_for("F").month
        'long'
        >>> options_for("w") is None
        True
    """
    return INTL_TOKEN_OPTIONS.get(char)


def classify(char: str) -> TokenKind:
    """Classify a format character for renderer dispatch.

    Example:
        >>> classify("Y")
        <TokenKind.INTL: 'intl'>
        >>> classify("/")
        <TokenKind.LITERAL: 'literal'>
    """
    if char in ERA_YEAR_TOKENS:
        return TokenKind.ERA_YEAR
    if char in WEEKDAY_NUMBER_TOKENS:
        return TokenKind.WEEKDAY_NUMBER
    if char == ESCAPE_CHAR:
        return TokenKind.ESCAPE
    if char in INTL_TOKEN_OPTIONS:
        return TokenKind.INTL
    return TokenKind.LITERAL
