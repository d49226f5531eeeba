"""CLDR date pattern tokenizing and field-width adjustment.

Both formatting backends resolve a skeleton (``yMMMMd``) to a locale
pattern (``MMMM d, y``) that may use other widths than requested. The
helpers here split a pattern into field and text tokens, rewrite field
widths back to the skeleton's, and join tokens into a pattern again.

Pattern syntax (UTS #35):
    - A run of one ASCII letter is a field; its length is the width
    - Text between single quotes is literal
    - Two single quotes are a literal quote, quoted or not

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Literal

from intldatetime.enums import PartType

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

__all__ = [
    "PatternToken",
    "adjust_fields",
    "join_pattern",
    "part_type",
    "split_pattern",
]

type PatternToken = tuple[Literal["field", "text"], str]

_QUOTE = "'"

_PART_TYPES: Mapping[str, PartType] = MappingProxyType({
    "G": PartType.ERA,
    "y": PartType.YEAR,
    "Y": PartType.YEAR,
    "u": PartType.YEAR,
    "U": PartType.YEAR,      # cyclic year name (chinese, dangi)
    "r": PartType.YEAR,      # related Gregorian year
    "M": PartType.MONTH,
    "L": PartType.MONTH,
    "d": PartType.DAY,
    "E": PartType.WEEKDAY,
    "e": PartType.WEEKDAY,
    "c": PartType.WEEKDAY,
    "h": PartType.HOUR,
    "H": PartType.HOUR,
    "K": PartType.HOUR,
    "k": PartType.HOUR,
    "m": PartType.MINUTE,
    "s": PartType.SECOND,
    "a": PartType.DAY_PERIOD,
    "b": PartType.DAY_PERIOD,
    "B": PartType.DAY_PERIOD,
    "z": PartType.TIME_ZONE_NAME,
    "Z": PartType.TIME_ZONE_NAME,
    "v": PartType.TIME_ZONE_NAME,
    "V": PartType.TIME_ZONE_NAME,
    "O": PartType.TIME_ZONE_NAME,
    "x": PartType.TIME_ZONE_NAME,
    "X": PartType.TIME_ZONE_NAME,
})

# Pattern letters that render the same field; widths are adjusted per class.
# "j" is the skeleton letter for the locale's preferred hour.
_FIELD_CLASS: Mapping[str, str] = MappingProxyType({
    "Y": "y",
    "u": "y",
    "L": "M",
    "e": "E",
    "c": "E",
    "H": "h",
    "K": "h",
    "k": "h",
    "j": "h",
})

_HOUR_CHARS: frozenset[str] = frozenset("hHKk")
_TWELVE_HOUR_CHARS: frozenset[str] = frozenset("hK")


def _is_pattern_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def part_type(field: str) -> PartType:
    """Structured part type of a pattern field (literal when unknown).

    Example:
        >>> part_type("MMMM")
        <PartType.MONTH: 'month'>
    """
    return _PART_TYPES.get(field[:1], PartType.LITERAL)


def split_pattern(pattern: str) -> tuple[PatternToken, ...]:
    """Split a CLDR pattern into field and text tokens.

    Quotes are consumed; text tokens carry the literal text.

    Example:
        >>> split_pattern("h 'o''clock' a")
        (('field', 'h'), ('text', " o'clock "), ('field', 'a'))
    """
    tokens: list[PatternToken] = []
    text: list[str] = []
    quoted = False
    pos = 0
    while pos < len(pattern):
        char = pattern[pos]
        if char == _QUOTE:
            if pattern.startswith(_QUOTE * 2, pos):
                text.append(_QUOTE)
                pos += 2
            else:
                quoted = not quoted
                pos += 1
            continue
        if quoted or not _is_pattern_letter(char):
            text.append(char)
            pos += 1
            continue
        end = pos
        while end < len(pattern) and pattern[end] == char:
            end += 1
        if text:
            tokens.append(("text", "".join(text)))
            text.clear()
        tokens.append(("field", pattern[pos:end]))
        pos = end
    if text:
        tokens.append(("text", "".join(text)))
    return tuple(tokens)


def join_pattern(tokens: Iterable[PatternToken]) -> str:
    """Join tokens into a CLDR pattern, quoting text that needs it."""
    result: list[str] = []
    for kind, value in tokens:
        if kind == "field" or not any(
            char == _QUOTE or _is_pattern_letter(char) for char in value
        ):
            result.append(value)
        else:
            result.append(_QUOTE + value.replace(_QUOTE, _QUOTE * 2) + _QUOTE)
    return "".join(result)


def adjust_fields(pattern: str, skeleton: str) -> str:
    """Rewrite pattern field widths (and hour letter) to the skeleton's.

    Locale patterns come from the closest available skeleton, which may use
    different widths (``L`` for a requested ``MMMM``). Each pattern field of
    a class present in the skeleton takes the skeleton's width; the hour
    letter switches between 12- and 24-hour forms when the skeleton names
    an explicit clock that differs.

    Example:
        >>> adjust_fields("M/d/y", "MMddy")
        'MM/dd/y'
    """
    requested: dict[str, str] = {}
    for kind, value in split_pattern(skeleton):
        if kind == "field":
            requested[_FIELD_CLASS.get(value[0], value[0])] = value

    adjusted: list[PatternToken] = []
    for kind, value in split_pattern(pattern):
        if kind == "field":
            char = value[0]
            field_class = _FIELD_CLASS.get(char, char)
            wanted = requested.get(field_class)
            if wanted is not None:
                wanted_char = wanted[0]
                if (
                    field_class == "h"
                    and wanted_char in _HOUR_CHARS
                    and (char in _TWELVE_HOUR_CHARS) != (wanted_char in _TWELVE_HOUR_CHARS)
                ):
                    char = wanted_char
                value = char * len(wanted)
        adjusted.append((kind, value))
    return join_pattern(adjusted)
