"""Explicit outcomes of a single token's formatter invocation.

The renderer asks a locale formatter for one token's text and gets back
either Formatted (use the text) or NeedsFallback (render the token with the
fallback formatter). Expected degradation never travels as an exception
past the invocation step.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from intldatetime.diagnostics import IntlDateTimeError

__all__ = ["Formatted", "NeedsFallback", "TokenOutcome"]


@dataclass(frozen=True, slots=True)
class Formatted:
    """Locale formatter produced the token text."""

    text: str


@dataclass(frozen=True, slots=True)
class NeedsFallback:
    """Locale formatter could not be built or used for the token.

    Attributes:
        error: Why the formatter path failed
    """

    error: IntlDateTimeError


type TokenOutcome = Formatted | NeedsFallback
