"""Babel compatibility layer for capability detection.

Provides centralized, lazy import infrastructure for Babel so that every
module reports a missing formatting capability the same way.

Design Rationale:
    The renderer must keep working when Babel is absent or broken: it then
    renders every token with the Gregorian fallback formatter. This module
    ensures that:
    1. The check for Babel happens once per process
    2. Callers get a consistent, helpful error when Babel is required
    3. Babel types are available for TYPE_CHECKING without runtime import

Usage Pattern:
    from intldatetime.core.babel_compat import require_babel

    def my_function(locale_code: str) -> None:
        require_babel("my_function")  # Raises BabelImportError if Babel missing
        from babel import Locale  # Safe to import Babel now
        ...

Python 3.13+.
"""

from __future__ import annotations

from datetime import datetime
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Protocol

from intldatetime.diagnostics import ErrorTemplate

if TYPE_CHECKING:
    from collections.abc import Iterable

    from babel import Locale


# pylint: disable=redefined-builtin,unnecessary-ellipsis
# Reason: Protocol definitions mirror Babel's API which uses 'format' parameter name
class BabelDatesProtocol(Protocol):
    """Protocol for Babel dates module interface.

    Defines the subset of babel.dates API actually used by intldatetime.
    """

    def format_datetime(
        self,
        datetime_obj: datetime | None = None,
        format: str = "medium",
        tzinfo: Any | None = None,
        locale: Locale | str | None = None,
    ) -> str:
        """Format datetime with locale-specific formatting."""
        ...

    def match_skeleton(
        self,
        skeleton: str,
        options: Iterable[str],
        allow_different_fields: bool = False,
    ) -> str | None:
        """Find the closest CLDR skeleton among options."""
        ...

    def tokenize_pattern(self, pattern: str) -> list[tuple[str, Any]]:
        """Split a CLDR pattern into field and literal tokens."""
        ...

    def untokenize_pattern(self, tokens: Iterable[tuple[str, Any]]) -> str:
        """Rebuild a CLDR pattern from tokens, re-quoting literals."""
        ...
# pylint: enable=redefined-builtin,unnecessary-ellipsis


__all__ = [
    "BabelDatesProtocol",
    "BabelImportError",
    "get_babel_dates",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        super().__init__(ErrorTemplate.capability_unavailable(feature).format_error())
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Uses cached result to avoid repeated import attempts.

    Returns:
        True if Babel is installed and importable, False otherwise.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_babel_dates() -> BabelDatesProtocol:
    """Get the Babel dates module.

    Returns:
        The babel.dates module (typed via BabelDatesProtocol)

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_dates")
    from babel import dates  # noqa: PLC0415

    return dates
