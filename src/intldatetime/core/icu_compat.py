"""PyICU compatibility layer for non-Gregorian calendars.

Babel ships the Gregorian CLDR calendar only. Every other calendar
(buddhist, hebrew, persian, islamic-*, ...) is formatted through ICU, which
carries the calendar arithmetic and the per-calendar CLDR names. PyICU is
an optional dependency: without it those calendars degrade per token to the
Gregorian fallback formatter.

Usage Pattern:
    from intldatetime.core.icu_compat import get_icu, is_icu_available

    if is_icu_available():
        icu = get_icu()
        locale = icu.Locale.forLanguageTag("th-TH-u-ca-buddhist")

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from types import ModuleType

from intldatetime.diagnostics import ErrorTemplate

__all__ = ["IcuImportError", "get_icu", "is_icu_available", "require_icu"]


@lru_cache(maxsize=1)
def _check_icu_available() -> bool:
    """Check if PyICU is installed (computed once, cached via lru_cache)."""
    try:
        import icu  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class IcuImportError(ImportError):
    """Raised when PyICU is required but not installed."""

    def __init__(self, calendar: str) -> None:
        super().__init__(ErrorTemplate.calendar_unsupported(calendar).format_error())
        self.calendar = calendar


def is_icu_available() -> bool:
    """Check if PyICU is installed.

    Returns:
        True if the ``icu`` module is importable, False otherwise.
    """
    return _check_icu_available()


def require_icu(calendar: str) -> None:
    """Assert that PyICU is available for calendar.

    Raises:
        IcuImportError: If PyICU is not installed
    """
    if not _check_icu_available():
        raise IcuImportError(calendar)


def get_icu() -> ModuleType:
    """Get the ``icu`` module.

    Raises:
        IcuImportError: If PyICU is not installed
    """
    require_icu("get_icu")
    import icu  # noqa: PLC0415

    return icu
