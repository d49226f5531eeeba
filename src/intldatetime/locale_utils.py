"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale tag normalization used throughout the codebase so cache
keys and Babel lookups agree on one canonical form.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from intldatetime.constants import ERA_SHIFT_LOCALE_PREFIX

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "is_era_shift_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (th-TH), while Babel/POSIX uses underscores (th_TH).
    Surrounding whitespace is dropped.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "th-TH")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "th_TH")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("th")
        'th'
    """
    return locale_code.strip().replace("-", "_")


def is_era_shift_locale(locale_code: str) -> bool:
    """Check whether a locale receives Buddhist Era year display.

    Only tags starting with ``th`` qualify (``th``, ``th-TH``, ``th_TH``).

    Example:
        >>> is_era_shift_locale("th-TH")
        True
        >>> is_era_shift_locale("en-TH")
        False
    """
    return normalize_locale(locale_code).startswith(ERA_SHIFT_LOCALE_PREFIX)


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
