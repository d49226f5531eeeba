"""Formatting capability detection.

Decides once per process whether locale-aware formatting is usable: Babel
must be importable and able to format a sample date in the ``full`` style.
When it is not, the problem is logged once as a warning and renderers use
the Gregorian fallback for every character.

PyICU is checked separately, per calendar, when a non-Gregorian formatter
is built (see CalendarFormatter).

Python 3.13+.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from functools import lru_cache

from intldatetime.constants import CAPABILITY_CHECK_LOCALE
from intldatetime.core.babel_compat import get_babel_dates, is_babel_available
from intldatetime.diagnostics import ErrorTemplate

__all__ = ["is_intl_supported"]

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def is_intl_supported() -> bool:
    """Check whether locale-aware formatting works in this environment.

    Computed once per process; the failure is reported once.

    Returns:
        True if Babel is installed and formats a sample date.
    """
    if not is_babel_available():
        logger.warning(
            "%s. Date formatting will use the Gregorian fallback.",
            ErrorTemplate.capability_unavailable("Locale-aware date formatting"),
        )
        return False

    # Lazy import: Babel is optional at import time
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        get_babel_dates().format_datetime(
            datetime.now(UTC), format="full", locale=CAPABILITY_CHECK_LOCALE
        )
    except (UnknownLocaleError, LookupError, ValueError, AttributeError, OSError) as e:
        logger.warning(
            "%s. Date formatting will use the Gregorian fallback.",
            ErrorTemplate.capability_check_failed(str(e)),
        )
        return False
    return True
