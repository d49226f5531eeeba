"""Thread-safe memo of constructed locale formatters.

Building a locale formatter looks up locale data and resolves a pattern;
using one is cheap. FormatterCache builds each distinct formatter once and
hands the same instance back for every later request with an equal key.

Architecture:
    - Thread-safe using threading.RLock (reentrant lock)
    - Immutable cache keys (normalized locale, frozen TokenOptionSet)
    - Value equality: option sets built separately but equal share an entry
    - No eviction: the key space is bounded by the token alphabet times the
      locale/calendar pairs actually in use
    - Construction runs outside the lock; a double-check keeps the first
      stored instance when two threads race on the same key
    - Construction failures are remembered per key: the first one is logged
      as a warning, later requests re-raise it without rebuilding

Backends:
    build_formatter (the default factory) uses the Babel DateTimeFormatter
    for the Gregorian calendars and the ICU CalendarFormatter for the rest.

Cache Key Structure:
    (locale_code, options)
    - locale_code: str (POSIX normalized)
    - options: TokenOptionSet (calendar bound in)

Python 3.13+.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import TYPE_CHECKING

from intldatetime.constants import DEFAULT_CALENDAR
from intldatetime.diagnostics import IntlDateTimeError
from intldatetime.locale_utils import normalize_locale

from .calendar_formatter import CalendarFormatter
from .formatter import GREGORIAN_CALENDARS, DateTimeFormatter

if TYPE_CHECKING:
    from collections.abc import Callable

    from .formatter import LocaleFormatter
    from .options import TokenOptionSet

__all__ = ["FormatterCache", "FormatterFactory", "build_formatter"]

logger = logging.getLogger(__name__)

type FormatterFactory = Callable[[str, TokenOptionSet], LocaleFormatter]

# Internal type alias for cache keys (prefixed with _ per naming convention)
type _CacheKey = tuple[str, TokenOptionSet]


def build_formatter(locale_code: str, options: TokenOptionSet) -> LocaleFormatter:
    """Build the formatter for options.calendar with the backend that has its data.

    Raises:
        UnsupportedCapabilityError: If Babel is not installed
        FormatterConstructionError: If the combination cannot be built
    """
    if (options.calendar or DEFAULT_CALENDAR) in GREGORIAN_CALENDARS:
        return DateTimeFormatter(locale_code, options)
    return CalendarFormatter(locale_code, options)


class FormatterCache:
    """Process-lifetime cache of locale formatter instances.

    Owned explicitly by a Renderer (or shared between renderers by passing
    the same instance). Entries live until clear() or the cache is dropped.

    Attributes:
        hits: Number of requests served from the cache
        misses: Number of requests that constructed a formatter
    """

    __slots__ = ("_entries", "_factory", "_failures", "_hits", "_lock", "_misses")

    def __init__(self, factory: FormatterFactory | None = None) -> None:
        """Initialize formatter cache.

        Args:
            factory: Formatter constructor (default: build_formatter).
                Receives the normalized locale code and the option set with
                the calendar bound in.
        """
        self._entries: dict[_CacheKey, LocaleFormatter] = {}
        self._failures: dict[_CacheKey, IntlDateTimeError] = {}
        self._factory: FormatterFactory = factory or build_formatter
        self._lock = RLock()
        self._hits = 0
        self._misses = 0

    def get(
        self,
        locale_code: str,
        calendar: str,
        options: TokenOptionSet,
    ) -> LocaleFormatter:
        """Get the formatter for (locale, calendar, options), building it once.

        Thread-safe.

        Args:
            locale_code: BCP-47 or POSIX locale tag
            calendar: Calendar identifier bound into the options
            options: Requested fields

        Returns:
            The cached formatter instance for this key

        Raises:
            UnsupportedCapabilityError: If the factory has no backend
            FormatterConstructionError: If the factory rejects the key; a
                remembered failure is raised again on later requests
        """
        key = self._make_key(locale_code, calendar, options)

        with self._lock:
            formatter = self._entries.get(key)
            if formatter is not None:
                self._hits += 1
                return formatter
            failure = self._failures.get(key)
            if failure is not None:
                self._hits += 1
                raise failure.with_traceback(None)
            self._misses += 1

        logger.debug("Formatter cache miss: %s %s", key[0], key[1].as_dict())
        try:
            formatter = self._factory(key[0], key[1])
        except IntlDateTimeError as e:
            with self._lock:
                first = self._failures.setdefault(key, e) is e
            if first:
                logger.warning(
                    "Cannot build formatter for %s %s, using fallback for it: %s",
                    key[0],
                    key[1].as_dict(),
                    e,
                )
            raise

        # Double-check: another thread may have stored this key meanwhile
        with self._lock:
            return self._entries.setdefault(key, formatter)

    def clear(self) -> None:
        """Drop every cached formatter and remembered failure, reset metrics.

        Thread-safe. For teardown and tests; rendering never needs it.
        """
        with self._lock:
            self._entries.clear()
            self._failures.clear()
            self._hits = 0
            self._misses = 0

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Thread-safe.

        Returns:
            Dict with keys:
            - size (int): Current number of cached formatters
            - failures (int): Number of keys whose construction failed
            - hits (int): Number of cache hits
            - misses (int): Number of cache misses
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0

            return {
                "size": len(self._entries),
                "failures": len(self._failures),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 2),
            }

    @staticmethod
    def _make_key(
        locale_code: str,
        calendar: str,
        options: TokenOptionSet,
    ) -> _CacheKey:
        """Create immutable cache key; equal inputs give equal keys."""
        return (normalize_locale(locale_code), options.with_calendar(calendar))

    def __len__(self) -> int:
        """Get current cache size.

        Thread-safe.
        """
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        """Check for a cached (locale, calendar, options) triple.

        Thread-safe.
        """
        if not isinstance(key, tuple) or len(key) != 3:
            return False
        locale_code, calendar, options = key
        with self._lock:
            return self._make_key(locale_code, calendar, options) in self._entries

    @property
    def hits(self) -> int:
        """Number of cache hits.

        Thread-safe.
        """
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses.

        Thread-safe.
        """
        with self._lock:
            return self._misses
