"""Timestamp coercion and conversion.

Timestamps arrive as milliseconds since the Unix epoch, often as strings
read from markup attributes. These helpers turn them into aware datetimes
or raise InvalidTimestampError.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
import re
from datetime import UTC, datetime, timedelta, tzinfo

from intldatetime.diagnostics import ErrorTemplate, InvalidTimestampError

__all__ = ["coerce_timestamp", "to_datetime"]

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

# Leading integer of a string, as parseInt() reads markup attributes.
_INTEGER_PREFIX = re.compile(r"\s*([+-]?\d+)")


def coerce_timestamp(value: object) -> int | float:
    """Coerce a raw timestamp to milliseconds.

    Accepts int, float and strings with a leading integer ("1700000000000",
    " 1700000000000ms"). Bools, non-finite floats and anything else are
    rejected.

    Raises:
        InvalidTimestampError: If value cannot be read as milliseconds

    Example:
        >>> coerce_timestamp("1704067200000")
        1704067200000
        >>> coerce_timestamp(1.5e12)
        1500000000000.0
    """
    match value:
        case bool():
            pass
        case int():
            return value
        case float() if math.isfinite(value):
            return value
        case str():
            found = _INTEGER_PREFIX.match(value)
            if found is not None:
                return int(found.group(1))
        case _:
            pass
    raise InvalidTimestampError(ErrorTemplate.invalid_timestamp(value), value=value)


def to_datetime(value: object, tz: tzinfo = UTC) -> datetime:
    """Convert a millisecond timestamp to an aware datetime in tz.

    Integer milliseconds convert exactly (no float rounding).

    Raises:
        InvalidTimestampError: If value is not a representable instant

    Example:
        >>> to_datetime(0)
        datetime.datetime(1970, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """
    millis = coerce_timestamp(value)
    try:
        return (_EPOCH + timedelta(milliseconds=millis)).astimezone(tz)
    except (OverflowError, ValueError) as e:
        raise InvalidTimestampError(ErrorTemplate.invalid_timestamp(value), value=value) from e
