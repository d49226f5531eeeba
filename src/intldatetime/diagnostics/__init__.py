"""Diagnostic system for intldatetime errors.

Provides structured error diagnostics with codes, hints and severities.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    FormatterConstructionError,
    IntlDateTimeError,
    InvalidCalendarError,
    InvalidTimestampError,
    UnsupportedCapabilityError,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "FormatterConstructionError",
    "IntlDateTimeError",
    "InvalidCalendarError",
    "InvalidTimestampError",
    "UnsupportedCapabilityError",
]
