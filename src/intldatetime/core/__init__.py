"""Core utilities shared across syntax and runtime layers.

Exports:
    FormattingError: Exception raised when locale formatting fails
    BabelImportError: Exception raised when Babel is required but missing
    IcuImportError: Exception raised when PyICU is required but missing
    is_babel_available: Cached Babel availability check
    is_icu_available: Cached PyICU availability check
    require_babel: Fail-fast Babel availability assertion

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel
from .errors import FormattingError
from .icu_compat import IcuImportError, is_icu_available

__all__ = [
    "BabelImportError",
    "FormattingError",
    "IcuImportError",
    "is_babel_available",
    "is_icu_available",
    "require_babel",
]
