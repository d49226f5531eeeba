"""Core error types shared across syntax and runtime layers.

Python 3.13+.
"""

from intldatetime.diagnostics import IntlDateTimeError

__all__ = ["FormattingError"]


class FormattingError(IntlDateTimeError):
    """Raised when a constructed formatter fails to format an instant.

    Recovery: the renderer formats the token with the Gregorian fallback.
    """
