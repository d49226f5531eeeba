"""Exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error
information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class IntlDateTimeError(Exception):
    """Base exception for all intldatetime errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize IntlDateTimeError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnsupportedCapabilityError(IntlDateTimeError):
    """No usable locale formatting capability in this environment.

    Recovery: the whole format string is rendered by the Gregorian fallback.
    """


class FormatterConstructionError(IntlDateTimeError):
    """A (locale, calendar, options) combination cannot be constructed.

    Recovery: the affected token is rendered by the fallback formatter.

    Attributes:
        locale_code: Locale requested
        calendar: Calendar identifier requested
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale_code: str = "",
        calendar: str = "",
    ) -> None:
        super().__init__(message)
        self.locale_code = locale_code
        self.calendar = calendar


class InvalidTimestampError(IntlDateTimeError, ValueError):
    """Input is not a valid instant.

    Recovery: render returns an empty string.

    Attributes:
        value: The rejected input
    """

    def __init__(self, message: str | Diagnostic, *, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidCalendarError(IntlDateTimeError, ValueError):
    """Calendar identifier outside the accepted set.

    Raised by strict settings validation, before a request reaches the
    renderer.
    """
