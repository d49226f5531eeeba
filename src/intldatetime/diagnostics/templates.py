"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps every message testable and documents every error case in one place.
    """

    @staticmethod
    def capability_unavailable(feature: str) -> Diagnostic:
        """Babel is not importable.

        Args:
            feature: Feature that needed the formatting capability

        Returns:
            Diagnostic for CAPABILITY_UNAVAILABLE
        """
        msg = f"{feature} requires Babel for CLDR locale data"
        return Diagnostic(
            code=DiagnosticCode.CAPABILITY_UNAVAILABLE,
            message=msg,
            hint="Install with: pip install Babel",
            severity="warning",
        )

    @staticmethod
    def capability_check_failed(reason: str) -> Diagnostic:
        """Babel is importable but cannot format a sample date."""
        msg = f"Locale formatting check failed: {reason}"
        return Diagnostic(
            code=DiagnosticCode.CAPABILITY_CHECK_FAILED,
            message=msg,
            hint="Check that the installed Babel ships its CLDR data files",
            severity="warning",
        )

    @staticmethod
    def formatter_construction_failed(
        locale_code: str, calendar: str, reason: str
    ) -> Diagnostic:
        """A (locale, calendar, options) combination cannot be constructed.

        Args:
            locale_code: Locale requested
            calendar: Calendar identifier requested
            reason: Underlying failure description

        Returns:
            Diagnostic for FORMATTER_CONSTRUCTION_FAILED
        """
        msg = (
            f"Cannot construct formatter for locale '{locale_code}' "
            f"and calendar '{calendar}': {reason}"
        )
        return Diagnostic(
            code=DiagnosticCode.FORMATTER_CONSTRUCTION_FAILED,
            message=msg,
            hint="Use a locale known to CLDR",
        )

    @staticmethod
    def calendar_unsupported(calendar: str) -> Diagnostic:
        """Non-Gregorian calendar requested without PyICU installed.

        Args:
            calendar: Calendar identifier requested

        Returns:
            Diagnostic for CALENDAR_UNSUPPORTED
        """
        msg = f"Calendar '{calendar}' requires PyICU for its CLDR calendar data"
        return Diagnostic(
            code=DiagnosticCode.CALENDAR_UNSUPPORTED,
            message=msg,
            hint="Install with: pip install PyICU",
        )

    @staticmethod
    def formatting_failed(pattern: str, reason: str) -> Diagnostic:
        """A constructed formatter failed while formatting."""
        msg = f"Formatting pattern '{pattern}' failed: {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=msg,
        )

    @staticmethod
    def structured_part_missing(part_type: str, pattern: str) -> Diagnostic:
        """Structured output lacks an expected part."""
        msg = f"Pattern '{pattern}' produced no '{part_type}' part"
        return Diagnostic(
            code=DiagnosticCode.STRUCTURED_PART_MISSING,
            message=msg,
            severity="warning",
        )

    @staticmethod
    def invalid_timestamp(value: object) -> Diagnostic:
        """Timestamp is not a valid instant.

        Args:
            value: The offending input

        Returns:
            Diagnostic for INVALID_TIMESTAMP
        """
        msg = f"Invalid timestamp {value!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_TIMESTAMP,
            message=msg,
            hint="Pass milliseconds since the Unix epoch as int, float or numeric string",
        )

    @staticmethod
    def invalid_calendar(value: str) -> Diagnostic:
        """Calendar identifier outside the accepted set."""
        msg = f"Invalid calendar type '{value}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CALENDAR,
            message=msg,
            hint="Use one of the CalendarId values, e.g. 'gregory' or 'buddhist'",
        )

    @staticmethod
    def unknown_locale(locale_code: str, reason: str) -> Diagnostic:
        """Locale tag not recognised by CLDR."""
        msg = f"Unknown locale identifier '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LOCALE,
            message=msg,
        )

    @staticmethod
    def empty_format() -> Diagnostic:
        """Legacy format string was empty."""
        return Diagnostic(
            code=DiagnosticCode.EMPTY_FORMAT,
            message="No format string provided, using defaults",
            severity="warning",
        )
