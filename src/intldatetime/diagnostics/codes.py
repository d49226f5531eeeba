"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Capability errors (formatting backend missing or unusable)
        2000-2999: Formatting errors (formatter construction and invocation)
        3000-3999: Input errors (timestamps, calendars, locales, formats)
    """

    # Capability errors (1000-1999)
    CAPABILITY_UNAVAILABLE = 1001
    CAPABILITY_CHECK_FAILED = 1002

    # Formatting errors (2000-2999)
    FORMATTER_CONSTRUCTION_FAILED = 2001
    CALENDAR_UNSUPPORTED = 2002
    FORMATTING_FAILED = 2003
    STRUCTURED_PART_MISSING = 2004

    # Input errors (3000-3999)
    INVALID_TIMESTAMP = 3001
    INVALID_CALENDAR = 3002
    UNKNOWN_LOCALE = 3003
    EMPTY_FORMAT = 3004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Example output:
            error[INVALID_TIMESTAMP]: Invalid timestamp 'abc'
              = help: Pass milliseconds since the Unix epoch

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {_escape_control(self.message)}"]
        if self.hint:
            lines.append(f"  = help: {_escape_control(self.hint)}")
        return "\n".join(lines)


def _escape_control(text: str) -> str:
    """Escape control characters so user input cannot forge log lines."""
    return "".join(
        char if char.isprintable() else char.encode("unicode_escape").decode("ascii")
        for char in text
    )
