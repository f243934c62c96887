"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
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
        1000-1999: Lookup errors (locales, missing translations)
        2000-2999: Resolution errors (pluralization, default specifications)
        3000-3999: Interpolation errors (placeholders)
        4000-4999: Loading errors (translation resources)
    """

    # Lookup errors (1000-1999)
    INVALID_LOCALE = 1001
    MISSING_TRANSLATION = 1002

    # Resolution errors (2000-2999)
    INVALID_PLURALIZATION_DATA = 2001
    INVALID_DEFAULT = 2002
    MAX_DEPTH_EXCEEDED = 2003

    # Interpolation errors (3000-3999)
    RESERVED_INTERPOLATION_KEY = 3001
    MISSING_INTERPOLATION_ARGUMENT = 3002

    # Loading errors (4000-4999)
    UNKNOWN_FILE_TYPE = 4001
    INVALID_RESOURCE_DATA = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale: Locale active when the error occurred
        key: Translation key (dotted form) involved in the error
        placeholder: Interpolation placeholder name (interpolation errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale: str | None = None
    key: str | None = None
    placeholder: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in the multi-line compiler style.

        Example output:
            error[MISSING_TRANSLATION]: Translation missing: en.greeting
              = locale: en
              = key: greeting
              = help: Store a translation for 'greeting' or pass a default

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
