"""Diagnostic codes and data structures.

Defines error codes, categories and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for decimalfield exceptions.

    Categories:
        PARSE: Numeral text could not be turned into a Decimal
        FORMATTING: Babel failed to render a Decimal against a pattern
        CONFIGURATION: Field configuration carried an invalid type or value
    """

    PARSE = "parse"
    FORMATTING = "formatting"
    CONFIGURATION = "configuration"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        2000-2999: Formatting errors (rendering a value)
        4000-4999: Parsing errors (reconstructing a value from text)
        5000-5999: Configuration errors (field construction and setters)
    """

    # Formatting errors (2000-2999)
    FORMATTING_FAILED = 2014

    # Parsing errors (4000-4999)
    PARSE_EMPTY_INPUT = 4001
    PARSE_DECIMAL_FAILED = 4002
    PARSE_LOCALE_UNKNOWN = 4006
    PARSE_NUMERAL_INVALID = 4009
    PARSE_MULTIPLE_SEPARATORS = 4011

    # Configuration errors (5000-5999)
    CONFIG_INVALID_TYPE = 5001
    CONFIG_VALUE_NOT_FINITE = 5002
    CONFIG_VALUE_INVALID = 5003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

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
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping (log injection prevention).

        Example output:
            error[PARSE_NUMERAL_INVALID]: Text '12a' is not a numeral for locale 'en_US'
              = help: Use digits, an optional leading '-' and the locale decimal separator

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
