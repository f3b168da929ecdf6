"""decimalfield exception hierarchy with structured diagnostics.

All exceptions can carry Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory


class DecimalFieldError(Exception):
    """Base exception for all decimalfield errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        category: Error category for aggregation and logging
    """

    category: ErrorCategory | None = None

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DecimalFieldError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ParseError(DecimalFieldError):
    """Numeral text could not be reconstructed into a Decimal.

    Returned (never raised) by the parse functions, inside the errors
    tuple, so callers can decide how to recover.

    Attributes:
        input_value: The string that failed to parse
        locale_code: The locale used for parsing

    Example:
        >>> result, errors = parse_decimal("12.34.56", "en_US")
        >>> if errors:
        ...     print(errors[0].input_value)
        12.34.56
    """

    category = ErrorCategory.PARSE

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        locale_code: str = "",
    ) -> None:
        """Initialize ParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            locale_code: The locale used for parsing
        """
        super().__init__(message)
        self.input_value = input_value
        self.locale_code = locale_code


class FormattingError(DecimalFieldError):
    """Raised when locale-aware formatting fails.

    The error carries a fallback_value that callers use as the display
    text instead, so a field always ends in a displayable state.

    Attributes:
        fallback_value: String to use in output when formatting fails
    """

    category = ErrorCategory.FORMATTING

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value


class ConfigurationError(DecimalFieldError, ValueError):
    """Field configuration carries a value of the wrong type."""

    category = ErrorCategory.CONFIGURATION


class InvalidValueError(DecimalFieldError, ValueError):
    """A programmatic value assignment cannot be represented by a field."""

    category = ErrorCategory.CONFIGURATION
