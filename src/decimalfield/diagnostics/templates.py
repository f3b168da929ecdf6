"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps every user-facing message testable and documented in one place.
    """

    @staticmethod
    def parse_empty_input(locale_code: str) -> Diagnostic:
        """Nothing to parse.

        Args:
            locale_code: The locale used for parsing

        Returns:
            Diagnostic for PARSE_EMPTY_INPUT
        """
        msg = f"Cannot parse empty text for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_EMPTY_INPUT,
            message=msg,
            hint="Enter at least one digit",
        )

    @staticmethod
    def parse_numeral_invalid(value: str, locale_code: str) -> Diagnostic:
        """Text contains characters outside the locale numeral grammar.

        Args:
            value: The input string that failed to parse
            locale_code: The locale used for parsing

        Returns:
            Diagnostic for PARSE_NUMERAL_INVALID
        """
        msg = f"Text '{value}' is not a numeral for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NUMERAL_INVALID,
            message=msg,
            hint="Use digits, an optional leading '-' and the locale decimal separator",
        )

    @staticmethod
    def parse_multiple_separators(value: str, separator: str) -> Diagnostic:
        """More than one decimal separator.

        Args:
            value: The input string that failed to parse
            separator: The locale decimal separator

        Returns:
            Diagnostic for PARSE_MULTIPLE_SEPARATORS
        """
        msg = f"Text '{value}' contains more than one decimal separator '{separator}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_MULTIPLE_SEPARATORS,
            message=msg,
            hint="Remove the extra decimal separators",
        )

    @staticmethod
    def parse_decimal_failed(value: str, locale_code: str, reason: str) -> Diagnostic:
        """Decimal conversion failed after the numeral was accepted.

        Args:
            value: The input string that failed to parse
            locale_code: The locale used for parsing
            reason: The reason parsing failed

        Returns:
            Diagnostic for PARSE_DECIMAL_FAILED
        """
        msg = f"Failed to parse decimal '{value}' for locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_DECIMAL_FAILED,
            message=msg,
            hint="Check that the decimal format matches the locale's conventions",
        )

    @staticmethod
    def parse_locale_unknown(locale_code: str) -> Diagnostic:
        """Unknown locale for parsing.

        Args:
            locale_code: The unknown locale code

        Returns:
            Diagnostic for PARSE_LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_LOCALE_UNKNOWN,
            message=msg,
            hint="Use BCP 47 locale codes (e.g., 'en_US', 'de_DE', 'fr_CH')",
        )

    @staticmethod
    def formatting_failed(value: str, pattern: str, reason: str) -> Diagnostic:
        """Babel could not render a value.

        Args:
            value: String form of the value being rendered
            pattern: The number pattern in use
            reason: The underlying failure

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        msg = f"Number formatting failed for '{value}' with pattern '{pattern}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=msg,
            hint="Check that the pattern is a valid CLDR number pattern",
        )

    @staticmethod
    def config_invalid_type(field: str, expected: str, received: object) -> Diagnostic:
        """Configuration field has the wrong type.

        Args:
            field: Name of the configuration field
            expected: Human-readable expected type
            received: The offending value

        Returns:
            Diagnostic for CONFIG_INVALID_TYPE
        """
        msg = (
            f"Field '{field}' expects {expected}, "
            f"got {type(received).__name__} ({received!r})"
        )
        return Diagnostic(
            code=DiagnosticCode.CONFIG_INVALID_TYPE,
            message=msg,
            hint=f"Pass {expected} for '{field}'",
        )

    @staticmethod
    def value_not_finite(value: object) -> Diagnostic:
        """NaN or infinity assigned as a field value.

        Args:
            value: The offending value

        Returns:
            Diagnostic for CONFIG_VALUE_NOT_FINITE
        """
        msg = f"Field value must be a finite number, got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_VALUE_NOT_FINITE,
            message=msg,
            hint="Use None to clear the field",
        )

    @staticmethod
    def value_invalid(value: object) -> Diagnostic:
        """Value text cannot be converted to a Decimal.

        Args:
            value: The offending value

        Returns:
            Diagnostic for CONFIG_VALUE_INVALID
        """
        msg = f"Cannot convert {value!r} to a decimal field value"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_VALUE_INVALID,
            message=msg,
            hint="Use a Decimal, int, float or a plain numeral string such as '12.5'",
        )
