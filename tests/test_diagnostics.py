"""Tests for the diagnostics package: codes, templates, formatter and errors."""

from __future__ import annotations

import json

import pytest

from decimalfield.diagnostics import (
    ConfigurationError,
    DecimalFieldError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorCategory,
    ErrorTemplate,
    FormattingError,
    InvalidValueError,
    OutputFormat,
    ParseError,
)


class TestDiagnosticCodes:
    """Test code numbering by category."""

    def test_codes_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("prefix", "low", "high"),
        [("FORMATTING_", 2000, 2999), ("PARSE_", 4000, 4999), ("CONFIG_", 5000, 5999)],
    )
    def test_codes_in_category_range(self, prefix: str, low: int, high: int) -> None:
        for code in DiagnosticCode:
            if code.name.startswith(prefix):
                assert low <= code.value <= high, code


class TestErrorTemplate:
    """Test template messages and hints."""

    def test_parse_empty_input(self) -> None:
        diagnostic = ErrorTemplate.parse_empty_input("en_US")
        assert diagnostic.code is DiagnosticCode.PARSE_EMPTY_INPUT
        assert diagnostic.message == "Cannot parse empty text for locale 'en_US'"
        assert diagnostic.hint == "Enter at least one digit"

    def test_parse_multiple_separators_names_separator(self) -> None:
        diagnostic = ErrorTemplate.parse_multiple_separators("1,2,3", ",")
        assert "'1,2,3'" in diagnostic.message
        assert "','" in diagnostic.message

    def test_config_invalid_type_names_received_type(self) -> None:
        diagnostic = ErrorTemplate.config_invalid_type("locale", "str", 42)
        assert diagnostic.message == "Field 'locale' expects str, got int (42)"

    def test_value_templates(self) -> None:
        assert ErrorTemplate.value_not_finite("nan").code is DiagnosticCode.CONFIG_VALUE_NOT_FINITE
        assert ErrorTemplate.value_invalid("x").code is DiagnosticCode.CONFIG_VALUE_INVALID

    def test_str_is_message(self) -> None:
        diagnostic = ErrorTemplate.parse_locale_unknown("xx")
        assert str(diagnostic) == "Unknown locale 'xx'"


class TestDiagnosticFormatter:
    """Test rust, simple and json output."""

    @pytest.fixture
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.parse_empty_input("en_US")

    def test_rust_format(self, diagnostic: Diagnostic) -> None:
        assert DiagnosticFormatter().format(diagnostic) == (
            "error[PARSE_EMPTY_INPUT]: Cannot parse empty text for locale 'en_US'\n"
            "  = help: Enter at least one digit"
        )

    def test_rust_format_without_hint(self) -> None:
        diagnostic = Diagnostic(DiagnosticCode.PARSE_DECIMAL_FAILED, "bad", severity="warning")
        assert DiagnosticFormatter().format(diagnostic) == "warning[PARSE_DECIMAL_FAILED]: bad"

    def test_simple_format(self, diagnostic: Diagnostic) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(diagnostic) == (
            "PARSE_EMPTY_INPUT: Cannot parse empty text for locale 'en_US'"
        )

    def test_json_format(self, diagnostic: Diagnostic) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        payload = json.loads(formatter.format(diagnostic))
        assert payload == {
            "code": "PARSE_EMPTY_INPUT",
            "message": "Cannot parse empty text for locale 'en_US'",
            "hint": "Enter at least one digit",
            "severity": "error",
        }

    def test_control_characters_escaped(self) -> None:
        """Typed text cannot inject new log lines."""
        diagnostic = ErrorTemplate.parse_numeral_invalid("1\nerror[FAKE]: x", "en_US")
        output = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic)
        assert "\n" not in output
        assert "\\n" in output

    def test_sanitize_truncates(self) -> None:
        diagnostic = Diagnostic(DiagnosticCode.PARSE_DECIMAL_FAILED, "x" * 50)
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        assert formatter.format(diagnostic) == "PARSE_DECIMAL_FAILED: " + "x" * 10 + "..."

    def test_format_all(self, diagnostic: Diagnostic) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format_all([diagnostic, diagnostic]).count("\n") == 1


class TestErrors:
    """Test the exception hierarchy."""

    def test_diagnostic_message_formatted(self) -> None:
        error = DecimalFieldError(ErrorTemplate.parse_empty_input("en_US"))
        assert str(error).startswith("error[PARSE_EMPTY_INPUT]")
        assert error.diagnostic is not None

    def test_plain_message(self) -> None:
        error = DecimalFieldError("plain")
        assert str(error) == "plain"
        assert error.diagnostic is None

    def test_parse_error_context(self) -> None:
        error = ParseError("bad", input_value="1,2,3", locale_code="en_US")
        assert error.input_value == "1,2,3"
        assert error.locale_code == "en_US"
        assert error.category is ErrorCategory.PARSE

    def test_formatting_error_fallback(self) -> None:
        error = FormattingError("failed", fallback_value="12.5 EUR")
        assert error.fallback_value == "12.5 EUR"

    @pytest.mark.parametrize("error_type", [ConfigurationError, InvalidValueError])
    def test_value_errors(self, error_type: type[DecimalFieldError]) -> None:
        """Configuration and value errors are also ValueErrors."""
        assert issubclass(error_type, ValueError)
        assert error_type.category is ErrorCategory.CONFIGURATION
