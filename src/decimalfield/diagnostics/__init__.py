"""Diagnostic system for decimalfield errors.

Provides structured error diagnostics with codes, hints and formatters.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    ConfigurationError,
    DecimalFieldError,
    FormattingError,
    InvalidValueError,
    ParseError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "DecimalFieldError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FormattingError",
    "InvalidValueError",
    "OutputFormat",
    "ParseError",
]
