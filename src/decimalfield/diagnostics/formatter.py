"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


# Escape table for control characters embedded in user-typed text.
_CONTROL_ESCAPES = {i: f"\\x{i:02x}" for i in range(32)} | {
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
    0x7F: "\\x7f",
}


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate message content to max_content_length
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.parse_empty_input("en_US")
        >>> print(formatter.format(diagnostic))
        error[PARSE_EMPTY_INPUT]: Cannot parse empty text for locale 'en_US'
          = help: Enter at least one digit

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        PARSE_EMPTY_INPUT: Cannot parse empty text for locale 'en_US'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format several diagnostics, one block per diagnostic."""
        return "\n".join(self.format(d) for d in diagnostics)

    def _clean(self, text: str) -> str:
        escaped = text.translate(_CONTROL_ESCAPES)
        if self.sanitize and len(escaped) > self.max_content_length:
            return escaped[: self.max_content_length] + "..."
        return escaped

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        lines = [
            f"{diagnostic.severity}[{diagnostic.code.name}]: {self._clean(diagnostic.message)}"
        ]
        if diagnostic.hint:
            lines.append(f"  = help: {self._clean(diagnostic.hint)}")
        return "\n".join(lines)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        return f"{diagnostic.code.name}: {self._clean(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        return json.dumps(
            {
                "code": diagnostic.code.name,
                "message": self._clean(diagnostic.message),
                "hint": diagnostic.hint,
                "severity": diagnostic.severity,
            },
            ensure_ascii=False,
        )
