"""decimalfield - Locale-aware numeric text field engine.

Keeps the exact Decimal value behind a numeric text field, renders it in
the user's locale with a unit label, restricts keystrokes to numerals that
can still become valid, and reads typed text back without loss.

Public API:
    ValueField - Field state machine (value, precision, sign policy, locale)
    FieldConfig - Typed construction parameters for ValueField
    FormatSpec - Number pattern, unit labels and prompt of a numeric type
    StandardType - Built-in FormatSpec presets
    SignPolicy - Whether negative values are kept or clamped to zero
    FieldState - EDITING or COMMITTED representation
    parse_decimal - Locale numeral text to Decimal (never raises)

Exceptions:
    DecimalFieldError - Base exception class
    ConfigurationError - Wrong-typed configuration
    InvalidValueError - Unrepresentable programmatic value
    FormattingError - Babel rendering failure (carries a fallback)

Submodules:
    decimalfield.runtime - FormatSpec, LocaleNumberFormatter, MaskGrammar, ValueField
    decimalfield.parsing - Locale-aware numeral parsing
    decimalfield.diagnostics - Error codes, templates and formatters
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    ConfigurationError,
    DecimalFieldError,
    FormattingError,
    InvalidValueError,
    ParseError,
)
from .enums import FieldState, SignPolicy, SourceTag, StandardType
from .parsing import parse_decimal
from .runtime import FieldConfig, FormatSpec, LocaleNumberFormatter, MaskGrammar, ValueField

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("decimalfield")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "DecimalFieldError",
    "FieldConfig",
    "FieldState",
    "FormatSpec",
    "FormattingError",
    "InvalidValueError",
    "LocaleNumberFormatter",
    "MaskGrammar",
    "ParseError",
    "SignPolicy",
    "SourceTag",
    "StandardType",
    "ValueField",
    "__version__",
    "parse_decimal",
]
