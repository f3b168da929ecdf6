"""Numeric field runtime.

Provides the FormatSpec display descriptions, the locale formatter, the
keystroke edit grammar and the ValueField state machine that ties them
together. Depends on the parsing package for reading numerals back.

Python 3.13+.
"""

from .format_spec import STANDARD_FORMATS, FormatSpec, derive_pattern
from .locale_formatter import LocaleNumberFormatter
from .mask_grammar import MaskGrammar, build_mask_expression
from .value_field import FieldConfig, FieldValue, ValueField, to_decimal

__all__ = [
    "STANDARD_FORMATS",
    "FieldConfig",
    "FieldValue",
    "FormatSpec",
    "LocaleNumberFormatter",
    "MaskGrammar",
    "ValueField",
    "build_mask_expression",
    "derive_pattern",
    "to_decimal",
]
