"""Parse locale-aware numeral text back to exact Decimal values.

- Functions NEVER raise exceptions - errors are returned in tuple
- Consistent with the field's "always ends in a displayable state" contract

This module provides the inverse operation to LocaleNumberFormatter.format():
- Formatting: Decimal -> locale-aware display string
- Parsing: Locale-aware numeral text -> Decimal

Public API:
    parse_decimal - Returns tuple[Decimal | None, tuple[ParseError, ...]]
    parse_localized_decimal - Same, for an already resolved Babel Locale
    is_valid_decimal - TypeIs guard for finite Decimal

Example:
    >>> from decimal import Decimal
    >>> from decimalfield.parsing import parse_decimal, is_valid_decimal
    >>> result, errors = parse_decimal("1.234,56", "de_DE")
    >>> if not errors and is_valid_decimal(result):
    ...     total = result.quantize(Decimal("0.01"))

Python 3.13+. Uses Babel CLDR symbols + stdlib decimal for all parsing.
"""

from .guards import is_valid_decimal
from .numbers import parse_decimal, parse_localized_decimal

__all__ = [
    "is_valid_decimal",
    "parse_decimal",
    "parse_localized_decimal",
]
