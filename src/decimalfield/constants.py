"""Shared constants for decimalfield.

This module provides centralized configuration constants used across
the parsing and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Precision limits: Clamping bounds for integer and fraction digits
- Edit grammar: Digit slack tolerated while a keystroke edit is in flight
- Pattern skeletons: Integer parts used when deriving number patterns
- Locale defaults: Fallback locale and cache bounds

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Precision limits
    "MIN_INTEGER_DIGITS",
    "MAX_INTEGER_DIGITS",
    "MIN_FRACTION_DIGITS",
    # Edit grammar
    "EDIT_DIGIT_SLACK",
    "ASCII_MINUS",
    # Pattern skeletons
    "PLAIN_INTEGER_PATTERN",
    "GROUPED_INTEGER_PATTERN",
    "UNIT_SEPARATOR",
    # Locale defaults
    "DEFAULT_LOCALE",
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# PRECISION LIMITS
# ============================================================================

# Integer digits accepted before the decimal separator.
# Setters clamp into [MIN_INTEGER_DIGITS, MAX_INTEGER_DIGITS] silently.
MIN_INTEGER_DIGITS: int = 1
MAX_INTEGER_DIGITS: int = 24

# Fraction digits have no upper bound; only the lower bound is enforced.
MIN_FRACTION_DIGITS: int = 0

# ============================================================================
# EDIT GRAMMAR
# ============================================================================

# Extra digit tolerated by the edit grammar's total-digit lookahead.
# A candidate is rejected once it holds
# integer_digit_cap + fraction_digit_count + EDIT_DIGIT_SLACK digits.
EDIT_DIGIT_SLACK: int = 1

# Raw numerals always use the ASCII hyphen-minus, whatever the locale prints.
ASCII_MINUS: str = "-"

# ============================================================================
# PATTERN SKELETONS
# ============================================================================

PLAIN_INTEGER_PATTERN: str = "0"
GROUPED_INTEGER_PATTERN: str = "#,###,##0"

# Placed between the rendered number and its unit label.
UNIT_SEPARATOR: str = " "

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Used when the system locale cannot be detected and as the fallback for
# unknown locale identifiers.
DEFAULT_LOCALE: str = "en_US"

# Maximum cached LocaleNumberFormatter instances.
# Prevents unbounded memory growth in multi-locale applications.
MAX_LOCALE_CACHE_SIZE: int = 128
