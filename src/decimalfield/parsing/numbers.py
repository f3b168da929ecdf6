"""Number parsing functions with locale awareness.

- parse_decimal() returns tuple[Decimal | None, tuple[ParseError, ...]]
- Parse errors returned in tuple, never raised

The accepted numeral grammar is deliberately narrow: an optional minus
sign, digits, grouping separators and at most one decimal separator.
Exponents, NaN/Infinity spellings, plus signs and embedded unit labels are
rejected before Babel converts the text to an exact Decimal.

Python 3.13+. Uses Babel for CLDR-compliant parsing.
"""

from __future__ import annotations

import functools
import re
from decimal import Decimal, InvalidOperation

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers

from decimalfield.constants import ASCII_MINUS
from decimalfield.diagnostics import Diagnostic, ErrorTemplate, ParseError
from decimalfield.locale_utils import babel_locale_for, locale_code_of
from decimalfield.symbols import LocaleSymbols

__all__ = ["parse_decimal", "parse_localized_decimal"]

# Bidi marks Babel prints around signs in some locales.
_BIDI_MARKS = {0x200E: None, 0x200F: None, 0x061C: None}

_WHITESPACE_RE = re.compile(r"\s+")


@functools.lru_cache(maxsize=32)
def _numeral_pattern(decimal_separator: str) -> re.Pattern[str]:
    # At least one digit somewhere, optional leading minus, one optional separator.
    sep = re.escape(decimal_separator)
    return re.compile(rf"(?=.*[0-9])-?[0-9]*(?:{sep}[0-9]*)?", re.ASCII)


def _canonicalize(text: str, symbols: LocaleSymbols) -> str:
    """Map locale minus signs to '-' and drop grouping separators."""
    text = text.translate(_BIDI_MARKS)
    for minus in (symbols.minus_sign.translate(_BIDI_MARKS), "−"):
        if minus and minus != ASCII_MINUS:
            text = text.replace(minus, ASCII_MINUS)
    if symbols.grouping_is_space:
        return _WHITESPACE_RE.sub("", text)
    return text.replace(symbols.grouping_separator, "")


def _failure(
    diagnostic: Diagnostic, value: str, locale_code: str
) -> tuple[Decimal | None, tuple[ParseError, ...]]:
    error = ParseError(diagnostic, input_value=value, locale_code=locale_code)
    return (None, (error,))


def parse_localized_decimal(
    value: str,
    babel_locale: Locale,
    locale_code: str,
) -> tuple[Decimal | None, tuple[ParseError, ...]]:
    """Parse numeral text against an already resolved Babel locale.

    Args:
        value: Numeral text (e.g., "1.234,5" for de_DE)
        babel_locale: Resolved Babel Locale
        locale_code: Locale code reported in errors

    Returns:
        Tuple of (result, errors); result is None when errors is non-empty.
    """
    text = value.strip()
    if not text:
        return _failure(ErrorTemplate.parse_empty_input(locale_code), value, locale_code)

    symbols = LocaleSymbols.for_locale(babel_locale)
    canonical = _canonicalize(text, symbols)

    if canonical.count(symbols.decimal_separator) > 1:
        diagnostic = ErrorTemplate.parse_multiple_separators(value, symbols.decimal_separator)
        return _failure(diagnostic, value, locale_code)

    if not _numeral_pattern(symbols.decimal_separator).fullmatch(canonical):
        diagnostic = ErrorTemplate.parse_numeral_invalid(value, locale_code)
        return _failure(diagnostic, value, locale_code)

    try:
        return (babel_numbers.parse_decimal(canonical, locale=babel_locale), ())
    except (babel_numbers.NumberFormatError, InvalidOperation, ValueError) as e:
        diagnostic = ErrorTemplate.parse_decimal_failed(value, locale_code, str(e))
        return _failure(diagnostic, value, locale_code)


def parse_decimal(
    value: str,
    locale: str | Locale,
) -> tuple[Decimal | None, tuple[ParseError, ...]]:
    """Parse locale-aware numeral text to an exact Decimal.

    Grouping separators are stripped, the locale decimal separator is
    interpreted, and the remaining numeral is converted without any
    binary-float rounding.

    Args:
        value: Numeral text (e.g., "1,234.56" for en_US)
        locale: BCP 47 / POSIX locale code or Babel Locale

    Returns:
        Tuple of (result, errors):
        - result: Parsed Decimal, or None if parsing failed
        - errors: Tuple of ParseError (empty tuple on success)

    Examples:
        >>> result, errors = parse_decimal("1,234.56", "en_US")
        >>> result
        Decimal('1234.56')
        >>> errors
        ()

        >>> result, errors = parse_decimal("1.234,56", "de_DE")
        >>> result
        Decimal('1234.56')

        >>> result, errors = parse_decimal("12.34.56", "en_US")
        >>> result is None
        True
        >>> errors[0].diagnostic.code.name
        'PARSE_MULTIPLE_SEPARATORS'
    """
    locale_code = locale_code_of(locale)
    if isinstance(locale, Locale):
        babel_locale = locale
    else:
        try:
            babel_locale = babel_locale_for(locale_code)
        except (UnknownLocaleError, ValueError):
            return _failure(ErrorTemplate.parse_locale_unknown(locale_code), value, locale_code)

    return parse_localized_decimal(value, babel_locale, locale_code)
