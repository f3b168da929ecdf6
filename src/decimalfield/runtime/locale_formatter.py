"""Locale-aware rendering and reading of decimal numerals.

Architecture:
    - LocaleNumberFormatter: Immutable per-locale formatter
    - Rendering uses Babel format_decimal (CLDR-compliant)
    - Reading delegates to decimalfield.parsing (never raises)
    - No dependency on Python's locale module (avoids global state)

A locale change never mutates a formatter: callers ask for the formatter of
the new locale, whose LocaleSymbols are derived in full at construction.

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Context, Decimal, InvalidOperation, localcontext
from threading import RLock
from typing import ClassVar

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers

from decimalfield.constants import (
    ASCII_MINUS,
    DEFAULT_LOCALE,
    MAX_LOCALE_CACHE_SIZE,
    UNIT_SEPARATOR,
)
from decimalfield.diagnostics import ErrorTemplate, FormattingError, ParseError
from decimalfield.locale_utils import locale_code_of
from decimalfield.parsing import parse_localized_decimal
from decimalfield.symbols import LocaleSymbols

__all__ = ["LocaleNumberFormatter"]

logger = logging.getLogger(__name__)

# Extra significant digits for a carry when rounding up (9.995 -> 10.00).
_PRECISION_MARGIN = 2


def _pattern_fraction_digits(pattern: str) -> int:
    """Count the maximum fraction digits a number pattern renders."""
    _, dot, fraction = pattern.partition(".")
    if not dot:
        return 0
    return sum(1 for ch in fraction if ch in "0#")


def _rendering_context(value: Decimal, fraction_digits: int) -> Context:
    """Context whose precision holds value quantized to fraction_digits.

    The default context keeps 28 significant digits, fewer than a field
    with 24 integer digits and several fraction digits needs.
    """
    _, digits, exponent = value.as_tuple()
    integer_digits = len(digits) + exponent if isinstance(exponent, int) else len(digits)
    prec = max(integer_digits, 1) + fraction_digits + _PRECISION_MARGIN
    return Context(prec=max(prec, len(digits) + _PRECISION_MARGIN), rounding=ROUND_HALF_EVEN)


@dataclass(frozen=True, slots=True)
class LocaleNumberFormatter:
    """Immutable locale configuration for numeral rendering and parsing.

    Use LocaleNumberFormatter.create() to construct instances with proper
    validation. Direct construction bypasses the locale cache.

    Cache Management:
        Instances are cached per normalized locale code (LRU):
        - LocaleNumberFormatter.clear_cache(): Clear all cached instances
        - LocaleNumberFormatter.cache_size(): Get current cache size
        - LocaleNumberFormatter.cache_info(): Get detailed cache statistics

    Examples:
        >>> fmt = LocaleNumberFormatter.create("de-DE")
        >>> fmt.format(Decimal("1234.5"), "#,###,##0.00", "EUR")
        '1.234,50 EUR'
        >>> fmt.parse("1.234,5")
        (Decimal('1234.5'), ())
        >>> fmt.to_raw(Decimal("1234.5"), 2)
        '1234,5'

        >>> fmt = LocaleNumberFormatter.create("xx-UNKNOWN")
        >>> fmt.is_fallback
        True
    """

    _cache: ClassVar[OrderedDict[str, "LocaleNumberFormatter"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    babel_locale: Locale
    symbols: LocaleSymbols
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the formatter cache."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached formatter instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with size, max_size and the cached locale codes (LRU order)
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @classmethod
    def create(cls, locale: str | Locale) -> "LocaleNumberFormatter":
        """Create a formatter with graceful fallback for invalid locales.

        Unknown or malformed locale codes log a warning and fall back to
        DEFAULT_LOCALE, preserving the requested code for debugging.

        Args:
            locale: BCP 47 / POSIX locale code or Babel Locale

        Returns:
            Cached LocaleNumberFormatter instance
        """
        cache_key = locale_code_of(locale)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        used_fallback = False
        if isinstance(locale, Locale):
            babel_locale = locale
        else:
            try:
                babel_locale = Locale.parse(cache_key)
            except UnknownLocaleError as e:
                logger.warning(
                    "Unknown locale '%s': %s. Falling back to %s", locale, e, DEFAULT_LOCALE
                )
                babel_locale = Locale.parse(DEFAULT_LOCALE)
                used_fallback = True
            except ValueError as e:
                logger.warning(
                    "Invalid locale format '%s': %s. Falling back to %s",
                    locale,
                    e,
                    DEFAULT_LOCALE,
                )
                babel_locale = Locale.parse(DEFAULT_LOCALE)
                used_fallback = True

        return cls._store(
            cls(
                locale_code=cache_key,
                babel_locale=babel_locale,
                symbols=LocaleSymbols.for_locale(babel_locale),
                is_fallback=used_fallback,
            )
        )

    @classmethod
    def create_or_raise(cls, locale: str | Locale) -> "LocaleNumberFormatter":
        """Create a formatter or raise on an unknown locale.

        Shares the cache with create(); a cached fallback formatter for the
        same code is never returned.

        Raises:
            ValueError: If locale code is invalid or unknown
        """
        code = locale_code_of(locale)
        with cls._cache_lock:
            cached = cls._cache.get(code)
            if cached is not None and not cached.is_fallback:
                cls._cache.move_to_end(code)
                return cached

        try:
            babel_locale = locale if isinstance(locale, Locale) else Locale.parse(code)
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{locale}': {e}"
            raise ValueError(msg) from None
        except ValueError as e:
            msg = f"Invalid locale format '{locale}': {e}"
            raise ValueError(msg) from None
        return cls._store(
            cls(
                locale_code=code,
                babel_locale=babel_locale,
                symbols=LocaleSymbols.for_locale(babel_locale),
            )
        )

    @classmethod
    def _store(cls, formatter: "LocaleNumberFormatter") -> "LocaleNumberFormatter":
        """Insert a formatter unless another thread cached one first."""
        with cls._cache_lock:
            existing = cls._cache.get(formatter.locale_code)
            if existing is not None and not existing.is_fallback:
                return existing
            if existing is None and len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[formatter.locale_code] = formatter
            return formatter

    @property
    def decimal_separator(self) -> str:
        """Locale decimal separator."""
        return self.symbols.decimal_separator

    @property
    def grouping_separator(self) -> str:
        """Locale grouping separator."""
        return self.symbols.grouping_separator

    def format(self, value: Decimal, pattern: str, unit_suffix: str = "") -> str:
        """Render a value against a number pattern and append the unit.

        Args:
            value: Value to render
            pattern: CLDR number pattern (e.g., "0.00", "#,###,##0.00")
            unit_suffix: Unit label appended after a space (omitted when empty)

        Returns:
            Display string

        Raises:
            FormattingError: If Babel cannot render the value; carries a
                plain-text fallback_value

        Examples:
            >>> LocaleNumberFormatter.create("de_DE").format(Decimal(500), "0.00", "EUR")
            '500,00 EUR'
            >>> LocaleNumberFormatter.create("en_US").format(Decimal(-3), "0.0")
            '-3.0'
            >>> LocaleNumberFormatter.create("en_US").format(Decimal("-0.001"), "0.00")
            '0.00'
        """
        places = _pattern_fraction_digits(pattern)
        try:
            # Babel rounds under the ambient context; widen it to hold every digit.
            with localcontext(_rendering_context(value, places)):
                if value.is_signed() and not value.quantize(Decimal(1).scaleb(-places)):
                    value = value.copy_abs()
                rendered = str(
                    babel_numbers.format_decimal(value, format=pattern, locale=self.babel_locale)
                )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            fallback = self._with_unit(str(value), unit_suffix)
            diagnostic = ErrorTemplate.formatting_failed(str(value), pattern, str(e))
            raise FormattingError(diagnostic, fallback_value=fallback) from e
        return self._with_unit(rendered, unit_suffix)

    def parse(self, text: str) -> tuple[Decimal | None, tuple[ParseError, ...]]:
        """Reconstruct an exact Decimal from locale numeral text.

        Grouping separators are stripped and the locale decimal separator is
        interpreted. Never raises; failures come back in the errors tuple.

        Returns:
            Tuple of (result, errors); result is None when parsing failed
        """
        return parse_localized_decimal(text, self.babel_locale, self.locale_code)

    def to_raw(self, value: Decimal, fraction_digit_count: int | None = None) -> str:
        """Render a value as the raw numeral shown while editing.

        Plain positional notation, ASCII minus, locale decimal separator,
        no grouping and no unit. When fraction_digit_count is given, excess
        fraction digits are rounded half-even so the numeral stays inside
        the edit grammar; trailing zeros already present are kept.

        Examples:
            >>> fmt = LocaleNumberFormatter.create("de_DE")
            >>> fmt.to_raw(Decimal("1E+3"))
            '1000'
            >>> fmt.to_raw(Decimal("-2.345"), 2)
            '-2,34'
        """
        if fraction_digit_count is not None:
            exponent = value.as_tuple().exponent
            if isinstance(exponent, int) and -exponent > fraction_digit_count:
                value = value.quantize(
                    Decimal(1).scaleb(-fraction_digit_count),
                    context=_rendering_context(value, fraction_digit_count),
                )
        integer, dot, fraction = format(value, "f").partition(".")
        if integer.startswith(ASCII_MINUS) and not value:
            integer = integer[1:]
        return integer + (self.decimal_separator + fraction if dot else "")

    @staticmethod
    def _with_unit(text: str, unit_suffix: str) -> str:
        if not unit_suffix:
            return text
        return f"{text}{UNIT_SEPARATOR}{unit_suffix}"
