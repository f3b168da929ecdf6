"""Locale number symbols.

LocaleSymbols captures the handful of CLDR symbols the engine needs to
shape and read numerals: decimal separator, grouping separator and minus
sign. Symbols are resolved through Babel and cached per locale, so a
locale change always yields a complete, freshly derived symbol set.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

from babel import Locale
from babel import numbers as babel_numbers

__all__ = ["LocaleSymbols"]


@dataclass(frozen=True, slots=True)
class LocaleSymbols:
    """Separator pair (plus minus sign) for one locale.

    Attributes:
        decimal_separator: Symbol between integer and fraction digits
        grouping_separator: Thousands separator used by grouped patterns
        minus_sign: Minus sign Babel prints for negative numbers

    Examples:
        >>> LocaleSymbols.for_locale(Locale.parse("de_DE"))
        LocaleSymbols(decimal_separator=',', grouping_separator='.', minus_sign='-')
    """

    decimal_separator: str
    grouping_separator: str
    minus_sign: str

    @classmethod
    def for_locale(cls, locale: Locale) -> LocaleSymbols:
        """Resolve symbols for a Babel locale (latn numbering system)."""
        return _symbols_for(locale)

    @property
    def grouping_is_space(self) -> bool:
        """True when the locale groups digits with some kind of space."""
        return self.grouping_separator.isspace()


@functools.lru_cache(maxsize=128)
def _symbols_for(locale: Locale) -> LocaleSymbols:
    return LocaleSymbols(
        decimal_separator=babel_numbers.get_decimal_symbol(locale),
        grouping_separator=babel_numbers.get_group_symbol(locale),
        minus_sign=babel_numbers.get_minus_sign_symbol(locale),
    )
