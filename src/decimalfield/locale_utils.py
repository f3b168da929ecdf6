"""Locale code handling for numeric fields.

Fields accept BCP-47 ("de-DE") or POSIX ("de_DE") codes as well as Babel
Locale objects. Everything is reduced to one POSIX code so formatter caches
and diagnostics agree on a single key.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

from decimalfield.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["babel_locale_for", "locale_code_of", "system_numeric_locale"]

logger = logging.getLogger(__name__)

# POSIX precedence for numeric formatting.
_NUMERIC_LOCALE_VARS = ("LC_ALL", "LC_NUMERIC", "LANG")

_PSEUDO_LOCALES = frozenset({"", "C", "POSIX"})


def locale_code_of(locale: str | Locale) -> str:
    """Return the POSIX code for a locale string or Babel Locale.

    Example:
        >>> locale_code_of("de-DE")
        'de_DE'
        >>> locale_code_of("zh-Hant-TW")
        'zh_Hant_TW'
    """
    if isinstance(locale, str):
        return locale.replace("-", "_")
    return str(locale)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def babel_locale_for(locale_code: str) -> Locale:
    """Parse a locale code into a cached Babel Locale.

    Raises:
        babel.core.UnknownLocaleError: If CLDR has no data for the locale
        ValueError: If the code is malformed
    """
    # Lazy import: Babel loads CLDR data at import time
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(locale_code_of(locale_code))


def _posix_code(setting: str) -> str:
    # "de_DE.UTF-8@euro" -> "de_DE"
    return setting.split(".")[0].split("@")[0]


def system_numeric_locale() -> str:
    """Locale code a field uses when none is configured.

    Numbers follow the numeric category, so LC_ALL, LC_NUMERIC and LANG are
    consulted in that order before the interpreter's LC_NUMERIC setting. The
    C and POSIX pseudo-locales are skipped; DEFAULT_LOCALE is the last resort.
    """
    import locale as locale_module  # noqa: PLC0415

    for var in _NUMERIC_LOCALE_VARS:
        code = _posix_code(os.environ.get(var, ""))
        if code not in _PSEUDO_LOCALES:
            return locale_code_of(code)

    try:
        current, _ = locale_module.getlocale(locale_module.LC_NUMERIC)
    except ValueError as e:
        logger.debug("Unrecognized LC_NUMERIC setting: %s", e)
        current = None
    code = _posix_code(current or "")
    if code not in _PSEUDO_LOCALES:
        return locale_code_of(code)

    logger.debug("No numeric locale configured; using %s", DEFAULT_LOCALE)
    return DEFAULT_LOCALE
