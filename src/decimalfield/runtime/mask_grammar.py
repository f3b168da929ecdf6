"""Keystroke-level edit grammar.

MaskGrammar decides whether the complete text proposed by an edit is a
legal in-progress numeral: a number that may not be finished yet ("12,",
"-", "") but could still become a valid value under the current precision
and sign settings. Anything that could never become valid is rejected.

The grammar is a regular expression equivalent to::

    [-]? DIGIT{0,cap} (SEP DIGIT{0,count})?

guarded by a negative lookahead that rejects candidates holding
cap + count + EDIT_DIGIT_SLACK digits or more. The separator branch is
omitted when count is zero and the minus sign only exists under
SignPolicy.ALLOW_NEGATIVE.

Grammars are immutable values. Any change to one of the four inputs
builds a new grammar; compiled expressions are memoised per input tuple.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass, field

from decimalfield.constants import EDIT_DIGIT_SLACK
from decimalfield.enums import SignPolicy

__all__ = ["MaskGrammar", "build_mask_expression"]


def build_mask_expression(
    integer_digit_cap: int,
    fraction_digit_count: int,
    allow_negative: bool,
    decimal_separator: str,
) -> str:
    """Build the regular expression source for an edit grammar."""
    max_total_digits = integer_digit_cap + fraction_digit_count + EDIT_DIGIT_SLACK
    parts = [rf"(?!(?:\D*\d){{{max_total_digits},}})"]
    if allow_negative:
        parts.append("-?")
    parts.append(rf"\d{{0,{integer_digit_cap}}}")
    if fraction_digit_count > 0:
        parts.append(rf"(?:{re.escape(decimal_separator)}\d{{0,{fraction_digit_count}}})?")
    return "".join(parts)


@functools.lru_cache(maxsize=256)
def _compile(
    integer_digit_cap: int,
    fraction_digit_count: int,
    allow_negative: bool,
    decimal_separator: str,
) -> re.Pattern[str]:
    expression = build_mask_expression(
        integer_digit_cap, fraction_digit_count, allow_negative, decimal_separator
    )
    # ASCII: \d must not admit other scripts' digits
    return re.compile(expression, re.ASCII)


@dataclass(frozen=True, slots=True)
class MaskGrammar:
    """Grammar of legal in-progress numeral edits.

    Attributes:
        integer_digit_cap: Maximum digits before the decimal separator
        fraction_digit_count: Maximum digits after the decimal separator
        sign_policy: Whether a leading '-' is allowed
        decimal_separator: Locale decimal separator

    Examples:
        >>> grammar = MaskGrammar(3, 2, SignPolicy.ALLOW_NEGATIVE, ",")
        >>> grammar.accepts("-12,")
        True
        >>> grammar.accepts("12,345")
        False
        >>> grammar.accepts("")
        True
    """

    integer_digit_cap: int
    fraction_digit_count: int
    sign_policy: SignPolicy
    decimal_separator: str
    _pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Compile (or fetch the memoised) expression for these inputs."""
        pattern = _compile(
            self.integer_digit_cap,
            self.fraction_digit_count,
            self.sign_policy is SignPolicy.ALLOW_NEGATIVE,
            self.decimal_separator,
        )
        object.__setattr__(self, "_pattern", pattern)

    @property
    def max_total_digits(self) -> int:
        """Digit count at which the lookahead starts rejecting candidates."""
        return self.integer_digit_cap + self.fraction_digit_count + EDIT_DIGIT_SLACK

    @property
    def expression(self) -> str:
        """Regular expression source backing this grammar."""
        return self._pattern.pattern

    def accepts(self, candidate: str) -> bool:
        """Check whether the full candidate text is a legal in-progress numeral.

        The whole string must match; a matching prefix is not enough.
        """
        return self._pattern.fullmatch(candidate) is not None
