"""Type guard for parsing result type narrowing.

parse_decimal() returns tuple[Decimal | None, tuple[ParseError, ...]].
The guard checks the result component to narrow its type for mypy.

Python 3.13+ with TypeIs support (PEP 742).

Note: The guard accepts None and returns False. This simplifies the pattern from
`if not errors and is_valid_decimal(result)` to just `if is_valid_decimal(result)`.

Example:
    >>> from decimal import Decimal
    >>> from decimalfield.parsing import parse_decimal, is_valid_decimal
    >>> result, errors = parse_decimal("1,234.56", "en_US")
    >>> if is_valid_decimal(result):
    ...     amount = result.quantize(Decimal("0.01"))
"""

from decimal import Decimal
from typing import TypeIs

__all__ = ["is_valid_decimal"]


def is_valid_decimal(value: Decimal | None) -> TypeIs[Decimal]:
    """Type guard: Check if a decimal is usable as a field value (not None/NaN/Infinity).

    Args:
        value: Decimal from parse_decimal() result tuple (may be None on error)

    Returns:
        True if value is a finite Decimal, False otherwise
    """
    return value is not None and value.is_finite()
