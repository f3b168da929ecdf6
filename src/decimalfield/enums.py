"""Enumerations for decimalfield type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class SignPolicy(StrEnum):
    """Whether a field may hold negative values.

    StrEnum provides automatic string conversion: str(SignPolicy.ALLOW_NEGATIVE) == "allow_negative"
    """

    NON_NEGATIVE_ONLY = "non_negative_only"
    """Negative values are clamped to zero; the edit grammar rejects '-'."""

    ALLOW_NEGATIVE = "allow_negative"
    """Negative values are kept; the edit grammar accepts a leading '-'."""


class SourceTag(StrEnum):
    """Domain a FormatSpec was seeded for.

    Purely descriptive: the tag carries no behavior beyond the default
    pattern, unit and prompt seeded by the standard presets.
    """

    CURRENCY = "currency"
    PERCENTAGE = "percentage"
    YEARS = "years"
    MONTHS = "months"
    DISTANCE = "distance"
    NONE = "none"
    CUSTOM = "custom"


class StandardType(StrEnum):
    """Built-in FormatSpec presets.

    See decimalfield.runtime.format_spec.STANDARD_FORMATS for the seeded values.
    """

    NONE = "none"
    KM = "km"
    PERCENTAGE = "percentage"
    YEARS = "years"
    MONTHS = "months"
    EURO = "euro"
    DOLLAR = "dollar"
    MM = "mm"
    F = "f"


class FieldState(StrEnum):
    """Representation currently shown by a ValueField."""

    EDITING = "editing"
    """Raw locale numeral, no unit, every edit checked by the mask grammar."""

    COMMITTED = "committed"
    """Canonical formatted text with unit suffix."""


__all__ = [
    "FieldState",
    "SignPolicy",
    "SourceTag",
    "StandardType",
]
