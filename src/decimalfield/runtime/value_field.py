"""ValueField: the numeric field state machine.

A ValueField owns the committed Decimal value of a numeric text field and
drives its parse/format/validate lifecycle across focus transitions. It is
toolkit independent: a hosting widget forwards focus changes and proposed
edits, and reads back the display text.

States:
    EDITING: Raw locale numeral without unit. Each proposed edit is checked
        against the MaskGrammar before it replaces the text.
    COMMITTED: Canonical text rendered through the number pattern, with unit.

Transitions:
    COMMITTED -> EDITING on notify_focus_gained()
    EDITING -> COMMITTED on notify_focus_lost(), which commits pending text

Every setter that touches pattern, grammar or locale builds fresh
FormatSpec / MaskGrammar / LocaleNumberFormatter values and then re-runs
commit(), so the display always reflects the current settings.

Thread Safety:
    Not thread-safe. All calls must come from the thread that delivers the
    host's focus and keystroke events.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any

from babel import Locale

from decimalfield.constants import (
    MAX_INTEGER_DIGITS,
    MIN_FRACTION_DIGITS,
    MIN_INTEGER_DIGITS,
)
from decimalfield.diagnostics import (
    ConfigurationError,
    ErrorTemplate,
    FormattingError,
    InvalidValueError,
)
from decimalfield.enums import FieldState, SignPolicy, StandardType
from decimalfield.locale_utils import locale_code_of, system_numeric_locale
from decimalfield.parsing import is_valid_decimal

from .format_spec import FormatSpec
from .locale_formatter import LocaleNumberFormatter
from .mask_grammar import MaskGrammar

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["FieldConfig", "FieldValue", "ValueField", "to_decimal"]

logger = logging.getLogger(__name__)

type FieldValue = Decimal | int | float | str | None
"""Values accepted for programmatic assignment."""


def to_decimal(value: FieldValue) -> Decimal | None:
    """Convert a programmatic value to a field Decimal.

    Floats go through their shortest repr, so 0.1 becomes Decimal('0.1').
    Empty strings mean "no value".

    Raises:
        InvalidValueError: For booleans, unparseable strings, NaN or infinity

    Examples:
        >>> to_decimal(0.1)
        Decimal('0.1')
        >>> to_decimal("") is None
        True
    """
    match value:
        case None:
            return None
        case bool():
            raise InvalidValueError(ErrorTemplate.value_invalid(value))
        case Decimal():
            result = value
        case int():
            result = Decimal(value)
        case float():
            result = Decimal(repr(value))
        case str():
            text = value.strip()
            if not text:
                return None
            try:
                result = Decimal(text)
            except InvalidOperation:
                raise InvalidValueError(ErrorTemplate.value_invalid(value)) from None
        case _:
            raise InvalidValueError(ErrorTemplate.value_invalid(value))

    if not is_valid_decimal(result):
        raise InvalidValueError(ErrorTemplate.value_not_finite(value))
    return result


def _clamp(minimum: int, maximum: int | None, value: int) -> int:
    if value < minimum:
        return minimum
    if maximum is not None and value > maximum:
        return maximum
    return value


def _require_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(ErrorTemplate.config_invalid_type(name, "int", value))


@dataclass(frozen=True, slots=True)
class FieldConfig:
    """Explicit, typed construction parameters for a ValueField.

    Types are validated at construction; out-of-range precision is not an
    error here because ValueField clamps it.

    Attributes:
        format: Display description (pattern, units, prompt)
        value: Initial value, or None for an empty field
        integer_digit_cap: Maximum integer digits (clamped to [1, 24])
        fraction_digit_count: Fixed fraction digits (clamped to >= 0)
        locale: Locale code or Babel Locale; None detects the system locale
        sign_policy: Whether negative values are kept
        prompt_text: Placeholder override; None uses format.prompt_text

    Examples:
        >>> config = FieldConfig.standard(StandardType.EURO, fraction_digit_count=2)
        >>> config.format.unit_singular
        'EUR'
    """

    format: FormatSpec = field(default_factory=FormatSpec)
    value: FieldValue = None
    integer_digit_cap: int = MAX_INTEGER_DIGITS
    fraction_digit_count: int = MIN_FRACTION_DIGITS
    locale: str | Locale | None = None
    sign_policy: SignPolicy = SignPolicy.NON_NEGATIVE_ONLY
    prompt_text: str | None = None

    def __post_init__(self) -> None:
        """Validate field types.

        Raises:
            ConfigurationError: If a field carries a value of the wrong type
        """
        if not isinstance(self.format, FormatSpec):
            raise ConfigurationError(
                ErrorTemplate.config_invalid_type("format", "FormatSpec", self.format)
            )
        _require_int("integer_digit_cap", self.integer_digit_cap)
        _require_int("fraction_digit_count", self.fraction_digit_count)
        if not isinstance(self.sign_policy, SignPolicy):
            try:
                object.__setattr__(self, "sign_policy", SignPolicy(self.sign_policy))
            except ValueError:
                raise ConfigurationError(
                    ErrorTemplate.config_invalid_type("sign_policy", "SignPolicy", self.sign_policy)
                ) from None
        if self.locale is not None and not isinstance(self.locale, (str, Locale)):
            raise ConfigurationError(
                ErrorTemplate.config_invalid_type("locale", "str or babel.Locale", self.locale)
            )
        if self.prompt_text is not None and not isinstance(self.prompt_text, str):
            raise ConfigurationError(
                ErrorTemplate.config_invalid_type("prompt_text", "str", self.prompt_text)
            )
        try:
            to_decimal(self.value)
        except InvalidValueError as e:
            raise ConfigurationError(e.diagnostic or str(e)) from e

    @classmethod
    def standard(cls, standard_type: StandardType, **overrides: Any) -> FieldConfig:
        """Seed a config from a standard FormatSpec preset."""
        return cls(format=FormatSpec.standard(standard_type), **overrides)


class ValueField:
    """Numeric field engine: value, precision, sign policy and locale.

    Examples:
        >>> vf = ValueField(FormatSpec.custom("0.00", "EUR"), 500, fraction_digit_count=2,
        ...                 locale="de_DE")
        >>> vf.display_text
        '500,00 EUR'
        >>> vf.notify_focus_gained()
        >>> vf.propose_edit("1234,5")
        True
        >>> vf.notify_focus_lost()
        >>> vf.value, vf.display_text
        (Decimal('1234.5'), '1234,50 EUR')
    """

    def __init__(
        self,
        format_spec: FormatSpec | None = None,
        value: FieldValue = None,
        *,
        integer_digit_cap: int = MAX_INTEGER_DIGITS,
        fraction_digit_count: int = MIN_FRACTION_DIGITS,
        locale: str | Locale | None = None,
        sign_policy: SignPolicy = SignPolicy.NON_NEGATIVE_ONLY,
        prompt_text: str | None = None,
    ) -> None:
        """Create a field; the arguments mirror FieldConfig."""
        config = FieldConfig(
            format=FormatSpec() if format_spec is None else format_spec,
            value=value,
            integer_digit_cap=integer_digit_cap,
            fraction_digit_count=fraction_digit_count,
            locale=locale,
            sign_policy=sign_policy,
            prompt_text=prompt_text,
        )
        self._sign_policy = config.sign_policy
        self._integer_digit_cap = self._clamped_integer_cap(config.integer_digit_cap)
        self._fraction_digit_count = self._clamped_fraction_count(config.fraction_digit_count)
        self._formatter = LocaleNumberFormatter.create(
            system_numeric_locale() if config.locale is None else config.locale
        )
        self._format = config.format.with_precision(self._fraction_digit_count)
        self._grammar = self._build_grammar()
        self._prompt_text = (
            config.format.prompt_text if config.prompt_text is None else config.prompt_text
        )

        self._value: Decimal | None = None
        self._pending: str | None = None
        self._text = ""

        initial = to_decimal(config.value)
        if initial is None:
            self._state = FieldState.EDITING
        else:
            self._state = FieldState.COMMITTED
            self.set_value(initial)

    @classmethod
    def from_config(cls, config: FieldConfig) -> ValueField:
        """Construct a field from an explicit configuration."""
        return cls(
            config.format,
            config.value,
            integer_digit_cap=config.integer_digit_cap,
            fraction_digit_count=config.fraction_digit_count,
            locale=config.locale,
            sign_policy=config.sign_policy,
            prompt_text=config.prompt_text,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(value={self._value!r}, display_text={self._text!r}, "
            f"state={self._state.value!r}, locale={self.locale!r})"
        )

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def value(self) -> Decimal | None:
        """Committed value; None when the field is empty."""
        return self._value

    @property
    def display_text(self) -> str:
        """Text the host widget should show."""
        return self._text

    @property
    def state(self) -> FieldState:
        return self._state

    @property
    def is_negative(self) -> bool:
        """True when a value is present and below zero (for conditional styling)."""
        return self._value is not None and self._value < 0

    @property
    def value_as_text(self) -> str | None:
        """Full-precision raw numeral of the value, or None when empty."""
        if self._value is None:
            return None
        return self._formatter.to_raw(self._value)

    @property
    def integer_digit_cap(self) -> int:
        return self._integer_digit_cap

    @property
    def fraction_digit_count(self) -> int:
        return self._fraction_digit_count

    @property
    def sign_policy(self) -> SignPolicy:
        return self._sign_policy

    @property
    def locale(self) -> str:
        """Locale code the field was configured with."""
        return self._formatter.locale_code

    @property
    def formatter(self) -> LocaleNumberFormatter:
        return self._formatter

    @property
    def format(self) -> FormatSpec:
        """Current FormatSpec; its pattern follows fraction_digit_count."""
        return self._format

    @property
    def edit_grammar(self) -> MaskGrammar:
        return self._grammar

    @property
    def prompt_text(self) -> str:
        """Placeholder shown while the field is empty."""
        return self._prompt_text

    @prompt_text.setter
    def prompt_text(self, text: str) -> None:
        self._prompt_text = text

    # ------------------------------------------------------------------
    # Host interface
    # ------------------------------------------------------------------

    def propose_edit(self, candidate: str) -> bool:
        """Accept or reject the complete text resulting from a keystroke.

        Only fields in the EDITING state take edits; the candidate must be
        accepted in full by the edit grammar.

        Returns:
            True if the candidate replaced the display text
        """
        if self._state is not FieldState.EDITING:
            logger.debug("Edit %r rejected: field is %s", candidate, self._state)
            return False
        if not self._grammar.accepts(candidate):
            logger.debug("Edit %r rejected by grammar %s", candidate, self._grammar.expression)
            return False
        self._pending = candidate
        self._text = candidate
        return True

    def notify_focus_gained(self) -> None:
        """Host widget gained editing focus."""
        self.on_edit_gained()

    def notify_focus_lost(self) -> None:
        """Host widget lost editing focus."""
        self.on_edit_lost()

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    def on_edit_gained(self) -> None:
        """Enter EDITING, showing the value as a raw locale numeral."""
        self._state = FieldState.EDITING
        self._pending = None
        self._render()

    def on_edit_lost(self) -> None:
        """Enter COMMITTED, committing whatever was typed.

        Emptied text clears the value; anything else goes through commit().
        """
        self._state = FieldState.COMMITTED
        if self._pending == "":
            self._pending = None
            self._value = None
            self._text = ""
            return
        self.commit()

    def commit(self) -> bool:
        """Apply pending text to the value and re-render.

        Pending text (typed since focus was gained) is parsed with the
        locale formatter; on success the sign policy is applied and the
        value replaced. On failure the typed text is discarded and the last
        valid value is rendered again. Never raises.

        Returns:
            True if pending text was applied to the value
        """
        applied = self._absorb_pending()
        self._render()
        return applied

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_value(self, value: FieldValue) -> None:
        """Assign a value programmatically, bypassing parsing.

        Applies the sign policy, drops any pending typed text and re-renders.

        Raises:
            InvalidValueError: For values that cannot be a field Decimal
        """
        self._value = self._apply_sign_policy(to_decimal(value))
        self._pending = None
        self._render()

    def set_text(self, text: str) -> bool:
        """Replace the text programmatically and commit it.

        A trailing unit label is ignored, so a previously displayed text can
        be fed back. Grouping separators are accepted. Empty text clears
        the value. On parse failure the previous rendering is restored.

        Returns:
            True if the text was applied to the value
        """
        self._pending = self._format.strip_unit(text)
        return self.commit()

    def set_fraction_digit_count(self, fraction_digit_count: int) -> None:
        """Change the fixed fraction digit count (clamped to >= 0)."""
        self._reconfigure(lambda: self._update_precision(None, fraction_digit_count))

    def set_integer_digit_cap(self, integer_digit_cap: int) -> None:
        """Change the integer digit cap (clamped to [1, 24])."""
        self._reconfigure(lambda: self._update_precision(integer_digit_cap, None))

    def set_precision(self, integer_digit_cap: int, fraction_digit_count: int) -> None:
        """Change both precision settings with a single commit."""
        self._reconfigure(lambda: self._update_precision(integer_digit_cap, fraction_digit_count))

    def set_locale(self, locale: str | Locale | None) -> None:
        """Switch locale; None detects the system locale."""

        def update() -> None:
            self._formatter = LocaleNumberFormatter.create(
                system_numeric_locale() if locale is None else locale
            )
            self._grammar = self._build_grammar()

        self._reconfigure(update)

    def set_sign_policy(self, sign_policy: SignPolicy) -> None:
        """Switch sign policy, clamping a negative value when forbidden."""

        def update() -> None:
            self._sign_policy = SignPolicy(sign_policy)
            self._value = self._apply_sign_policy(self._value)
            self._grammar = self._build_grammar()

        self._reconfigure(update)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _reconfigure(self, update: Callable[[], None]) -> None:
        # Pending text was typed under the old settings: read it with them.
        self._absorb_pending()
        update()
        self.commit()

    def _update_precision(
        self, integer_digit_cap: int | None, fraction_digit_count: int | None
    ) -> None:
        if integer_digit_cap is not None:
            self._integer_digit_cap = self._clamped_integer_cap(integer_digit_cap)
        if fraction_digit_count is not None:
            self._fraction_digit_count = self._clamped_fraction_count(fraction_digit_count)
            self._format = self._format.with_precision(self._fraction_digit_count)
        self._grammar = self._build_grammar()

    def _absorb_pending(self) -> bool:
        if self._pending is None:
            return False
        text, self._pending = self._pending, None
        if not text.strip():
            self._value = None
            return True

        parsed, errors = self._formatter.parse(text)
        if errors or not is_valid_decimal(parsed):
            logger.debug("Discarding uncommittable text %r: %s", text, errors[0] if errors else "")
            return False
        self._value = self._apply_sign_policy(parsed)
        return True

    def _render(self) -> None:
        value = self._value
        if value is None:
            self._text = ""
        elif self._state is FieldState.EDITING:
            self._text = self._formatter.to_raw(value, self._fraction_digit_count)
        else:
            unit = self._format.select_unit(value)
            try:
                self._text = self._formatter.format(value, self._format.pattern, unit)
            except FormattingError as e:
                logger.warning("%s; displaying %r", e, e.fallback_value)
                self._text = e.fallback_value

    def _apply_sign_policy(self, value: Decimal | None) -> Decimal | None:
        if value is None:
            return None
        if not value:
            # Signed zeros would render with a minus sign.
            return value.copy_abs()
        if self._sign_policy is SignPolicy.ALLOW_NEGATIVE or value > 0:
            return value
        logger.debug("Negative value %s clamped to 0 (%s)", value, self._sign_policy)
        return Decimal(0)

    def _build_grammar(self) -> MaskGrammar:
        return MaskGrammar(
            self._integer_digit_cap,
            self._fraction_digit_count,
            self._sign_policy,
            self._formatter.decimal_separator,
        )

    @staticmethod
    def _clamped_integer_cap(integer_digit_cap: int) -> int:
        clamped = _clamp(MIN_INTEGER_DIGITS, MAX_INTEGER_DIGITS, integer_digit_cap)
        if clamped != integer_digit_cap:
            logger.debug("Integer digit cap %d clamped to %d", integer_digit_cap, clamped)
        return clamped

    @staticmethod
    def _clamped_fraction_count(fraction_digit_count: int) -> int:
        clamped = _clamp(MIN_FRACTION_DIGITS, None, fraction_digit_count)
        if clamped != fraction_digit_count:
            logger.debug("Fraction digit count %d clamped to %d", fraction_digit_count, clamped)
        return clamped
