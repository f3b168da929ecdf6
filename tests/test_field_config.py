"""Tests for FieldConfig - typed, validated field construction."""

from __future__ import annotations

import dataclasses
from decimal import Decimal

import pytest
from babel import Locale

from decimalfield import FieldConfig, ValueField
from decimalfield.diagnostics import ConfigurationError, DiagnosticCode, ErrorCategory
from decimalfield.enums import FieldState, SignPolicy, StandardType
from decimalfield.runtime.format_spec import FormatSpec


class TestFieldConfigValidation:
    """Test __post_init__ type validation."""

    def test_defaults(self) -> None:
        config = FieldConfig()
        assert config.format == FormatSpec()
        assert config.value is None
        assert config.integer_digit_cap == 24
        assert config.fraction_digit_count == 0
        assert config.locale is None
        assert config.sign_policy is SignPolicy.NON_NEGATIVE_ONLY
        assert config.prompt_text is None

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"format": "0.00"},
            {"integer_digit_cap": "5"},
            {"integer_digit_cap": True},
            {"fraction_digit_count": 2.0},
            {"sign_policy": "sometimes"},
            {"locale": 42},
            {"prompt_text": 7},
        ],
    )
    def test_wrong_types_rejected(self, kwargs: dict[str, object]) -> None:
        """Wrongly typed fields raise ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            FieldConfig(**kwargs)  # type: ignore[arg-type]

        error = exc_info.value
        assert error.category is ErrorCategory.CONFIGURATION
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.CONFIG_INVALID_TYPE

    @pytest.mark.parametrize("value", [True, "abc", float("nan"), Decimal("Infinity")])
    def test_invalid_values_rejected(self, value: object) -> None:
        """Values a field cannot hold are configuration errors."""
        with pytest.raises(ConfigurationError):
            FieldConfig(value=value)  # type: ignore[arg-type]

    def test_configuration_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="integer_digit_cap"):
            FieldConfig(integer_digit_cap="many")  # type: ignore[arg-type]

    def test_sign_policy_string_coerced(self) -> None:
        """The enum's string value is accepted."""
        config = FieldConfig(sign_policy="allow_negative")  # type: ignore[arg-type]
        assert config.sign_policy is SignPolicy.ALLOW_NEGATIVE

    def test_out_of_range_precision_is_not_an_error(self) -> None:
        """Range is the field's concern (it clamps)."""
        config = FieldConfig(integer_digit_cap=99, fraction_digit_count=-1)
        assert config.integer_digit_cap == 99

    def test_babel_locale_accepted(self) -> None:
        config = FieldConfig(locale=Locale.parse("de_DE"))
        assert ValueField.from_config(config).locale == "de_DE"

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            FieldConfig().value = 1  # type: ignore[misc]


class TestFieldConfigStandard:
    """Test FieldConfig.standard() presets."""

    def test_seeds_format_from_preset(self) -> None:
        config = FieldConfig.standard(StandardType.DOLLAR, fraction_digit_count=2)
        assert config.format == FormatSpec.standard(StandardType.DOLLAR)
        assert config.fraction_digit_count == 2

    def test_overrides_validated(self) -> None:
        with pytest.raises(ConfigurationError):
            FieldConfig.standard(StandardType.KM, integer_digit_cap=None)


class TestFromConfig:
    """Test ValueField.from_config()."""

    def test_builds_configured_field(self) -> None:
        config = FieldConfig.standard(
            StandardType.EURO,
            value=Decimal("1234.5"),
            fraction_digit_count=2,
            locale="de_DE",
            sign_policy=SignPolicy.ALLOW_NEGATIVE,
            prompt_text="Price",
        )
        field = ValueField.from_config(config)

        assert field.state is FieldState.COMMITTED
        assert field.display_text == "1234,50 EUR"
        assert field.sign_policy is SignPolicy.ALLOW_NEGATIVE
        assert field.prompt_text == "Price"
        assert field.integer_digit_cap == 24

    def test_empty_config_builds_empty_field(self) -> None:
        field = ValueField.from_config(FieldConfig(locale="en_US"))
        assert field.value is None
        assert field.state is FieldState.EDITING
        assert field.prompt_text == ""
