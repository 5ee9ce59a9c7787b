"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema контракта fraction.json:
- Загрузка схемы из package data и её валидность
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и constraints (min/enum/const)
- Интеграция с Pydantic моделью Fraction
"""

from importlib import resources

import pytest
from jsonschema import Draft202012Validator, ValidationError

from src.core.contracts import (
    fraction_validator,
    load_fraction_schema,
    validate_fraction,
)
from src.core.domain import Fraction, Sign


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_fraction():
    """Валидная сериализованная дробь -3/4."""
    return {"numerator": 3, "denominator": 4, "sign": "negative"}


# =============================================================================
# SCHEMA LOADING
# =============================================================================


class TestSchemaLoading:
    """Тесты для load_fraction_schema / fraction_validator"""

    def test_schema_shipped_as_package_data(self) -> None:
        """Схема лежит внутри пакета, а не в корне рабочей копии"""
        source = resources.files("src.core.contracts").joinpath("schema").joinpath(
            "fraction.json"
        )
        assert source.is_file()

    def test_load_fraction_schema(self) -> None:
        schema = load_fraction_schema()
        assert schema["title"] == "Fraction"
        assert set(schema["required"]) == {"numerator", "denominator", "sign"}
        Draft202012Validator.check_schema(schema)

    def test_schema_is_cached(self) -> None:
        assert load_fraction_schema() is load_fraction_schema()
        assert fraction_validator() is fraction_validator()


# =============================================================================
# FRACTION CONTRACT
# =============================================================================


class TestFractionContract:
    """Тесты для fraction.json"""

    def test_valid_data_passes(self, valid_fraction) -> None:
        validate_fraction(valid_fraction)
        assert fraction_validator().is_valid(valid_fraction)

    def test_missing_required_field(self, valid_fraction) -> None:
        del valid_fraction["sign"]
        with pytest.raises(ValidationError, match="'sign' is a required property"):
            validate_fraction(valid_fraction)

    def test_zero_denominator_rejected(self, valid_fraction) -> None:
        valid_fraction["denominator"] = 0
        with pytest.raises(ValidationError):
            validate_fraction(valid_fraction)

    def test_negative_magnitude_rejected(self, valid_fraction) -> None:
        valid_fraction["numerator"] = -3
        with pytest.raises(ValidationError):
            validate_fraction(valid_fraction)

    def test_string_numerator_rejected(self, valid_fraction) -> None:
        valid_fraction["numerator"] = "3"
        with pytest.raises(ValidationError):
            validate_fraction(valid_fraction)

    def test_unknown_sign_rejected(self, valid_fraction) -> None:
        valid_fraction["sign"] = "minus"
        with pytest.raises(ValidationError):
            validate_fraction(valid_fraction)

    def test_additional_properties_rejected(self, valid_fraction) -> None:
        valid_fraction["whole"] = 1
        with pytest.raises(ValidationError):
            validate_fraction(valid_fraction)

    def test_negative_zero_rejected(self) -> None:
        """Канонический ноль: numerator == 0 требует sign == positive"""
        with pytest.raises(ValidationError):
            validate_fraction({"numerator": 0, "denominator": 1, "sign": "negative"})
        validate_fraction({"numerator": 0, "denominator": 1, "sign": "positive"})

    def test_iter_errors_reports_all(self) -> None:
        errors = list(
            fraction_validator().iter_errors(
                {"numerator": -1, "denominator": 0, "sign": "minus"}
            )
        )
        assert len(errors) == 3


# =============================================================================
# ИНТЕГРАЦИЯ С PYDANTIC
# =============================================================================


class TestFractionModelIntegration:
    """Fraction.to_contract / Fraction.from_contract"""

    def test_to_contract(self) -> None:
        data = Fraction.new(-3, 4).to_contract()
        assert data == {"numerator": 3, "denominator": 4, "sign": "negative"}
        validate_fraction(data)

    def test_from_contract(self, valid_fraction) -> None:
        f = Fraction.from_contract(valid_fraction)
        assert f == Fraction.new(-3, 4)
        assert f.sign == Sign.NEGATIVE

    def test_round_trip_keeps_unsimplified_form(self) -> None:
        f = Fraction.new(2, 4)
        restored = Fraction.from_contract(f.to_contract())
        assert restored.as_integer_ratio_string() == "2/4"

    def test_from_contract_rejects_invalid(self) -> None:
        with pytest.raises(ValidationError):
            Fraction.from_contract({"numerator": 1, "denominator": 0, "sign": "positive"})
