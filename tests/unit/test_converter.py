"""
Tests for ElbonianArabicConverter

Покрывает:
- Конверсии arabic ↔ elbonian
- Лимиты кратности, carry rule, порядок
- Пробелы и пустой вход
- Границы arabic
- Immutability (frozen=True)
- Валидация через model_validate
"""

import pytest
from pydantic import ValidationError

from src.converter import ElbonianArabicConverter
from src.core.domain.numerals import (
    MalformedNumberError,
    NumeralForm,
    ValueOutOfBoundsError,
)


class TestConversions:
    """Конверсии в обе стороны"""

    def test_elbonian_to_arabic_sample(self) -> None:
        assert ElbonianArabicConverter("I").to_arabic() == 1

    def test_elbonian_to_arabic_large(self) -> None:
        assert ElbonianArabicConverter("NNMDYYYJI").to_arabic() == 7394

    def test_arabic_to_elbonian_large(self) -> None:
        assert ElbonianArabicConverter("7394").to_elbonian() == "NNMDYYYJI"

    def test_arabic_to_elbonian_small(self) -> None:
        assert ElbonianArabicConverter("23").to_elbonian() == "XXJ"

    def test_arabic_form_to_arabic(self) -> None:
        """to_arabic для arabic-входа возвращает значение"""
        assert ElbonianArabicConverter(" 007 ").to_arabic() == 7

    def test_elbonian_form_to_elbonian(self) -> None:
        """to_elbonian для elbonian-входа возвращает каноническую запись"""
        assert ElbonianArabicConverter("YYYJJJ").to_elbonian() == "YYYJJJ"

    def test_roundtrip_full_range(self) -> None:
        """Инвариант: arabic → elbonian → arabic для всех v в [1, 9999]"""
        for value in range(1, 10_000):
            elbonian = ElbonianArabicConverter(value).to_elbonian()
            assert ElbonianArabicConverter(elbonian).to_arabic() == value


class TestMultiplicity:
    """Лимиты кратности символов"""

    @pytest.mark.parametrize(
        "text,expected",
        [("II", 2), ("MM", 2000), ("CC", 200), ("XX", 20), ("NNN", 9000), ("DDD", 900), ("YYY", 90), ("JJJ", 9)],
    )
    def test_at_cap_passes(self, text: str, expected: int) -> None:
        assert ElbonianArabicConverter(text).to_arabic() == expected

    @pytest.mark.parametrize("text", ["III", "MMM", "CCC", "XXX", "NNNN", "DDDD", "YYYY", "JJJJ"])
    def test_over_cap_fails(self, text: str) -> None:
        with pytest.raises(MalformedNumberError, match="More than"):
            ElbonianArabicConverter(text)

    @pytest.mark.parametrize("text", ["NNNM", "DDDC", "YYYX", "IJJJ"])
    def test_carry_rule_fails(self, text: str) -> None:
        with pytest.raises(MalformedNumberError, match="Can't have"):
            ElbonianArabicConverter(text)


class TestOrderingAndAlphabet:
    """Порядок и алфавит"""

    @pytest.mark.parametrize("text", ["IM", "NMDCYXIJ"])
    def test_improper_ordering(self, text: str) -> None:
        with pytest.raises(MalformedNumberError, match="Improper ordering"):
            ElbonianArabicConverter(text)

    @pytest.mark.parametrize("text", ["ABC", "xx", "1.5", "V"])
    def test_invalid_numeral(self, text: str) -> None:
        with pytest.raises(MalformedNumberError, match="Invalid numeral used"):
            ElbonianArabicConverter(text)


class TestSpacingAndBounds:
    """Пробелы, пустой вход, границы"""

    def test_surrounding_spaces_trimmed(self) -> None:
        converter = ElbonianArabicConverter("   11   ")
        assert converter.get_number() == "11"
        assert converter.number == "11"
        assert converter.form == NumeralForm.ARABIC

    @pytest.mark.parametrize("text", ["9 9", "I I"])
    def test_interior_space_fails(self, text: str) -> None:
        with pytest.raises(MalformedNumberError, match="Improper spacing"):
            ElbonianArabicConverter(text)

    @pytest.mark.parametrize("text", ["", "   ", "        "])
    def test_empty_fails(self, text: str) -> None:
        with pytest.raises(MalformedNumberError, match="No input"):
            ElbonianArabicConverter(text)

    @pytest.mark.parametrize("text", ["0", "10000", "-5", "123456789012345678901234567890"])
    def test_out_of_bounds(self, text: str) -> None:
        with pytest.raises(ValueOutOfBoundsError):
            ElbonianArabicConverter(text)

    def test_long_digit_string_out_of_bounds(self) -> None:
        """Строка длиннее лимита int() - ValueOutOfBoundsError, не ValidationError"""
        with pytest.raises(ValueOutOfBoundsError):
            ElbonianArabicConverter("9" * 5000)

    def test_long_leading_zeros(self) -> None:
        converter = ElbonianArabicConverter("0" * 5000 + "7")
        assert converter.to_arabic() == 7
        assert converter.to_elbonian() == "JJI"
        assert converter.get_number() == "0" * 5000 + "7"

    @pytest.mark.parametrize("text", ["1", "9999"])
    def test_bounds_inclusive(self, text: str) -> None:
        assert ElbonianArabicConverter(text).to_arabic() == int(text)


class TestModel:
    """Pydantic-поведение модели"""

    def test_converter_immutable(self) -> None:
        """Конвертер должен быть immutable (frozen=True)"""
        converter = ElbonianArabicConverter("XXJ")
        with pytest.raises(ValidationError):
            converter.number = "I"  # type: ignore[misc]

    def test_model_validate_runs_same_checks(self) -> None:
        converter = ElbonianArabicConverter.model_validate({"number": " XXJ "})
        assert converter.number == "XXJ"
        assert converter.form == NumeralForm.ELBONIAN

        with pytest.raises(MalformedNumberError):
            ElbonianArabicConverter.model_validate({"number": "IM"})

    def test_form_is_always_derived(self) -> None:
        """Переданная форма игнорируется"""
        converter = ElbonianArabicConverter("23", form=NumeralForm.ELBONIAN)
        assert converter.form == NumeralForm.ARABIC

    def test_errors_not_wrapped_in_validation_error(self) -> None:
        """Ошибки конвертера не оборачиваются pydantic"""
        with pytest.raises(ValueOutOfBoundsError) as exc_info:
            ElbonianArabicConverter("0")
        assert not isinstance(exc_info.value, ValidationError)

    def test_equal_inputs_compare_equal(self) -> None:
        assert ElbonianArabicConverter(" XXJ") == ElbonianArabicConverter("XXJ ")

    def test_model_copy_revalidates_update(self) -> None:
        """model_copy(update=...) проходит ту же валидацию, что и конструктор"""
        converter = ElbonianArabicConverter("XXJ")

        with pytest.raises(MalformedNumberError):
            converter.model_copy(update={"number": "IM"})
        with pytest.raises(ValueOutOfBoundsError):
            converter.model_copy(update={"number": "0"})

        copied = converter.model_copy(update={"number": " 23 "})
        assert copied.number == "23"
        assert copied.form == NumeralForm.ARABIC
        assert converter.number == "XXJ"

    def test_model_copy_without_update(self) -> None:
        converter = ElbonianArabicConverter("XXJ")
        assert converter.model_copy() == converter
        assert converter.model_copy(deep=True) == converter

    def test_to_record(self) -> None:
        assert ElbonianArabicConverter("23").to_record() == {
            "number": "23",
            "form": "arabic",
            "arabic": 23,
            "elbonian": "XXJ",
        }
