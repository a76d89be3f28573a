"""Тесты для CHECK 0: Input Shape

Покрытие:
- Обрезка краевых пробелов
- Пустой вход
- Пробелы внутри числа
- Классификация ARABIC / ELBONIAN
- Тип входа
"""

import pytest

from src.core.domain.numerals import NumeralForm
from src.validation.checks import Check00InputShape


@pytest.fixture
def check00():
    """CHECK 0 instance."""
    return Check00InputShape()


# =============================================================================
# ТЕСТЫ: нормализация
# =============================================================================


def test_check00_trims_surrounding_spaces(check00):
    """PASS: "   11   " → "11"."""
    result = check00.evaluate("   11   ")

    assert result.passed is True
    assert result.normalized == "11"
    assert result.form == NumeralForm.ARABIC


def test_check00_trims_tabs_and_newlines(check00):
    """PASS: табы и переводы строк по краям обрезаются."""
    result = check00.evaluate("\tXXJ\n")

    assert result.passed is True
    assert result.normalized == "XXJ"
    assert result.form == NumeralForm.ELBONIAN


# =============================================================================
# ТЕСТЫ: блокировки
# =============================================================================


@pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
def test_check00_empty_input_blocked(check00, raw):
    """BLOCK: пустой вход после обрезки."""
    result = check00.evaluate(raw)

    assert result.passed is False
    assert result.block_reason == "empty_input"
    assert result.form is None


@pytest.mark.parametrize("raw", ["9 9", "I I", " 1 2 ", "X\tX"])
def test_check00_interior_whitespace_blocked(check00, raw):
    """BLOCK: пробел внутри числа."""
    result = check00.evaluate(raw)

    assert result.passed is False
    assert result.block_reason == "improper_spacing"


def test_check00_unsupported_type_blocked(check00):
    """BLOCK: вход не str и не int."""
    result = check00.evaluate(3.5)

    assert result.passed is False
    assert result.block_reason == "unsupported_input_type"


def test_check00_bool_is_not_a_number(check00):
    """BLOCK: bool не приводится к числу."""
    result = check00.evaluate(True)

    assert result.passed is False
    assert result.block_reason == "unsupported_input_type"


# =============================================================================
# ТЕСТЫ: классификация
# =============================================================================


@pytest.mark.parametrize("raw", ["7394", "0", "+5", "-5", "007", "99999999999999"])
def test_check00_decimal_classified_arabic(check00, raw):
    """Цифры с опциональным знаком → ARABIC (границы не проверяются)."""
    result = check00.evaluate(raw)

    assert result.passed is True
    assert result.form == NumeralForm.ARABIC


@pytest.mark.parametrize("raw", ["NNMDYYYJI", "IM", "abc", "1.5", "12a", "+", "1_000"])
def test_check00_non_decimal_classified_elbonian(check00, raw):
    """Всё, что не десятичное целое → ELBONIAN."""
    result = check00.evaluate(raw)

    assert result.passed is True
    assert result.form == NumeralForm.ELBONIAN


def test_check00_int_input_rendered(check00):
    """int приводится через str()."""
    result = check00.evaluate(23)

    assert result.passed is True
    assert result.normalized == "23"
    assert result.form == NumeralForm.ARABIC
