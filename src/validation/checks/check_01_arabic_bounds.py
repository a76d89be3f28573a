"""CHECK 1: Границы десятичного числа

Проверяет, что десятичный вход представим в Elbonian:
- value <= 0 → блокировка
- value >= 10000 → блокировка

Интеграция:
- Использует результат CHECK 0 (должен быть PASS с формой ARABIC)
"""

from dataclasses import dataclass

from src.core.domain.numerals import (
    ARABIC_MAX_VALUE_EXCLUSIVE,
    ARABIC_MIN_VALUE,
    NumeralForm,
    parse_arabic,
)
from src.validation.checks.check_00_input_shape import Check00Result


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Check01Result:
    """Результат CHECK 1."""

    passed: bool
    block_reason: str

    # Разобранное значение (None если CHECK 0 заблокирован)
    value: int | None

    # Детали
    details: str


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class Check01Config:
    """Конфигурация CHECK 1.

    Диапазон [min_value, max_value_exclusive).
    """

    min_value: int = ARABIC_MIN_VALUE
    max_value_exclusive: int = ARABIC_MAX_VALUE_EXCLUSIVE


# =============================================================================
# CHECK 1
# =============================================================================


class Check01ArabicBounds:
    """CHECK 1: Границы десятичного числа."""

    def __init__(self, config: Check01Config | None = None):
        """Инициализация CHECK 1.

        Args:
            config: конфигурация check (опционально, используется default)
        """
        self.config = config or Check01Config()

    def evaluate(self, check00_result: Check00Result) -> Check01Result:
        """Оценка CHECK 1.

        Args:
            check00_result: результат CHECK 0 (нормализованная строка, форма)

        Returns:
            Check01Result с разобранным значением
        """
        if not check00_result.passed:
            return Check01Result(
                passed=False,
                block_reason=f"check00_blocked: {check00_result.block_reason}",
                value=None,
                details=f"CHECK 0 blocked: {check00_result.details}",
            )

        if check00_result.form != NumeralForm.ARABIC:
            return Check01Result(
                passed=False,
                block_reason="not_arabic_form",
                value=None,
                details=f"Expected arabic form, got {check00_result.form}",
            )

        low = self.config.min_value
        high = self.config.max_value_exclusive
        max_digits = max(len(str(abs(low))), len(str(high)))
        value = parse_arabic(check00_result.normalized, max_digits)

        if value is None:
            return Check01Result(
                passed=False,
                block_reason="arabic_out_of_bounds",
                value=None,
                details=(
                    f"Out of Arabic bounds: more than {max_digits} significant digits, "
                    f"not in [{low}, {high - 1}]"
                ),
            )

        if value < low or value >= high:
            return Check01Result(
                passed=False,
                block_reason="arabic_out_of_bounds",
                value=value,
                details=f"Out of Arabic bounds: {value} not in [{low}, {high - 1}]",
            )

        return Check01Result(
            passed=True,
            block_reason="",
            value=value,
            details=f"PASS: {value} within [{low}, {high - 1}]",
        )
