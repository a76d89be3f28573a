"""CHECK 0: Нормализация и классификация входа

Проверяет форму входной строки:
- Обрезка пробелов по краям
- Пустая строка → блокировка
- Пробелы внутри числа → блокировка ("9 9" нельзя, " 99 " можно)
- Классификация: десятичное целое (цифры, опциональный знак) → ARABIC,
  иначе → ELBONIAN

Классификация чисто синтаксическая, границы не проверяются.
"""

import re
from dataclasses import dataclass
from typing import Any, Final

from src.core.domain.numerals import NumeralForm


# =============================================================================
# CONSTANTS
# =============================================================================

# Десятичное целое: ASCII-цифры с опциональным знаком
ARABIC_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Check00Result:
    """Результат CHECK 0."""

    passed: bool
    block_reason: str

    # Нормализованный вход
    normalized: str
    form: NumeralForm | None

    # Детали
    details: str


# =============================================================================
# CHECK 0
# =============================================================================


class Check00InputShape:
    """CHECK 0: Нормализация и классификация входа.

    Порядок проверок:
    1. Тип входа (str или int)
    2. Обрезка краевых пробелов, пустая строка
    3. Пробелы внутри числа
    4. Классификация ARABIC / ELBONIAN
    """

    def __init__(self):
        """CHECK 0 не требует зависимостей (stateless)."""
        pass

    def evaluate(self, raw: Any) -> Check00Result:
        """Оценка CHECK 0.

        Args:
            raw: исходный вход (str; int допускается и приводится через str())

        Returns:
            Check00Result с нормализованной строкой и нотацией
        """
        # 1. Тип входа (bool - подкласс int, но числом не является)
        if isinstance(raw, int) and not isinstance(raw, bool):
            raw = str(raw)

        if not isinstance(raw, str):
            return Check00Result(
                passed=False,
                block_reason="unsupported_input_type",
                normalized="",
                form=None,
                details=f"Unsupported input type: {type(raw).__name__}",
            )

        # 2. Обрезка и пустая строка
        normalized = raw.strip()

        if not normalized:
            return Check00Result(
                passed=False,
                block_reason="empty_input",
                normalized="",
                form=None,
                details="No input",
            )

        # 3. Пробелы внутри числа
        if any(ch.isspace() for ch in normalized):
            return Check00Result(
                passed=False,
                block_reason="improper_spacing",
                normalized=normalized,
                form=None,
                details=f"Improper spacing in {normalized!r}",
            )

        # 4. Классификация
        form = self._classify(normalized)

        return Check00Result(
            passed=True,
            block_reason="",
            normalized=normalized,
            form=form,
            details=f"PASS: {normalized!r} classified as {form.value}",
        )

    def _classify(self, normalized: str) -> NumeralForm:
        """Определение нотации по синтаксису строки.

        Args:
            normalized: обрезанная строка без пробелов

        Returns:
            ARABIC если строка - десятичное целое, иначе ELBONIAN
        """
        if ARABIC_PATTERN.fullmatch(normalized):
            return NumeralForm.ARABIC
        return NumeralForm.ELBONIAN
