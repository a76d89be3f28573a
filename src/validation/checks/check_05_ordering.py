"""CHECK 5: Порядок символов

Слева направо значение каждого символа >= значения следующего
(невозрастающая последовательность). Любое строгое возрастание блокирует.

Интеграция:
- Использует результат CHECK 4 (должен быть PASS)
- Строка берётся из CHECK 2 (алфавит уже проверен)
"""

from dataclasses import dataclass

from src.core.domain.numerals import symbol_value
from src.validation.checks.check_02_alphabet import Check02Result
from src.validation.checks.check_04_carry_rule import Check04Result


@dataclass(frozen=True)
class Check05Result:
    """Результат CHECK 5."""

    passed: bool
    block_reason: str

    # Позиция первого нарушения (индекс левого символа пары)
    violation_index: int | None

    details: str


class Check05Ordering:
    """CHECK 5: Невозрастающий порядок символов."""

    def evaluate(
        self,
        check02_result: Check02Result,
        check04_result: Check04Result,
    ) -> Check05Result:
        """Оценка CHECK 5.

        Args:
            check02_result: результат CHECK 2 (строка)
            check04_result: результат CHECK 4 (carry rule)

        Returns:
            Check05Result с решением
        """
        if not check04_result.passed:
            return Check05Result(
                passed=False,
                block_reason=f"check04_blocked: {check04_result.block_reason}",
                violation_index=None,
                details=f"CHECK 4 blocked: {check04_result.details}",
            )

        text = check02_result.text

        for i in range(len(text) - 1):
            left, right = text[i], text[i + 1]
            if symbol_value(left) < symbol_value(right):
                return Check05Result(
                    passed=False,
                    block_reason="improper_ordering",
                    violation_index=i,
                    details=f"Improper ordering of numerals: {left} before {right} at {i}",
                )

        return Check05Result(
            passed=True,
            block_reason="",
            violation_index=None,
            details="PASS: numerals in non-increasing order",
        )
