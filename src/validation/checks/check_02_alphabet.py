"""CHECK 2: Алфавит Elbonian

Проверяет, что каждый символ входа - один из восьми символов
(N, M, D, C, Y, X, J, I), и подсчитывает вхождения каждого символа.

Счётчики используются в CHECK 3 (кратность) и CHECK 4 (carry rule).
"""

from dataclasses import dataclass, field

from src.core.domain.numerals import SYMBOL_TABLE, NumeralForm, is_symbol
from src.validation.checks.check_00_input_shape import Check00Result


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Check02Result:
    """Результат CHECK 2."""

    passed: bool
    block_reason: str

    # Проверенная строка и счётчики символов
    text: str
    counts: dict[str, int] = field(default_factory=dict)

    # Первый недопустимый символ
    invalid_char: str | None = None

    # Детали
    details: str = ""


# =============================================================================
# CHECK 2
# =============================================================================


class Check02Alphabet:
    """CHECK 2: Алфавит Elbonian и подсчёт символов."""

    def evaluate(self, check00_result: Check00Result) -> Check02Result:
        """Оценка CHECK 2.

        Args:
            check00_result: результат CHECK 0 (должен быть PASS с формой ELBONIAN)

        Returns:
            Check02Result со счётчиками всех восьми символов
        """
        if not check00_result.passed:
            return Check02Result(
                passed=False,
                block_reason=f"check00_blocked: {check00_result.block_reason}",
                text="",
                details=f"CHECK 0 blocked: {check00_result.details}",
            )

        if check00_result.form != NumeralForm.ELBONIAN:
            return Check02Result(
                passed=False,
                block_reason="not_elbonian_form",
                text=check00_result.normalized,
                details=f"Expected elbonian form, got {check00_result.form}",
            )

        text = check00_result.normalized
        counts = {symbol.value: 0 for symbol, _ in SYMBOL_TABLE}

        for ch in text:
            if not is_symbol(ch):
                return Check02Result(
                    passed=False,
                    block_reason="invalid_numeral",
                    text=text,
                    counts=counts,
                    invalid_char=ch,
                    details=f"Invalid numeral used: {ch!r} in {text!r}",
                )
            counts[ch] += 1

        return Check02Result(
            passed=True,
            block_reason="",
            text=text,
            counts=counts,
            details=f"PASS: {len(text)} numerals",
        )
