"""CHECK 3: Кратность символов

Правила:
- Major символы (M, C, X, I) - не более 2 вхождений
- Minor символы (N, D, Y, J) - не более 3 вхождений

Порядок: сначала все major, затем все minor (первое нарушение блокирует).

Интеграция:
- Использует счётчики CHECK 2 (должен быть PASS)
"""

from dataclasses import dataclass

from src.core.domain.numerals import (
    MAJOR_SYMBOL_CAP,
    MAJOR_SYMBOLS,
    MINOR_SYMBOL_CAP,
    MINOR_SYMBOLS,
    Symbol,
)
from src.validation.checks.check_02_alphabet import Check02Result


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Check03Result:
    """Результат CHECK 3."""

    passed: bool
    block_reason: str

    # Символ, превысивший лимит
    offending_symbol: Symbol | None
    offending_count: int

    # Детали
    details: str


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class Check03Config:
    """Конфигурация CHECK 3."""

    major_cap: int = MAJOR_SYMBOL_CAP
    minor_cap: int = MINOR_SYMBOL_CAP


# =============================================================================
# CHECK 3
# =============================================================================


class Check03Multiplicity:
    """CHECK 3: Кратность символов.

    Порядок проверок:
    1. CHECK 2 блокировка (должен быть PASS)
    2. Лимит major символов
    3. Лимит minor символов
    """

    def __init__(self, config: Check03Config | None = None):
        self.config = config or Check03Config()

    def evaluate(self, check02_result: Check02Result) -> Check03Result:
        """Оценка CHECK 3.

        Args:
            check02_result: результат CHECK 2 (счётчики символов)

        Returns:
            Check03Result с решением
        """
        if not check02_result.passed:
            return Check03Result(
                passed=False,
                block_reason=f"check02_blocked: {check02_result.block_reason}",
                offending_symbol=None,
                offending_count=0,
                details=f"CHECK 2 blocked: {check02_result.details}",
            )

        counts = check02_result.counts

        for symbols, cap, reason in (
            (MAJOR_SYMBOLS, self.config.major_cap, "major_symbol_cap_exceeded"),
            (MINOR_SYMBOLS, self.config.minor_cap, "minor_symbol_cap_exceeded"),
        ):
            for symbol in symbols:
                count = counts[symbol.value]
                if count > cap:
                    listed = ",".join(s.value for s in symbols)
                    return Check03Result(
                        passed=False,
                        block_reason=reason,
                        offending_symbol=symbol,
                        offending_count=count,
                        details=(
                            f"More than {cap} of one of the following: [{listed}] "
                            f"({symbol.value} occurs {count} times)"
                        ),
                    )

        return Check03Result(
            passed=True,
            block_reason="",
            offending_symbol=None,
            offending_count=0,
            details="PASS: multiplicity within caps",
        )
