"""CHECK 4: Carry rule

Если minor символ встречается ровно 3 раза, парный major символ на разряд
ниже запрещён: N↔M, D↔C, Y↔X, J↔I (3 minor уже равны 9 единицам major).

Пары проверяются независимо, в порядке убывания разряда.

Интеграция:
- Использует результат CHECK 3 (должен быть PASS)
- Использует счётчики CHECK 2
"""

from dataclasses import dataclass

from src.core.domain.numerals import CARRY_PAIRS, CARRY_THRESHOLD, Symbol
from src.validation.checks.check_02_alphabet import Check02Result
from src.validation.checks.check_03_multiplicity import Check03Result


@dataclass(frozen=True)
class Check04Result:
    """Результат CHECK 4."""

    passed: bool
    block_reason: str

    # Нарушенная пара (minor, major)
    violated_pair: tuple[Symbol, Symbol] | None

    details: str


@dataclass(frozen=True)
class Check04Config:
    """Конфигурация CHECK 4."""

    carry_threshold: int = CARRY_THRESHOLD


class Check04CarryRule:
    """CHECK 4: Carry rule для пар minor/major."""

    def __init__(self, config: Check04Config | None = None):
        self.config = config or Check04Config()

    def evaluate(
        self,
        check02_result: Check02Result,
        check03_result: Check03Result,
    ) -> Check04Result:
        """Оценка CHECK 4.

        Args:
            check02_result: результат CHECK 2 (счётчики символов)
            check03_result: результат CHECK 3 (кратность)

        Returns:
            Check04Result с решением
        """
        if not check03_result.passed:
            return Check04Result(
                passed=False,
                block_reason=f"check03_blocked: {check03_result.block_reason}",
                violated_pair=None,
                details=f"CHECK 3 blocked: {check03_result.details}",
            )

        counts = check02_result.counts

        for minor, major in CARRY_PAIRS:
            if counts[minor.value] == self.config.carry_threshold and counts[major.value] > 0:
                article = "an" if major.value in "MXI" else "a"
                return Check04Result(
                    passed=False,
                    block_reason="carry_rule_violation",
                    violated_pair=(minor, major),
                    details=(
                        f"Can't have {article} {major.value} if you have "
                        f"{self.config.carry_threshold} {minor.value}'s"
                    ),
                )

        return Check04Result(
            passed=True,
            block_reason="",
            violated_pair=None,
            details="PASS: carry rule satisfied",
        )
