"""Numeral Validation Pipeline - последовательный запуск проверок.

Фиксированный порядок:
- CHECK 0 (форма входа) для любого входа
- ARABIC: CHECK 1 (границы)
- ELBONIAN: CHECK 2 (алфавит) → CHECK 3 (кратность) → CHECK 4 (carry) → CHECK 5 (порядок)

Проверки не бросают исключений. Pipeline возвращает NumeralVerdict;
исключение формируется только в raise_for_rejection().
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from src.core.domain.numerals import (
    MalformedNumberError,
    NumeralError,
    NumeralForm,
    ValueOutOfBoundsError,
)
from src.validation.checks import (
    Check00InputShape,
    Check01ArabicBounds,
    Check01Config,
    Check02Alphabet,
    Check03Config,
    Check03Multiplicity,
    Check04CarryRule,
    Check04Config,
    Check05Ordering,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NumeralValidationConfig:
    """Конфигурация всех проверок pipeline."""

    check01: Check01Config = field(default_factory=Check01Config)
    check03: Check03Config = field(default_factory=Check03Config)
    check04: Check04Config = field(default_factory=Check04Config)


@dataclass(frozen=True)
class NumeralVerdict:
    """Итог валидации входа."""

    accepted: bool
    form: NumeralForm | None
    normalized: str

    # Тип ошибки: MalformedNumberError / ValueOutOfBoundsError (None если accepted)
    error_kind: type[NumeralError] | None
    block_reason: str

    # Проверка, заблокировавшая вход ("check00".."check05")
    failed_check: str | None

    details: str

    def raise_for_rejection(self) -> None:
        """Бросает исключение, соответствующее отказу.

        Raises:
            MalformedNumberError: нарушены правила записи
            ValueOutOfBoundsError: десятичное значение вне диапазона
        """
        if self.accepted:
            return
        error_kind = self.error_kind or MalformedNumberError
        raise error_kind(self.details, block_reason=self.block_reason)


class NumeralValidationPipeline:
    """Pipeline валидации входа конвертера.

    Stateless после инициализации: один экземпляр можно разделять между
    любым числом конвертеров.
    """

    def __init__(self, config: NumeralValidationConfig | None = None):
        self.config = config or NumeralValidationConfig()
        self.check00 = Check00InputShape()
        self.check01 = Check01ArabicBounds(self.config.check01)
        self.check02 = Check02Alphabet()
        self.check03 = Check03Multiplicity(self.config.check03)
        self.check04 = Check04CarryRule(self.config.check04)
        self.check05 = Check05Ordering()

    def evaluate(self, raw: Any) -> NumeralVerdict:
        """Прогон всех проверок для входа.

        Args:
            raw: исходный вход (str или int)

        Returns:
            NumeralVerdict
        """
        r00 = self.check00.evaluate(raw)
        if not r00.passed:
            return self._reject(r00.normalized, None, MalformedNumberError, "check00", r00.block_reason, r00.details)

        if r00.form == NumeralForm.ARABIC:
            r01 = self.check01.evaluate(r00)
            if not r01.passed:
                return self._reject(
                    r00.normalized, r00.form, ValueOutOfBoundsError, "check01", r01.block_reason, r01.details
                )
            return self._accept(r00.normalized, r00.form)

        r02 = self.check02.evaluate(r00)
        r03 = self.check03.evaluate(r02)
        r04 = self.check04.evaluate(r02, r03)
        r05 = self.check05.evaluate(r02, r04)

        # Первая заблокировавшая проверка определяет причину
        for name, result in (("check02", r02), ("check03", r03), ("check04", r04), ("check05", r05)):
            if not result.passed:
                return self._reject(
                    r00.normalized, r00.form, MalformedNumberError, name, result.block_reason, result.details
                )

        return self._accept(r00.normalized, r00.form)

    def is_valid(self, raw: Any) -> bool:
        """Проверка входа без exception."""
        return self.evaluate(raw).accepted

    def _accept(self, normalized: str, form: NumeralForm) -> NumeralVerdict:
        return NumeralVerdict(
            accepted=True,
            form=form,
            normalized=normalized,
            error_kind=None,
            block_reason="",
            failed_check=None,
            details=f"PASS: {normalized!r} accepted as {form.value}",
        )

    def _reject(
        self,
        normalized: str,
        form: NumeralForm | None,
        error_kind: type[NumeralError],
        failed_check: str,
        block_reason: str,
        details: str,
    ) -> NumeralVerdict:
        logger.debug("Rejected %r at %s: %s (%s)", normalized, failed_check, block_reason, details)
        return NumeralVerdict(
            accepted=False,
            form=form,
            normalized=normalized,
            error_kind=error_kind,
            block_reason=block_reason,
            failed_check=failed_check,
            details=details,
        )
