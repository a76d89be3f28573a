"""
ElbonianArabicConverter - конвертер Elbonian ↔ Arabic

Immutable Pydantic модель, хранящая одну провалидированную и обрезанную
строку (Elbonian или Arabic). Валидация выполняется один раз при создании:
экземпляр либо создан полностью валидным, либо не создан вовсе.

Допустимо: " 99 " (пробелы по краям). Недопустимо: "9 9" (пробел внутри).
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, model_validator

from src.core.domain.numerals import (
    NumeralForm,
    arabic_to_elbonian,
    elbonian_to_arabic,
    parse_arabic,
)
from src.validation.pipeline import NumeralValidationPipeline


# Pipeline без состояния, общий для всех экземпляров
_PIPELINE = NumeralValidationPipeline()


class ElbonianArabicConverter(BaseModel):
    """
    Конвертер числа в нотации Elbonian или Arabic.

    Raises (при создании):
        MalformedNumberError: Elbonian-запись нарушает правила системы,
            либо вход пустой / содержит пробелы внутри числа
        ValueOutOfBoundsError: Arabic-число не представимо в Elbonian
    """

    number: str = Field(..., min_length=1, description="Обрезанная входная строка")
    form: NumeralForm = Field(..., description="Нотация входной строки")

    model_config = {"frozen": True}

    def __init__(self, number: Any, **data: Any):
        super().__init__(number=number, **data)

    @model_validator(mode="before")
    @classmethod
    def validate_number(cls, data: Any) -> dict[str, Any]:
        """
        Классификация и валидация входа через NumeralValidationPipeline.

        Форма всегда определяется заново, переданное значение form игнорируется.
        """
        raw = data.get("number") if isinstance(data, dict) else data

        verdict = _PIPELINE.evaluate(raw)
        verdict.raise_for_rejection()

        return {"number": verdict.normalized, "form": verdict.form}

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> "ElbonianArabicConverter":
        """
        Копия конвертера.

        С update новое значение number проходит полную валидацию, form
        определяется заново. Без update - обычная копия.

        Raises:
            MalformedNumberError, ValueOutOfBoundsError: update с невалидным number
        """
        if update:
            return type(self).model_validate({"number": update.get("number", self.number)})
        return super().model_copy(deep=deep)

    def to_arabic(self) -> int:
        """
        Значение в десятичной записи.

        Returns:
            Целое в [1, 9999]
        """
        if self.form == NumeralForm.ARABIC:
            return parse_arabic(self.number)
        return elbonian_to_arabic(self.number)

    def to_elbonian(self) -> str:
        """
        Каноническая запись Elbonian.

        Для Elbonian-входа значение пересчитывается жадно, поэтому результат
        всегда канонический.
        """
        return arabic_to_elbonian(self.to_arabic())

    def get_number(self) -> str:
        """Обрезанная входная строка в том виде, в каком она сохранена."""
        return self.number

    def to_record(self) -> dict[str, Any]:
        """
        Запись конверсии для контракта conversion_record.

        Returns:
            {"number", "form", "arabic", "elbonian"}
        """
        return {
            "number": self.number,
            "form": self.form.value,
            "arabic": self.to_arabic(),
            "elbonian": self.to_elbonian(),
        }
