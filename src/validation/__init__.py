"""Validation - система проверок входа конвертера.

- CHECK 0-5 с фиксированным порядком
- Pipeline собирает результаты в единый NumeralVerdict
"""

from .pipeline import NumeralValidationConfig, NumeralValidationPipeline, NumeralVerdict

__all__ = [
    "NumeralValidationPipeline",
    "NumeralValidationConfig",
    "NumeralVerdict",
]
