"""
Contract Validation Module

Модуль для валидации JSON контрактов конвертера.
"""

from .validators import (
    ContractValidator,
    ConversionRecordValidator,
    SchemaLoader,
    validate_conversion_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConversionRecordValidator",
    # Functions
    "validate_conversion_record",
]
