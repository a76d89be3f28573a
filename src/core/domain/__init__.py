"""
Domain models and value objects.

Contains the Elbonian numeral table, numeral errors and pure conversions.
"""

from src.core.domain.numerals import (
    ARABIC_MAX_VALUE_EXCLUSIVE,
    ARABIC_MIN_VALUE,
    CARRY_PAIRS,
    CARRY_THRESHOLD,
    MAJOR_SYMBOL_CAP,
    MAJOR_SYMBOLS,
    MINOR_SYMBOL_CAP,
    MINOR_SYMBOLS,
    SYMBOL_TABLE,
    SYMBOL_VALUES,
    MalformedNumberError,
    NumeralError,
    NumeralForm,
    Symbol,
    ValueOutOfBoundsError,
    arabic_to_elbonian,
    elbonian_to_arabic,
    is_symbol,
    parse_arabic,
    symbol_value,
    validate_arabic_value,
)

__all__ = [
    # Constants
    "ARABIC_MIN_VALUE",
    "ARABIC_MAX_VALUE_EXCLUSIVE",
    "MAJOR_SYMBOL_CAP",
    "MINOR_SYMBOL_CAP",
    "CARRY_THRESHOLD",
    "SYMBOL_TABLE",
    "SYMBOL_VALUES",
    "MAJOR_SYMBOLS",
    "MINOR_SYMBOLS",
    "CARRY_PAIRS",
    # Enums
    "NumeralForm",
    "Symbol",
    # Errors
    "NumeralError",
    "MalformedNumberError",
    "ValueOutOfBoundsError",
    # Conversions
    "is_symbol",
    "symbol_value",
    "parse_arabic",
    "validate_arabic_value",
    "arabic_to_elbonian",
    "elbonian_to_arabic",
]
