"""Converter - конвертер чисел между нотациями Elbonian и Arabic.

- Валидация при создании (fail-fast), immutable после успеха
- to_arabic / to_elbonian / get_number
"""

from .elbonian_arabic import ElbonianArabicConverter

__all__ = [
    "ElbonianArabicConverter",
]
