"""Checks - индивидуальные проверки валидации числа.

- CHECK 0: Нормализация / пустой вход / пробелы / классификация
- CHECK 1: Границы десятичного числа
- CHECK 2: Алфавит Elbonian и счётчики символов
- CHECK 3: Кратность major/minor символов
- CHECK 4: Carry rule
- CHECK 5: Порядок символов
"""

from .check_00_input_shape import Check00InputShape, Check00Result
from .check_01_arabic_bounds import Check01ArabicBounds, Check01Result, Check01Config
from .check_02_alphabet import Check02Alphabet, Check02Result
from .check_03_multiplicity import Check03Multiplicity, Check03Result, Check03Config
from .check_04_carry_rule import Check04CarryRule, Check04Result, Check04Config
from .check_05_ordering import Check05Ordering, Check05Result

__all__ = [
    "Check00InputShape",
    "Check00Result",
    "Check01ArabicBounds",
    "Check01Result",
    "Check01Config",
    "Check02Alphabet",
    "Check02Result",
    "Check03Multiplicity",
    "Check03Result",
    "Check03Config",
    "Check04CarryRule",
    "Check04Result",
    "Check04Config",
    "Check05Ordering",
    "Check05Result",
]
