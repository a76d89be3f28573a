"""
Numerals - Централизованная таблица символов Elbonian и конверсии

Единственный допустимый способ преобразований между:
- arabic (int, десятичная запись)
- elbonian (str, аддитивная запись из 8 символов)

Таблица символов - неизменяемые константы процесса, разделяемые всеми
экземплярами конвертера без синхронизации.
"""

from enum import Enum
from typing import Final


# =============================================================================
# ГРАНИЦЫ ПРЕДСТАВИМЫХ ЗНАЧЕНИЙ
# =============================================================================
# Минимальное значение, представимое в обеих нотациях
ARABIC_MIN_VALUE: Final[int] = 1

# Верхняя граница (не включительно)
ARABIC_MAX_VALUE_EXCLUSIVE: Final[int] = 10_000

# Максимум вхождений major-символа (M, C, X, I)
MAJOR_SYMBOL_CAP: Final[int] = 2

# Максимум вхождений minor-символа (N, D, Y, J)
MINOR_SYMBOL_CAP: Final[int] = 3

# Количество minor-символов, при котором парный major запрещён (carry rule)
CARRY_THRESHOLD: Final[int] = 3


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NumeralError(Exception):
    """
    Базовая ошибка конвертера.

    Не наследует ValueError: pydantic-валидаторы пропускают такие исключения
    к вызывающему коду без оборачивания в ValidationError.
    """

    def __init__(self, reason: str, block_reason: str = ""):
        super().__init__(reason)
        self.reason = reason
        self.block_reason = block_reason


class MalformedNumberError(NumeralError):
    """Нарушены правила записи: пробелы, алфавит, кратность, carry rule, порядок."""
    pass


class ValueOutOfBoundsError(NumeralError):
    """Десятичное значение вне диапазона [1, 9999]."""
    pass


# =============================================================================
# ТАБЛИЦА СИМВОЛОВ
# =============================================================================


class NumeralForm(str, Enum):
    """Нотация входной строки"""

    ARABIC = "arabic"
    ELBONIAN = "elbonian"


class Symbol(str, Enum):
    """Символы Elbonian в порядке убывания значения"""

    N = "N"
    M = "M"
    D = "D"
    C = "C"
    Y = "Y"
    X = "X"
    J = "J"
    I = "I"  # noqa: E741


# Пары (символ, значение), строго по убыванию значения
SYMBOL_TABLE: Final[tuple[tuple[Symbol, int], ...]] = (
    (Symbol.N, 3000),
    (Symbol.M, 1000),
    (Symbol.D, 300),
    (Symbol.C, 100),
    (Symbol.Y, 30),
    (Symbol.X, 10),
    (Symbol.J, 3),
    (Symbol.I, 1),
)

SYMBOL_VALUES: Final[dict[str, int]] = {symbol.value: value for symbol, value in SYMBOL_TABLE}

MAJOR_SYMBOLS: Final[tuple[Symbol, ...]] = (Symbol.M, Symbol.C, Symbol.X, Symbol.I)
MINOR_SYMBOLS: Final[tuple[Symbol, ...]] = (Symbol.N, Symbol.D, Symbol.Y, Symbol.J)

# minor → major на один разряд ниже (3 minor = 9 единиц major)
CARRY_PAIRS: Final[tuple[tuple[Symbol, Symbol], ...]] = (
    (Symbol.N, Symbol.M),
    (Symbol.D, Symbol.C),
    (Symbol.Y, Symbol.X),
    (Symbol.J, Symbol.I),
)


# =============================================================================
# БАЗОВЫЕ КОНВЕРТЕРЫ
# =============================================================================


def is_symbol(ch: str) -> bool:
    """Проверка, что символ входит в алфавит Elbonian."""
    return ch in SYMBOL_VALUES


def symbol_value(ch: str) -> int:
    """
    Значение одного символа Elbonian.

    Args:
        ch: Символ (например, 'Y')

    Returns:
        Целое значение символа

    Raises:
        MalformedNumberError: Если символ не входит в алфавит
    """
    try:
        return SYMBOL_VALUES[ch]
    except KeyError:
        raise MalformedNumberError(
            f"Invalid numeral used: {ch!r}", block_reason="invalid_numeral"
        ) from None


def parse_arabic(text: str, max_digits: int = len(str(ARABIC_MAX_VALUE_EXCLUSIVE))) -> int | None:
    """
    Разбор десятичной строки без ограничения int() на длину строки.

    Знак и ведущие нули отбрасываются до разбора; значимых цифр больше
    max_digits → None (заведомо вне диапазона).

    Args:
        text: Десятичное целое (ASCII-цифры, опциональный знак)
        max_digits: Максимум значимых цифр

    Returns:
        Значение или None, если значимых цифр больше max_digits

    Examples:
        >>> parse_arabic("+007")
        7
        >>> parse_arabic("9" * 5000) is None
        True
    """
    sign = -1 if text.startswith("-") else 1
    digits = text.lstrip("+-").lstrip("0") or "0"
    if len(digits) > max_digits:
        return None
    return sign * int(digits)


def validate_arabic_value(value: int) -> None:
    """
    Проверка, что значение представимо в Elbonian.

    Args:
        value: Десятичное значение

    Raises:
        ValueOutOfBoundsError: Если value <= 0 или value >= 10000
    """
    if not ARABIC_MIN_VALUE <= value < ARABIC_MAX_VALUE_EXCLUSIVE:
        raise ValueOutOfBoundsError(
            f"Out of Arabic bounds: {value} not in "
            f"[{ARABIC_MIN_VALUE}, {ARABIC_MAX_VALUE_EXCLUSIVE - 1}]",
            block_reason="arabic_out_of_bounds",
        )


def arabic_to_elbonian(value: int) -> str:
    """
    Конверсия: arabic → elbonian (жадное вычитание).

    Для таблицы (3000, 1000, 300, 100, 30, 10, 3, 1) и значений в [1, 9999]
    результат всегда удовлетворяет правилам кратности и порядка.

    Args:
        value: Десятичное значение в [1, 9999]

    Returns:
        Каноническая запись Elbonian

    Raises:
        ValueOutOfBoundsError: Если значение вне диапазона

    Examples:
        >>> arabic_to_elbonian(23)
        'XXJ'
        >>> arabic_to_elbonian(7394)
        'NNMDYYYJI'
    """
    validate_arabic_value(value)

    remaining = value
    parts: list[str] = []
    for symbol, symbol_val in SYMBOL_TABLE:
        count, remaining = divmod(remaining, symbol_val)
        parts.append(symbol.value * count)
    return "".join(parts)


def elbonian_to_arabic(text: str) -> int:
    """
    Конверсия: elbonian → arabic (сумма значений символов).

    Грамматика не перепроверяется: вызывающий код отвечает за валидацию.

    Args:
        text: Запись Elbonian

    Returns:
        Сумма значений символов

    Raises:
        MalformedNumberError: Если встречен символ вне алфавита
    """
    return sum(symbol_value(ch) for ch in text)
