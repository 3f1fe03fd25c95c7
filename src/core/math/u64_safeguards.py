"""
U64 Safeguards — безопасная арифметика беззнаковых 64-битных величин

Модуль обеспечивает корректность всех операций над количествами стоимости:
- Верхняя граница берётся из нативного типа c_uint64, а не задаётся литералом
- Checked-сложение и вычитание без wraparound (None при выходе за диапазон)
- Проверка запаса (headroom) перед увеличением счётчика
- Валидация входных значений (int, не bool, 0 <= x <= U64_MAX)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат любой операции либо в [0, U64_MAX], либо явно отклонён
2. Python int не переполняется сам, поэтому граница проверяется явно
3. Все операции детерминированы и не имеют побочных эффектов
"""

import ctypes
from typing import Final, Optional

# =============================================================================
# ГРАНИЦЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Максимум беззнакового 64-битного целого (2**64 - 1)
U64_MAX: Final[int] = ctypes.c_uint64(-1).value

# Разрядность представления
U64_BITS: Final[int] = ctypes.sizeof(ctypes.c_uint64) * 8


# =============================================================================
# ПРОВЕРКИ ДИАПАЗОНА
# =============================================================================


def is_u64(value: object) -> bool:
    """
    Проверка, что значение является допустимым u64.

    bool формально является int, но как количество не принимается.

    Examples:
        >>> is_u64(0)
        True
        >>> is_u64(-1)
        False
        >>> is_u64(True)
        False
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= U64_MAX


def validate_u64(value: object, name: str) -> int:
    """
    Валидация, что значение является u64.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        То же значение (для удобства цепочек)

    Raises:
        TypeError: Если value не int (или bool)
        ValueError: Если value вне [0, U64_MAX]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

    if value > U64_MAX:
        raise ValueError(f"{name} must be <= {U64_MAX}, got {value}")

    return value


# =============================================================================
# CHECKED-АРИФМЕТИКА
# =============================================================================


def checked_add(a: int, b: int) -> Optional[int]:
    """
    Сложение с проверкой переполнения.

    Returns:
        a + b, либо None если сумма больше U64_MAX

    Examples:
        >>> checked_add(1, 2)
        3
        >>> checked_add(U64_MAX, 1) is None
        True
    """
    result = a + b
    if result > U64_MAX:
        return None
    return result


def checked_sub(a: int, b: int) -> Optional[int]:
    """
    Вычитание с проверкой ухода в минус.

    Returns:
        a - b, либо None если b > a
    """
    if b > a:
        return None
    return a - b


def has_headroom(current: int, amount: int) -> bool:
    """
    Строгая проверка запаса перед увеличением счётчика.

    Условие: amount < U64_MAX - current. После увеличения остаётся
    запас минимум в 1 единицу, поэтому граница amount == U64_MAX - current
    уже считается переполнением.

    Examples:
        >>> has_headroom(0, U64_MAX - 1)
        True
        >>> has_headroom(0, U64_MAX)
        False
        >>> has_headroom(10, U64_MAX - 10)
        False
    """
    return amount < U64_MAX - current
