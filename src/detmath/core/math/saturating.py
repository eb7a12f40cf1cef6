"""
Saturating Machine Arithmetic — целочисленные примитивы фиксированной ширины

Модуль эмулирует машинные целые (u32, u64, i64, u128) поверх Python int:
- Насыщающие операции (saturating) для u64 и i64
- Оборачивающие операции (wrapping) там, где переполнение — часть алгоритма
- Деление и остаток с округлением к нулю (семантика машинного signed div)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда лежит в диапазоне своей ширины
2. Переполнение насыщается к MAX/MIN, а не оборачивается (кроме wrapping_*)
3. Деление знаковых чисел округляет к нулю, а не к -inf (в отличие от //)
4. Все операции детерминированы и не используют float
"""

from typing import Final

# =============================================================================
# ГРАНИЦЫ ТИПОВ
# =============================================================================

U32_MAX: Final[int] = (1 << 32) - 1
U64_MAX: Final[int] = (1 << 64) - 1
U128_MAX: Final[int] = (1 << 128) - 1

I64_MIN: Final[int] = -(1 << 63)
I64_MAX: Final[int] = (1 << 63) - 1

U64_BITS: Final[int] = 64


# =============================================================================
# U64
# =============================================================================


def saturating_add_u64(a: int, b: int) -> int:
    """
    Сложение u64 с насыщением к U64_MAX.

    Examples:
        >>> saturating_add_u64(1, 2)
        3
        >>> saturating_add_u64(U64_MAX, 1) == U64_MAX
        True
    """
    return min(a + b, U64_MAX)


def saturating_sub_u64(a: int, b: int) -> int:
    """
    Вычитание u64 с насыщением к нулю.

    Examples:
        >>> saturating_sub_u64(5, 3)
        2
        >>> saturating_sub_u64(3, 5)
        0
    """
    return max(a - b, 0)


def saturating_mul_u64(a: int, b: int) -> int:
    """Умножение u64 с насыщением к U64_MAX."""
    return min(a * b, U64_MAX)


def wrapping_mul_u64(a: int, b: int) -> int:
    """Умножение по модулю 2^64 (используется генератором xorshift*)."""
    return (a * b) & U64_MAX


def wrapping_add_u32(a: int, b: int) -> int:
    """Сложение по модулю 2^32 (фазовый сдвиг углов)."""
    return (a + b) & U32_MAX


# =============================================================================
# I64
# =============================================================================


def saturate_i64(value: int) -> int:
    """
    Приведение произвольного int в диапазон i64 с насыщением.

    Examples:
        >>> saturate_i64(10)
        10
        >>> saturate_i64(1 << 70) == I64_MAX
        True
        >>> saturate_i64(-(1 << 70)) == I64_MIN
        True
    """
    if value > I64_MAX:
        return I64_MAX
    if value < I64_MIN:
        return I64_MIN
    return value


def u64_to_i64(value: int) -> int:
    """
    Конверсия u64 → i64.

    Значения выше I64_MAX насыщаются к I64_MAX (никакой переинтерпретации
    битов, отрицательное число из беззнакового не появляется).
    """
    return min(value, I64_MAX)


def saturating_add_i64(a: int, b: int) -> int:
    """Сложение i64 с насыщением."""
    return saturate_i64(a + b)


def saturating_sub_i64(a: int, b: int) -> int:
    """Вычитание i64 с насыщением."""
    return saturate_i64(a - b)


def saturating_mul_i64(a: int, b: int) -> int:
    """Умножение i64 с насыщением."""
    return saturate_i64(a * b)


# =============================================================================
# ДЕЛЕНИЕ С ОКРУГЛЕНИЕМ К НУЛЮ
# =============================================================================


def trunc_div(a: int, b: int) -> int:
    """
    Целочисленное деление с округлением к нулю.

    Python `//` округляет к -inf, машинное знаковое деление — к нулю.
    Делитель обязан быть ненулевым: проверка нуля — задача вызывающего.

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
        >>> trunc_div(-175, 100)
        -1
    """
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        return -quotient
    return quotient


def trunc_rem(a: int, b: int) -> int:
    """
    Остаток, согласованный с trunc_div: знак остатка совпадает со знаком a.

    Examples:
        >>> trunc_rem(7, 3)
        1
        >>> trunc_rem(-7, 3)
        -1
        >>> trunc_rem(7, -3)
        1
    """
    return a - b * trunc_div(a, b)
