"""
Fixed-Point Core — десятичная арифметика с масштабом 100

Скаляр v представляет значение v / 100. Произведение и частное двух
скаляров перенормируются ровно на один множитель SCALE.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль определено: беззнаковый путь → 0, знаковый → I64_MAX
2. Переполнение насыщается, никогда не оборачивается
3. Знаковые операции округляют к нулю
4. float не используется

ФОРМУЛЫ:
    mul(a, b)   = sat(a * b) / 100
    div(a, b)   = sat(a * 100) / b
    square(n)   = mul(n, n)
    sqrt(n)     = isqrt(sat(n * 100))  (Babylonian iteration)
"""

from typing import Final

from detmath.core.math.saturating import (
    I64_MAX,
    saturate_i64,
    saturating_mul_u64,
    trunc_div,
)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Масштаб fixed-point: 1.00 == 100
SCALE: Final[int] = 100

# Верхняя граница параметра интерполяции t (100 == 1.00)
LERP_T_MAX: Final[int] = SCALE


# =============================================================================
# БЕЗЗНАКОВЫЕ ОПЕРАЦИИ (u64)
# =============================================================================


def mul(a: int, b: int) -> int:
    """
    Fixed-point умножение.

    Examples:
        >>> mul(250, 200)  # 2.50 * 2.00
        500
        >>> mul(5, 5)  # 0.05 * 0.05 → 0.0025, усечение до 0.00
        0
    """
    return saturating_mul_u64(a, b) // SCALE


def div(a: int, b: int) -> int:
    """
    Fixed-point деление. Деление на ноль возвращает 0.

    Examples:
        >>> div(500, 200)
        250
        >>> div(500, 0)
        0
    """
    if b == 0:
        return 0
    return saturating_mul_u64(a, SCALE) // b


def square(n: int) -> int:
    """Fixed-point квадрат."""
    return mul(n, n)


def square_root(n: int) -> int:
    """
    Fixed-point квадратный корень.

    Вход масштабируется на 100, затем целочисленный метод Ньютона
    (Babylonian iteration) от (x + 1) / 2 до сходимости (y >= x).
    Результат равен isqrt(sat(n * 100)).

    Args:
        n: Fixed-point значение (u64)

    Returns:
        Fixed-point корень; 0 для n == 0

    Examples:
        >>> square_root(400)  # sqrt(4.00) = 2.00
        200
        >>> square_root(200)  # sqrt(2.00) ≈ 1.41
        141
        >>> square_root(0)
        0
    """
    scaled_n = saturating_mul_u64(n, SCALE)
    if scaled_n == 0:
        return 0

    x = scaled_n
    y = (x + 1) // 2
    while y < x:
        x = y
        y = (x + scaled_n // x) // 2
    return x


def clamp(value: int, min_value: int, max_value: int) -> int:
    """
    Двустороннее ограничение значения.

    Порядок min_value <= max_value не проверяется: при min > max результат
    определяется первой сработавшей веткой.
    """
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


def lerp(start: int, end: int, t: int) -> int:
    """
    Линейная интерполяция start → end.

    t ограничивается диапазоном [0, 100]. Смещение считается от модуля
    разности, поэтому знак не нужен: путь всегда в пределах [start, end].

    Examples:
        >>> lerp(1000, 2000, 50)
        1500
        >>> lerp(2000, 1000, 25)
        1750
        >>> lerp(1000, 2000, 500)  # t > 100 → 100
        2000
    """
    t_clamped = min(t, LERP_T_MAX)
    if start < end:
        delta = end - start
        return start + saturating_mul_u64(delta, t_clamped) // SCALE

    delta = start - end
    return start - saturating_mul_u64(delta, t_clamped) // SCALE


# =============================================================================
# ЗНАКОВЫЕ ОПЕРАЦИИ (i64)
# =============================================================================


def mul_signed(a: int, b: int) -> int:
    """Fixed-point умножение i64: точный промежуточный результат, затем насыщение."""
    return saturate_i64(trunc_div(a * b, SCALE))


def div_signed(a: int, b: int) -> int:
    """
    Fixed-point деление i64.

    Деление на ноль возвращает I64_MAX как признак неопределённости.
    """
    if b == 0:
        return I64_MAX
    return saturate_i64(trunc_div(a * SCALE, b))


def square_signed(a: int) -> int:
    """Fixed-point квадрат i64."""
    return mul_signed(a, a)
