"""
Trajectory Composer — коэффициенты параболической траектории

Для угла запуска θ, начальной скорости v0 и гравитации g траектория
описывается как
    y = c1·x + c2·x²
    c1 = sin θ / cos θ
    c2 = −g / (2 · v0² · cos² θ)

Все величины — fixed-point с масштабом 100, результат — пара i64.

Сентинелы:
- cos θ == 0 (вертикальный запуск): c1 = I64_MAX, c2 принудительно 0
- нулевой знаменатель c2: c2 = I64_MIN
"""

from typing import NamedTuple

from detmath.core.math.fixed_point import div_signed, mul_signed, square, square_signed
from detmath.core.math.saturating import (
    I64_MAX,
    I64_MIN,
    saturating_mul_i64,
    u64_to_i64,
)
from detmath.core.math.trigonometry import cos, sin


class TrajectoryCoefficients(NamedTuple):
    """Коэффициенты параболы y = c1·x + c2·x² (i64, fixed-point)."""

    c1: int
    c2: int


def projectile_coefficients(
    angle_tenths: int,
    initial_velocity: int,
    gravity: int,
) -> TrajectoryCoefficients:
    """
    Вычисление коэффициентов траектории снаряда.

    Args:
        angle_tenths: Угол запуска в десятых долях градуса (u32)
        initial_velocity: Начальная скорость (u64, fixed-point)
        gravity: Ускорение свободного падения (u64, fixed-point)

    Returns:
        TrajectoryCoefficients(c1, c2)

    Examples:
        >>> projectile_coefficients(450, 1000, 980)  # 45°, v0 = 10.00, g = 9.80
        TrajectoryCoefficients(c1=100, c2=-10)
        >>> projectile_coefficients(900, 1000, 980)  # вертикально
        TrajectoryCoefficients(c1=9223372036854775807, c2=0)
    """
    sin_val = sin(angle_tenths)
    cos_val = cos(angle_tenths)

    if cos_val == 0:
        return TrajectoryCoefficients(I64_MAX, 0)

    c1 = div_signed(sin_val, cos_val)

    v0_squared = u64_to_i64(square(initial_velocity))
    denominator = saturating_mul_i64(mul_signed(v0_squared, square_signed(cos_val)), 2)

    if denominator == 0:
        c2 = I64_MIN
    else:
        c2 = div_signed(-u64_to_i64(gravity), denominator)

    return TrajectoryCoefficients(c1, c2)
