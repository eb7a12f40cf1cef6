"""
Geometry Engine — 2-D векторная алгебра и point-in-shape предикаты

Все операции идут через Fixed-Point Core (масштаб 100):
- Скалярное произведение = сумма двух fixed-point произведений
- Модуль вектора = sqrt(v · v)
- Векторное произведение = z-компонента 3-D cross product (i64)
- Поворот использует fixed-point sin/cos из Trigonometric Engine

Позиции и модули — беззнаковые (u64), результаты поворота и отражения —
знаковые (i64). Все предикаты включают границу: точка на ребре — внутри.
"""

from typing import NamedTuple

from detmath.core.math.fixed_point import SCALE, div, mul, square_root
from detmath.core.math.saturating import (
    saturating_add_i64,
    saturating_add_u64,
    saturating_mul_i64,
    saturating_mul_u64,
    saturating_sub_i64,
    saturating_sub_u64,
    trunc_div,
    u64_to_i64,
)
from detmath.core.math.trigonometry import cos, sin

# =============================================================================
# ТИПЫ
# =============================================================================


class Vec2(NamedTuple):
    """Беззнаковый fixed-point вектор (u64, u64)."""

    x: int
    y: int


class SignedVec2(NamedTuple):
    """Знаковый fixed-point вектор (i64, i64)."""

    x: int
    y: int


def _abs_diff(a: int, b: int) -> int:
    return a - b if a > b else b - a


# =============================================================================
# РАССТОЯНИЯ И ПРОИЗВЕДЕНИЯ
# =============================================================================


def squared_distance(x1: int, y1: int, x2: int, y2: int) -> int:
    """
    Квадрат расстояния между двумя точками (fixed-point).

    Examples:
        >>> squared_distance(0, 0, 300, 400)  # (3.00, 4.00) → 25.00
        2500
    """
    dx = _abs_diff(x1, x2)
    dy = _abs_diff(y1, y2)
    return saturating_add_u64(mul(dx, dx), mul(dy, dy))


def distance_between(x1: int, y1: int, x2: int, y2: int) -> int:
    """
    Расстояние между двумя точками.

    Examples:
        >>> distance_between(0, 0, 300, 400)
        500
    """
    return square_root(squared_distance(x1, y1, x2, y2))


def dot_product(vx1: int, vy1: int, vx2: int, vy2: int) -> int:
    """Скалярное произведение двух векторов (u64)."""
    return saturating_add_u64(mul(vx1, vx2), mul(vy1, vy2))


def magnitude(vx: int, vy: int) -> int:
    """Модуль вектора."""
    return square_root(dot_product(vx, vy, vx, vy))


def cross_product(vx1: int, vy1: int, vx2: int, vy2: int) -> int:
    """
    z-компонента векторного произведения (i64).

    Положительная для поворота v1 → v2 против часовой стрелки.

    Examples:
        >>> cross_product(100, 0, 0, 100)
        100
        >>> cross_product(0, 100, 100, 0)
        -100
    """
    term1 = u64_to_i64(mul(vx1, vy2))
    term2 = u64_to_i64(mul(vy1, vx2))
    return saturating_sub_i64(term1, term2)


# =============================================================================
# ОПЕРАЦИИ НАД ВЕКТОРАМИ
# =============================================================================


def clamp_vector_magnitude(vx: int, vy: int, max_length: int) -> Vec2:
    """
    Ограничение длины вектора.

    Вектор масштабируется только если его модуль больше max_length.
    Коэффициент max_length / mag округляется до fixed-point, поэтому
    результат может оказаться немного короче max_length.

    Examples:
        >>> clamp_vector_magnitude(300, 400, 250)  # |v| = 5.00 → 2.50
        Vec2(x=150, y=200)
        >>> clamp_vector_magnitude(300, 400, 1000)
        Vec2(x=300, y=400)
    """
    mag = magnitude(vx, vy)
    if mag > max_length:
        ratio = div(max_length, mag)
        return Vec2(mul(vx, ratio), mul(vy, ratio))
    return Vec2(vx, vy)


def add_vectors(vx1: int, vy1: int, vx2: int, vy2: int) -> Vec2:
    """Покомпонентная сумма с насыщением."""
    return Vec2(saturating_add_u64(vx1, vx2), saturating_add_u64(vy1, vy2))


def subtract_vectors(vx1: int, vy1: int, vx2: int, vy2: int) -> Vec2:
    """Покомпонентная разность с насыщением к нулю."""
    return Vec2(saturating_sub_u64(vx1, vx2), saturating_sub_u64(vy1, vy2))


def scale_vector(vx: int, vy: int, scalar: int) -> Vec2:
    """Умножение вектора на fixed-point скаляр."""
    return Vec2(mul(vx, scalar), mul(vy, scalar))


def normalize_vector(vx: int, vy: int) -> Vec2:
    """
    Единичный вектор того же направления.

    Нулевой вектор остаётся нулевым.

    Examples:
        >>> normalize_vector(300, 400)
        Vec2(x=60, y=80)
        >>> normalize_vector(0, 0)
        Vec2(x=0, y=0)
    """
    mag = magnitude(vx, vy)
    if mag == 0:
        return Vec2(0, 0)
    return Vec2(div(vx, mag), div(vy, mag))


def rotate_vector(vx: int, vy: int, angle_tenths: int) -> SignedVec2:
    """
    Поворот вектора на угол (десятые доли градуса) против часовой стрелки.

        x' = x·cos − y·sin
        y' = x·sin + y·cos

    Examples:
        >>> rotate_vector(100, 0, 900)
        SignedVec2(x=0, y=100)
    """
    x = u64_to_i64(vx)
    y = u64_to_i64(vy)
    cos_a = cos(angle_tenths)
    sin_a = sin(angle_tenths)

    new_x = saturating_sub_i64(
        trunc_div(saturating_mul_i64(x, cos_a), SCALE),
        trunc_div(saturating_mul_i64(y, sin_a), SCALE),
    )
    new_y = saturating_add_i64(
        trunc_div(saturating_mul_i64(x, sin_a), SCALE),
        trunc_div(saturating_mul_i64(y, cos_a), SCALE),
    )
    return SignedVec2(new_x, new_y)


def reflect_vector(vx: int, vy: int, normal_x: int, normal_y: int) -> SignedVec2:
    """
    Отражение вектора относительно нормали: v − 2·(v·n)·n.

    Нормаль ожидается единичной (модуль 1.00 == 100); ненормированная
    нормаль масштабирует результат.

    Examples:
        >>> reflect_vector(100, 100, 0, 100)  # отражение от пола
        SignedVec2(x=100, y=-100)
    """
    two_dot = saturating_mul_i64(2, u64_to_i64(dot_product(vx, vy, normal_x, normal_y)))
    change_x = trunc_div(saturating_mul_i64(u64_to_i64(normal_x), two_dot), SCALE)
    change_y = trunc_div(saturating_mul_i64(u64_to_i64(normal_y), two_dot), SCALE)
    return SignedVec2(
        saturating_sub_i64(u64_to_i64(vx), change_x),
        saturating_sub_i64(u64_to_i64(vy), change_y),
    )


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_point_in_rect(
    px: int,
    py: int,
    rect_x: int,
    rect_y: int,
    rect_width: int,
    rect_height: int,
) -> bool:
    """Точка внутри прямоугольника (границы включены)."""
    return (
        rect_x <= px <= saturating_add_u64(rect_x, rect_width)
        and rect_y <= py <= saturating_add_u64(rect_y, rect_height)
    )


def is_point_in_circle(
    px: int,
    py: int,
    circle_cx: int,
    circle_cy: int,
    circle_radius: int,
) -> bool:
    """
    Точка внутри круга (граница включена).

    Квадраты сравниваются без перенормировки: обе стороны в одном масштабе.
    """
    dx = _abs_diff(px, circle_cx)
    dy = _abs_diff(py, circle_cy)
    dist_sq = saturating_add_u64(saturating_mul_u64(dx, dx), saturating_mul_u64(dy, dy))
    return dist_sq <= saturating_mul_u64(circle_radius, circle_radius)


def _edge_cross(ox: int, oy: int, ex: int, ey: int, px: int, py: int) -> int:
    # (e - o) x (p - o)
    edge_x = saturating_sub_i64(ex, ox)
    edge_y = saturating_sub_i64(ey, oy)
    rel_x = saturating_sub_i64(px, ox)
    rel_y = saturating_sub_i64(py, oy)
    return saturating_sub_i64(
        saturating_mul_i64(edge_x, rel_y),
        saturating_mul_i64(edge_y, rel_x),
    )


def is_point_in_triangle(
    px: int,
    py: int,
    ax: int,
    ay: int,
    bx: int,
    by: int,
    cx: int,
    cy: int,
) -> bool:
    """
    Точка внутри треугольника ABC.

    Три cross product рёбер AB, BC, CA с точкой P. Точка внутри, если все
    неотрицательны или все неположительны, поэтому порядок обхода вершин
    (по или против часовой стрелки) не важен. Вершины и рёбра — внутри.

    Examples:
        >>> is_point_in_triangle(100, 100, 0, 0, 400, 0, 0, 400)
        True
        >>> is_point_in_triangle(500, 500, 0, 0, 400, 0, 0, 400)
        False
    """
    p = (u64_to_i64(px), u64_to_i64(py))
    a = (u64_to_i64(ax), u64_to_i64(ay))
    b = (u64_to_i64(bx), u64_to_i64(by))
    c = (u64_to_i64(cx), u64_to_i64(cy))

    crosses = (
        _edge_cross(*a, *b, *p),
        _edge_cross(*b, *c, *p),
        _edge_cross(*c, *a, *p),
    )

    all_non_negative = all(cp >= 0 for cp in crosses)
    all_non_positive = all(cp <= 0 for cp in crosses)
    return all_non_negative or all_non_positive
