"""
Elliptic-Curve Engine — сложение и удвоение точек в аффинных координатах

Кривая в форме Вейерштрасса: y² = x³ + a·x + b (mod modulus).
Коэффициент b не нужен ни для сложения, ни для удвоения, поэтому не
передаётся: принадлежность точки кривой не проверяется (garbage in —
garbage out).

ФОРМУЛЫ:
    double:  λ = (3x² + a) · (2y)⁻¹
    add:     λ = (y2 − y1) · (x2 − x1)⁻¹
    x_r = λ² − x1 − x2
    y_r = λ·(x1 − x_r) − y1

Все промежуточные значения точные, результат приведён в [0, modulus).
None означает, что нужный обратный элемент не существует (модуль не
простой или вырожден).
"""

from typing import Optional

from detmath.core.domain.point import INFINITY, AffinePoint, Point, PointAtInfinity
from detmath.core.math.number_theory import modinv
from detmath.core.math.saturating import U64_BITS


# =============================================================================
# ГРУППОВЫЕ ОПЕРАЦИИ
# =============================================================================


def point_double(p: Point, a: int, modulus: int) -> Optional[Point]:
    """
    Удвоение точки.

    Args:
        p: Точка (Infinity или AffinePoint)
        a: Коэффициент a кривой
        modulus: Модуль поля

    Returns:
        2P; Infinity для Infinity, y == 0 (вертикальная касательная) и
        modulus == 0; None, если 2y необратим по модулю

    Examples:
        >>> point_double(AffinePoint(x=5, y=1), 2, 17)
        AffinePoint(kind='coordinate', x=6, y=3)
    """
    if isinstance(p, PointAtInfinity):
        return INFINITY
    if p.y == 0 or modulus == 0:
        return INFINITY

    two_y_inv = modinv((2 * p.y) % modulus, modulus)
    if two_y_inv is None:
        return None

    lam = ((3 * p.x * p.x + a) * two_y_inv) % modulus
    x_r = (lam * lam - 2 * p.x) % modulus
    y_r = (lam * (p.x - x_r) - p.y) % modulus
    return AffinePoint(x=x_r, y=y_r)


def point_add(p1: Point, p2: Point, a: int, modulus: int) -> Optional[Point]:
    """
    Сложение двух точек.

    Infinity — нейтральный элемент с любой стороны. Точки с равным x
    либо удваиваются (равный y), либо взаимно уничтожаются (Infinity).

    Returns:
        P1 + P2; None при modulus == 0 или необратимой разности x

    Examples:
        >>> point_add(AffinePoint(x=5, y=1), AffinePoint(x=6, y=3), 2, 17)
        AffinePoint(kind='coordinate', x=10, y=6)
    """
    if modulus == 0:
        return None
    if isinstance(p1, PointAtInfinity):
        return p2
    if isinstance(p2, PointAtInfinity):
        return p1

    if p1.x == p2.x:
        if p1.y == p2.y:
            return point_double(p1, a, modulus)
        return INFINITY

    x_diff_inv = modinv((p2.x - p1.x) % modulus, modulus)
    if x_diff_inv is None:
        return None

    lam = ((p2.y - p1.y) * x_diff_inv) % modulus
    x_r = (lam * lam - p1.x - p2.x) % modulus
    y_r = (lam * (p1.x - x_r) - p1.y) % modulus
    return AffinePoint(x=x_r, y=y_r)


def point_negate(p: Point, modulus: int) -> Point:
    """
    Обратная точка −P = (x, −y mod modulus).

    Для modulus == 0 точка возвращается без изменений.
    """
    if isinstance(p, PointAtInfinity) or modulus == 0:
        return p
    return AffinePoint(x=p.x, y=(-p.y) % modulus)


def scalar_multiply(p: Point, k: int, a: int, modulus: int) -> Optional[Point]:
    """
    Умножение точки на скаляр k (u64) методом double-and-add.

    Число итераций ограничено 64 битами k. Любой None на промежуточном
    шаге распространяется наружу.

    Examples:
        >>> scalar_multiply(AffinePoint(x=5, y=1), 3, 2, 17)
        AffinePoint(kind='coordinate', x=10, y=6)
    """
    result: Optional[Point] = INFINITY
    addend: Optional[Point] = p

    for bit in range(U64_BITS):
        if (k >> bit) & 1:
            result = point_add(result, addend, a, modulus)
            if result is None:
                return None
        if (k >> (bit + 1)) == 0:
            break
        addend = point_double(addend, a, modulus)
        if addend is None:
            return None

    return result
