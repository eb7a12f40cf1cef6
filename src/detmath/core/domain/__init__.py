"""
Domain models and value objects.

Contains the elliptic-curve point variants shared by the engine and the codec.
"""

from detmath.core.domain.point import (
    INFINITY,
    AffinePoint,
    Point,
    PointAtInfinity,
    coordinate,
)

__all__ = [
    "INFINITY",
    "AffinePoint",
    "Point",
    "PointAtInfinity",
    "coordinate",
]
