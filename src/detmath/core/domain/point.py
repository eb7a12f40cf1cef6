"""
Point — точка эллиптической кривой в аффинных координатах

Immutable Pydantic модели для двух вариантов точки:
- PointAtInfinity: нейтральный элемент группы (единственный экземпляр INFINITY)
- AffinePoint: пара (x, y) в поле Z_modulus

На проводе Infinity кодируется парой (U64_MAX, U64_MAX), поэтому
AffinePoint с такими координатами запрещён: сентинел не может совпасть с
настоящей точкой.
"""

from typing import Final, Literal, Union

from pydantic import BaseModel, Field, model_validator

# Граница u64 (совпадает с detmath.core.math.saturating.U64_MAX)
U64_MAX: Final[int] = (1 << 64) - 1


# =============================================================================
# POINT MODELS
# =============================================================================


class PointAtInfinity(BaseModel):
    """Точка на бесконечности (аддитивная единица)."""

    kind: Literal["infinity"] = "infinity"

    model_config = {"frozen": True}


class AffinePoint(BaseModel):
    """Конечная точка кривой в аффинных координатах."""

    kind: Literal["coordinate"] = "coordinate"
    x: int = Field(..., ge=0, le=U64_MAX, description="Координата x (u64)")
    y: int = Field(..., ge=0, le=U64_MAX, description="Координата y (u64)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def reject_infinity_sentinel(self) -> "AffinePoint":
        """Пара (U64_MAX, U64_MAX) зарезервирована под Infinity."""
        if self.x == U64_MAX and self.y == U64_MAX:
            raise ValueError("coordinate pair (U64_MAX, U64_MAX) is reserved for the point at infinity")
        return self


Point = Union[PointAtInfinity, AffinePoint]

INFINITY: PointAtInfinity = PointAtInfinity()


def coordinate(x: int, y: int) -> AffinePoint:
    """Короткий конструктор AffinePoint."""
    return AffinePoint(x=x, y=y)
