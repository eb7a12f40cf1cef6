"""
Тесты для Trajectory Composer
"""

import pytest

from detmath.core.math.saturating import I64_MAX, I64_MIN
from detmath.core.math.trajectory import TrajectoryCoefficients, projectile_coefficients


class TestProjectileCoefficients:
    """Тесты projectile_coefficients"""

    def test_forty_five_degrees(self) -> None:
        """45°, v0 = 10.00, g = 9.80: c1 = 1.00, c2 = −0.10"""
        result = projectile_coefficients(450, 1000, 980)
        assert result == TrajectoryCoefficients(c1=100, c2=-10)

    @pytest.mark.parametrize("angle", [900, 2700])
    def test_vertical_launch(self, angle: int) -> None:
        """cos == 0 → c1 = I64_MAX, c2 = 0"""
        assert projectile_coefficients(angle, 1000, 980) == TrajectoryCoefficients(I64_MAX, 0)

    def test_zero_velocity_gives_min_c2(self) -> None:
        """Нулевой знаменатель c2 → I64_MIN"""
        result = projectile_coefficients(450, 0, 980)
        assert result.c1 == 100
        assert result.c2 == I64_MIN

    def test_horizontal_launch(self) -> None:
        """0°: c1 = 0; c2 = −9.80 / (2 · 100.00 · 1.00) ≈ −0.04"""
        assert projectile_coefficients(0, 1000, 980) == TrajectoryCoefficients(0, -4)

    def test_zero_gravity(self) -> None:
        assert projectile_coefficients(450, 1000, 0).c2 == 0

    def test_result_is_named_tuple(self) -> None:
        c1, c2 = projectile_coefficients(300, 1000, 980)
        assert c1 == projectile_coefficients(300, 1000, 980).c1
        assert isinstance(c2, int)
