"""
Тесты для модуля Fixed-Point Core

Проверяет:
1. Умножение/деление с перенормировкой на 100
2. Деление на ноль (u64 → 0, i64 → I64_MAX)
3. Квадратный корень против isqrt и float-эталона
4. clamp и lerp (включая t > 100 и обратное направление)
5. Знаковые операции с округлением к нулю
"""

import math

import pytest

from detmath.core.math.fixed_point import (
    SCALE,
    clamp,
    div,
    div_signed,
    lerp,
    mul,
    mul_signed,
    square,
    square_root,
    square_signed,
)
from detmath.core.math.saturating import I64_MAX, I64_MIN, U64_MAX

# =============================================================================
# БЕЗЗНАКОВЫЕ ОПЕРАЦИИ
# =============================================================================


class TestMulDiv:
    """Тесты mul / div / square"""

    def test_mul_renormalizes(self) -> None:
        """2.50 * 2.00 = 5.00"""
        assert mul(250, 200) == 500

    def test_mul_truncates_small_products(self) -> None:
        assert mul(5, 5) == 0

    def test_mul_saturates(self) -> None:
        assert mul(U64_MAX, U64_MAX) == U64_MAX // SCALE

    def test_div_renormalizes(self) -> None:
        assert div(500, 200) == 250
        assert div(100, 300) == 33

    def test_div_by_zero_returns_zero(self) -> None:
        assert div(500, 0) == 0
        assert div(0, 0) == 0

    def test_square(self) -> None:
        assert square(250) == 625
        assert square(0) == 0


class TestSquareRoot:
    """Тесты square_root"""

    def test_exact_roots(self) -> None:
        assert square_root(400) == 200
        assert square_root(100) == 100
        assert square_root(0) == 0

    @pytest.mark.parametrize("n", [1, 2, 3, 200, 12345, 999_999, 10**12, U64_MAX // 100])
    def test_matches_isqrt_of_scaled_input(self, n: int) -> None:
        """square_root(n) == isqrt(n * 100)"""
        assert square_root(n) == math.isqrt(n * SCALE)

    @pytest.mark.parametrize("n", [2, 50, 200, 12345, 1_000_000])
    def test_close_to_float_reference(self, n: int) -> None:
        """Результат не дальше одной сотой от float sqrt"""
        reference = math.sqrt(n / SCALE) * SCALE
        assert abs(square_root(n) - reference) <= 1

    def test_saturated_input(self) -> None:
        """Вход выше U64_MAX / 100 насыщается перед извлечением корня"""
        assert square_root(U64_MAX) == math.isqrt(U64_MAX)


class TestClampLerp:
    """Тесты clamp / lerp"""

    def test_clamp(self) -> None:
        assert clamp(50, 100, 200) == 100
        assert clamp(250, 100, 200) == 200
        assert clamp(150, 100, 200) == 150

    def test_clamp_inverted_bounds_first_branch_wins(self) -> None:
        """min > max не валидируется: сначала проверяется нижняя граница"""
        assert clamp(150, 200, 100) == 200

    def test_lerp_ascending(self) -> None:
        assert lerp(1000, 2000, 50) == 1500
        assert lerp(1000, 2000, 0) == 1000
        assert lerp(1000, 2000, 100) == 2000

    def test_lerp_descending(self) -> None:
        assert lerp(2000, 1000, 25) == 1750

    def test_lerp_t_clamped_to_one(self) -> None:
        assert lerp(1000, 2000, 500) == 2000
        assert lerp(2000, 1000, U64_MAX) == 1000

    def test_lerp_equal_endpoints(self) -> None:
        assert lerp(700, 700, 37) == 700


# =============================================================================
# ЗНАКОВЫЕ ОПЕРАЦИИ
# =============================================================================


class TestSignedOperations:
    """Тесты mul_signed / div_signed / square_signed"""

    def test_mul_signed_truncates_toward_zero(self) -> None:
        """-1.75 * 1.00 → -1.75; -0.05 * 0.05 → 0 (не -1)"""
        assert mul_signed(-175, 100) == -175
        assert mul_signed(-5, 5) == 0

    def test_div_signed(self) -> None:
        assert div_signed(-980, 9800) == -10
        assert div_signed(70, 70) == 100

    def test_div_signed_by_zero_returns_i64_max(self) -> None:
        assert div_signed(5, 0) == I64_MAX
        assert div_signed(-5, 0) == I64_MAX

    def test_signed_saturation(self) -> None:
        assert mul_signed(I64_MAX, I64_MAX) == I64_MAX
        assert mul_signed(I64_MIN, I64_MAX) == I64_MIN
        assert div_signed(I64_MIN, 1) == I64_MIN

    def test_square_signed_non_negative(self) -> None:
        assert square_signed(-70) == 49
