"""
Тесты для модуля Saturating Machine Arithmetic

Проверяет:
1. Насыщение u64 / i64 на границах
2. Оборачивающие операции (wrapping)
3. Деление и остаток с округлением к нулю
4. Конверсию u64 → i64 без переинтерпретации битов
"""

import pytest

from detmath.core.math.saturating import (
    I64_MAX,
    I64_MIN,
    U32_MAX,
    U64_MAX,
    saturate_i64,
    saturating_add_i64,
    saturating_add_u64,
    saturating_mul_i64,
    saturating_mul_u64,
    saturating_sub_i64,
    saturating_sub_u64,
    trunc_div,
    trunc_rem,
    u64_to_i64,
    wrapping_add_u32,
    wrapping_mul_u64,
)

# =============================================================================
# U64
# =============================================================================


class TestSaturatingU64:
    """Тесты насыщающих операций u64"""

    def test_add_within_range(self) -> None:
        assert saturating_add_u64(2, 3) == 5

    def test_add_saturates_at_max(self) -> None:
        """Переполнение сложения даёт U64_MAX"""
        assert saturating_add_u64(U64_MAX, 1) == U64_MAX
        assert saturating_add_u64(U64_MAX, U64_MAX) == U64_MAX

    def test_sub_saturates_at_zero(self) -> None:
        """Вычитание большего из меньшего даёт 0, а не отрицательное"""
        assert saturating_sub_u64(3, 5) == 0
        assert saturating_sub_u64(5, 3) == 2

    def test_mul_saturates_at_max(self) -> None:
        assert saturating_mul_u64(1 << 40, 1 << 40) == U64_MAX
        assert saturating_mul_u64(1 << 20, 1 << 20) == 1 << 40


class TestWrapping:
    """Тесты оборачивающих операций"""

    def test_wrapping_mul_u64(self) -> None:
        """Произведение берётся по модулю 2^64"""
        assert wrapping_mul_u64(1 << 63, 2) == 0
        assert wrapping_mul_u64(U64_MAX, U64_MAX) == 1

    def test_wrapping_add_u32(self) -> None:
        assert wrapping_add_u32(U32_MAX, 1) == 0
        assert wrapping_add_u32(U32_MAX, 900) == 899


# =============================================================================
# I64
# =============================================================================


class TestSaturatingI64:
    """Тесты насыщающих операций i64"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, 0),
            (-5, -5),
            (I64_MAX + 1, I64_MAX),
            (I64_MIN - 1, I64_MIN),
            (1 << 100, I64_MAX),
            (-(1 << 100), I64_MIN),
        ],
    )
    def test_saturate_i64(self, value: int, expected: int) -> None:
        assert saturate_i64(value) == expected

    def test_add_sub_mul_saturate(self) -> None:
        assert saturating_add_i64(I64_MAX, 1) == I64_MAX
        assert saturating_sub_i64(I64_MIN, 1) == I64_MIN
        assert saturating_mul_i64(I64_MIN, -1) == I64_MAX
        assert saturating_mul_i64(I64_MAX, -2) == I64_MIN

    def test_u64_to_i64_saturates_instead_of_reinterpreting(self) -> None:
        """u64 выше I64_MAX не становится отрицательным"""
        assert u64_to_i64(42) == 42
        assert u64_to_i64(U64_MAX) == I64_MAX
        assert u64_to_i64(1 << 63) == I64_MAX


# =============================================================================
# ДЕЛЕНИЕ С ОКРУГЛЕНИЕМ К НУЛЮ
# =============================================================================


class TestTruncatingDivision:
    """Тесты trunc_div / trunc_rem"""

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            (7, 2, 3),
            (-7, 2, -3),
            (7, -2, -3),
            (-7, -2, 3),
            (-175, 100, -1),
            (0, -5, 0),
        ],
    )
    def test_trunc_div_rounds_toward_zero(self, a: int, b: int, expected: int) -> None:
        assert trunc_div(a, b) == expected

    @pytest.mark.parametrize("a,b", [(7, 3), (-7, 3), (7, -3), (-7, -3), (10, 5)])
    def test_trunc_rem_consistent_with_div(self, a: int, b: int) -> None:
        """a == b * trunc_div(a, b) + trunc_rem(a, b), знак остатка = знак a"""
        r = trunc_rem(a, b)
        assert b * trunc_div(a, b) + r == a
        assert r == 0 or (r < 0) == (a < 0)
