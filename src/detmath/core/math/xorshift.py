"""
Stream Generator — xorshift*64

Детерминированный 64-битный генератор псевдослучайных чисел:
    s ^= s >> 12
    s ^= s << 25   (mod 2^64)
    s ^= s >> 27
    out = s * 0x2545F4914F6CDD1D  (mod 2^64)

Состояние принадлежит вызывающему: генератор создаётся из seed и не
хранится глобально. Нулевое состояние — неподвижная точка xor-shift шагов,
поэтому seed == 0 заменяется на 1.
"""

from typing import Final, Iterator

from detmath.core.math.saturating import U64_MAX, wrapping_mul_u64

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

XORSHIFT_MULTIPLIER: Final[int] = 0x2545F4914F6CDD1D

SHIFT_A: Final[int] = 12
SHIFT_B: Final[int] = 25
SHIFT_C: Final[int] = 27

# Замена для нулевого seed
ZERO_SEED_REPLACEMENT: Final[int] = 1


# =============================================================================
# GENERATOR
# =============================================================================


class Xorshift64Star:
    """
    Генератор xorshift*64.

    Поддерживает протокол итератора: next(rng) эквивалентно rng.next_u64().

    Examples:
        >>> rng = Xorshift64Star(0)
        >>> rng.state
        1
    """

    __slots__ = ("_state",)

    def __init__(self, seed: int):
        seed &= U64_MAX
        self._state = seed if seed != 0 else ZERO_SEED_REPLACEMENT

    @property
    def state(self) -> int:
        """Текущее (никогда не нулевое) состояние."""
        return self._state

    def next_u64(self) -> int:
        """Шаг генератора: обновляет состояние и возвращает скремблированный выход."""
        s = self._state
        s ^= s >> SHIFT_A
        s ^= (s << SHIFT_B) & U64_MAX
        s ^= s >> SHIFT_C
        self._state = s
        return wrapping_mul_u64(s, XORSHIFT_MULTIPLIER)

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next_u64()

    def __repr__(self) -> str:
        return f"Xorshift64Star(state={self._state:#018x})"
