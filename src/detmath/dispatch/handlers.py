"""
Handler table — связывание селекторов с операциями ядра

Каждая запись описывает:
- типы аргументных слов (ArgKind), по которым call data декодируется
- функцию, которая вызывает операцию ядра и кодирует результат в слова

Таблица закрыта: Dispatcher проверяет, что она покрывает всё
перечисление Selector.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Final, Tuple

from detmath.core.abi.codec import (
    U32_PAYLOAD_SIZE,
    U64_PAYLOAD_SIZE,
    WORD_SIZE,
    check_clean_word,
    decode_i64,
    decode_point,
    decode_u32,
    decode_u64,
    encode_bool,
    encode_i64,
    encode_optional,
    encode_point_result,
    encode_u32,
    encode_u64,
    encode_words,
)
from detmath.core.math.elliptic import point_add, point_double
from detmath.core.math.fixed_point import clamp, div, lerp, mul, square, square_root
from detmath.core.math.geometry import (
    SignedVec2,
    Vec2,
    add_vectors,
    clamp_vector_magnitude,
    cross_product,
    distance_between,
    dot_product,
    is_point_in_circle,
    is_point_in_rect,
    is_point_in_triangle,
    magnitude,
    normalize_vector,
    reflect_vector,
    rotate_vector,
    scale_vector,
    squared_distance,
    subtract_vectors,
)
from detmath.core.math.number_theory import (
    clmul,
    constant_time_eq,
    factorial,
    gcd,
    is_prime,
    lcm,
    log2_floor,
    log10_floor,
    modexp,
    modinv,
    n_choose_k,
    phi,
    popcount,
    reverse_bits,
    rotl64,
    rotr64,
)
from detmath.core.math.saturating import U64_MAX
from detmath.core.math.trajectory import projectile_coefficients
from detmath.core.math.trigonometry import cos, sin
from detmath.core.math.xorshift import Xorshift64Star
from detmath.dispatch.selectors import Selector


# =============================================================================
# ТИПЫ АРГУМЕНТОВ
# =============================================================================


class ArgKind(Enum):
    """Тип аргумента в call data."""

    U64 = "u64"
    I64 = "i64"
    U32 = "u32"
    WORD = "word"  # сырое 32-байтное слово
    POINT = "point"  # два слова (x, y)


WORDS_PER_KIND: Final[Dict[ArgKind, int]] = {
    ArgKind.U64: 1,
    ArgKind.I64: 1,
    ArgKind.U32: 1,
    ArgKind.WORD: 1,
    ArgKind.POINT: 2,
}

PAYLOAD_SIZE: Final[Dict[ArgKind, int]] = {
    ArgKind.U64: U64_PAYLOAD_SIZE,
    ArgKind.I64: U64_PAYLOAD_SIZE,
    ArgKind.U32: U32_PAYLOAD_SIZE,
    ArgKind.WORD: WORD_SIZE,
    ArgKind.POINT: U64_PAYLOAD_SIZE,
}

_SCALAR_DECODERS: Final[Dict[ArgKind, Callable[[bytes], object]]] = {
    ArgKind.U64: decode_u64,
    ArgKind.I64: decode_i64,
    ArgKind.U32: decode_u32,
    ArgKind.WORD: bytes,
}


# =============================================================================
# HANDLER SPEC
# =============================================================================


@dataclass(frozen=True)
class HandlerSpec:
    """Сигнатура операции и функция, возвращающая закодированный результат."""

    arg_kinds: Tuple[ArgKind, ...]
    fn: Callable[..., bytes]

    @property
    def word_count(self) -> int:
        """Число аргументных слов в call data."""
        return sum(WORDS_PER_KIND[kind] for kind in self.arg_kinds)

    def decode_args(self, words: list[bytes], strict: bool = False) -> list:
        """
        Слова → аргументы Python.

        Args:
            words: Ровно word_count слов по 32 байта
            strict: Проверять, что старшие байты нулевые

        Raises:
            DirtyWordTrap: strict=True и слово содержит мусор в старших байтах
        """
        if strict:
            index = 0
            for kind in self.arg_kinds:
                for _ in range(WORDS_PER_KIND[kind]):
                    check_clean_word(words[index], PAYLOAD_SIZE[kind], index)
                    index += 1

        args = []
        index = 0
        for kind in self.arg_kinds:
            if kind is ArgKind.POINT:
                args.append(decode_point(words[index], words[index + 1]))
            else:
                args.append(_SCALAR_DECODERS[kind](words[index]))
            index += WORDS_PER_KIND[kind]
        return args

    def invoke(self, words: list[bytes], strict: bool = False) -> bytes:
        return self.fn(*self.decode_args(words, strict))


# =============================================================================
# КОДИРОВАНИЕ СОСТАВНЫХ РЕЗУЛЬТАТОВ
# =============================================================================


def _u64_pair(vec: Vec2) -> bytes:
    return encode_words(encode_u64(vec.x), encode_u64(vec.y))


def _i64_pair(vec: SignedVec2) -> bytes:
    return encode_words(encode_i64(vec.x), encode_i64(vec.y))


def _clmul_words(a: int, b: int) -> bytes:
    # 128-битное произведение: старшая половина, затем младшая
    product = clmul(a, b)
    return encode_words(encode_u64(product >> 64), encode_u64(product & U64_MAX))


def _xorshift_next(seed: int) -> bytes:
    return encode_u64(Xorshift64Star(seed).next_u64())


def _projectile(angle_tenths: int, initial_velocity: int, gravity: int) -> bytes:
    c1, c2 = projectile_coefficients(angle_tenths, initial_velocity, gravity)
    return encode_words(encode_i64(c1), encode_i64(c2))


# =============================================================================
# ТАБЛИЦА
# =============================================================================

_U64 = ArgKind.U64
_I64 = ArgKind.I64
_U32 = ArgKind.U32
_WORD = ArgKind.WORD
_POINT = ArgKind.POINT


HANDLERS: Final[Dict[Selector, HandlerSpec]] = {
    # --- Fixed-point ---
    Selector.MODEXP: HandlerSpec((_U64, _U64, _U64), lambda b, e, m: encode_u64(modexp(b, e, m))),
    Selector.SQUARE: HandlerSpec((_U64,), lambda n: encode_u64(square(n))),
    Selector.SQUARE_ROOT: HandlerSpec((_U64,), lambda n: encode_u64(square_root(n))),
    Selector.MUL: HandlerSpec((_U64, _U64), lambda a, b: encode_u64(mul(a, b))),
    Selector.DIV: HandlerSpec((_U64, _U64), lambda a, b: encode_u64(div(a, b))),
    Selector.LERP: HandlerSpec((_U64, _U64, _U64), lambda s, e, t: encode_u64(lerp(s, e, t))),
    Selector.CLAMP: HandlerSpec((_U64, _U64, _U64), lambda v, lo, hi: encode_u64(clamp(v, lo, hi))),
    # --- Trigonometry ---
    Selector.SIN: HandlerSpec((_U32,), lambda angle: encode_i64(sin(angle))),
    Selector.COS: HandlerSpec((_U32,), lambda angle: encode_i64(cos(angle))),
    # --- Geometry ---
    Selector.SQUARED_DISTANCE: HandlerSpec(
        (_U64,) * 4, lambda *xy: encode_u64(squared_distance(*xy))
    ),
    Selector.DISTANCE: HandlerSpec((_U64,) * 4, lambda *xy: encode_u64(distance_between(*xy))),
    Selector.DOT_PRODUCT: HandlerSpec((_U64,) * 4, lambda *v: encode_u64(dot_product(*v))),
    Selector.MAGNITUDE: HandlerSpec((_U64, _U64), lambda vx, vy: encode_u64(magnitude(vx, vy))),
    Selector.CROSS_PRODUCT: HandlerSpec((_U64,) * 4, lambda *v: encode_i64(cross_product(*v))),
    Selector.CLAMP_VECTOR_MAGNITUDE: HandlerSpec(
        (_U64,) * 3, lambda *v: _u64_pair(clamp_vector_magnitude(*v))
    ),
    Selector.POINT_IN_RECT: HandlerSpec((_U64,) * 6, lambda *a: encode_bool(is_point_in_rect(*a))),
    Selector.POINT_IN_CIRCLE: HandlerSpec(
        (_U64,) * 5, lambda *a: encode_bool(is_point_in_circle(*a))
    ),
    Selector.ADD_VECTORS: HandlerSpec((_U64,) * 4, lambda *v: _u64_pair(add_vectors(*v))),
    Selector.SUBTRACT_VECTORS: HandlerSpec((_U64,) * 4, lambda *v: _u64_pair(subtract_vectors(*v))),
    Selector.SCALE_VECTOR: HandlerSpec((_U64,) * 3, lambda *v: _u64_pair(scale_vector(*v))),
    Selector.NORMALIZE_VECTOR: HandlerSpec((_U64, _U64), lambda *v: _u64_pair(normalize_vector(*v))),
    Selector.ROTATE_VECTOR: HandlerSpec((_U64, _U64, _U32), lambda *v: _i64_pair(rotate_vector(*v))),
    Selector.REFLECT_VECTOR: HandlerSpec((_U64,) * 4, lambda *v: _i64_pair(reflect_vector(*v))),
    Selector.POINT_IN_TRIANGLE: HandlerSpec(
        (_U64,) * 8, lambda *a: encode_bool(is_point_in_triangle(*a))
    ),
    # --- Number theory ---
    Selector.MODINV: HandlerSpec(
        (_I64, _I64), lambda a, m: encode_optional(modinv(a, m), encode_i64)
    ),
    Selector.IS_PRIME: HandlerSpec((_U64,), lambda n: encode_bool(is_prime(n))),
    Selector.GCD: HandlerSpec((_U64, _U64), lambda a, b: encode_u64(gcd(a, b))),
    Selector.LCM: HandlerSpec((_U64, _U64), lambda a, b: encode_u64(lcm(a, b))),
    Selector.FACTORIAL: HandlerSpec((_U64,), lambda n: encode_optional(factorial(n), encode_u64)),
    Selector.N_CHOOSE_K: HandlerSpec((_U64, _U64), lambda n, k: encode_u64(n_choose_k(n, k))),
    Selector.LOG2_FLOOR: HandlerSpec((_U64,), lambda n: encode_optional(log2_floor(n), encode_u32)),
    Selector.LOG10_FLOOR: HandlerSpec((_U64,), lambda n: encode_u32(log10_floor(n))),
    Selector.POPCOUNT: HandlerSpec((_U64,), lambda n: encode_u32(popcount(n))),
    Selector.REVERSE_BITS: HandlerSpec((_U64,), lambda n: encode_u64(reverse_bits(n))),
    Selector.PHI: HandlerSpec((_U64,), lambda n: encode_u64(phi(n))),
    # --- Bit utilities & crypto ---
    Selector.ROTL64: HandlerSpec((_U64, _U32), lambda n, k: encode_u64(rotl64(n, k))),
    Selector.ROTR64: HandlerSpec((_U64, _U32), lambda n, k: encode_u64(rotr64(n, k))),
    Selector.CONSTANT_TIME_EQ: HandlerSpec(
        (_WORD, _WORD), lambda a, b: encode_bool(constant_time_eq(a, b))
    ),
    Selector.CLMUL: HandlerSpec((_U64, _U64), _clmul_words),
    Selector.XORSHIFT_NEXT: HandlerSpec((_U64,), _xorshift_next),
    # --- Elliptic curve ---
    Selector.POINT_ADD: HandlerSpec(
        (_POINT, _POINT, _U64, _U64),
        lambda p1, p2, a, m: encode_point_result(point_add(p1, p2, a, m)),
    ),
    Selector.POINT_DOUBLE: HandlerSpec(
        (_POINT, _U64, _U64),
        lambda p, a, m: encode_point_result(point_double(p, a, m)),
    ),
    # --- Trajectory ---
    Selector.PROJECTILE_COEFFICIENTS: HandlerSpec((_U32, _U64, _U64), _projectile),
}
