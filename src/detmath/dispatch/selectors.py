"""Selector — закрытое перечисление операций ABI."""

from enum import IntEnum


class Selector(IntEnum):
    """
    4-байтный идентификатор операции.

    0x01–0x18: fixed-point и геометрия
    0x19–0x2B: теория чисел, криптография, траектория

    Любое значение вне перечисления обрабатывается веткой по умолчанию
    диспетчера (нулевое слово), а не ошибкой.
    """

    # --- Fixed-point & geometry ---
    MODEXP = 0x01
    SQUARE = 0x02
    SQUARE_ROOT = 0x03
    MUL = 0x04
    DIV = 0x05
    LERP = 0x06
    SIN = 0x07
    COS = 0x08
    SQUARED_DISTANCE = 0x09
    DISTANCE = 0x0A
    DOT_PRODUCT = 0x0B
    MAGNITUDE = 0x0C
    CROSS_PRODUCT = 0x0D
    CLAMP = 0x0E
    CLAMP_VECTOR_MAGNITUDE = 0x0F
    POINT_IN_RECT = 0x10
    POINT_IN_CIRCLE = 0x11
    ADD_VECTORS = 0x12
    SUBTRACT_VECTORS = 0x13
    SCALE_VECTOR = 0x14
    NORMALIZE_VECTOR = 0x15
    ROTATE_VECTOR = 0x16
    REFLECT_VECTOR = 0x17
    POINT_IN_TRIANGLE = 0x18

    # --- Number theory, crypto & trajectory ---
    MODINV = 0x19
    IS_PRIME = 0x1A
    GCD = 0x1B
    LCM = 0x1C
    FACTORIAL = 0x1D
    N_CHOOSE_K = 0x1E
    LOG2_FLOOR = 0x1F
    LOG10_FLOOR = 0x20
    POPCOUNT = 0x21
    REVERSE_BITS = 0x22
    PHI = 0x23
    ROTL64 = 0x24
    ROTR64 = 0x25
    CONSTANT_TIME_EQ = 0x26
    CLMUL = 0x27
    XORSHIFT_NEXT = 0x28
    POINT_ADD = 0x29
    POINT_DOUBLE = 0x2A
    PROJECTILE_COEFFICIENTS = 0x2B
