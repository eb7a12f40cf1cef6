"""
Core math modules для detmath

Целочисленные примитивы с гарантией детерминизма и тотальности.
"""

# Saturating machine arithmetic
from detmath.core.math.saturating import (
    I64_MAX,
    I64_MIN,
    U32_MAX,
    U64_MAX,
    U128_MAX,
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

# Fixed-Point Core
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

# Trigonometric Engine
from detmath.core.math.trigonometry import SINE_TABLE, cos, sin

# Geometry Engine
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

# Number-Theory Engine
from detmath.core.math.number_theory import (
    FACTORIAL_MAX_N,
    MILLER_RABIN_WITNESSES,
    clmul,
    constant_time_eq,
    extended_gcd,
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

# Elliptic-Curve Engine
from detmath.core.math.elliptic import (
    point_add,
    point_double,
    point_negate,
    scalar_multiply,
)

# Stream Generator
from detmath.core.math.xorshift import XORSHIFT_MULTIPLIER, Xorshift64Star

# Trajectory Composer
from detmath.core.math.trajectory import (
    TrajectoryCoefficients,
    projectile_coefficients,
)

__all__ = [
    # Saturating — Constants
    "I64_MAX",
    "I64_MIN",
    "U32_MAX",
    "U64_MAX",
    "U128_MAX",
    # Saturating — Functions
    "saturate_i64",
    "saturating_add_i64",
    "saturating_add_u64",
    "saturating_mul_i64",
    "saturating_mul_u64",
    "saturating_sub_i64",
    "saturating_sub_u64",
    "trunc_div",
    "trunc_rem",
    "u64_to_i64",
    "wrapping_add_u32",
    "wrapping_mul_u64",
    # Fixed-Point
    "SCALE",
    "clamp",
    "div",
    "div_signed",
    "lerp",
    "mul",
    "mul_signed",
    "square",
    "square_root",
    "square_signed",
    # Trigonometry
    "SINE_TABLE",
    "cos",
    "sin",
    # Geometry — Types
    "SignedVec2",
    "Vec2",
    # Geometry — Functions
    "add_vectors",
    "clamp_vector_magnitude",
    "cross_product",
    "distance_between",
    "dot_product",
    "is_point_in_circle",
    "is_point_in_rect",
    "is_point_in_triangle",
    "magnitude",
    "normalize_vector",
    "reflect_vector",
    "rotate_vector",
    "scale_vector",
    "squared_distance",
    "subtract_vectors",
    # Number Theory — Constants
    "FACTORIAL_MAX_N",
    "MILLER_RABIN_WITNESSES",
    # Number Theory — Functions
    "clmul",
    "constant_time_eq",
    "extended_gcd",
    "factorial",
    "gcd",
    "is_prime",
    "lcm",
    "log2_floor",
    "log10_floor",
    "modexp",
    "modinv",
    "n_choose_k",
    "phi",
    "popcount",
    "reverse_bits",
    "rotl64",
    "rotr64",
    # Elliptic Curve
    "point_add",
    "point_double",
    "point_negate",
    "scalar_multiply",
    # Stream Generator
    "XORSHIFT_MULTIPLIER",
    "Xorshift64Star",
    # Trajectory
    "TrajectoryCoefficients",
    "projectile_coefficients",
]
