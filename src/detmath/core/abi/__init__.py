"""
ABI layer — кодек 32-байтных слов для аргументов и результатов.
"""

from detmath.core.abi.codec import (
    SELECTOR_SIZE,
    U32_PAYLOAD_SIZE,
    U64_MAX_WORD,
    U64_PAYLOAD_SIZE,
    WORD_SIZE,
    ZERO_WORD,
    check_clean_word,
    decode_bool,
    decode_i64,
    decode_optional,
    decode_point,
    decode_point_result,
    decode_u32,
    decode_u64,
    encode_bool,
    encode_i64,
    encode_int_word,
    encode_optional,
    encode_point,
    encode_point_result,
    encode_u32,
    encode_u64,
    encode_words,
    high_bytes_clean,
    read_selector,
    read_words,
)

__all__ = [
    # Constants
    "SELECTOR_SIZE",
    "U32_PAYLOAD_SIZE",
    "U64_MAX_WORD",
    "U64_PAYLOAD_SIZE",
    "WORD_SIZE",
    "ZERO_WORD",
    # Call data
    "read_selector",
    "read_words",
    "check_clean_word",
    "high_bytes_clean",
    # Scalars
    "decode_bool",
    "decode_i64",
    "decode_u32",
    "decode_u64",
    "encode_bool",
    "encode_i64",
    "encode_int_word",
    "encode_u32",
    "encode_u64",
    "encode_words",
    # Optional / Point
    "decode_optional",
    "decode_point",
    "decode_point_result",
    "encode_optional",
    "encode_point",
    "encode_point_result",
]
