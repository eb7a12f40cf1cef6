"""
Word Codec — кодирование аргументов и результатов в 32-байтные слова

Формат вызова:
    selector (4 байта, big-endian) || word_0 || word_1 || ...

Слово (ABI word) — 32 байта big-endian:
- u64 / i64 занимают младшие 8 байт (i64 — дополнительный код, БЕЗ
  расширения знака в старшие байты)
- u32 занимает младшие 4 байта
- bool — младший бит последнего байта

Составные результаты:
- Optional: слово присутствия + слово значения (нули при отсутствии)
- Point: слово присутствия + x + y; Infinity = (U64_MAX, U64_MAX)

Декодер читает только младшие байты и не проверяет старшие (dirty bits
игнорируются). Проверка доступна отдельно через check_clean_word.
"""

from typing import Callable, Final, Optional

from detmath.core.domain.point import INFINITY, AffinePoint, Point, PointAtInfinity
from detmath.core.faults import DirtyWordTrap, ExecutionTrap
from detmath.core.math.saturating import I64_MAX, I64_MIN, U32_MAX, U64_MAX

# =============================================================================
# РАЗМЕРЫ
# =============================================================================

WORD_SIZE: Final[int] = 32
SELECTOR_SIZE: Final[int] = 4

U64_PAYLOAD_SIZE: Final[int] = 8
U32_PAYLOAD_SIZE: Final[int] = 4

ZERO_WORD: Final[bytes] = bytes(WORD_SIZE)


def _require_word(word: bytes) -> None:
    if len(word) != WORD_SIZE:
        raise ExecutionTrap(f"ABI word must be {WORD_SIZE} bytes, got {len(word)}")


# =============================================================================
# ЧТЕНИЕ CALL DATA
# =============================================================================


def read_selector(call_data: bytes) -> int:
    """
    Селектор из первых 4 байт call data.

    Недостающие байты читаются как нули.
    """
    return int.from_bytes(call_data[:SELECTOR_SIZE].ljust(SELECTOR_SIZE, b"\x00"), "big")


def read_words(call_data: bytes, count: int) -> list[bytes]:
    """
    Чтение count аргументных слов, начиная со смещения 4.

    Слова за пределами call data дополняются нулями, лишние байты в конце
    игнорируются.
    """
    words = []
    for i in range(count):
        start = SELECTOR_SIZE + i * WORD_SIZE
        chunk = call_data[start:start + WORD_SIZE]
        words.append(chunk.ljust(WORD_SIZE, b"\x00"))
    return words


def high_bytes_clean(word: bytes, payload_size: int) -> bool:
    """True, если все байты слова вне полезной нагрузки равны нулю."""
    _require_word(word)
    return not any(word[:WORD_SIZE - payload_size])


def check_clean_word(word: bytes, payload_size: int, word_index: int) -> None:
    """
    Strict проверка старших байт.

    Raises:
        DirtyWordTrap: Если старшие байты ненулевые
    """
    if not high_bytes_clean(word, payload_size):
        raise DirtyWordTrap(word_index, word)


# =============================================================================
# СКАЛЯРЫ
# =============================================================================


def decode_u64(word: bytes) -> int:
    _require_word(word)
    return int.from_bytes(word[WORD_SIZE - U64_PAYLOAD_SIZE:], "big")


def decode_i64(word: bytes) -> int:
    _require_word(word)
    return int.from_bytes(word[WORD_SIZE - U64_PAYLOAD_SIZE:], "big", signed=True)


def decode_u32(word: bytes) -> int:
    _require_word(word)
    return int.from_bytes(word[WORD_SIZE - U32_PAYLOAD_SIZE:], "big")


def decode_bool(word: bytes) -> bool:
    _require_word(word)
    return any(word)


def encode_u64(value: int) -> bytes:
    """
    u64 → слово.

    Raises:
        ExecutionTrap: Если значение вне диапазона u64 (нарушение инварианта движка)
    """
    if not 0 <= value <= U64_MAX:
        raise ExecutionTrap(f"value out of u64 range: {value}")
    return value.to_bytes(WORD_SIZE, "big")


def encode_i64(value: int) -> bytes:
    """i64 → слово: 8 байт дополнительного кода, старшие 24 байта нулевые."""
    if not I64_MIN <= value <= I64_MAX:
        raise ExecutionTrap(f"value out of i64 range: {value}")
    return (value & U64_MAX).to_bytes(WORD_SIZE, "big")


def encode_u32(value: int) -> bytes:
    if not 0 <= value <= U32_MAX:
        raise ExecutionTrap(f"value out of u32 range: {value}")
    return value.to_bytes(WORD_SIZE, "big")


def encode_bool(value: bool) -> bytes:
    return (1 if value else 0).to_bytes(WORD_SIZE, "big")


def encode_int_word(value: int) -> bytes:
    """
    Целое → слово по знаку: отрицательное как i64, иначе как u64.

    Используется call vectors, где аргументы записаны обычными числами.
    """
    if value < 0:
        return encode_i64(value)
    return encode_u64(value)


def encode_words(*words: bytes) -> bytes:
    """Конкатенация слов (пары векторов, коэффициенты, clmul high/low)."""
    for word in words:
        _require_word(word)
    return b"".join(words)


# =============================================================================
# OPTIONAL
# =============================================================================


def encode_optional(value: Optional[int], encoder: Callable[[int], bytes]) -> bytes:
    """
    Optional → слово присутствия + слово значения.

    Examples:
        >>> encode_optional(None, encode_u64) == bytes(64)
        True
    """
    if value is None:
        return encode_bool(False) + ZERO_WORD
    return encode_bool(True) + encoder(value)


def decode_optional(data: bytes, decoder: Callable[[bytes], int]) -> Optional[int]:
    """Обратное к encode_optional."""
    if len(data) != 2 * WORD_SIZE:
        raise ExecutionTrap(f"optional encoding must be {2 * WORD_SIZE} bytes, got {len(data)}")
    if not decode_bool(data[:WORD_SIZE]):
        return None
    return decoder(data[WORD_SIZE:])


# =============================================================================
# POINT
# =============================================================================

# Сентинел точки на бесконечности
U64_MAX_WORD: Final[bytes] = U64_MAX.to_bytes(WORD_SIZE, "big")


def decode_point(x_word: bytes, y_word: bytes) -> Point:
    """
    Пара слов → точка.

    Как и для скаляров, читаются только младшие 8 байт каждого слова;
    пара (U64_MAX, U64_MAX) означает Infinity.
    """
    x = decode_u64(x_word)
    y = decode_u64(y_word)
    if x == U64_MAX and y == U64_MAX:
        return INFINITY
    return AffinePoint(x=x, y=y)


def encode_point(point: Point) -> bytes:
    """Точка → два слова (x, y)."""
    if isinstance(point, PointAtInfinity):
        return U64_MAX_WORD + U64_MAX_WORD
    return encode_u64(point.x) + encode_u64(point.y)


def encode_point_result(point: Optional[Point]) -> bytes:
    """Optional[Point] → присутствие + x + y; None кодируется тремя нулевыми словами."""
    if point is None:
        return encode_bool(False) + ZERO_WORD + ZERO_WORD
    return encode_bool(True) + encode_point(point)


def decode_point_result(data: bytes) -> Optional[Point]:
    """Обратное к encode_point_result."""
    if len(data) != 3 * WORD_SIZE:
        raise ExecutionTrap(f"point encoding must be {3 * WORD_SIZE} bytes, got {len(data)}")
    if not decode_bool(data[:WORD_SIZE]):
        return None
    return decode_point(data[WORD_SIZE:2 * WORD_SIZE], data[2 * WORD_SIZE:])
