"""Конфигурация диспетчера."""

from dataclasses import dataclass

from detmath.core.abi.codec import WORD_SIZE, ZERO_WORD


@dataclass(frozen=True)
class DispatcherConfig:
    """Конфигурация Dispatcher.

    strict_words:
        False (default) — старшие байты аргументных слов игнорируются;
        True — ненулевые старшие байты приводят к DirtyWordTrap.
    default_response:
        Ответ на неизвестный селектор (одно нулевое слово).
    """

    strict_words: bool = False
    default_response: bytes = ZERO_WORD

    def __post_init__(self):
        if len(self.default_response) != WORD_SIZE:
            raise ValueError(
                f"default_response must be exactly {WORD_SIZE} bytes, got {len(self.default_response)}"
            )
