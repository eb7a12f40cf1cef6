"""
Dispatcher — точка входа вызова

Поток вызова:
1. Селектор из первых 4 байт call data
2. Неизвестный селектор → default_response (одно нулевое слово)
3. Чтение аргументных слов (недостающие байты — нули)
4. Декодирование, вызов операции, кодирование результата

Хост (Host) поставляет call data и принимает результат. ExecutionTrap
не перехватывается: при сбое return_value не вызывается вовсе.
"""

import logging
from typing import Dict, Optional, Protocol

from detmath.core.abi.codec import read_selector, read_words
from detmath.core.faults import ExecutionTrap
from detmath.dispatch.config import DispatcherConfig
from detmath.dispatch.handlers import HANDLERS, HandlerSpec
from detmath.dispatch.selectors import Selector

logger = logging.getLogger(__name__)


class Host(Protocol):
    """Среда исполнения: источник call data и приёмник результата."""

    def call_data(self) -> bytes:
        ...

    def return_value(self, data: bytes) -> None:
        ...


class Dispatcher:
    """
    Маршрутизация вызова по селектору.

    Экземпляр хранит только неизменяемую конфигурацию и таблицу
    обработчиков, поэтому может переиспользоваться между вызовами.
    """

    def __init__(
        self,
        config: Optional[DispatcherConfig] = None,
        handlers: Optional[Dict[Selector, HandlerSpec]] = None,
    ):
        """
        Args:
            config: Конфигурация (default DispatcherConfig())
            handlers: Таблица обработчиков (default HANDLERS)

        Raises:
            ExecutionTrap: Если таблица не покрывает всё перечисление Selector
        """
        self.config = config or DispatcherConfig()
        self._handlers = HANDLERS if handlers is None else handlers

        missing = [selector.name for selector in Selector if selector not in self._handlers]
        if missing:
            raise ExecutionTrap(f"handler table is missing selectors: {', '.join(missing)}")

    def dispatch(self, call_data: bytes) -> bytes:
        """
        Исполнение одного вызова.

        Args:
            call_data: selector || word_0 || word_1 || ...

        Returns:
            Закодированный результат (одно или несколько слов)

        Raises:
            ExecutionTrap: Неустранимый сбой (включая DirtyWordTrap в strict режиме)
        """
        raw_selector = read_selector(call_data)
        try:
            selector = Selector(raw_selector)
        except ValueError:
            logger.warning("Unknown selector %#010x, returning default response", raw_selector)
            return self.config.default_response

        handler = self._handlers[selector]
        words = read_words(call_data, handler.word_count)

        try:
            result = handler.invoke(words, strict=self.config.strict_words)
        except ExecutionTrap as e:
            logger.error("Execution trap in %s: %s", selector.name, e)
            raise

        logger.debug("Dispatched %s (%d words in, %d bytes out)", selector.name, len(words), len(result))
        return result


def execute(host: Host, dispatcher: Optional[Dispatcher] = None) -> None:
    """
    Полный цикл вызова: call data хоста → dispatch → return_value.

    Результат передаётся хосту ровно один раз и только при успехе.
    """
    dispatcher = dispatcher or Dispatcher()
    result = dispatcher.dispatch(host.call_data())
    host.return_value(result)
