"""
Dispatch layer для detmath

Селекторы, таблица обработчиков, конфигурация и точка входа execute(host).
"""

from detmath.dispatch.config import DispatcherConfig
from detmath.dispatch.dispatcher import Dispatcher, Host, execute
from detmath.dispatch.handlers import HANDLERS, ArgKind, HandlerSpec
from detmath.dispatch.selectors import Selector

__all__ = [
    # Classes
    "ArgKind",
    "Dispatcher",
    "DispatcherConfig",
    "HandlerSpec",
    "Host",
    "Selector",
    # Handler table
    "HANDLERS",
    # Functions
    "execute",
]
