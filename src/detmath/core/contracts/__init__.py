"""
Contract Validation Module

Модуль для валидации JSON контрактов detmath (call vectors).
"""

from .validators import (
    CallVectorValidator,
    ContractValidator,
    SchemaLoader,
    validate_call_vectors,
)
from .vectors import CallVector, load_call_vectors, parse_call_vectors

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CallVectorValidator",
    "CallVector",
    # Functions
    "validate_call_vectors",
    "parse_call_vectors",
    "load_call_vectors",
]
