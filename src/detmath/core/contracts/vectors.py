"""
CallVector — golden call vectors для воспроизводимости вызовов

Документ call vectors (JSON) описывает вызовы через ABI и их ожидаемый
результат. Документ проверяется JSON Schema (call_vector.json), затем
каждый вектор превращается в immutable Pydantic модель.

Аргументы и ожидаемые слова записаны целыми числами:
- неотрицательное → u64 в младших 8 байтах слова
- отрицательное → i64 в дополнительном коде
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel, Field

from detmath.core.abi.codec import SELECTOR_SIZE, encode_int_word
from detmath.core.contracts.validators import validate_call_vectors
from detmath.core.math.saturating import I64_MIN, U32_MAX, U64_MAX

logger = logging.getLogger(__name__)


# =============================================================================
# CALL VECTOR MODEL
# =============================================================================


class CallVector(BaseModel):
    """Один вызов: селектор, аргументы и ожидаемый выход."""

    name: str = Field(..., min_length=1, description="Идентификатор вектора")
    selector: int = Field(..., ge=0, le=U32_MAX, description="4-байтный селектор")
    args: list[int] = Field(default_factory=list, description="Аргументные слова")
    expected: list[int] = Field(..., min_length=1, description="Ожидаемые слова результата")
    description: str = Field(default="", description="Пояснение")

    model_config = {"frozen": True}

    def call_data(self) -> bytes:
        """Сборка call data: селектор + аргументные слова."""
        words = b"".join(encode_int_word(_check_word_int(v)) for v in self.args)
        return self.selector.to_bytes(SELECTOR_SIZE, "big") + words

    def expected_output(self) -> bytes:
        """Ожидаемый выход как конкатенация слов."""
        return b"".join(encode_int_word(_check_word_int(v)) for v in self.expected)


def _check_word_int(value: int) -> int:
    if not I64_MIN <= value <= U64_MAX:
        raise ValueError(f"word integer out of range: {value}")
    return value


# =============================================================================
# LOADING
# =============================================================================


def parse_call_vectors(data: Dict[str, Any]) -> list[CallVector]:
    """
    Валидация документа и построение моделей.

    Raises:
        jsonschema.ValidationError: Если документ не соответствует схеме
        pydantic.ValidationError: Если вектор не проходит валидацию модели
    """
    validate_call_vectors(data)
    return [CallVector(**item) for item in data["vectors"]]


def load_call_vectors(path: Path | str) -> list[CallVector]:
    """
    Загрузка call vectors из JSON файла.

    Args:
        path: Путь к JSON документу

    Returns:
        Список CallVector в порядке документа
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    vectors = parse_call_vectors(data)
    logger.info("Loaded %d call vectors from %s", len(vectors), path)
    return vectors
