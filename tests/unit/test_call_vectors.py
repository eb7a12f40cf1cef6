"""
Tests for call vector contracts

- Валидность JSON Schema и загрузчика схем
- Валидация документа call vectors (required, типы, диапазоны)
- Pydantic модель CallVector и сборка call data
- Replay golden файла tests/vectors/core_vectors.json через Dispatcher
"""

import json
import logging
from pathlib import Path

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as PydanticValidationError

from detmath.core.abi.codec import encode_i64, encode_u64
from detmath.core.contracts import (
    CallVector,
    CallVectorValidator,
    SchemaLoader,
    load_call_vectors,
    parse_call_vectors,
    validate_call_vectors,
)
from detmath.dispatch import Dispatcher

GOLDEN_VECTORS = Path(__file__).resolve().parent.parent / "vectors" / "core_vectors.json"


@pytest.fixture
def valid_document():
    return {
        "schema_version": "1",
        "vectors": [
            {"name": "gcd", "selector": 27, "args": [48, 18], "expected": [6]},
            {
                "name": "sin_210",
                "selector": 7,
                "args": [2100],
                "expected": [-50],
                "description": "third quadrant",
            },
        ],
    }


# =============================================================================
# SCHEMA
# =============================================================================


class TestSchemaLoader:
    """Тесты SchemaLoader"""

    def test_loads_and_caches_schema(self):
        loader = SchemaLoader()
        schema = loader.load_schema("call_vector")
        assert schema["title"] == "CallVectorDocument"
        assert loader.load_schema("call_vector") is schema

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("no_such_schema")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


class TestCallVectorValidator:
    """Тесты валидации документа"""

    def test_valid_document(self, valid_document):
        validate_call_vectors(valid_document)
        assert CallVectorValidator().is_valid(valid_document)

    def test_missing_required_field(self, valid_document):
        del valid_document["vectors"][0]["expected"]
        with pytest.raises(ValidationError, match="expected"):
            validate_call_vectors(valid_document)

    def test_wrong_schema_version(self, valid_document):
        valid_document["schema_version"] = "2"
        with pytest.raises(ValidationError):
            validate_call_vectors(valid_document)

    def test_selector_out_of_range(self, valid_document):
        valid_document["vectors"][0]["selector"] = 1 << 32
        with pytest.raises(ValidationError):
            validate_call_vectors(valid_document)

    def test_word_out_of_range(self, valid_document):
        valid_document["vectors"][0]["args"] = [1 << 64]
        assert not CallVectorValidator().is_valid(valid_document)

    def test_unknown_property_rejected(self, valid_document):
        valid_document["vectors"][0]["gas"] = 100
        with pytest.raises(ValidationError):
            validate_call_vectors(valid_document)

    def test_bad_name_pattern(self, valid_document):
        valid_document["vectors"][0]["name"] = "Has Spaces"
        errors = list(CallVectorValidator().iter_errors(valid_document))
        assert len(errors) == 1


# =============================================================================
# MODEL
# =============================================================================


class TestCallVectorModel:
    """Тесты модели CallVector"""

    def test_call_data(self):
        vector = CallVector(name="gcd", selector=27, args=[48, 18], expected=[6])
        assert vector.call_data() == b"\x00\x00\x00\x1b" + encode_u64(48) + encode_u64(18)

    def test_expected_output_negative_word(self):
        vector = CallVector(name="sin", selector=7, args=[2100], expected=[-50])
        assert vector.expected_output() == encode_i64(-50)

    def test_frozen(self):
        vector = CallVector(name="gcd", selector=27, args=[48, 18], expected=[6])
        with pytest.raises(PydanticValidationError):
            vector.name = "other"

    def test_empty_expected_rejected(self):
        with pytest.raises(PydanticValidationError):
            CallVector(name="gcd", selector=27, args=[], expected=[])

    def test_out_of_range_word_in_call_data(self):
        vector = CallVector(name="big", selector=1, args=[1 << 64], expected=[0])
        with pytest.raises(ValueError, match="out of range"):
            vector.call_data()

    def test_parse_call_vectors(self, valid_document):
        vectors = parse_call_vectors(valid_document)
        assert [v.name for v in vectors] == ["gcd", "sin_210"]
        assert vectors[1].description == "third quadrant"


# =============================================================================
# GOLDEN REPLAY
# =============================================================================


class TestGoldenVectors:
    """Replay golden call vectors"""

    def test_load_logs_count(self, caplog):
        with caplog.at_level(logging.INFO, logger="detmath.core.contracts.vectors"):
            vectors = load_call_vectors(GOLDEN_VECTORS)
        assert f"Loaded {len(vectors)} call vectors" in caplog.text

    def test_names_unique(self):
        names = [v.name for v in load_call_vectors(GOLDEN_VECTORS)]
        assert len(names) == len(set(names))

    @pytest.mark.parametrize("vector", load_call_vectors(GOLDEN_VECTORS), ids=lambda v: v.name)
    def test_replay(self, vector: CallVector):
        assert Dispatcher().dispatch(vector.call_data()) == vector.expected_output()
