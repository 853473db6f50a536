"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Детекция нарушений constraints (not/enum/additionalProperties)
- Интеграция с Pydantic моделью SequenceDescriptor
"""

import json

import pytest
from jsonschema import Draft202012Validator, ValidationError

from src.core.contracts import (
    SCHEMA_DIR,
    SEQUENCE_DESCRIPTOR_SCHEMA,
    SequenceDescriptorValidator,
    load_schema,
    validate_sequence_descriptor,
)
from src.core.domain import SequenceDescriptor


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_descriptor():
    """Валидный sequence_descriptor для тестирования."""
    return {"start": 0, "stop": 100, "step": 20}


@pytest.fixture
def validator():
    return SequenceDescriptorValidator()


# =============================================================================
# SCHEMA LOADING
# =============================================================================


class TestLoadSchema:
    """Тесты load_schema."""

    def test_schema_dir_exists(self):
        assert SCHEMA_DIR.is_dir()

    def test_load_schema_is_valid_draft_2020_12(self):
        schema = load_schema(SEQUENCE_DESCRIPTOR_SCHEMA)
        Draft202012Validator.check_schema(schema)
        assert schema["title"] == "SequenceDescriptor"

    def test_schema_cached(self):
        assert load_schema(SEQUENCE_DESCRIPTOR_SCHEMA) is load_schema(
            SEQUENCE_DESCRIPTOR_SCHEMA
        )

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            load_schema("does_not_exist")

    def test_missing_schema_dir(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            load_schema(SEQUENCE_DESCRIPTOR_SCHEMA, tmp_path / "absent")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text(
            json.dumps({"type": "not-a-type"}), encoding="utf-8"
        )
        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            load_schema("broken", tmp_path)


# =============================================================================
# SEQUENCE DESCRIPTOR CONTRACT
# =============================================================================


class TestSequenceDescriptorContract:
    """Тесты sequence_descriptor контракта."""

    def test_valid(self, validator, valid_descriptor):
        validator.validate(valid_descriptor)
        assert validator.errors(valid_descriptor) == []
        validate_sequence_descriptor(valid_descriptor)

    def test_valid_float_values(self, validator):
        assert validator.errors({"start": 0.5, "stop": 2.5, "step": 0.25}) == []

    def test_valid_stop_only(self, validator):
        assert validator.errors({"stop": 10}) == []

    def test_valid_infinite_stop(self, validator):
        assert validator.errors({"stop": "Infinity"}) == []
        assert validator.errors({"start": 0, "stop": "-Infinity", "step": 1}) == []

    def test_missing_stop(self, validator):
        with pytest.raises(ValidationError, match="'stop' is a required property"):
            validator.validate({"start": 0, "step": 1})

    def test_zero_step(self, validator):
        assert validator.errors({"stop": 10, "step": 0})
        assert validator.errors({"stop": 10, "step": 0.0})

    def test_wrong_types(self, validator):
        assert validator.errors({"stop": "10"})
        assert validator.errors({"stop": None})
        assert validator.errors({"stop": True})
        assert validator.errors({"start": "0", "stop": 10})

    def test_unknown_property(self, validator):
        with pytest.raises(ValidationError):
            validate_sequence_descriptor({"stop": 10, "count": 3})

    def test_errors_reports_all(self, validator):
        errors = validator.errors({"start": "a", "step": 0})
        assert len(errors) == 3
        assert "'stop' is a required property" in errors

    def test_errors_empty_for_valid(self, validator, valid_descriptor):
        assert validator.errors(valid_descriptor) == []

    def test_model_contract_is_valid(self, validator):
        """to_contract() модели всегда проходит схему."""
        for d in (
            SequenceDescriptor(stop=10),
            SequenceDescriptor(start=-1.5, stop=3.0, step=0.5),
            SequenceDescriptor(stop=float("inf")),
        ):
            assert validator.errors(d.to_contract()) == []
