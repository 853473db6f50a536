"""
JSON Schema Contract Validators

Валидация JSON payload'ов параметров прогрессии против формального
JSON Schema контракта (jsonschema, Draft 2020-12).

Схемы поставляются вместе с пакетом (src/core/contracts/schema/):
- sequence_descriptor.json
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, List

from jsonschema import Draft202012Validator, SchemaError

# Каталог схем рядом с модулем
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

SEQUENCE_DESCRIPTOR_SCHEMA: Final[str] = "sequence_descriptor"


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-validation JSON Schema (результат кэшируется).

    Args:
        schema_name: Имя схемы без расширения (например, 'sequence_descriptor')
        schema_dir: Каталог схем (default: SCHEMA_DIR)

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема не проходит meta-validation
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.is_file():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

    return schema


class SequenceDescriptorValidator:
    """Валидатор payload'а sequence_descriptor."""

    def __init__(self):
        self.validator = Draft202012Validator(load_schema(SEQUENCE_DESCRIPTOR_SCHEMA))

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первое (по релевантности) нарушение схемы
        """
        self.validator.validate(data)

    def errors(self, data: Dict[str, Any]) -> List[str]:
        """Все нарушения схемы в виде сообщений, отсортированных по пути поля."""
        found = sorted(self.validator.iter_errors(data), key=lambda e: list(e.path))
        return [e.message for e in found]


def validate_sequence_descriptor(data: Dict[str, Any]) -> None:
    """
    Валидация sequence_descriptor данных.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    SequenceDescriptorValidator().validate(data)
