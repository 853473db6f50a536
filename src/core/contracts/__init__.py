"""
Contract Validation Module

Модуль для валидации JSON контрактов параметров прогрессии.
"""

from .validators import (
    SCHEMA_DIR,
    SEQUENCE_DESCRIPTOR_SCHEMA,
    SequenceDescriptorValidator,
    load_schema,
    validate_sequence_descriptor,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "SEQUENCE_DESCRIPTOR_SCHEMA",
    # Classes
    "SequenceDescriptorValidator",
    # Functions
    "load_schema",
    "validate_sequence_descriptor",
]
