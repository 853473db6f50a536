"""
Domain models and value objects.

Contains the immutable progression descriptor (start, stop, step).
"""

from src.core.domain.descriptor import (
    DEFAULT_START,
    DEFAULT_STEP,
    DEFAULT_STOP,
    NEGATIVE_INFINITY_TOKEN,
    POSITIVE_INFINITY_TOKEN,
    SequenceDescriptor,
)

__all__ = [
    # Defaults
    "DEFAULT_START",
    "DEFAULT_STOP",
    "DEFAULT_STEP",
    # Contract encoding
    "POSITIVE_INFINITY_TOKEN",
    "NEGATIVE_INFINITY_TOKEN",
    # Descriptor model
    "SequenceDescriptor",
]
