"""
Core math modules

Математические примитивы прогрессий с гарантией численной корректности.
"""

from src.core.math.numerical_safeguards import (
    # Constants
    MAX_SEARCHABLE_INDEX,
    UNBOUNDED_LENGTH,
    # NaN/Inf checks
    is_nan,
    is_valid_float,
    # Validation
    validate_finite,
    validate_nonzero,
    validate_not_nan,
    # Progression math
    ceil_div,
    count_progression_terms,
    term_below,
)

__all__ = [
    # Constants
    "MAX_SEARCHABLE_INDEX",
    "UNBOUNDED_LENGTH",
    # NaN/Inf checks
    "is_nan",
    "is_valid_float",
    # Validation
    "validate_finite",
    "validate_nonzero",
    "validate_not_nan",
    # Progression math
    "ceil_div",
    "count_progression_terms",
    "term_below",
]
