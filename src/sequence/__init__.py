"""Sequence — арифметические прогрессии с семантикой Python 3 range.

- make_range и named constructors Range.from_*
- Ленивый курсор с явным сигналом окончания (RangeCursor)
- Eager операции to_list/map/filter
"""

from .cursor import (
    CursorState,
    CursorStep,
    RangeCursor,
)
from .range import (
    Range,
    UnboundedSequenceError,
    make_range,
)

__all__ = [
    "make_range",
    "Range",
    "RangeCursor",
    "CursorState",
    "CursorStep",
    "UnboundedSequenceError",
]
