"""Range — арифметическая прогрессия с семантикой Python 3 range.

Формы конструирования:
- make_range(stop)               → 0, 1, ..., stop - 1
- make_range(start, stop)        → start, start + 1, ..., < stop
- make_range(start, stop, step)  → start, start + step, ..., < stop

Значения: start + k*step для k = 0, 1, 2, ... пока значение < stop.
При start >= stop прогрессия пуста независимо от знака step.

Потребление:
- iter(r) / for — новый независимый курсор при каждом вызове
- lazy() — курсор с pull() → CursorStep(value, done), подходит для stop = +inf
- to_list(), map(), filter() — eager материализация (только для ограниченных)

Examples:
    >>> make_range(10).to_list()
    [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]
    >>> make_range(0, 100, 20).to_list()
    [0, 20, 40, 60, 80]
    >>> cursor = make_range(float('inf')).lazy()
    >>> cursor.pull()
    CursorStep(value=0, done=False)
"""

import math
from fractions import Fraction
from typing import Any, Callable, Dict, Iterator, List, Optional

from src.core.domain.descriptor import DEFAULT_START, DEFAULT_STEP, SequenceDescriptor
from src.core.math.numerical_safeguards import MAX_SEARCHABLE_INDEX
from src.sequence.cursor import RangeCursor


class UnboundedSequenceError(OverflowError):
    """Eager операция над неограниченной прогрессией (stop = +inf).

    Материализация такой прогрессии никогда не завершится, поэтому
    операция отвергается до начала итерации. Для инкрементального
    потребления используйте lazy().
    """
    pass


class Range:
    """Арифметическая прогрессия поверх immutable SequenceDescriptor."""

    def __init__(self, descriptor: SequenceDescriptor):
        if not isinstance(descriptor, SequenceDescriptor):
            raise TypeError(
                f"Range expects a SequenceDescriptor, got {type(descriptor).__name__}"
            )
        self._descriptor = descriptor

    # -------------------------------------------------------------------------
    # Named constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_stop(cls, stop: float) -> "Range":
        return cls(SequenceDescriptor(stop=stop))

    @classmethod
    def from_start_stop(cls, start: float, stop: float) -> "Range":
        return cls(SequenceDescriptor(start=start, stop=stop))

    @classmethod
    def from_start_stop_step(cls, start: float, stop: float, step: float) -> "Range":
        return cls(SequenceDescriptor(start=start, stop=stop, step=step))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Range":
        """Построение из payload контракта sequence_descriptor (с валидацией схемы)."""
        return cls(SequenceDescriptor.from_contract(data))

    def to_dict(self) -> Dict[str, Any]:
        return self._descriptor.to_contract()

    # -------------------------------------------------------------------------
    # Descriptor
    # -------------------------------------------------------------------------

    @property
    def descriptor(self) -> SequenceDescriptor:
        return self._descriptor

    @property
    def start(self) -> float:
        return self._descriptor.start

    @property
    def stop(self) -> float:
        return self._descriptor.stop

    @property
    def step(self) -> float:
        return self._descriptor.step

    @property
    def length(self) -> float:
        """Количество членов: int ≥ 0, либо math.inf для неограниченной прогрессии."""
        return self._descriptor.length

    @property
    def is_unbounded(self) -> bool:
        return self._descriptor.is_unbounded

    def _require_bounded(self, operation: str) -> None:
        if self.is_unbounded:
            raise UnboundedSequenceError(
                f"Cannot {operation} an unbounded range {self!r}; use lazy() instead"
            )

    # -------------------------------------------------------------------------
    # Lazy iteration
    # -------------------------------------------------------------------------

    def __iter__(self) -> RangeCursor:
        return RangeCursor(self._descriptor)

    def lazy(self) -> RangeCursor:
        """Новый курсор с ручным продвижением через pull()."""
        return RangeCursor(self._descriptor)

    def __reversed__(self) -> Iterator[float]:
        self._require_bounded("reverse")
        return (self._descriptor.term(k) for k in range(self.length - 1, -1, -1))

    # -------------------------------------------------------------------------
    # Eager materialization
    # -------------------------------------------------------------------------

    def to_list(self) -> List[float]:
        """
        Материализация прогрессии в список в порядке перечисления.

        Raises:
            UnboundedSequenceError: Если stop = +inf
        """
        self._require_bounded("materialize")
        return list(self)

    def map(self, transform: Callable[[float, int, "Range"], Any]) -> List[Any]:
        """
        Eager применение transform(value, index, range) к каждому члену.

        Результат имеет длину self.length и сохраняет порядок перечисления.

        Raises:
            UnboundedSequenceError: Если stop = +inf
        """
        self._require_bounded("map")
        return [transform(value, index, self) for index, value in enumerate(self)]

    def filter(self, predicate: Callable[[float, int, "Range"], Any]) -> List[float]:
        """
        Eager отбор членов, для которых predicate(value, index, range) истинен.

        Относительный порядок членов сохраняется.

        Raises:
            UnboundedSequenceError: Если stop = +inf
        """
        self._require_bounded("filter")
        return [value for index, value in enumerate(self) if predicate(value, index, self)]

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        self._require_bounded("take len() of")
        return self.length

    def __bool__(self) -> bool:
        return self.step > 0 and self.start < self.stop

    def __getitem__(self, index: int) -> float:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(
                f"Range indices must be integers, not {type(index).__name__}"
            )

        if index < 0:
            self._require_bounded("use negative indices on")
            index += self.length

        if index < 0 or index >= self.length:
            raise IndexError("Range index out of range")

        return self._descriptor.term(index)

    def _index_of(self, value: Any) -> Optional[int]:
        """Индекс члена, равного value, либо None."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        if not self or not self.start <= value < self.stop:
            return None

        if all(isinstance(v, int) for v in (value, self.start, self.step)):
            index, remainder = divmod(value - self.start, self.step)
            return index if remainder == 0 else None

        if not math.isfinite(value):
            return None

        # Ближайший индекс (точная рациональная арифметика, без переполнения);
        # членство подтверждается точным сравнением с term()
        index = round((Fraction(value) - Fraction(self.start)) / Fraction(self.step))
        if index >= MAX_SEARCHABLE_INDEX:
            return None
        if 0 <= index < self.length and self._descriptor.term(index) == value:
            return index
        return None

    def __contains__(self, value: Any) -> bool:
        return self._index_of(value) is not None

    def index(self, value: float) -> int:
        """
        Raises:
            ValueError: Если value не является членом прогрессии
        """
        index = self._index_of(value)
        if index is None:
            raise ValueError(f"{value!r} is not in range")
        return index

    def count(self, value: float) -> int:
        # Член прогрессии встречается ровно 0 или 1 раз
        return int(value in self)

    # -------------------------------------------------------------------------
    # Equality & repr
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return self._descriptor == other._descriptor

    def __hash__(self) -> int:
        return hash(self._descriptor)

    def __repr__(self) -> str:
        if self.start == DEFAULT_START and self.step == DEFAULT_STEP:
            return f"Range({self.stop!r})"
        if self.step == DEFAULT_STEP:
            return f"Range({self.start!r}, {self.stop!r})"
        return f"Range({self.start!r}, {self.stop!r}, {self.step!r})"


# Маркер "stop не передан": None остаётся обычным (невалидным) значением
_STOP_OMITTED = object()


def make_range(
    start_or_stop: float = DEFAULT_START,
    stop: Any = _STOP_OMITTED,
    step: float = DEFAULT_STEP,
) -> Range:
    """
    Построение прогрессии в стиле Python 3 range.

    Args:
        start_or_stop: stop, если stop не задан; иначе start
        stop: Исключающая верхняя граница (явный None отвергается валидацией)
        step: Разность прогрессии (default: 1)

    Returns:
        Range. make_range() без аргументов даёт пустую прогрессию.

    Raises:
        pydantic.ValidationError: step == 0, NaN, бесконечные start/step,
            нечисловые аргументы
    """
    if stop is _STOP_OMITTED:
        start_or_stop, stop = DEFAULT_START, start_or_stop
    return Range.from_start_stop_step(start_or_stop, stop, step)
