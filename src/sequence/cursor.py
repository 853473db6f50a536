"""RangeCursor — ленивый однопроходный курсор по арифметической прогрессии.

Состояния курсора:
- READY: следующий член ещё не выдан, pull() выдаёт его и сдвигает индекс
- EXHAUSTED: члены закончились, состояние поглощающее

Курсор не выполняет никакой работы до вызова pull()/next(). Каждый курсор
независим: несколько курсоров над одним descriptor не разделяют состояние.
"""

from enum import Enum
from typing import NamedTuple, Optional

from src.core.domain.descriptor import SequenceDescriptor
from src.core.math.numerical_safeguards import term_below


class CursorState(str, Enum):
    """Состояние курсора."""
    READY = "READY"
    EXHAUSTED = "EXHAUSTED"


class CursorStep(NamedTuple):
    """Результат одного pull().

    value: очередной член прогрессии (None, если курсор исчерпан)
    done: True, если курсор исчерпан
    """
    value: Optional[float]
    done: bool


class RangeCursor:
    """Курсор с явным сигналом окончания, ручным продвижением и без перемотки.

    Поддерживает два протокола:
    - pull() → CursorStep(value, done)
    - стандартный iterator protocol (next(), for)

    Для неограниченной прогрессии (stop = +inf) курсор никогда не переходит
    в EXHAUSTED и потребляется инкрементально.
    """

    def __init__(self, descriptor: SequenceDescriptor):
        self._descriptor = descriptor
        self._index = 0
        self._state = CursorState.READY

    @property
    def state(self) -> CursorState:
        return self._state

    @property
    def index(self) -> int:
        """Количество уже выданных членов."""
        return self._index

    @property
    def current(self) -> Optional[float]:
        """Член, который будет выдан следующим pull() (None в EXHAUSTED)."""
        if self._state is CursorState.EXHAUSTED or not self._has_next():
            return None
        return self._descriptor.term(self._index)

    def _has_next(self) -> bool:
        d = self._descriptor
        # step < 0 при start < stop: прогрессия удаляется от stop, членов нет
        return d.step > 0 and term_below(d.start, d.step, self._index, d.stop)

    def pull(self) -> CursorStep:
        if self._state is CursorState.EXHAUSTED:
            return CursorStep(None, True)

        if not self._has_next():
            self._state = CursorState.EXHAUSTED
            return CursorStep(None, True)

        value = self._descriptor.term(self._index)
        self._index += 1
        return CursorStep(value, False)

    def __iter__(self) -> "RangeCursor":
        return self

    def __next__(self) -> float:
        step = self.pull()
        if step.done:
            raise StopIteration
        return step.value

    def __repr__(self) -> str:
        return (
            f"RangeCursor(state={self._state.value}, index={self._index}, "
            f"descriptor={self._descriptor!r})"
        )
