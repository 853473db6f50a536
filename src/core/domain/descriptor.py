"""
SequenceDescriptor — Модель параметров арифметической прогрессии

Immutable Pydantic модель, представляющая тройку (start, stop, step).
Совместима с JSON Schema (src/core/contracts/schema/sequence_descriptor.json).

ИНВАРИАНТЫ:
1. start конечен, step конечен и ненулевой
2. stop может быть ±inf (неограниченная прогрессия), но не NaN
3. int остаётся int, float остаётся float (без приведения)
4. Строки, None и bool отвергаются
"""

import math
from typing import Any, Dict, Final, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, field_validator

from src.core.contracts.validators import validate_sequence_descriptor
from src.core.math.numerical_safeguards import (
    count_progression_terms,
    validate_finite,
    validate_nonzero,
    validate_not_nan,
)

# =============================================================================
# ЗНАЧЕНИЯ ПО УМОЛЧАНИЮ
# =============================================================================

DEFAULT_START: Final[int] = 0
DEFAULT_STOP: Final[int] = 0
DEFAULT_STEP: Final[int] = 1

# Строковое кодирование бесконечности в JSON контракте
POSITIVE_INFINITY_TOKEN: Final[str] = "Infinity"
NEGATIVE_INFINITY_TOKEN: Final[str] = "-Infinity"

Number = Union[StrictInt, StrictFloat]


# =============================================================================
# DESCRIPTOR MODEL
# =============================================================================


class SequenceDescriptor(BaseModel):
    """
    Параметры арифметической прогрессии.

    Значения прогрессии: start + k*step для k = 0, 1, 2, ... пока < stop.

    Immutable модель (frozen=True): каждый вызов make_range создаёт новый
    экземпляр, курсоры ссылаются на него только для чтения.
    """

    start: Number = Field(DEFAULT_START, description="Первый член (включительно)")
    stop: Number = Field(DEFAULT_STOP, description="Верхняя граница (исключительно)")
    step: Number = Field(DEFAULT_STEP, description="Разность прогрессии (ненулевая)")

    model_config = {"frozen": True}

    @field_validator("start")
    @classmethod
    def validate_start(cls, v: float) -> float:
        validate_finite(v, "start")
        return v

    @field_validator("stop")
    @classmethod
    def validate_stop(cls, v: float) -> float:
        """stop = ±inf допустим: неограниченная прогрессия потребляется через lazy()."""
        validate_not_nan(v, "stop")
        return v

    @field_validator("step")
    @classmethod
    def validate_step(cls, v: float) -> float:
        validate_finite(v, "step")
        validate_nonzero(v, "step")
        return v

    # -------------------------------------------------------------------------
    # Производные величины
    # -------------------------------------------------------------------------

    @property
    def length(self) -> float:
        """Количество членов (int), либо math.inf для неограниченной прогрессии."""
        return count_progression_terms(self.start, self.stop, self.step)

    @property
    def is_unbounded(self) -> bool:
        # length может быть int > float max, поэтому проверяем границу, а не длину
        return self.step > 0 and self.stop == math.inf

    def term(self, index: int) -> float:
        """
        Член прогрессии с номером index.

        Вычисляется от индекса (а не накоплением), поэтому float-прогрессии
        не накапливают погрешность.
        """
        return self.start + index * self.step

    # -------------------------------------------------------------------------
    # JSON контракт
    # -------------------------------------------------------------------------

    def to_contract(self) -> Dict[str, Any]:
        """
        Сериализация в dict, соответствующий sequence_descriptor.json.

        JSON не имеет литерала бесконечности: stop = ±inf кодируется
        строками "Infinity" / "-Infinity".
        """
        stop: Any = self.stop
        if math.isinf(stop):
            stop = POSITIVE_INFINITY_TOKEN if stop > 0 else NEGATIVE_INFINITY_TOKEN

        return {"start": self.start, "stop": stop, "step": self.step}

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "SequenceDescriptor":
        """
        Десериализация из dict с валидацией против JSON Schema.

        Args:
            data: Payload контракта sequence_descriptor

        Returns:
            Новый SequenceDescriptor

        Raises:
            jsonschema.ValidationError: Если payload не соответствует схеме
            pydantic.ValidationError: Если значения нарушают инварианты модели
        """
        validate_sequence_descriptor(data)

        fields = dict(data)
        if fields.get("stop") == POSITIVE_INFINITY_TOKEN:
            fields["stop"] = math.inf
        elif fields.get("stop") == NEGATIVE_INFINITY_TOKEN:
            fields["stop"] = -math.inf

        return cls(**fields)
