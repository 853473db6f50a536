"""
Numerical Safeguards — Safe Progression Math

Модуль обеспечивает численную корректность арифметических прогрессий:
- NaN/Inf проверки для параметров прогрессии
- Валидация ненулевого шага
- Точный подсчёт количества членов прогрессии start + k*step < stop
  (целочисленная арифметика для int, бинарный поиск по индексу для float)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Количество членов всегда совпадает с количеством значений, которое
   выдаёт итерация по условию start + k*step < stop
2. NaN никогда не попадает в расчёт длины
3. Все операции детерминированы и воспроизводимы
"""

import math
from fractions import Fraction
from typing import Final


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Длина неограниченной прогрессии (stop = +inf, step > 0)
UNBOUNDED_LENGTH: Final[float] = math.inf

# Верхняя граница индекса, для которого член start + k*step вычислим во float
MAX_SEARCHABLE_INDEX: Final[int] = 2**1000


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли значение конечным числом (не NaN, не Inf).

    Args:
        value: Проверяемое значение (int или float)

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_nan(value: float) -> bool:
    """NaN-проверка, безопасная для int."""
    return isinstance(value, float) and math.isnan(value)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value равен NaN или Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a finite number (not NaN/Inf), got {value}")


def validate_not_nan(value: float, name: str) -> None:
    """
    Валидация, что значение не NaN (±Inf допускается).

    Raises:
        ValueError: Если value равен NaN
    """
    if is_nan(value):
        raise ValueError(f"{name} must not be NaN")


def validate_nonzero(value: float, name: str) -> None:
    """
    Валидация, что значение ненулевое.

    Нулевой шаг превращает прогрессию в бесконечный повтор start,
    поэтому отвергается при конструировании.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value == 0
    """
    if value == 0:
        raise ValueError(f"{name} must be nonzero, got {value}")


# =============================================================================
# ПОДСЧЁТ ЧЛЕНОВ ПРОГРЕССИИ
# =============================================================================


def ceil_div(numerator: float, denominator: float) -> int:
    """
    Деление с округлением вверх без потери точности.

    Для int используется целочисленная арифметика, для float — точная
    рациональная арифметика (Fraction): частное не переполняется в inf
    даже для 1e308 / 1e-10.

    Examples:
        >>> ceil_div(10, 3)
        4
        >>> ceil_div(9, 3)
        3
        >>> ceil_div(1.0, 0.3)
        4
    """
    if isinstance(numerator, int) and isinstance(denominator, int):
        return -(-numerator // denominator)
    return math.ceil(Fraction(numerator) / Fraction(denominator))


def term_below(start: float, step: float, index: int, stop: float) -> bool:
    """Условие итерации: start + index*step < stop."""
    return start + index * step < stop


def count_progression_terms(start: float, stop: float, step: float) -> float:
    """
    Количество членов прогрессии start + k*step, строго меньших stop.

    Правила:
    - start >= stop → 0 (независимо от знака step)
    - step < 0 при start < stop → 0 (прогрессия удаляется от stop)
    - stop = +inf при step > 0 → UNBOUNDED_LENGTH
    - int → точное ceil((stop - start) / step)
    - float → наименьший k, для которого start + k*step >= stop

    Для float член start + k*step монотонно не убывает по k, поэтому
    точная оценка ceil((stop - start) / step) уточняется экспоненциальным
    расширением окна и бинарным поиском: O(log) вычислений члена вместо
    пошаговой коррекции.

    Args:
        start: Первый член (конечный)
        stop: Исключающая верхняя граница (может быть ±inf)
        step: Шаг (конечный, ненулевой)

    Returns:
        int количество членов, либо math.inf для неограниченной прогрессии

    Examples:
        >>> count_progression_terms(0, 10, 1)
        10
        >>> count_progression_terms(0, 50, 10)
        5
        >>> count_progression_terms(10, 0, 1)
        0
        >>> count_progression_terms(0, 1, 0.1)
        10
    """
    if not start < stop or step < 0:
        return 0

    if math.isinf(stop):
        return UNBOUNDED_LENGTH

    if isinstance(start, int) and isinstance(stop, int) and isinstance(step, int):
        return ceil_div(stop - start, step)

    estimate = ceil_div(Fraction(stop) - Fraction(start), step)

    # Индексы за пределами float не вычислимы как член прогрессии
    if estimate >= MAX_SEARCHABLE_INDEX:
        return estimate

    # Инвариант поиска: term(lo) < stop <= term(hi)
    lo, hi = estimate - 1, estimate

    offset = 1
    while term_below(start, step, hi, stop):
        lo, hi = hi, estimate + offset
        offset *= 2

    offset = 1
    while lo > 0 and not term_below(start, step, lo, stop):
        lo, hi = max(estimate - 1 - offset, 0), lo
        offset *= 2

    while hi - lo > 1:
        mid = (lo + hi) // 2
        if term_below(start, step, mid, stop):
            lo = mid
        else:
            hi = mid

    return hi
