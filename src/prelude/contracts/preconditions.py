"""
Preconditions — ошибки нарушения контракта вызывающей стороны

Prelude не восстанавливается после нарушения предусловий: ошибка
поднимается немедленно в точке нарушения и пропагирует к вызывающему коду.

Таксономия:
- PreconditionViolation: базовый класс всех caller errors
- IndexOutOfRange: индекс вне допустимого диапазона операции
- EmptySequenceError: pop/first/last на пустой последовательности
- WrongAlternativeError: доступ к неактивной альтернативе tagged union

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Отрицательные индексы никогда не "заворачиваются" (нет семантики -1)
2. Индекс вне диапазона никогда не расширяет и не усекает контейнер
"""

import operator


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PreconditionViolation(Exception):
    """
    Нарушение предусловия операции (programmer error).

    Не является recoverable runtime condition: вызывающая сторона
    обязана проверять предусловия до вызова.
    """

    pass


class IndexOutOfRange(PreconditionViolation, IndexError):
    """Индекс вне допустимого диапазона."""

    def __init__(self, index: int, length: int, allowed: str):
        self.index = index
        self.length = length
        super().__init__(
            f"index {index} out of range {allowed} for sequence of length {length}"
        )


class EmptySequenceError(PreconditionViolation, IndexError):
    """Операция требует непустую последовательность."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}() called on an empty sequence")


class WrongAlternativeError(PreconditionViolation, TypeError):
    """Доступ к tagged union через неактивную альтернативу."""

    def __init__(self, requested: type, active: type):
        self.requested = requested
        self.active = active
        super().__init__(
            f"requested alternative {requested.__name__}, "
            f"but active alternative is {active.__name__}"
        )


# =============================================================================
# CHECKS
# =============================================================================


def _as_index(index) -> int:
    # operator.index отклоняет float и прочие не-целые значения; bool тоже не индекс
    if isinstance(index, bool):
        raise TypeError("bool is not a valid index")
    return operator.index(index)


def require_non_empty(length: int, operation: str) -> None:
    """
    Проверка, что последовательность непустая.

    Raises:
        EmptySequenceError: Если length == 0
    """
    if length == 0:
        raise EmptySequenceError(operation)


def require_index(index: int, length: int) -> int:
    """
    Проверка индекса элемента: 0 <= index < length.

    Returns:
        Индекс как int

    Raises:
        IndexOutOfRange: Если индекс вне [0, length)
        TypeError: Если index не целое число
    """
    i = _as_index(index)
    if i < 0 or i >= length:
        raise IndexOutOfRange(i, length, f"[0, {length})")
    return i


def require_position(index: int, length: int) -> int:
    """
    Проверка позиции вставки: 0 <= index <= length.

    Raises:
        IndexOutOfRange: Если позиция вне [0, length]
    """
    i = _as_index(index)
    if i < 0 or i > length:
        raise IndexOutOfRange(i, length, f"[0, {length}]")
    return i


def require_bounds(start: int, end: int, length: int) -> tuple[int, int]:
    """
    Проверка границ среза: 0 <= start <= end <= length.

    Returns:
        (start, end) как int

    Raises:
        IndexOutOfRange: Если границы некорректны
    """
    s = _as_index(start)
    e = _as_index(end)
    if s < 0 or s > length:
        raise IndexOutOfRange(s, length, f"[0, {length}]")
    if e < s or e > length:
        raise IndexOutOfRange(e, length, f"[{s}, {length}]")
    return s, e


def require_count(count: int) -> int:
    """
    Проверка количества элементов: count >= 0.

    Raises:
        ValueError: Если count отрицательный
    """
    n = _as_index(count)
    if n < 0:
        raise ValueError(f"count must be non-negative, got {n}")
    return n
