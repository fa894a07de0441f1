"""
Sequence — растущая упорядоченная коллекция с проверкой границ

Тонкий эргономический слой над list: хранение и стратегия роста полностью
делегированы list. Добавлено только:
- именованные операции в словаре array-like языков (push/pop/first/last)
- индексация с обязательной проверкой границ

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. length() всегда равно числу живых элементов
2. Индекс вне диапазона → IndexOutOfRange (никакого wraparound, никакого расширения)
3. slice() никогда не мутирует источник и возвращает новую независимую коллекцию
4. Копия (Sequence(other), copy()) независима от оригинала

Потокобезопасность: нет. Владелец экземпляра синхронизирует доступ сам.
"""

import copy
import itertools
from typing import Callable, Generic, Iterable, Iterator, TypeVar

from src.prelude.contracts import (
    IndexOutOfRange,
    require_bounds,
    require_count,
    require_index,
    require_non_empty,
    require_position,
)

T = TypeVar("T")


class Sequence(Generic[T]):
    """
    Generic growable sequence.

    Construction:
        Sequence()                      -> пустая
        Sequence([1, 2, 3])             -> из литерала / любого iterable
        Sequence(other_sequence)        -> копия (element-wise copy.copy)
        Sequence.sized(3, int)          -> [0, 0, 0]
        Sequence.filled(3, 7)           -> [7, 7, 7]
        Sequence.from_iter(it, count=2) -> первые 2 элемента итератора

    Examples:
        >>> s = Sequence([1, 2, 3])
        >>> s.push(4)
        >>> s.pop()
        4
        >>> s.slice(1).to_list()
        [2, 3]
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] | None = None):
        if items is None:
            self._items: list[T] = []
        elif isinstance(items, Sequence):
            # Копирующий конструктор: каждый элемент копируется
            self._items = [copy.copy(item) for item in items._items]
        else:
            self._items = list(items)

    # =========================================================================
    # ALTERNATE CONSTRUCTORS
    # =========================================================================

    @classmethod
    def sized(cls, n: int, element_type: Callable[[], T]) -> "Sequence[T]":
        """
        Pre-sized последовательность со значением по умолчанию для типа.

        Args:
            n: Количество элементов
            element_type: Тип (или фабрика) элемента; вызывается для каждого слота

        Examples:
            >>> Sequence.sized(3, int).to_list()
            [0, 0, 0]
        """
        n = require_count(n)
        return cls(element_type() for _ in range(n))

    @classmethod
    def filled(cls, n: int, value: T) -> "Sequence[T]":
        """Pre-sized последовательность, заполненная value."""
        n = require_count(n)
        return cls([value] * n)

    @classmethod
    def from_iter(cls, iterator: Iterable[T], count: int | None = None) -> "Sequence[T]":
        """
        Последовательность из итератора (range целиком или iterator + count).

        Args:
            iterator: Источник элементов
            count: Сколько элементов взять (None = все)

        Raises:
            IndexOutOfRange: Если итератор короче count
        """
        if count is None:
            return cls(iterator)

        count = require_count(count)
        items = list(itertools.islice(iterator, count))
        if len(items) < count:
            raise IndexOutOfRange(count, len(items), f"[0, {len(items)}]")
        return cls(items)

    # =========================================================================
    # STACK-LIKE OPERATIONS
    # =========================================================================

    def push(self, value: T) -> None:
        """Добавить элемент в конец (amortized O(1))."""
        self._items.append(value)

    def pop(self) -> T:
        """
        Удалить и вернуть последний элемент.

        Raises:
            EmptySequenceError: Если последовательность пустая
        """
        require_non_empty(len(self._items), "pop")
        return self._items.pop()

    def first(self) -> T:
        require_non_empty(len(self._items), "first")
        return self._items[0]

    def last(self) -> T:
        require_non_empty(len(self._items), "last")
        return self._items[-1]

    # =========================================================================
    # POSITIONAL OPERATIONS
    # =========================================================================

    def insert(self, index: int, value: T) -> None:
        """Вставка в позицию index, 0 <= index <= length (O(n))."""
        i = require_position(index, len(self._items))
        self._items.insert(i, value)

    def remove(self, index: int) -> T:
        """Удаление элемента index, 0 <= index < length (O(n)). Возвращает удалённый."""
        i = require_index(index, len(self._items))
        return self._items.pop(i)

    def append(self, other: "Sequence[T] | T") -> None:
        """
        Расширение последовательности.

        Sequence → добавляются все её элементы (аргумент не мутируется),
        любое другое значение → push. Для вложенной Sequence как элемента
        используйте push().
        """
        if isinstance(other, Sequence):
            self._items.extend(list(other._items))
        else:
            self._items.append(other)

    def extend(self, values: Iterable[T]) -> None:
        self._items.extend(values)

    def slice(self, start: int, end: int | None = None) -> "Sequence[T]":
        """
        Новая независимая Sequence с shallow copy элементов [start, end).

        Args:
            start: Начало (включительно)
            end: Конец (исключительно), None = length

        Raises:
            IndexOutOfRange: Если не 0 <= start <= end <= length
        """
        if end is None:
            end = len(self._items)
        s, e = require_bounds(start, end, len(self._items))
        return Sequence(self._items[s:e])

    # =========================================================================
    # SIZE
    # =========================================================================

    def length(self) -> int:
        return len(self._items)

    def empty(self) -> bool:
        return len(self._items) == 0

    def clear(self) -> None:
        self._items.clear()

    def resize(self, n: int, element_type: Callable[[], T]) -> None:
        """
        Изменение размера: усечение или дополнение значениями по умолчанию.

        Новые элементы создаются вызовом element_type() (как в sized),
        каждый элемент независим.
        """
        n = require_count(n)
        if n < len(self._items):
            del self._items[n:]
        else:
            self._items.extend(element_type() for _ in range(n - len(self._items)))

    # =========================================================================
    # CONVERSIONS
    # =========================================================================

    def copy(self) -> "Sequence[T]":
        return Sequence(self)

    def to_list(self) -> list[T]:
        return list(self._items)

    # =========================================================================
    # PYTHON PROTOCOLS
    # =========================================================================

    def __getitem__(self, index):
        if isinstance(index, slice):
            if index.step is not None:
                raise TypeError("Sequence slicing does not support a step")
            start = 0 if index.start is None else index.start
            return self.slice(start, index.stop)
        return self._items[require_index(index, len(self._items))]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[require_index(index, len(self._items))] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # mutable

    def __copy__(self) -> "Sequence[T]":
        return Sequence(self)

    def __repr__(self) -> str:
        return f"Sequence({self._items!r})"
