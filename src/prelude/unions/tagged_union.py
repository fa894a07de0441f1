"""
TaggedUnion — закрытый sum type с runtime-тегом

Значение ровно одной альтернативы из фиксированного набора типов.
Активная альтернатива (тег) хранится явно, поэтому доступ к неактивной
альтернативе обнаруживается и поднимает WrongAlternativeError.

Объявление:
    Number = TaggedUnion[int, float]

    class Shape(TaggedUnion[Circle, Square]):
        label = "Shape"

    class Token(TaggedUnion, alternatives=(Word, Punct)):
        pass

Форматирование (стабильный, пользовательский вывод):
    {label}{{{union_payload_prefix}{payload}}}
    TaggedUnion[int, float](3)  →  "TaggedUnion{arg = 3}"

Payload форматируется capability активной альтернативы: dynamic tag
выбирает ветку, внутри ветки — type-keyed dispatch Formatting Protocol.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Всегда активна ровно одна альтернатива
2. get(Alt) с неактивной Alt → WrongAlternativeError (никогда не "мусор")
3. Все альтернативы имеют formatting capability на момент объявления
"""

import types
from typing import Any, Callable, ClassVar, TypeVar

from src.prelude.contracts import WrongAlternativeError
from src.prelude.formatting import (
    FormatSettings,
    ensure_formattable,
    format_value,
    register_formatter,
)
from src.prelude.logging import get_logger

logger = get_logger(__name__)

A = TypeVar("A")
R = TypeVar("R")

# Кэш специализаций: TaggedUnion[int, float] is TaggedUnion[int, float]
_SPECIALIZATIONS: dict[tuple[type, tuple[type, ...]], type] = {}


def _validate_alternatives(name: str, alternatives: tuple[Any, ...]) -> tuple[type, ...]:
    if not alternatives:
        raise TypeError(f"{name} must declare at least one alternative")

    for alt in alternatives:
        if not isinstance(alt, type):
            raise TypeError(f"{name}: alternative {alt!r} is not a type")
        ensure_formattable(alt)

    if len(set(alternatives)) != len(alternatives):
        raise TypeError(f"{name}: alternatives must be distinct types")

    return alternatives


class TaggedUnion:
    """
    Базовый класс tagged union.

    Сам по себе не имеет альтернатив и не инстанцируется; используйте
    TaggedUnion[...] или подкласс с alternatives=(...).
    """

    alternatives: ClassVar[tuple[type, ...]] = ()
    label: ClassVar[str] = "TaggedUnion"

    __slots__ = ("_index", "_value")
    __match_args__ = ("value",)

    def __init_subclass__(cls, alternatives: tuple[type, ...] | None = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if alternatives is None:
            # Подкласс специализации наследует её альтернативы
            return

        if any(base.alternatives for base in cls.__bases__ if issubclass(base, TaggedUnion)):
            raise TypeError(f"{cls.__name__}: base union already declares alternatives")

        cls.alternatives = _validate_alternatives(cls.__name__, tuple(alternatives))
        logger.debug(
            "tagged_union_declared",
            name=cls.__qualname__,
            alternatives=[alt.__qualname__ for alt in cls.alternatives],
        )

    def __class_getitem__(cls, params):
        if not isinstance(params, tuple):
            params = (params,)

        if cls.alternatives:
            raise TypeError(f"{cls.__name__} already declares alternatives")

        key = (cls, params)
        specialized = _SPECIALIZATIONS.get(key)
        if specialized is None:
            names = ", ".join(getattr(p, "__name__", repr(p)) for p in params)

            def _body(ns: dict) -> None:
                ns["__slots__"] = ()
                ns["__module__"] = cls.__module__

            specialized = types.new_class(
                f"{cls.__name__}[{names}]", (cls,), {"alternatives": params}, _body
            )
            _SPECIALIZATIONS[key] = specialized
        return specialized

    # =========================================================================
    # CONSTRUCTION / ASSIGNMENT
    # =========================================================================

    def __init__(self, value: Any, alternative: type | None = None):
        """
        Args:
            value: Значение одной из альтернатив
            alternative: Явный выбор альтернативы (иначе по типу value)

        Raises:
            TypeError: Если value не принадлежит ни одной альтернативе
        """
        self._index, self._value = self._select(value, alternative)

    @classmethod
    def _select(cls, value: Any, alternative: type | None) -> tuple[int, Any]:
        if not cls.alternatives:
            raise TypeError(f"{cls.__name__} declares no alternatives")

        if alternative is not None:
            if alternative not in cls.alternatives:
                raise TypeError(
                    f"{alternative.__name__} is not an alternative of {cls.__name__}"
                )
            if not isinstance(value, alternative):
                raise TypeError(
                    f"value of type {type(value).__name__} "
                    f"is not a {alternative.__name__}"
                )
            return cls.alternatives.index(alternative), value

        # Точное совпадение типа приоритетнее isinstance (bool vs int)
        exact = type(value)
        if exact in cls.alternatives:
            return cls.alternatives.index(exact), value

        for index, alt in enumerate(cls.alternatives):
            if isinstance(value, alt):
                return index, value

        raise TypeError(
            f"value of type {type(value).__name__} is not an alternative of {cls.__name__}"
        )

    def set(self, value: Any, alternative: type | None = None) -> None:
        """Присваивание: новое значение и (возможно) новая активная альтернатива."""
        self._index, self._value = self._select(value, alternative)

    # =========================================================================
    # ACCESS
    # =========================================================================

    @property
    def active(self) -> type:
        """Тип активной альтернативы."""
        return self.alternatives[self._index]

    @property
    def index(self) -> int:
        """Позиция активной альтернативы в объявлении."""
        return self._index

    @property
    def value(self) -> Any:
        return self._value

    def holds(self, alternative: type) -> bool:
        return self.alternatives[self._index] is alternative

    def get(self, alternative: type[A]) -> A:
        """
        Значение как альтернатива alternative.

        Raises:
            WrongAlternativeError: Если alternative не активна
        """
        if not self.holds(alternative):
            raise WrongAlternativeError(alternative, self.active)
        return self._value

    def visit(self, fn: Callable[[Any], R]) -> R:
        return fn(self._value)

    # =========================================================================
    # PYTHON PROTOCOLS
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._index == other._index and self._value == other._value

    __hash__ = None  # mutable через set()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


@register_formatter(TaggedUnion)
def _format_tagged_union(value: TaggedUnion, settings: FormatSettings) -> str:
    # Тег выбирает ветку, capability ветки выбирается по объявленному типу альтернативы
    payload = format_value.dispatch(value.active)(value.value, settings)
    return f"{value.label}{{{settings.union_payload_prefix}{payload}}}"
