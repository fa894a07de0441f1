"""
Formatting Protocol — единое текстовое представление значений

Каждый тип имеет ровно одну каноническую formatting capability,
выбираемую по типу значения (type-keyed dispatch через
functools.singledispatch, с учётом MRO), без общего базового класса.

Источники capability (в порядке приоритета):
1. Реализация, зарегистрированная для типа (register_formatter)
2. Метод __formatted__(self, settings) -> str на классе значения
3. Нет capability → MissingFormatterError

Встроенные capabilities:
- int    → десятичный текст
- float  → FormatSettings.float_style (shortest / fixed)
- bool   → FormatSettings.bool_style (true/false или 1/0)
- str    → сама строка
- Sequence → [a, b, c], каждый элемент через протокол

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Форматирование никогда не мутирует значение
2. Отсутствие capability обнаруживается при объявлении составного типа
   (ensure_formattable), а не при первом выводе
"""

import functools
from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

from src.prelude.containers import Sequence
from src.prelude.formatting.settings import (
    DEFAULT_SETTINGS,
    BoolStyle,
    FloatStyle,
    FormatSettings,
)
from src.prelude.logging import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., str])


# =============================================================================
# EXCEPTIONS & PROTOCOL
# =============================================================================


class MissingFormatterError(TypeError):
    """Для типа не существует formatting capability."""

    def __init__(self, tp: type):
        self.type = tp
        super().__init__(f"no formatting capability for type {tp.__qualname__}")


@runtime_checkable
class Formattable(Protocol):
    """Тип, который сам задаёт своё текстовое представление."""

    def __formatted__(self, settings: FormatSettings) -> str: ...


# =============================================================================
# DISPATCH
# =============================================================================


@functools.singledispatch
def format_value(value: Any, settings: FormatSettings) -> str:
    """
    Текстовое представление value через capability его типа.

    Args:
        value: Форматируемое значение
        settings: Настройки форматирования

    Returns:
        Текст значения

    Raises:
        MissingFormatterError: Если у типа нет capability
    """
    method = getattr(type(value), "__formatted__", None)
    if method is None:
        raise MissingFormatterError(type(value))
    return method(value, settings)


@format_value.register
def _format_bool(value: bool, settings: FormatSettings) -> str:
    if settings.bool_style == BoolStyle.NUMERIC:
        return "1" if value else "0"
    return "true" if value else "false"


@format_value.register
def _format_int(value: int, settings: FormatSettings) -> str:
    return str(value)


@format_value.register
def _format_float(value: float, settings: FormatSettings) -> str:
    if settings.float_style == FloatStyle.FIXED:
        return f"{value:.{settings.float_precision}f}"
    return repr(value)


@format_value.register
def _format_str(value: str, settings: FormatSettings) -> str:
    return value


@format_value.register
def _format_sequence(value: Sequence, settings: FormatSettings) -> str:
    inner = settings.sequence_separator.join(format_value(item, settings) for item in value)
    return f"{settings.sequence_open}{inner}{settings.sequence_close}"


# =============================================================================
# REGISTRATION
# =============================================================================


def register_formatter(tp: type) -> Callable[[F], F]:
    """
    Декоратор: зарегистрировать capability для типа tp.

    Повторная регистрация для того же типа заменяет предыдущую
    (capability у типа всегда одна).

    Examples:
        >>> @register_formatter(Point)
        ... def _format_point(value: Point, settings: FormatSettings) -> str:
        ...     return f"Point({value.x}, {value.y})"
    """

    def decorator(fn: F) -> F:
        replaced = tp in format_value.registry
        format_value.register(tp, fn)
        logger.debug("formatter_registered", type=tp.__qualname__, replaced=replaced)
        return fn

    return decorator


def has_formatter(tp: type) -> bool:
    """Проверка наличия capability для типа (без форматирования значения)."""
    if format_value.dispatch(tp) is not format_value.registry[object]:
        return True
    return callable(getattr(tp, "__formatted__", None))


def ensure_formattable(tp: type) -> None:
    """
    Проверка capability при объявлении типа.

    Вызывается составными типами (TaggedUnion) в момент их объявления,
    чтобы отсутствие capability обнаруживалось при импорте модуля.

    Raises:
        MissingFormatterError: Если у типа нет capability
    """
    if not has_formatter(tp):
        raise MissingFormatterError(tp)


# =============================================================================
# PUBLIC SURFACE
# =============================================================================


def formatted(value: Any, settings: FormatSettings | None = None) -> str:
    """
    Текстовое представление значения.

    Examples:
        >>> formatted(42)
        '42'
        >>> formatted(Sequence([1, 2.5, True]))
        '[1, 2.5, true]'
    """
    return format_value(value, settings or DEFAULT_SETTINGS)


class TextBuilder:
    """
    Stream-insertion-style сборка текста.

    Каждое вставленное значение форматируется через протокол, поэтому
    custom capability составного типа пишется как конкатенация его полей:

        def __formatted__(self, settings: FormatSettings) -> str:
            return str(TextBuilder(settings) << "Circle(" << self.radius << ")")
    """

    __slots__ = ("_parts", "_settings")

    def __init__(self, settings: FormatSettings | None = None):
        self._parts: list[str] = []
        self._settings = settings or DEFAULT_SETTINGS

    def write(self, *values: Any) -> "TextBuilder":
        for value in values:
            self._parts.append(format_value(value, self._settings))
        return self

    def __lshift__(self, value: Any) -> "TextBuilder":
        return self.write(value)

    def build(self) -> str:
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.build()
