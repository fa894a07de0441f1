"""
Тесты для Formatting Protocol и FormatSettings

Проверяет:
1. Capabilities встроенных типов (int, float, bool, str)
2. Композицию: Sequence форматирует элементы через протокол
3. Custom capabilities (register_formatter и __formatted__)
4. MissingFormatterError и ensure_formattable
5. TextBuilder (stream-insertion-style сборка)
6. Валидацию и immutability FormatSettings
"""

from dataclasses import dataclass

import pytest
from pydantic import ValidationError

from src.prelude.containers import Sequence
from src.prelude.formatting import (
    DEFAULT_SETTINGS,
    BoolStyle,
    FloatStyle,
    FormatSettings,
    Formattable,
    MissingFormatterError,
    TextBuilder,
    ensure_formattable,
    formatted,
    has_formatter,
    register_formatter,
)


# =============================================================================
# FIXTURE TYPES
# =============================================================================


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@register_formatter(Point)
def _format_point(value: Point, settings: FormatSettings) -> str:
    return str(TextBuilder(settings) << "Point(" << value.x << ", " << value.y << ")")


class Celsius:
    def __init__(self, degrees: float):
        self.degrees = degrees

    def __formatted__(self, settings: FormatSettings) -> str:
        return str(TextBuilder(settings) << self.degrees << "°C")


class Opaque:
    pass


# =============================================================================
# ВСТРОЕННЫЕ CAPABILITIES
# =============================================================================


class TestBuiltinFormatters:
    """Тесты capabilities по умолчанию"""

    def test_int(self) -> None:
        assert formatted(42) == "42"
        assert formatted(-7) == "-7"

    def test_float_shortest(self) -> None:
        assert formatted(0.1) == "0.1"
        assert formatted(3.0) == "3.0"
        assert formatted(float("inf")) == "inf"
        assert formatted(float("nan")) == "nan"

    def test_float_fixed(self) -> None:
        """FIXED: фиксированное число знаков (как numeric-to-string)"""
        settings = FormatSettings(float_style=FloatStyle.FIXED)
        assert formatted(3.14, settings) == "3.140000"
        settings = FormatSettings(float_style=FloatStyle.FIXED, float_precision=2)
        assert formatted(2.0, settings) == "2.00"

    def test_bool_word(self) -> None:
        assert formatted(True) == "true"
        assert formatted(False) == "false"

    def test_bool_numeric(self) -> None:
        settings = FormatSettings(bool_style=BoolStyle.NUMERIC)
        assert formatted(True, settings) == "1"
        assert formatted(False, settings) == "0"

    def test_str_is_identity(self) -> None:
        assert formatted("hello") == "hello"
        assert formatted("") == ""

    def test_formatting_does_not_mutate(self) -> None:
        s = Sequence([1, 2])
        formatted(s)
        assert s.to_list() == [1, 2]


# =============================================================================
# КОМПОЗИЦИЯ
# =============================================================================


class TestComposition:
    """Тесты составных значений"""

    def test_sequence(self) -> None:
        assert formatted(Sequence([1, 2, 3])) == "[1, 2, 3]"
        assert formatted(Sequence()) == "[]"

    def test_sequence_of_custom_type(self) -> None:
        """Контейнер custom типа форматируется тем же механизмом"""
        s = Sequence([Point(1, 2), Point(3, 4)])
        assert formatted(s) == "[Point(1, 2), Point(3, 4)]"

    def test_nested_sequence(self) -> None:
        s = Sequence([Sequence([1]), Sequence([2, 3])])
        assert formatted(s) == "[[1], [2, 3]]"

    def test_sequence_settings_propagate(self) -> None:
        """Настройки доходят до элементов"""
        settings = FormatSettings(
            bool_style=BoolStyle.NUMERIC,
            sequence_open="<",
            sequence_close=">",
            sequence_separator=" ",
        )
        assert formatted(Sequence([True, False]), settings) == "<1 0>"

    def test_sequence_with_unformattable_element(self) -> None:
        with pytest.raises(MissingFormatterError):
            formatted(Sequence([Opaque()]))


# =============================================================================
# CUSTOM CAPABILITIES
# =============================================================================


class TestCustomFormatters:
    """Тесты пользовательских capabilities"""

    def test_registered_formatter(self) -> None:
        assert formatted(Point(1, 2)) == "Point(1, 2)"

    def test_dunder_formatted(self) -> None:
        assert formatted(Celsius(21.5)) == "21.5°C"
        assert isinstance(Celsius(0.0), Formattable)

    def test_dunder_formatted_receives_settings(self) -> None:
        """__formatted__ получает те же настройки, что и register_formatter"""
        settings = FormatSettings(float_style=FloatStyle.FIXED, float_precision=2)
        assert formatted(Celsius(21.5), settings) == "21.50°C"
        assert formatted(Sequence([Celsius(1.0)]), settings) == "[1.00°C]"

    def test_registered_formatter_applies_to_subclasses(self) -> None:
        """Dispatch учитывает MRO"""

        @dataclass(frozen=True)
        class Point3(Point):
            z: int = 0

        assert formatted(Point3(1, 2, 3)) == "Point(1, 2)"

    def test_reregistration_replaces(self) -> None:
        """У типа всегда одна capability: повторная регистрация заменяет"""

        class Tag:
            pass

        @register_formatter(Tag)
        def _first(value, settings):
            return "first"

        @register_formatter(Tag)
        def _second(value, settings):
            return "second"

        assert formatted(Tag()) == "second"


# =============================================================================
# ОТСУТСТВИЕ CAPABILITY
# =============================================================================


class TestMissingFormatter:
    """Тесты MissingFormatterError"""

    def test_format_unsupported_value(self) -> None:
        with pytest.raises(MissingFormatterError, match="Opaque"):
            formatted(Opaque())

    def test_none_unsupported(self) -> None:
        with pytest.raises(MissingFormatterError):
            formatted(None)

    def test_error_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            formatted(object())

    def test_has_formatter(self) -> None:
        assert has_formatter(int)
        assert has_formatter(bool)
        assert has_formatter(Sequence)
        assert has_formatter(Point)
        assert has_formatter(Celsius)
        assert not has_formatter(Opaque)
        assert not has_formatter(object)

    def test_ensure_formattable(self) -> None:
        ensure_formattable(float)
        with pytest.raises(MissingFormatterError) as exc_info:
            ensure_formattable(Opaque)
        assert exc_info.value.type is Opaque


# =============================================================================
# TEXT BUILDER
# =============================================================================


class TestTextBuilder:
    """Тесты TextBuilder"""

    def test_insertion_chain(self) -> None:
        text = str(TextBuilder() << "x = " << 1 << ", ok = " << True)
        assert text == "x = 1, ok = true"

    def test_write_many(self) -> None:
        assert TextBuilder().write("a", 1, 2.5).build() == "a12.5"

    def test_uses_settings(self) -> None:
        settings = FormatSettings(float_style=FloatStyle.FIXED, float_precision=1)
        assert str(TextBuilder(settings) << 2.25) == "2.2"

    def test_rejects_unformattable(self) -> None:
        with pytest.raises(MissingFormatterError):
            TextBuilder() << Opaque()


# =============================================================================
# SETTINGS
# =============================================================================


class TestFormatSettings:
    """Тесты FormatSettings"""

    def test_defaults(self) -> None:
        assert DEFAULT_SETTINGS.float_style == FloatStyle.SHORTEST
        assert DEFAULT_SETTINGS.float_precision == 6
        assert DEFAULT_SETTINGS.bool_style == BoolStyle.WORD
        assert DEFAULT_SETTINGS.line_terminator == "\n"
        assert DEFAULT_SETTINGS.union_payload_prefix == "arg = "

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            DEFAULT_SETTINGS.float_precision = 3

    @pytest.mark.parametrize("precision", [-1, 18])
    def test_precision_bounds(self, precision: int) -> None:
        with pytest.raises(ValidationError):
            FormatSettings(float_precision=precision)

    def test_enum_from_string(self) -> None:
        settings = FormatSettings(float_style="fixed", bool_style="numeric")
        assert settings.float_style == FloatStyle.FIXED
        assert settings.bool_style == BoolStyle.NUMERIC
