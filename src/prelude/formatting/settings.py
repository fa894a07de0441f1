"""
FormatSettings — конфигурация текстового представления значений

Immutable Pydantic модель. Передаётся во все точки входа форматирования
(formatted, format_string, println); None означает DEFAULT_SETTINGS.
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class FloatStyle(str, Enum):
    """Представление float"""

    # Кратчайшее round-trip представление: repr(0.1) == "0.1"
    SHORTEST = "shortest"
    # Фиксированное число знаков после точки: 3.14 → "3.140000"
    FIXED = "fixed"


class BoolStyle(str, Enum):
    """Представление bool"""

    WORD = "word"  # true / false
    NUMERIC = "numeric"  # 1 / 0


# =============================================================================
# SETTINGS MODEL
# =============================================================================


class FormatSettings(BaseModel):
    """
    Настройки форматирования prelude.

    Все поля имеют стабильные значения по умолчанию: текст, который видит
    пользователь сгенерированной программы, не меняется без явной настройки.
    """

    # Числа
    float_style: FloatStyle = Field(
        FloatStyle.SHORTEST, description="Представление float"
    )
    float_precision: int = Field(
        6, ge=0, le=17, description="Знаков после точки для FloatStyle.FIXED"
    )
    bool_style: BoolStyle = Field(BoolStyle.WORD, description="Представление bool")

    # Sequence: [a, b, c]
    sequence_open: str = Field("[", description="Открывающий маркер Sequence")
    sequence_close: str = Field("]", description="Закрывающий маркер Sequence")
    sequence_separator: str = Field(", ", description="Разделитель элементов Sequence")

    # TaggedUnion: TaggedUnion{arg = <payload>}
    union_payload_prefix: str = Field(
        "arg = ", description="Префикс payload внутри TaggedUnion{...}"
    )

    # println
    line_terminator: str = Field("\n", description="Завершающий перевод строки println")

    model_config = {"frozen": True}


DEFAULT_SETTINGS = FormatSettings()
