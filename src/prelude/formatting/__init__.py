"""
Formatting modules для prelude

Formatting Protocol (capability на тип), настройки и интерпретатор шаблонов.
"""

# Settings
from src.prelude.formatting.settings import (
    DEFAULT_SETTINGS,
    BoolStyle,
    FloatStyle,
    FormatSettings,
)

# Formatting Protocol
from src.prelude.formatting.protocol import (
    Formattable,
    MissingFormatterError,
    TextBuilder,
    ensure_formattable,
    format_value,
    formatted,
    has_formatter,
    register_formatter,
)

# Template Interpreter
from src.prelude.formatting.template import (
    TemplateError,
    count_placeholders,
    format_string,
    println,
)

__all__ = [
    # Settings
    "DEFAULT_SETTINGS",
    "BoolStyle",
    "FloatStyle",
    "FormatSettings",
    # Formatting Protocol: Exceptions
    "MissingFormatterError",
    # Formatting Protocol: Types
    "Formattable",
    "TextBuilder",
    # Formatting Protocol: Functions
    "ensure_formattable",
    "format_value",
    "formatted",
    "has_formatter",
    "register_formatter",
    # Template Interpreter
    "TemplateError",
    "count_placeholders",
    "format_string",
    "println",
]
