"""
Template Interpreter — подстановка аргументов в шаблон строки

Шаблон разбирается при каждом вызове за один проход слева направо
с просмотром на два символа вперёд (без backtracking):

    {}   → следующий аргумент (k-й {} ↔ k-й аргумент), через Formatting Protocol
    {{   → литерал {
    }}   → литерал }
    {x   → TemplateError (одиночная {)
    }x   → TemplateError (одиночная })
    иное → литерал

Ошибки шаблона (одиночная скобка, {} больше чем аргументов) — TemplateError.
Лишние аргументы не ошибка: они просто не используются.

Текст собирается в памяти целиком до вывода: при ошибке шаблона println
ничего не пишет (нет частичного вывода).
"""

import sys
from typing import Any, TextIO

from src.prelude.formatting.protocol import format_value
from src.prelude.formatting.settings import DEFAULT_SETTINGS, FormatSettings
from src.prelude.logging import get_logger

logger = get_logger(__name__)


class TemplateError(ValueError):
    """Некорректный шаблон форматирования."""

    def __init__(self, template: str, position: int, reason: str):
        self.template = template
        self.position = position
        self.reason = reason
        super().__init__(f"invalid format string {template!r} at position {position}: {reason}")


def _reject(template: str, position: int, reason: str) -> TemplateError:
    logger.debug("template_rejected", template=template, position=position, reason=reason)
    return TemplateError(template, position, reason)


def _scan(template: str, args: tuple[Any, ...] | None, settings: FormatSettings) -> tuple[str, int]:
    """
    Единственный проход по шаблону.

    Args:
        template: Шаблон
        args: Аргументы подстановки; None = только валидация (без форматирования)
        settings: Настройки форматирования

    Returns:
        (текст, количество placeholders)
    """
    parts: list[str] = []
    arg_index = 0
    i = 0
    n = len(template)

    while i < n:
        ch = template[i]
        nxt = template[i + 1] if i + 1 < n else ""

        if ch == "{":
            if nxt == "}":
                if args is not None:
                    if arg_index >= len(args):
                        raise _reject(
                            template,
                            i,
                            f"placeholder #{arg_index + 1} has no argument "
                            f"({len(args)} supplied)",
                        )
                    parts.append(format_value(args[arg_index], settings))
                arg_index += 1
                i += 2
            elif nxt == "{":
                parts.append("{")
                i += 2
            else:
                raise _reject(template, i, "unmatched '{'")
        elif ch == "}":
            if nxt == "}":
                parts.append("}")
                i += 2
            else:
                raise _reject(template, i, "unmatched '}'")
        else:
            parts.append(ch)
            i += 1

    return "".join(parts), arg_index


def format_string(template: str, *args: Any, settings: FormatSettings | None = None) -> str:
    """
    Подстановка аргументов в шаблон ("build a string").

    Args:
        template: Шаблон с {} / {{ / }}
        *args: Аргументы подстановки в порядке вызова
        settings: Настройки форматирования (default: DEFAULT_SETTINGS)

    Returns:
        Текст без завершающего перевода строки

    Raises:
        TemplateError: Одиночная скобка или {} больше, чем аргументов
        MissingFormatterError: Аргумент без formatting capability

    Examples:
        >>> format_string("{} and {}", 1, 2)
        '1 and 2'
        >>> format_string("{{}}")
        '{}'
        >>> format_string("{}%", 5)
        '5%'
    """
    text, _ = _scan(template, args, settings or DEFAULT_SETTINGS)
    return text


def println(
    template: str,
    *args: Any,
    file: TextIO | None = None,
    settings: FormatSettings | None = None,
) -> None:
    """
    Подстановка аргументов и вывод строки ("print a line").

    Текст + settings.line_terminator пишется одним write() в file
    (default: sys.stdout). При ошибке шаблона ничего не пишется.
    """
    settings = settings or DEFAULT_SETTINGS
    text, _ = _scan(template, args, settings)
    stream = file if file is not None else sys.stdout
    stream.write(text + settings.line_terminator)


def count_placeholders(template: str) -> int:
    """
    Количество {} в шаблоне (валидация без подстановки).

    Raises:
        TemplateError: Если шаблон содержит одиночную скобку
    """
    _, count = _scan(template, None, DEFAULT_SETTINGS)
    return count
