"""
Structured logging для prelude runtime.

Все модули prelude логируют через structlog:

    logger = get_logger(__name__)
    logger.debug("template_rejected", position=3, reason="lone '{'")

Импорт prelude не меняет глобальную конфигурацию structlog или logging.
Логгеры prelude передают события в stdlib logging (logging.getLogger(name)),
поэтому без настройки хоста debug-события отбрасываются, а WARNING и выше
уходят в stderr через logging.lastResort. println пишет в stdout, и логи
с ним не смешиваются.

Хост включает вывод явно через configure_logging() или собственную
настройку structlog / logging.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

_SERVICE_NAME = "prelude"

# Handler, установленный последним вызовом configure_logging()
_HANDLER: logging.Handler | None = None


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service.name", _SERVICE_NAME)
    return event_dict


def configure_logging(
    level: str = "WARNING",
    json_format: bool = False,
    stream: TextIO | None = None,
    service: str = "prelude",
) -> None:
    """
    Конфигурация structlog + stdlib logging для хост-программы.

    Prelude сам её не вызывает. Повторный вызов заменяет handler,
    установленный предыдущим вызовом.

    Args:
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR)
        json_format: True для JSON, False для console renderer
        stream: Поток вывода (default: sys.stderr)
        service: Имя сервиса в метаданных событий
    """
    global _SERVICE_NAME, _HANDLER
    _SERVICE_NAME = service

    numeric_level = getattr(logging, level.upper())

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _add_service_metadata,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    if json_format:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    if _HANDLER is not None:
        root.removeHandler(_HANDLER)
    root.addHandler(handler)
    root.setLevel(numeric_level)
    _HANDLER = handler


def get_logger(name: str | None = None) -> Any:
    """
    Получить structured logger поверх stdlib логгера name.

    Processors берутся из текущей конфигурации structlog в момент вызова,
    уровень и вывод определяет stdlib logging.

    Args:
        name: Имя логгера (обычно __name__)

    Returns:
        structlog stdlib BoundLogger (lazy proxy)
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


__all__ = [
    "configure_logging",
    "get_logger",
]
