"""Structured logging setup for text-splitter."""

from __future__ import annotations

import logging
import sys
import typing

import structlog

_HANDLER_NAME = "text-splitter"


def _shared_processors() -> list[typing.Callable]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(json_format: bool) -> typing.Callable:
    if json_format:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def configure_logging(
    level: int | str = logging.INFO,
    json_format: bool = False,
) -> None:
    """Route stdlib and structlog records through one structlog formatter.

    Library modules log with ``logging.getLogger(__name__)``; this only
    decides how those records are rendered. Logs go to stderr so they never
    mix with records written to stdout. Calling it again replaces the
    handler installed by the previous call.

    Args:
        level: Logging level (e.g., logging.INFO, "DEBUG").
        json_format: Emit one JSON object per line instead of console text.
    """
    if isinstance(level, str):
        level = level.upper()

    shared_processors = _shared_processors()

    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(json_format),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
