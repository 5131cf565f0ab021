"""Logging configuration for pagebar.

The library only calls ``get_logger``; applications embedding it call
``setup_logging`` once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

from pagebar.config import Settings, get_settings


def build_processors(log_format: str, colors: bool = False) -> list[Any]:
    """Processor chain for the ``console`` or ``json`` format."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=colors))
    return processors


def setup_logging(settings: Settings | None = None, stream: TextIO | None = None) -> None:
    """Configure structured logging.

    Args:
        settings: Source of ``log_level`` and ``log_format``, defaults to the
            cached application settings
        stream: Where log lines are written, defaults to stdout. Colors are
            only used when it is a terminal.
    """
    settings = settings or get_settings()
    stream = stream or sys.stdout
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    structlog.configure(
        processors=build_processors(settings.log_format, colors=stream.isatty()),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=log_level,
    )

    # one line per handled update
    logging.getLogger("aiogram.event").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance for the given name."""
    return structlog.get_logger(name)
