"""Handlers – StructlogHandler and configure_structlog.

Forwards mp-log events into structlog so applications that already render
through a structlog pipeline keep a single output format.
"""
from __future__ import annotations

import logging
from typing import Any, TextIO

import structlog

from mp_log.core.event import LogEvent, Mode
from mp_log.core.level import Level

_METHODS: dict[str, str] = {
    "debug": "debug",
    "info": "info",
    "warn": "warning",
    "error": "error",
}

_STDLIB_LEVELS: dict[Level, int] = {
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
}


class StructlogHandler:
    """Log handler delegating every event to a structlog logger.

    The event message becomes the structlog ``event``; ``tags``, ``mode`` and
    the event meta are passed as key/values.  Meta keys that collide with
    those names are prefixed with ``meta_``.

    Parameters
    ----------
    logger:
        A structlog (bound) logger.  Defaults to ``structlog.get_logger(name)``.
    name:
        Logger name used when *logger* is not given.
    """

    def __init__(self, logger: Any = None, name: str = "mp_log") -> None:
        self._logger = logger if logger is not None else structlog.get_logger(name)

    def __call__(self, event: LogEvent) -> None:
        method = getattr(self._logger, _METHODS.get(event.level, "info"))
        kw: dict[str, Any] = {}
        for key, value in event.meta.items():
            kw[f"meta_{key}" if key in ("event", "tags", "mode") else key] = value
        method(str(event.message), tags=list(event.tags), mode=str(event.mode), **kw)


def configure_structlog(
    mode: Mode | str = Mode.PRODUCTION,
    level: Level | str = Level.DEBUG,
    file: TextIO | None = None,
) -> None:
    """Configure structlog output for use with :class:`StructlogHandler`.

    Development mode renders with ``ConsoleRenderer``; production mode emits
    one JSON object per line.  Records below *level* are dropped by structlog.
    Output goes to *file*, stdout by default.
    """
    renderer: Any
    if Mode.create(mode) is Mode.DEVELOPMENT:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_STDLIB_LEVELS[Level.create(level)]),
        logger_factory=structlog.PrintLoggerFactory(file),
        cache_logger_on_first_use=False,
    )


__all__ = ["StructlogHandler", "configure_structlog"]
