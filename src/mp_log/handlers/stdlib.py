"""Handlers – ClientLogHandler, the stdlib :mod:`logging` bridge.

Third-party libraries log through :mod:`logging` rather than printing, so
attaching a :class:`ClientLogHandler` is the way to route their output into
mp-log handlers::

    handler = ClientLogHandler(logger.client(tags=["stdlib"]))
    logging.getLogger("urllib3").addHandler(handler)

:meth:`mp_log.core.logger.Logger.capture_stdlib_logging` does the wiring.
"""
from __future__ import annotations

import logging
import traceback
from typing import Any

from mp_log.core.client import Client
from mp_log.core.level import Level


class ClientLogHandler(logging.Handler):
    """A :class:`logging.Handler` that re-emits records through a :class:`Client`.

    The record level is mapped with :meth:`Level.from_stdlib`; the client's
    logger level still decides whether the event is emitted.  ``meta`` gets
    the stdlib logger name and, when the record carries ``exc_info``, the
    formatted traceback as ``stack``.
    """

    def __init__(self, client: Client, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._client = client

    @property
    def client(self) -> Client:
        return self._client

    def emit(self, record: logging.LogRecord) -> None:
        try:
            meta: dict[str, Any] = {"logger": record.name}
            if record.exc_info and record.exc_info[1] is not None:
                meta["stack"] = "".join(traceback.format_exception(*record.exc_info))
            self._client.log(Level.from_stdlib(record.levelno), record.getMessage(), meta)
        except RecursionError:
            raise
        except Exception:  # noqa: BLE001
            self.handleError(record)


__all__ = ["ClientLogHandler"]
