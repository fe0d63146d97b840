"""Core – Logger, the shared dispatcher.

A :class:`Logger` holds the active level and mode, owns the ordered list of
log handlers and creates :class:`~mp_log.core.client.Client` instances.
Events emitted by its clients are broadcast synchronously to every handler,
in registration order.  A handler that raises aborts the broadcast and the
exception propagates to the caller of ``Client.log``.
"""
from __future__ import annotations

import contextlib
import logging
import threading
from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any, Callable

from mp_log.console import Console, ConsoleChannels, console as global_console
from mp_log.core.client import Client
from mp_log.core.event import LogEvent, Mode
from mp_log.core.level import Level

if TYPE_CHECKING:
    from mp_log.config.settings import LoggerSettings
    from mp_log.handlers.stdlib import ClientLogHandler

LogHandler = Callable[[LogEvent], object]

_log = logging.getLogger(__name__)


class Logger:
    """Standardised log API with swappable log handling.

    Parameters
    ----------
    console:
        The :class:`Console` the default handler writes to and
        :meth:`hijack_console` patches.  Defaults to the process-wide
        :data:`mp_log.console.console`.  Its channels are captured here so the
        default handler keeps printing even while the console is hijacked.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._level: Level = Level.ERROR
        self._mode: Mode = Mode.PRODUCTION
        self._console = console if console is not None else global_console
        self._original_channels: ConsoleChannels = self._console.snapshot()
        self._hijack_channels: ConsoleChannels | None = None
        self._handlers: tuple[LogHandler, ...] = ()
        self._lock = threading.RLock()
        self._stdlib_captures: list[tuple[logging.Logger, ClientLogHandler]] = []
        self.reset_log_handlers()

    @classmethod
    def from_settings(cls, settings: LoggerSettings, console: Console | None = None) -> Logger:
        logger = cls(console)
        logger.apply_settings(settings)
        return logger

    def apply_settings(self, settings: LoggerSettings) -> None:
        self.level = Level.create(settings.level)
        self.mode = settings.mode

    def __repr__(self) -> str:
        return f"Logger(level={self._level!s}, mode={self._mode!s}, handlers={len(self._handlers)})"

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def level(self) -> Level:
        """The active level.  Events of levels it does not include are dropped."""
        return self._level

    @level.setter
    def level(self, level: Level) -> None:
        self._level = level

    @property
    def mode(self) -> Mode:
        """The rendering mode; development pretty-prints events."""
        return self._mode

    @mode.setter
    def mode(self, mode: Mode | str) -> None:
        self._mode = Mode.create(mode)

    @property
    def console(self) -> Console:
        return self._console

    def client(
        self,
        meta: Mapping[str, Any] | None = None,
        tags: Iterable[str] | None = None,
    ) -> Client:
        """Create a new :class:`Client` bound to this logger."""
        return Client(self, meta, tags)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    @property
    def default_log_handler(self) -> LogHandler:
        """Handler printing each event to the matching original console channel."""
        channels = self._original_channels

        def handle(event: LogEvent) -> None:
            channels.channel_for(event.level)(str(event))

        return handle

    @property
    def log_handlers(self) -> list[LogHandler]:
        return list(self._handlers)

    def reset_log_handlers(self) -> None:
        """Go back to the default console handler only."""
        self._subscribe([self.default_log_handler])

    def set_log_handlers(self, *handlers: LogHandler) -> None:
        """Replace every handler; events reach *handlers* in the given order."""
        self._subscribe(handlers)

    def add_log_handler(self, handler: LogHandler) -> None:
        with self._lock:
            self._subscribe([*self._handlers, handler])

    def _subscribe(self, handlers: Iterable[LogHandler]) -> None:
        with self._lock:
            self._handlers = tuple(handlers)
        _log.debug("mp_log handlers subscribed: %d", len(self._handlers))

    def emit(self, event: LogEvent) -> None:
        """Invoke every handler with *event*, synchronously and in order."""
        for handler in self._handlers:
            handler(event)

    # ------------------------------------------------------------------
    # Console hijacking
    # ------------------------------------------------------------------

    def hijack_console(
        self,
        meta: Mapping[str, Any] | None = None,
        tags: Iterable[str] | None = None,
    ) -> ConsoleChannels:
        """Route the console channels through a new client of this logger.

        Use with care: everything printed through the console, including
        output of other libraries, becomes a log event.  Returns the channels
        that were installed before.
        """
        _, previous = self._hijack(meta, tags)
        return previous

    def _hijack(
        self,
        meta: Mapping[str, Any] | None,
        tags: Iterable[str] | None,
    ) -> tuple[Client, ConsoleChannels]:
        client = self.client(meta, tags)
        channels = ConsoleChannels(
            log=client.debug,
            debug=client.debug,
            info=client.info,
            warn=client.warn,
            error=client.error,
        )
        with self._lock:
            previous = self._console.install(channels)
            self._hijack_channels = channels
        _log.debug("mp_log console hijacked")
        return client, previous

    @property
    def console_hijacked(self) -> bool:
        """True while the channels installed by this logger's last hijack are active."""
        return self._hijack_channels is not None and self._console.snapshot() is self._hijack_channels

    def release_console(self) -> None:
        """Restore the console channels captured when this logger was created.

        When another logger has hijacked the console since this logger's own
        hijack, its channels are left in place.
        """
        with self._lock:
            hijacked, self._hijack_channels = self._hijack_channels, None
            if hijacked is not None and self._console.snapshot() is not hijacked:
                _log.debug("mp_log console hijacked elsewhere; release skipped")
                return
            self._console.install(self._original_channels)
        _log.debug("mp_log console released")

    @contextlib.contextmanager
    def hijacked_console(
        self,
        meta: Mapping[str, Any] | None = None,
        tags: Iterable[str] | None = None,
    ) -> Iterator[Client]:
        """Hijack the console for the duration of the block, yielding the hijack client."""
        client, _ = self._hijack(meta, tags)
        try:
            yield client
        finally:
            self.release_console()

    # ------------------------------------------------------------------
    # stdlib logging capture
    # ------------------------------------------------------------------

    def capture_stdlib_logging(
        self,
        name: str | None = None,
        meta: Mapping[str, Any] | None = None,
        tags: Iterable[str] | None = None,
    ) -> ClientLogHandler:
        """Forward records of the stdlib logger *name* (root by default) to this logger."""
        from mp_log.handlers.stdlib import ClientLogHandler

        target = logging.getLogger(name)
        handler = ClientLogHandler(self.client(meta, tags))
        target.addHandler(handler)
        with self._lock:
            self._stdlib_captures.append((target, handler))
        _log.debug("mp_log capturing stdlib logger %r", target.name)
        return handler

    def release_stdlib_logging(self) -> None:
        """Detach every handler installed by :meth:`capture_stdlib_logging`."""
        with self._lock:
            captures, self._stdlib_captures = self._stdlib_captures, []
        for target, handler in captures:
            target.removeHandler(handler)
            handler.close()


__all__ = ["LogHandler", "Logger"]
