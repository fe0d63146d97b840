"""Core – Client, the per-context logging API.

A :class:`Client` is bound to one :class:`~mp_log.core.logger.Logger` and
carries default ``meta`` and ``tags`` that are merged into every event it
emits.  Clients are cheap; create one per component or per logical flow.

The wrapper and scope helpers temporarily mutate the client's own state and
restore it on exit.  They are not safe for interleaved use of a single client
from several threads or tasks: give each flow its own client instead.
"""
from __future__ import annotations

import contextlib
import functools
import inspect
import traceback
from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from mp_log.core.event import LogEvent
from mp_log.core.level import Level

if TYPE_CHECKING:
    from mp_log.core.logger import Logger

F = TypeVar("F", bound=Callable[..., Any])


def is_error(value: Any) -> bool:
    """Return ``True`` for exceptions and exception-like values.

    A value is exception-like when it exposes both a ``message`` and a
    ``stack`` that are not ``None``, either as attributes or as mapping keys.
    """
    if value is None:
        return False
    if isinstance(value, BaseException):
        return True
    if isinstance(value, Mapping):
        return value.get("message") is not None and value.get("stack") is not None
    return (
        getattr(value, "message", None) is not None
        and getattr(value, "stack", None) is not None
    )


def _describe_error(value: Any) -> tuple[Any, Any]:
    """Split an error-like value into ``(message, stack)``."""
    if isinstance(value, BaseException):
        message = getattr(value, "message", None)
        if message is None:
            message = str(value)
        return message, "".join(traceback.format_exception(value))
    if isinstance(value, Mapping):
        return value["message"], value["stack"]
    return value.message, value.stack


class Client:
    """The logger client API.

    Parameters
    ----------
    logger:
        The :class:`Logger` events are emitted on.  Shared, not owned.
    meta:
        Meta data added to every event (copied).
    tags:
        Tags added to every event (copied).
    """

    def __init__(
        self,
        logger: Logger,
        meta: Mapping[str, Any] | None = None,
        tags: Iterable[str] | None = None,
    ) -> None:
        self._logger = logger
        self._meta: dict[str, Any] = dict(meta or {})
        self._tags: list[str] = list(tags or [])

    def __repr__(self) -> str:
        return f"Client(meta={self._meta!r}, tags={self._tags!r})"

    @property
    def logger(self) -> Logger:
        return self._logger

    @property
    def meta(self) -> dict[str, Any]:
        """Meta data added to every event.  Reads and writes copy."""
        return dict(self._meta)

    @meta.setter
    def meta(self, meta: Mapping[str, Any] | None) -> None:
        self._meta = dict(meta) if meta is not None else {}

    @property
    def tags(self) -> list[str]:
        """Tags added to every event.  Reads and writes copy."""
        return list(self._tags)

    @tags.setter
    def tags(self, tags: Iterable[str] | None) -> None:
        self._tags = list(tags) if tags is not None else []

    def add_meta(self, meta: Mapping[str, Any]) -> None:
        """Merge *meta* into the client meta; new keys win."""
        self._meta.update(meta)

    def add_tags(self, *tags: str) -> None:
        self._tags.extend(tags)

    # ------------------------------------------------------------------
    # Emitting
    # ------------------------------------------------------------------

    def log(
        self,
        level: Level | str,
        message: Any,
        meta: Mapping[str, Any] | None = None,
    ) -> LogEvent | None:
        """Build and emit a :class:`LogEvent`.

        *level* may also be a level name in any case; unknown names raise
        :class:`~mp_log.kernel.errors.InvalidLevelError`.  Returns the emitted
        event, or ``None`` when *level* is not included by the logger's active
        level.  Exceptions (and exception-like values) passed as *message*
        contribute their description as the message and their traceback as
        the ``stack`` meta field.
        """
        if isinstance(level, str):
            level = Level.create(level)
        if not self._logger.level.includes(level):
            return None

        error_meta: dict[str, Any] = {}
        if is_error(message):
            message, error_meta["stack"] = _describe_error(message)

        event = LogEvent(
            level=str(level),
            message=message,
            meta={**self._meta, **(meta or {}), **error_meta},
            tags=("log", str(level), *self._tags),
            mode=self._logger.mode,
        )
        self._logger.emit(event)
        return event

    def debug(self, message: Any, meta: Mapping[str, Any] | None = None) -> LogEvent | None:
        return self.log(Level.DEBUG, message, meta)

    def info(self, message: Any, meta: Mapping[str, Any] | None = None) -> LogEvent | None:
        return self.log(Level.INFO, message, meta)

    def warn(self, message: Any, meta: Mapping[str, Any] | None = None) -> LogEvent | None:
        return self.log(Level.WARN, message, meta)

    # stdlib spelling
    warning = warn

    def error(self, message: Any, meta: Mapping[str, Any] | None = None) -> LogEvent | None:
        return self.log(Level.ERROR, message, meta)

    # ------------------------------------------------------------------
    # Scoped meta / tags
    # ------------------------------------------------------------------

    @contextlib.contextmanager
    def scoped_meta(self, meta: Mapping[str, Any] | None) -> Iterator[Client]:
        """Add *meta* for the duration of the ``with`` block."""
        saved = self.meta
        self.add_meta(meta or {})
        try:
            yield self
        finally:
            self.meta = saved

    @contextlib.contextmanager
    def scoped_tags(self, *tags: str) -> Iterator[Client]:
        """Add *tags* for the duration of the ``with`` block."""
        saved = self.tags
        self.add_tags(*tags)
        try:
            yield self
        finally:
            self.tags = saved

    @contextlib.contextmanager
    def scoped(self, meta: Mapping[str, Any] | None, *tags: str) -> Iterator[Client]:
        with self.scoped_meta(meta), self.scoped_tags(*tags):
            yield self

    # ------------------------------------------------------------------
    # Function wrappers
    # ------------------------------------------------------------------

    def meta_wrapper(self, fn: F, meta: Mapping[str, Any] | None) -> F:
        """Wrap *fn* so every event it logs through this client carries *meta*.

        Bound methods keep their binding; wrap ``obj.method``, not
        ``Type.method``, when the instance matters.
        """
        return _wrap(fn, lambda: self.scoped_meta(meta))

    def tags_wrapper(self, fn: F, *tags: str) -> F:
        """Wrap *fn* so every event it logs through this client carries *tags*."""
        return _wrap(fn, lambda: self.scoped_tags(*tags))

    def wrapper(self, fn: F, meta: Mapping[str, Any] | None, *tags: str) -> F:
        """Combine :meth:`meta_wrapper` and :meth:`tags_wrapper`."""
        return self.meta_wrapper(self.tags_wrapper(fn, *tags), meta)


def _wrap(fn: F, scope: Callable[[], contextlib.AbstractContextManager[Any]]) -> F:
    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            with scope():
                return await fn(*args, **kwargs)

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        with scope():
            return fn(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


__all__ = ["Client", "is_error"]
