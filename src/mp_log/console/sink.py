"""Console – the five-channel output sink.

The process-wide :data:`console` plays the role of a global console: code
that wants plain text output calls ``console.info("...")`` and so on.  A
:class:`~mp_log.core.logger.Logger` can hijack those channels so such output
is routed through its handlers instead.
"""
from __future__ import annotations

import dataclasses
import sys
from typing import Callable

Channel = Callable[[str], object]

CHANNEL_NAMES: tuple[str, ...] = ("log", "debug", "info", "warn", "error")


def _stream_channel(stream_name: str) -> Channel:
    # Resolve the stream per call so redirected stdout/stderr are honoured.
    def write(text: str) -> None:
        print(text, file=getattr(sys, stream_name), flush=True)  # noqa: T201

    return write


@dataclasses.dataclass(frozen=True)
class ConsoleChannels:
    """An immutable set of the five console channels."""

    log: Channel
    debug: Channel
    info: Channel
    warn: Channel
    error: Channel

    @classmethod
    def standard(cls) -> ConsoleChannels:
        """``log``, ``debug`` and ``info`` go to stdout; ``warn`` and ``error`` to stderr."""
        stdout = _stream_channel("stdout")
        stderr = _stream_channel("stderr")
        return cls(log=stdout, debug=stdout, info=stdout, warn=stderr, error=stderr)

    def channel_for(self, level: str) -> Channel:
        """Return the channel used to print an event of *level*.

        Debug output goes through the generic ``log`` channel.
        """
        if level == "debug":
            return self.log
        return getattr(self, level, self.log)


class Console:
    """Mutable five-channel sink.

    Calls to :meth:`log`, :meth:`debug`, :meth:`info`, :meth:`warn` and
    :meth:`error` are dispatched to whichever channels are installed at call
    time.
    """

    def __init__(self, channels: ConsoleChannels | None = None) -> None:
        self._channels = channels or ConsoleChannels.standard()

    def snapshot(self) -> ConsoleChannels:
        """Return the channels currently installed."""
        return self._channels

    def install(self, channels: ConsoleChannels) -> ConsoleChannels:
        """Install *channels* and return the ones they replaced."""
        previous, self._channels = self._channels, channels
        return previous

    def log(self, text: str) -> None:
        self._channels.log(text)

    def debug(self, text: str) -> None:
        self._channels.debug(text)

    def info(self, text: str) -> None:
        self._channels.info(text)

    def warn(self, text: str) -> None:
        self._channels.warn(text)

    def error(self, text: str) -> None:
        self._channels.error(text)


console = Console()


__all__ = ["CHANNEL_NAMES", "Channel", "Console", "ConsoleChannels", "console"]
