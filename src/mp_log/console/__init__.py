"""Console – five-channel text sink and the process-wide console."""
from mp_log.console.sink import CHANNEL_NAMES, Channel, Console, ConsoleChannels, console

__all__ = ["CHANNEL_NAMES", "Channel", "Console", "ConsoleChannels", "console"]
