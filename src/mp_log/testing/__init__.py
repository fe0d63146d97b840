"""Testing – in-memory handler double and pytest fixtures."""
from mp_log.testing.fakes import InMemoryLogHandler

__all__ = ["InMemoryLogHandler"]
