"""Core – Mode and LogEvent."""
from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from structlog.processors import JSONRenderer

from mp_log.kernel.errors import InvalidModeError


class Mode(str, Enum):
    """Rendering mode of a logger."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"

    @classmethod
    def create(cls, mode: Any) -> Mode:
        """Return the member for *mode* or raise :class:`InvalidModeError`."""
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            try:
                return cls(mode)
            except ValueError:
                pass
        raise InvalidModeError(mode)

    def __str__(self) -> str:
        return self.value


development_mode = Mode.DEVELOPMENT
production_mode = Mode.PRODUCTION

_RENDERERS: dict[Mode, JSONRenderer] = {
    Mode.DEVELOPMENT: JSONRenderer(indent=4),
    Mode.PRODUCTION: JSONRenderer(separators=(",", ":")),
}


@dataclasses.dataclass(frozen=True)
class LogEvent:
    """Immutable snapshot of one log call.

    ``meta`` is exposed as a read-only mapping and ``tags`` as a tuple, so
    handlers cannot alter what the next handler receives.  The hash leaves
    ``meta`` out, so events with a hashable message can be used in sets.
    """

    level: str
    message: Any
    meta: Mapping[str, Any] = dataclasses.field(default_factory=dict, hash=False)
    tags: tuple[str, ...] = ()
    mode: Mode = Mode.PRODUCTION

    def __post_init__(self) -> None:
        object.__setattr__(self, "meta", MappingProxyType(dict(self.meta)))
        object.__setattr__(self, "tags", tuple(self.tags))

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "message": self.message,
            "meta": dict(self.meta),
            "tags": list(self.tags),
            "mode": str(self.mode),
        }

    def render(self) -> str:
        """Encode the event as JSON, indented in development mode."""
        renderer = _RENDERERS.get(self.mode, _RENDERERS[Mode.PRODUCTION])
        return renderer(None, self.level, self.to_dict())

    def to_json(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()

    @classmethod
    def from_json(cls, text: str) -> LogEvent:
        """Rebuild an event from :meth:`render` output."""
        data = json.loads(text)
        return cls(
            level=data["level"],
            message=data["message"],
            meta=data.get("meta", {}),
            tags=tuple(data.get("tags", ())),
            mode=Mode.create(data.get("mode", Mode.PRODUCTION.value)),
        )


__all__ = ["LogEvent", "Mode", "development_mode", "production_mode"]
