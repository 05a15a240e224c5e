"""Structured logging helpers shared by the generator and the metrics engine."""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Protocol, TextIO


class Logger(Protocol):
    """Minimal structured logger: an event name plus keyword fields."""

    def info(self, event: str, **fields: Any) -> None:
        """Emit an ``INFO``-level event."""
        ...

    def debug(self, event: str, **fields: Any) -> None:
        """Emit a ``DEBUG``-level event."""
        ...


class NoopLogger:
    """Logger that discards all events. Used when no logger is supplied."""

    def info(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def debug(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return


class StdLogger:
    """Write events to a text stream as ``key=value`` lines or JSON objects.

    Args:
        level: Lowest level written (``"debug"``, ``"info"`` or ``"warning"``).
        json_fmt: Emit one JSON object per line instead of plain text.
        stream: Destination stream, ``sys.stderr`` by default.
    """

    _levels: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        if level not in self._levels:
            raise ValueError(f"unknown log level {level!r}")
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr

    def enabled(self, level: str) -> bool:
        return self._levels[level] >= self._levels[self.level]

    def _format(self, level: str, event: str, fields: Dict[str, Any]) -> str:
        if self.json_fmt:
            obj: Dict[str, Any] = {"level": level, "event": event}
            obj.update(fields)
            return json.dumps(obj, default=str)
        kv = " ".join(f"{k}={v}" for k, v in fields.items())
        return f"{level} {event} {kv}".rstrip()

    def log(self, level: str, event: str, **fields: Any) -> None:
        """Emit ``event`` at ``level`` if the level is enabled."""
        if not self.enabled(level):
            return
        self.stream.write(self._format(level, event, fields) + "\n")

    def info(self, event: str, **fields: Any) -> None:
        self.log("info", event, **fields)

    def debug(self, event: str, **fields: Any) -> None:
        self.log("debug", event, **fields)


__all__ = ["Logger", "NoopLogger", "StdLogger"]
