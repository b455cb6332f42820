"""Decision trace sinks for the route optimizer."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Protocol

logger = logging.getLogger(__name__)

_WARNING_EVENTS = frozenset({"candidate_skipped"})


@dataclass(slots=True)
class TraceEvent:
    name: str
    fields: dict[str, Any] = field(default_factory=dict)


class OptimizationTracer(Protocol):
    def record(self, name: str, **fields: Any) -> None:
        ...


class LoggingTracer:
    """Forward every event to the optimizer logger."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logger

    def record(self, name: str, **fields: Any) -> None:
        level = logging.WARNING if name in _WARNING_EVENTS else logging.DEBUG
        if not self.log.isEnabledFor(level):
            return
        details = ", ".join(f"{key}={value}" for key, value in fields.items())
        self.log.log(level, f"{name}: {details}")


class CollectingTracer:
    """Keep events in memory so callers can inspect the optimizer's decisions."""

    def __init__(self) -> None:
        self.events: List[TraceEvent] = []

    def record(self, name: str, **fields: Any) -> None:
        self.events.append(TraceEvent(name=name, fields=dict(fields)))

    def named(self, name: str) -> List[TraceEvent]:
        return [event for event in self.events if event.name == name]
