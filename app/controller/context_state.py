from __future__ import annotations
from dataclasses import dataclass
from typing import Any, FrozenSet

from app.analytics.config import RhythmConfig
from app.analytics.metrics import Stats
from app.controller.event_bus import EventStream
from core.utils.window import TimestampWindow

# resource names stages declare in their reads/writes
EVENTS = "events"
WINDOW = "window"
STATS = "stats"

class ResourceAccessError(RuntimeError):
    """A stage touched a resource it did not declare."""

@dataclass
class SharedResources:
    """State shared between stages, passed explicitly to the scheduler."""
    events: EventStream
    window: TimestampWindow
    stats: Stats

    @classmethod
    def create(cls, config: RhythmConfig) -> "SharedResources":
        return cls(
            events=EventStream(),
            window=TimestampWindow(config.window_capacity),
            stats=Stats(),
        )

    def names(self) -> FrozenSet[str]:
        return frozenset((EVENTS, WINDOW, STATS))

    def get(self, name: str) -> Any:
        if name not in self.names():
            raise KeyError(name)
        return getattr(self, name)

class StageResources:
    """
    A stage's view of the shared resources.
    write() hands out the live object for declared writes only; read() hands
    out a snapshot, so readers never see (or cause) later mutation.
    """
    def __init__(self, stage: str, resources: SharedResources, reads: FrozenSet[str], writes: FrozenSet[str]):
        self.stage = stage
        self._resources = resources
        self._reads = reads
        self._writes = writes

    def write(self, name: str) -> Any:
        if name not in self._writes:
            raise ResourceAccessError(f"stage {self.stage!r} has no write access to {name!r}")
        return self._resources.get(name)

    def read(self, name: str) -> Any:
        if name not in self._reads and name not in self._writes:
            raise ResourceAccessError(f"stage {self.stage!r} has no read access to {name!r}")
        return self._resources.get(name).snapshot()
