# app/controller/event_bus.py
from __future__ import annotations
from typing import List, Tuple

from core.hooks.events import SemanticEvent

class EventStream:
    """
    Single-producer channel of semantic events for one tick.
    The capture stage publishes, the aggregation stage drains; nothing is
    expected to survive past the end of the tick.
    """
    def __init__(self):
        self._pending: List[SemanticEvent] = []

    def publish(self, ev: SemanticEvent) -> None:
        self._pending.append(ev)

    def drain(self) -> List[SemanticEvent]:
        out, self._pending = self._pending, []
        return out

    def snapshot(self) -> Tuple[SemanticEvent, ...]:
        return tuple(self._pending)

    def __len__(self) -> int:
        return len(self._pending)
