# core/utils/window.py
from __future__ import annotations
from collections import deque
from typing import Deque, Iterator, Optional, Tuple

class TimestampWindow:
    """
    Fixed-capacity ring of press timestamps.
    Pushing into a full window drops the oldest entry first, so the window
    always holds the most recent `capacity` timestamps in chronological order.
    """
    def __init__(self, capacity: int = 8):
        if capacity < 1:
            raise ValueError(f"window capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._buf: Deque[float] = deque(maxlen=capacity)

    def push(self, t: float) -> None:
        self._buf.append(t)  # deque(maxlen) evicts from the left

    def front(self) -> Optional[float]:
        return self._buf[0] if self._buf else None

    def back(self) -> Optional[float]:
        return self._buf[-1] if self._buf else None

    def snapshot(self) -> Tuple[float, ...]:
        return tuple(self._buf)

    def __iter__(self) -> Iterator[float]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._buf)

    def __repr__(self) -> str:
        return f"TimestampWindow(capacity={self.capacity}, items={list(self._buf)!r})"
