# app/controller/pacing.py
from __future__ import annotations
import time
from typing import Callable, Optional

class FrameLimiter:
    """
    Sleep-then-yield frame pacing.
    Sleeps until `min_sleep_s` before the frame deadline, then yields the
    thread until the deadline passes. The next frame is timed from the moment
    the wait ends, so a slow frame does not trigger a catch-up burst.
    """
    def __init__(
        self,
        fps: int = 60,
        min_sleep_s: float = 0.002,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.frame_s = 1.0 / fps
        self.min_sleep_s = min_sleep_s
        self.clock = clock
        self.sleep = sleep
        self._last: Optional[float] = None

    def start(self) -> None:
        self._last = self.clock()

    def wait(self) -> None:
        if self._last is None:
            self.start()
        deadline = self._last + self.frame_s
        remaining = deadline - self.clock()
        if remaining > self.min_sleep_s:
            self.sleep(remaining - self.min_sleep_s)
        while self.clock() < deadline:
            self.sleep(0)
        self._last = self.clock()
