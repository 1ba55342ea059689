from __future__ import annotations
import threading
from typing import Callable, Optional
import structlog

from app.analytics.config import RhythmConfig
from app.controller.context_state import SharedResources
from app.controller.pacing import FrameLimiter
from app.controller.scheduler import TickScheduler
from app.controller.stages import AggregationStage, InputCaptureStage, PresentationStage
from core.hooks.events import mono_ts
from core.hooks.keymap import Keymap
from core.terminal.interfaces import FrameSink, KeySource
from ui.frame_view import FrameView

log = structlog.get_logger()

class TickRuntime:
    """Wires the terminal, shared state and the three stages into a paced tick loop."""
    def __init__(
        self,
        source: KeySource,
        sink: FrameSink,
        config: Optional[RhythmConfig] = None,
        keymap: Optional[Keymap] = None,
        limiter: Optional[FrameLimiter] = None,
        clock: Callable[[], float] = mono_ts,
    ):
        self.cfg = config or RhythmConfig()
        self.resources = SharedResources.create(self.cfg)
        self.keymap = keymap or Keymap.from_keys(self.cfg.press_keys)

        self.capture = InputCaptureStage(source, self.keymap, clock=clock)
        self.aggregate = AggregationStage(self.cfg)
        self.present = PresentationStage(
            FrameView(sink, rows=self.cfg.grid_rows, cols=self.cfg.grid_cols), self.cfg
        )
        self.scheduler = TickScheduler([self.capture, self.aggregate, self.present], self.resources)
        self.limiter = limiter or FrameLimiter(self.cfg.tick_hz, self.cfg.min_sleep_s)
        self._stop_evt = threading.Event()

    def run(self, max_ticks: Optional[int] = None) -> None:
        self._stop_evt.clear()
        log.info("runtime.start", order=self.scheduler.order, tick_hz=self.cfg.tick_hz)
        self.limiter.start()
        try:
            while not self._stop_evt.is_set():
                self.scheduler.tick()
                if max_ticks is not None and self.scheduler.ticks >= max_ticks:
                    break
                self.limiter.wait()
        finally:
            log.info(
                "session.summary",
                ticks=self.scheduler.ticks,
                **self.resources.stats.to_record(),
            )

    def stop(self) -> None:
        self._stop_evt.set()
