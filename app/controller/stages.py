# app/controller/stages.py
from __future__ import annotations
from typing import Callable, Optional
import structlog

from app.analytics.aggregator import StatsAggregator
from app.analytics.config import RhythmConfig
from app.analytics.metrics import RenderFrame, timing_metrics
from app.controller.context_state import EVENTS, STATS, WINDOW, StageResources
from app.controller.scheduler import SchedulerState
from core.hooks.events import SemanticEvent, mono_ts
from core.hooks.keymap import Keymap
from core.terminal.interfaces import KeySource
from ui.frame_view import FrameView

log = structlog.get_logger()

class InputCaptureStage:
    """Drains every key the source has ready and publishes the mapped ones."""
    name = "input_capture"
    phase = SchedulerState.CAPTURING
    after = ()
    reads = frozenset()
    writes = frozenset({EVENTS})

    def __init__(self, source: KeySource, keymap: Keymap, clock: Callable[[], float] = mono_ts):
        self.source = source
        self.keymap = keymap
        self.clock = clock

    def run(self, res: StageResources) -> None:
        events = res.write(EVENTS)
        while True:
            key = self.source.poll_key()
            if key is None:
                break
            kind = self.keymap.lookup(key)
            if kind is None:
                log.debug("input.unmapped", key=repr(key))
                continue
            ev = SemanticEvent(kind=kind, t_mono=self.clock())
            events.publish(ev)
            log.debug("input.press", key=repr(key), **ev.to_record())

class AggregationStage:
    name = "stats_aggregate"
    phase = SchedulerState.AGGREGATING
    after = ("input_capture",)
    reads = frozenset()
    writes = frozenset({EVENTS, WINDOW, STATS})

    def __init__(self, config: Optional[RhythmConfig] = None):
        self.cfg = config or RhythmConfig()
        self.aggregator: Optional[StatsAggregator] = None

    def run(self, res: StageResources) -> None:
        if self.aggregator is None:
            self.aggregator = StatsAggregator(
                res.write(WINDOW), res.write(STATS), combo_timeout_s=self.cfg.combo_timeout_s
            )
        for ev in res.write(EVENTS).drain():
            self.aggregator.process(ev)

class PresentationStage:
    """Turns window + stats snapshots into a RenderFrame and draws it."""
    name = "presentation"
    phase = SchedulerState.PRESENTING
    after = ("stats_aggregate",)
    reads = frozenset({WINDOW, STATS})
    writes = frozenset()

    def __init__(self, view: FrameView, config: Optional[RhythmConfig] = None):
        self.view = view
        self.cfg = config or RhythmConfig()
        self.last_frame: Optional[RenderFrame] = None

    def run(self, res: StageResources) -> None:
        stamps = res.read(WINDOW)
        frame = RenderFrame(
            stats=res.read(STATS),
            timing=timing_metrics(stamps, self.cfg.avg_divide_threshold_s),
        )
        self.view.draw(frame)
        self.last_frame = frame
