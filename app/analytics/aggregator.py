# app/analytics/aggregator.py
from __future__ import annotations
import structlog

from core.hooks.events import InputEvent, SemanticEvent
from core.utils.window import TimestampWindow
from app.analytics.metrics import Stats, U32_MASK, U64_MASK

log = structlog.get_logger()

class StatsAggregator:
    """
    Folds press events, in order, into the timestamp window and the counters:
      - a gap above combo_timeout_s (measured before recording) resets combo
      - combo += 1, then score += combo, then total += 1
    """
    def __init__(self, window: TimestampWindow, stats: Stats, combo_timeout_s: float = 1.0):
        self.window = window
        self.stats = stats
        self.combo_timeout_s = combo_timeout_s

    def process(self, ev: SemanticEvent) -> None:
        if ev.kind == InputEvent.PRESS:
            self.on_event(ev.t_mono)

    def on_event(self, now: float) -> None:
        stats = self.stats
        last = self.window.back()
        if last is not None:
            # a clock going backwards gives a negative gap and never resets
            gap = now - last
            if gap > self.combo_timeout_s:
                log.debug("combo.reset", gap_s=round(gap, 3), combo=stats.combo)
                stats.combo = 0

        self.window.push(now)
        stats.combo = (stats.combo + 1) & U32_MASK
        stats.score = (stats.score + stats.combo) & U64_MASK
        stats.total = (stats.total + 1) & U32_MASK
