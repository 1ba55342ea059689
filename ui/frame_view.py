from __future__ import annotations
import math
from typing import Dict

from app.analytics.metrics import RenderFrame
from core.terminal.interfaces import FrameSink

def fmt_metric(value: float, digits: int) -> str:
    if not math.isfinite(value):
        return "n/a"
    return f"{value:.{digits}f}"

class FrameView:
    """
    Fixed screen layout:
      rows 0-2  average delay, KPS, BPM (only when there is timing)
      row  3    blank
      rows 4-6  total presses, combo, score
    """
    def __init__(self, sink: FrameSink, rows: int = 100, cols: int = 100):
        self.sink = sink
        self.rows = rows
        self.cols = cols

    def lines(self, frame: RenderFrame) -> Dict[int, str]:
        out: Dict[int, str] = {}
        t = frame.timing
        if t is not None:
            out[0] = f"Average delay between presses: {fmt_metric(t.avg, 4)}"
            out[1] = f"KPS: {fmt_metric(t.rate, 2)}"
            out[2] = f"BPM: {fmt_metric(t.bpm, 1)}"
        s = frame.stats
        out[4] = f"Total Presses: {s.total}"
        out[5] = f"Combo: {s.combo}"
        out[6] = f"Score: {s.score}"
        return out

    def draw(self, frame: RenderFrame) -> None:
        self.sink.clear()
        for row, text in self.lines(frame).items():
            if row < self.rows:
                self.sink.write_at(row, 0, text[: self.cols])
        self.sink.refresh()
