# app/analytics/metrics.py
from __future__ import annotations
import math
from dataclasses import dataclass, replace
from typing import Dict, Optional, Sequence
import numpy as np

U32_MASK = (1 << 32) - 1
U64_MASK = (1 << 64) - 1

@dataclass
class Stats:
    """Running press counters. Fixed-width unsigned: values wrap instead of growing."""
    total: int = 0
    combo: int = 0
    score: int = 0

    def snapshot(self) -> "Stats":
        return replace(self)

    def to_record(self) -> Dict[str, int]:
        return {"total": self.total, "combo": self.combo, "score": self.score}

@dataclass(frozen=True)
class TimingMetrics:
    avg: float
    rate: float
    bpm: float
    samples: int

@dataclass(frozen=True)
class RenderFrame:
    stats: Stats
    timing: Optional[TimingMetrics] = None

def average_delay(stamps: Sequence[float], threshold_s: float = 0.01) -> Optional[float]:
    """
    Sum of each retained timestamp's offset from the front one.
    Only a sum above `threshold_s` is divided by len-1; at or below it the raw
    sum is returned as-is. A single stamp gives the empty sum, 0.0.
    None for an empty window (nothing to anchor on).
    """
    if not stamps:
        return None
    front = stamps[0]
    deltas = np.array([t - front for t in stamps[1:]], dtype=float)
    avg = float(deltas.sum())
    if avg > threshold_s:
        avg = avg / (len(stamps) - 1)
    return avg

def timing_metrics(stamps: Sequence[float], threshold_s: float = 0.01) -> Optional[TimingMetrics]:
    avg = average_delay(stamps, threshold_s)
    if avg is None:
        return None
    # 0 avg -> infinite rate; left for the view to display as n/a
    rate = 1.0 / avg if avg != 0 else math.inf
    return TimingMetrics(avg=avg, rate=rate, bpm=rate * 60.0, samples=len(stamps))
