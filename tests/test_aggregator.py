# tests/test_aggregator.py
# How to run:
#   From repo root: pytest -q
#
# What this covers:
#   - combo/score/total progression on a steady stream
#   - combo reset when the gap before a press exceeds the timeout
#   - backwards clock never resets, window is fed in event order

from app.analytics.aggregator import StatsAggregator
from app.analytics.metrics import Stats, U32_MASK
from core.hooks.events import SemanticEvent
from core.utils.window import TimestampWindow

def _feed(times, timeout=1.0):
    w, s = TimestampWindow(8), Stats()
    agg = StatsAggregator(w, s, combo_timeout_s=timeout)
    for t in times:
        agg.on_event(t)
    return w, s

def test_steady_presses_build_combo_and_score():
    w, s = _feed([0.0, 0.3, 0.6])
    assert (s.total, s.combo, s.score) == (3, 3, 6)
    assert list(w) == [0.0, 0.3, 0.6]

def test_long_gap_resets_combo_before_counting():
    _, s = _feed([0.0, 0.3, 1.5])
    assert s.total == 3
    assert s.combo == 1
    assert s.score == 1 + 2 + 1

def test_gap_exactly_at_timeout_keeps_streak():
    _, s = _feed([0.0, 1.0])
    assert s.combo == 2

def test_first_press_never_resets():
    _, s = _feed([100.0])
    assert (s.total, s.combo, s.score) == (1, 1, 1)

def test_backwards_clock_does_not_reset():
    w, s = _feed([5.0, 3.0])
    assert s.combo == 2
    assert list(w) == [5.0, 3.0]

def test_process_uses_event_timestamp():
    w, s = TimestampWindow(8), Stats()
    agg = StatsAggregator(w, s)
    agg.process(SemanticEvent(t_mono=2.5))
    assert w.back() == 2.5
    assert s.total == 1

def test_total_wraps_like_u32():
    w, s = TimestampWindow(8), Stats(total=U32_MASK)
    StatsAggregator(w, s).on_event(0.0)
    assert s.total == 0
