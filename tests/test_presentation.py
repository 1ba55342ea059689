# tests/test_presentation.py
# How to run:
#   From repo root: pytest -q
#
# What this covers:
#   - average delay: divided above the 0.01s threshold, raw sum at or below
#   - degenerate windows (empty / single stamp) never divide by zero
#   - FrameView layout and n/a display for non-finite metrics

import math

import pytest

from app.analytics.metrics import RenderFrame, Stats, average_delay, timing_metrics
from core.terminal.memory_terminal import MemoryTerminal
from ui.frame_view import FrameView

def test_average_divides_when_sum_above_threshold():
    # S = 0.3 + 0.6 = 0.9 -> 0.9 / 2
    assert average_delay([0.0, 0.3, 0.6]) == pytest.approx(0.45)

def test_average_keeps_raw_sum_at_or_below_threshold():
    # S = 0.002 + 0.004 = 0.006, not divided
    assert average_delay([0.0, 0.002, 0.004]) == pytest.approx(0.006)

def test_average_threshold_is_configurable():
    assert average_delay([0.0, 0.3, 0.6], threshold_s=1.0) == pytest.approx(0.9)

def test_single_stamp_is_empty_sum():
    assert average_delay([4.2]) == 0.0
    m = timing_metrics([4.2])
    assert m.avg == 0.0
    assert math.isinf(m.rate) and math.isinf(m.bpm)

def test_empty_window_has_no_timing():
    assert average_delay([]) is None
    assert timing_metrics([]) is None

def test_rate_and_bpm_follow_average():
    m = timing_metrics([0.0, 0.5, 1.0])  # S = 1.5 -> 0.75
    assert m.avg == pytest.approx(0.75)
    assert m.rate == pytest.approx(1 / 0.75)
    assert m.bpm == pytest.approx(60 / 0.75)
    assert m.samples == 3

def test_frame_view_layout():
    term = MemoryTerminal()
    view = FrameView(term)
    view.draw(RenderFrame(stats=Stats(total=3, combo=3, score=6), timing=timing_metrics([0.0, 0.3, 0.6])))
    lines = term.screen_lines()
    assert lines[0] == "Average delay between presses: 0.4500"
    assert lines[1] == "KPS: 2.22"
    assert lines[2] == "BPM: 133.3"
    assert lines[3] == ""
    assert lines[4:] == ["Total Presses: 3", "Combo: 3", "Score: 6"]

def test_frame_view_shows_na_for_infinite_rate():
    term = MemoryTerminal()
    FrameView(term).draw(RenderFrame(stats=Stats(total=1, combo=1, score=1), timing=timing_metrics([1.0])))
    lines = term.screen_lines()
    assert lines[0] == "Average delay between presses: 0.0000"
    assert lines[1] == "KPS: n/a"
    assert lines[2] == "BPM: n/a"

def test_frame_view_without_timing_only_shows_stats():
    term = MemoryTerminal()
    FrameView(term).draw(RenderFrame(stats=Stats()))
    lines = term.screen_lines()
    assert lines[:4] == ["", "", "", ""]
    assert lines[4:] == ["Total Presses: 0", "Combo: 0", "Score: 0"]
    assert len(term.frames) == 1

def test_frame_view_clips_to_grid():
    term = MemoryTerminal()
    FrameView(term, rows=5, cols=8).draw(RenderFrame(stats=Stats(total=12)))
    assert term.screen_lines()[4] == "Total Pr"
    assert len(term.screen_lines()) == 5
