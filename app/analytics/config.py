from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class RhythmConfig:
    # timestamp window
    window_capacity: int = 8

    # combo: a gap longer than this breaks the streak
    combo_timeout_s: float = 1.0

    # presentation
    avg_divide_threshold_s: float = 0.01  # raw delta sum at or below this is shown undivided
    grid_rows: int = 100
    grid_cols: int = 100

    # pacing
    tick_hz: int = 60
    min_sleep_s: float = 0.002

    # keys that count as a press
    press_keys: Tuple[str, ...] = ("x", "b")

    # logging (curses owns the screen, so logs go to a file)
    log_path: str = "keytempo.log"
    debug: bool = False
