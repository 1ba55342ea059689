# core/terminal/memory_terminal.py
from __future__ import annotations
from collections import deque
from typing import Deque, Dict, List, Optional

from core.terminal.interfaces import RawKey

class MemoryTerminal:
    """In-memory key source and frame sink (scripted keys, captured grid)."""
    def __init__(self, rows: int = 100, cols: int = 100):
        self.rows = rows
        self.cols = cols
        self._pending: Deque[RawKey] = deque()
        self._grid: Dict[int, str] = {}
        self.frames: List[List[str]] = []

    def feed(self, *keys: RawKey) -> None:
        self._pending.extend(keys)

    def poll_key(self) -> Optional[RawKey]:
        return self._pending.popleft() if self._pending else None

    def clear(self) -> None:
        self._grid = {}

    def write_at(self, row: int, col: int, text: str) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            return
        line = self._grid.get(row, "").ljust(col)
        text = text[: self.cols - col]
        self._grid[row] = line[:col] + text + line[col + len(text):]

    def refresh(self) -> None:
        self.frames.append(self.screen_lines())

    def screen_lines(self) -> List[str]:
        if not self._grid:
            return []
        return [self._grid.get(r, "") for r in range(max(self._grid) + 1)]
