# core/terminal/interfaces.py
from __future__ import annotations
from typing import Optional, Protocol, Union

# Characters arrive as str, function/keypad keys as curses int codes.
RawKey = Union[str, int]

class KeySource(Protocol):
    """Non-blocking supplier of raw keys."""

    def poll_key(self) -> Optional[RawKey]:
        """Return the next pending key, or None when nothing is ready."""

class FrameSink(Protocol):
    """Character grid the presentation stage draws into."""

    def clear(self) -> None: ...

    def write_at(self, row: int, col: int, text: str) -> None: ...

    def refresh(self) -> None: ...
