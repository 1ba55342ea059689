# core/terminal/curses_terminal.py
from __future__ import annotations
import curses
from typing import Optional
import structlog

from core.terminal.interfaces import RawKey

log = structlog.get_logger()

NORMAL_PAIR = 1

class TerminalInitError(RuntimeError):
    """The terminal could not be switched into the mode the app needs."""

class CursesTerminal:
    """
    Curses-backed key source and frame sink.
    - cbreak character mode, no echo, keypad decoding, hidden cursor
    - non-blocking reads (nodelay) with zero escape delay
    Use as a context manager so the terminal is always restored.
    """
    def __init__(self, escdelay_ms: int = 0):
        self.escdelay_ms = escdelay_ms
        self._scr: Optional["curses.window"] = None

    def start(self) -> None:
        if self._scr is not None:
            return
        try:
            self._scr = curses.initscr()
            curses.cbreak()
            curses.noecho()
            self._scr.keypad(True)
            self._scr.nodelay(True)
            curses.set_escdelay(self.escdelay_ms)

            # Cosmetic only; some terminals cannot hide the cursor or do colour.
            try:
                curses.curs_set(0)
            except curses.error:
                log.warning("terminal.cursor.visible")
            try:
                self._setup_colour()
            except curses.error as e:
                log.warning("terminal.colour.unavailable", err=str(e))

            self._scr.refresh()
            rows, cols = self._scr.getmaxyx()
        except curses.error as e:
            self.stop()
            raise TerminalInitError(f"failed to start curses: {e}") from e
        log.info("terminal.start", rows=rows, cols=cols)

    def _setup_colour(self) -> None:
        if not curses.has_colors():
            return
        curses.start_color()
        curses.init_pair(NORMAL_PAIR, curses.COLOR_WHITE, curses.COLOR_BLACK)
        self._scr.bkgd(" ", curses.color_pair(NORMAL_PAIR))

    def stop(self) -> None:
        if self._scr is None:
            return
        scr, self._scr = self._scr, None
        try:
            scr.keypad(False)
            curses.nocbreak()
            curses.echo()
        finally:
            curses.endwin()
        log.info("terminal.stop")

    def __enter__(self) -> "CursesTerminal":
        self.start()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.stop()

    # --- KeySource ---
    def poll_key(self) -> Optional[RawKey]:
        try:
            return self._screen().get_wch()
        except curses.error:
            # nodelay: raised when no input is pending
            return None

    # --- FrameSink ---
    def clear(self) -> None:
        self._screen().erase()

    def write_at(self, row: int, col: int, text: str) -> None:
        scr = self._screen()
        max_y, max_x = scr.getmaxyx()
        if row >= max_y or col >= max_x:
            return
        try:
            scr.addstr(row, col, text[: max_x - col])
        except curses.error:
            # writing into the bottom-right cell moves the cursor off-screen
            pass

    def refresh(self) -> None:
        self._screen().refresh()

    def _screen(self) -> "curses.window":
        if self._scr is None:
            raise RuntimeError("terminal is not started")
        return self._scr
