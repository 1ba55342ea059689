from __future__ import annotations
import argparse, sys
from typing import List, Optional

from app.analytics.config import RhythmConfig
from app.controller.runner import TickRuntime
from core.terminal.memory_terminal import MemoryTerminal

def load_timestamps(values: List[float]) -> List[float]:
    if values:
        return list(values)
    out: List[float] = []
    for lineno, line in enumerate(sys.stdin, 1):
        text = line.strip()
        if not text:
            continue
        try:
            out.append(float(text))
        except ValueError:
            raise ValueError(f"line {lineno}: not a timestamp: {text!r}") from None
    return out

def replay(timestamps: List[float], config: Optional[RhythmConfig] = None, key: str = "x") -> List[str]:
    """Feed one press per timestamp, one tick each, and return the final screen."""
    cfg = config or RhythmConfig()
    term = MemoryTerminal(rows=cfg.grid_rows, cols=cfg.grid_cols)
    now = [0.0]
    runtime = TickRuntime(term, term, cfg, clock=lambda: now[0])
    for t in timestamps:
        now[0] = t
        term.feed(key)
        runtime.scheduler.tick()
    if not timestamps:
        runtime.scheduler.tick()
    return term.screen_lines()

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="keytempo-tool", description="keytempo rhythm input tools")
    sub = ap.add_subparsers(dest="cmd", required=True)

    sub.add_parser("run", help="Launch the interactive terminal app")

    p_replay = sub.add_parser("replay", help="Replay press timestamps (seconds) and print the screen")
    p_replay.add_argument("timestamps", nargs="*", type=float,
                          help="Press timestamps; read from stdin (one per line) when omitted")
    p_replay.add_argument("--keys", default="x,b",
                          help="Comma-separated keys counted as presses (default: x,b)")

    args = ap.parse_args(argv)
    if args.cmd == "run":
        from main import main as run_app
        return run_app()

    if args.cmd == "replay":
        keys = tuple(k for k in args.keys.split(",") if k)
        if not keys:
            ap.error("--keys needs at least one key")
        cfg = RhythmConfig(press_keys=keys)
        try:
            stamps = load_timestamps(args.timestamps)
        except ValueError as e:
            ap.error(str(e))
        for line in replay(stamps, cfg, key=keys[0]):
            print(line)
        return 0
    return 2

if __name__ == "__main__":
    sys.exit(main())
