# main.py
from __future__ import annotations
import sys
import structlog
from app.analytics.config import RhythmConfig
from app.controller.runner import TickRuntime
from app.logging_config import configure_logging
from core.terminal.curses_terminal import CursesTerminal, TerminalInitError

def main() -> int:
    cfg = RhythmConfig()
    configure_logging(debug=cfg.debug, log_path=cfg.log_path)
    log = structlog.get_logger()

    log.info("app.start", msg="Launching keytempo")
    try:
        with CursesTerminal() as term:
            runtime = TickRuntime(term, term, cfg)
            try:
                runtime.run()
            except KeyboardInterrupt:
                log.info("app.interrupt")
    except TerminalInitError as e:
        log.error("app.start.failed", err=str(e))
        print(f"keytempo: {e}", file=sys.stderr)
        return 1
    log.info("app.stop", msg="Exited cleanly")
    return 0

if __name__ == "__main__":
    sys.exit(main())
