from __future__ import annotations
import logging
import sys
from typing import Optional
import structlog

def configure_logging(debug: bool = False, log_path: Optional[str] = None) -> None:
    timestamper = structlog.processors.TimeStamper(fmt="iso")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            # JSON renderer for machine-readable logs
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if debug else logging.INFO
        ),
        cache_logger_on_first_use=True,
    )

    # route stdlib logging to a file while curses owns the screen
    level = logging.DEBUG if debug else logging.INFO
    if log_path:
        logging.basicConfig(format="%(message)s", filename=log_path, level=level)
    else:
        logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
