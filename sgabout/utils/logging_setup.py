from __future__ import annotations

import logging
import sys


def configure_logging(level: str = "WARNING") -> None:
    """Route package loggers to stderr. Unknown level names fall back to WARNING."""
    log_level = getattr(logging, level.upper(), logging.WARNING)
    if not isinstance(log_level, int):
        log_level = logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
