"""Logging configuration."""

from __future__ import annotations

import logging
import sys

# Per-request chatter from the server and the test client.
_NOISY_LOGGERS = ("uvicorn.access", "httpx")

LOG_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)-24s | %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Route game logs to stderr so walk output on stdout stays diffable."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    logging.getLogger("geocoin").setLevel(numeric_level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
