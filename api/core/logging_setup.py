"""Logging configuration for the ``api`` logger tree."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stream handler to the ``api`` logger once and apply the level."""
    global _handler
    logger = logging.getLogger("api")
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_handler)
        logger.propagate = False
    logger.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))
    return logger
