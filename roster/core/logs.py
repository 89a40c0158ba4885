"""Logging setup for the roster application."""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """
    Attach a single stderr handler to the ``roster`` logger.

    The session writes to stdout, so log records go to stderr to keep the
    menu readable. Calling this twice does not duplicate handlers.
    """
    logger = logging.getLogger("roster")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    if not any(getattr(h, "_roster_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._roster_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
