"""Logging helpers for namode."""

import logging
import sys
from typing import Optional

LOGGER_NAME = "namode"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the namode namespace."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(level: int = logging.INFO, fmt: Optional[str] = None) -> logging.Logger:
    """
    Send namode log records to stderr.

    Only the `namode` logger is touched; the root logger is left alone.
    Calling this again updates the level without adding handlers.
    """
    app_logger = logging.getLogger(LOGGER_NAME)

    stream_handlers = [
        h for h in app_logger.handlers
        if isinstance(h, logging.StreamHandler) and getattr(h, "_namode", False)
    ]
    if not stream_handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
        handler._namode = True
        app_logger.addHandler(handler)
        stream_handlers = [handler]

    for handler in stream_handlers:
        handler.setLevel(level)
    app_logger.setLevel(level)
    app_logger.propagate = False
    return app_logger
