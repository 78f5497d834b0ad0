"""Logging helpers.

The package logger stays silent (NullHandler) until an application opts in,
either through its own logging setup or through :func:`configure_logging`,
which the CLI calls.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "rapleaf_client"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


class ConsoleHandler(logging.StreamHandler):
    """Marker type so repeated configuration reuses one handler."""


def configure_logging(verbose: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Attach one console handler to the package logger for CLI usage."""
    logger = get_logger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    target = stream if stream is not None else sys.stderr
    for handler in logger.handlers:
        if isinstance(handler, ConsoleHandler):
            handler.setStream(target)
            return logger

    handler = ConsoleHandler(target)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger


def get_logger() -> logging.Logger:
    """Return the package logger used across the client and CLI."""
    return logging.getLogger(LOGGER_NAME)
