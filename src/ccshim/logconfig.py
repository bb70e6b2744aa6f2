"""Logging setup for the debug trace.

Records go to stderr only; the build's stdout stays untouched.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

ROOT_LOGGER_NAME = "ccshim"
LOG_FORMAT = "ccshim %(levelname)s: %(message)s"

_HANDLER_MARKER = "_ccshim_handler"


def configure_logging(debug: bool, *, stream: TextIO | None = None) -> logging.Logger:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    remove_handlers(logger)
    # A fresh handler each call; the previous stream may already be closed.
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    setattr(handler, _HANDLER_MARKER, True)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False
    return logger


def remove_handlers(logger: logging.Logger | None = None) -> None:
    logger = logger or logging.getLogger(ROOT_LOGGER_NAME)
    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_MARKER, False)]:
        logger.removeHandler(handler)
