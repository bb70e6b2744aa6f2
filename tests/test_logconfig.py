from __future__ import annotations

import io
import logging

from ccshim.logconfig import ROOT_LOGGER_NAME, configure_logging


def _marked(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, "_ccshim_handler", False)]


def test_configure_logging_keeps_a_single_handler() -> None:
    first = configure_logging(True, stream=io.StringIO())
    second = configure_logging(True, stream=io.StringIO())
    assert first is second
    assert len(_marked(first)) == 1
    assert first.level == logging.DEBUG
    assert first.propagate is False


def test_reconfigure_after_previous_stream_closed() -> None:
    stale = io.StringIO()
    configure_logging(True, stream=stale)
    stale.close()
    fresh = io.StringIO()
    logger = configure_logging(True, stream=fresh)
    logging.getLogger(f"{ROOT_LOGGER_NAME}.dispatch").debug("after close")
    assert len(_marked(logger)) == 1
    assert fresh.getvalue() == "ccshim DEBUG: after close\n"


def test_warning_level_hides_debug() -> None:
    stream = io.StringIO()
    configure_logging(False, stream=stream)
    logging.getLogger(f"{ROOT_LOGGER_NAME}.dispatch").debug("hidden")
    logging.getLogger(f"{ROOT_LOGGER_NAME}.dispatch").warning("shown")
    assert stream.getvalue() == "ccshim WARNING: shown\n"
