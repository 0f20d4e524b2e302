"""Tests for logging helpers."""

import logging

from spanview.utils.logging import configure_logging, get_logger


def test_get_logger_is_namespaced():
    assert get_logger("spanview.session.loop").name == "spanview.session.loop"


def test_configure_logging_single_handler():
    configure_logging(logging.DEBUG)
    configure_logging(logging.INFO)
    logger = logging.getLogger("spanview")
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
