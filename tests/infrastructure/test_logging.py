"""Tests for the structlog setup."""

import json
import logging

import pytest
import structlog

from shopcart.infrastructure.logging import SHOPCART_LOGGER, configure_logging


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    structlog.reset_defaults()
    logger = logging.getLogger(SHOPCART_LOGGER)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def test_default_shows_warnings_only():
    configure_logging()
    logger = logging.getLogger(SHOPCART_LOGGER)
    assert logger.level == logging.WARNING
    assert logger.propagate is False


def test_verbose_enables_debug():
    configure_logging(verbose=True)
    assert logging.getLogger(SHOPCART_LOGGER).level == logging.DEBUG


def test_reconfiguring_keeps_a_single_handler():
    configure_logging()
    configure_logging(verbose=True)
    assert len(logging.getLogger(SHOPCART_LOGGER).handlers) == 1


def test_json_lines_on_stderr(capsys):
    configure_logging(log_json=True)

    structlog.get_logger("shopcart.application.checkout").warning(
        "checkout_failed", item_count=1
    )

    record = json.loads(capsys.readouterr().err.strip())
    assert record["event"] == "checkout_failed"
    assert record["level"] == "warning"
    assert record["logger"] == "shopcart.application.checkout"
    assert record["item_count"] == 1


def test_debug_events_dropped_when_not_verbose(capsys):
    configure_logging(log_json=True)

    structlog.get_logger("shopcart.application.add_item").debug("item_added")

    assert capsys.readouterr().err == ""
