"""Tests for the intgraph package logger."""

import logging
import sys
from io import StringIO

import pytest

from intgraph.logging import (
    LOG_LEVEL_ENV,
    PACKAGE_LOGGER,
    get_logger,
    level_from_flags,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _fresh_package_logger(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    reset_logging()
    yield
    reset_logging()


def _capture(level=None):
    stream = StringIO()
    setup_root_logger(
        level=level,
        format_string="%(levelname)s %(name)s %(message)s",
        handler=logging.StreamHandler(stream),
    )
    return stream


def test_default_level_is_info():
    stream = _capture()
    log = get_logger("intgraph.algorithms.apsp")
    log.debug("hidden")
    log.info("relaxed 3 vertices")
    assert "hidden" not in stream.getvalue()
    assert "INFO intgraph.algorithms.apsp relaxed 3 vertices" in stream.getvalue()


def test_env_variable_sets_starting_level(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    _capture()
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG


def test_unknown_env_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
    _capture()
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO


def test_explicit_level_beats_env(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
    _capture(level=logging.ERROR)
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.ERROR


def test_global_level_reaches_existing_and_new_children():
    _capture()
    codec_log = get_logger("intgraph.codec")
    set_global_log_level(logging.WARNING)
    assert codec_log.getEffectiveLevel() == logging.WARNING
    assert get_logger("intgraph.service").getEffectiveLevel() == logging.WARNING


def test_setup_is_idempotent():
    _capture()
    setup_root_logger(level=logging.DEBUG)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.INFO


def test_default_handler_writes_to_stderr():
    setup_root_logger()
    (handler,) = logging.getLogger(PACKAGE_LOGGER).handlers
    assert handler.stream is sys.stderr


def test_reset_clears_handlers():
    _capture()
    reset_logging()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    assert package_logger.handlers == []
    assert package_logger.level == logging.NOTSET


@pytest.mark.parametrize(
    "verbose, quiet, expected",
    [
        (False, False, logging.INFO),
        (True, False, logging.DEBUG),
        (False, True, logging.WARNING),
        (True, True, logging.DEBUG),
    ],
)
def test_level_from_flags(verbose, quiet, expected):
    assert level_from_flags(verbose, quiet) == expected
