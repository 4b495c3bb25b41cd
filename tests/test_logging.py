"""Tests for logging utilities."""

import logging
from io import StringIO

from algokit.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)


def test_get_logger_returns_logger():
    """Test that get_logger returns a logger under the algokit namespace."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "algokit.test_module"


def test_get_logger_keeps_package_names():
    """Test that module names already inside algokit are not prefixed twice."""
    logger = get_logger("algokit.graphs.mst")
    assert logger.name == "algokit.graphs.mst"
    assert get_logger().name == "algokit"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    assert get_logger("test_module") is get_logger("test_module")


def test_get_logger_different_modules():
    """Test that different modules get different loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to the root logger."""
    assert get_logger("test_module").propagate is False


def test_set_log_level():
    """Test that set_log_level updates logger and handler levels."""
    logger = get_logger("test_module")
    try:
        set_log_level(logging.INFO)
        assert logger.level == logging.INFO
        assert all(h.level == logging.INFO for h in logger.handlers)
    finally:
        set_log_level(logging.WARNING)
    assert logger.level == logging.WARNING


def test_set_log_level_string():
    """Test that set_log_level accepts level names."""
    logger = get_logger("test_module")
    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG
        set_log_level("ERROR")
        assert logger.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


def test_configure_logging_redirects_output():
    """Test that configure_logging sends records to the given stream."""
    logger = get_logger("test_module")
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        logger.debug("Debug message")
    finally:
        configure_logging(level=logging.WARNING)

    output = stream.getvalue()
    assert "Debug message" in output
    assert "[DEBUG] algokit.test_module" in output


def test_configure_logging_custom_format():
    """Test that configure_logging honours a custom format string."""
    logger = get_logger("test_module")
    stream = StringIO()
    try:
        configure_logging(level=logging.INFO, format_string="%(levelname)s|%(message)s", stream=stream)
        logger.info("hello")
    finally:
        configure_logging(level=logging.WARNING)

    assert stream.getvalue().strip() == "INFO|hello"
