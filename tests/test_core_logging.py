"""Tests for logging configuration."""

import logging
from unittest.mock import patch

from tailorbook.core.logging import configured_level, get_logger


def test_get_logger_returns_logger():
    logger = get_logger("test.module")
    assert isinstance(logger, logging.Logger)


def test_get_logger_cached():
    logger1 = get_logger("test.cached")
    logger2 = get_logger("test.cached")
    assert logger1 is logger2


def test_get_logger_has_handler():
    logger = get_logger("test.handler")
    assert len(logger.handlers) >= 1


def test_get_logger_format_includes_name():
    logger = get_logger("test.format")
    fmt = logger.handlers[0].formatter._fmt
    assert "%(name)s" in fmt


def test_get_logger_respects_level():
    logger = get_logger("test.level.debug", level=logging.DEBUG)
    assert logger.level == logging.DEBUG


def test_configured_level_reads_config():
    with patch("tailorbook.core.logging.get_config_value", return_value="warning"):
        assert configured_level() == logging.WARNING


def test_configured_level_unknown_name_falls_back_to_info():
    with patch("tailorbook.core.logging.get_config_value", return_value="chatty"):
        assert configured_level() == logging.INFO


def test_get_logger_defaults_to_configured_level():
    with patch("tailorbook.core.logging.get_config_value",
               side_effect=lambda *keys, default=None: "DEBUG" if keys[-1] == "level" else default):
        logger = get_logger("test.level.configured")
    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG


def test_shipped_config_level_is_info():
    assert get_logger("test.level.shipped").level == logging.INFO
