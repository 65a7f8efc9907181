"""
Logging configuration for TailorBook.

Every module logger writes to stdout with one shared format. Level and
format come from the ``logging`` section of config.yaml unless the caller
passes a level explicitly.
"""

import logging
import sys
from typing import Dict, Optional

from tailorbook.core.config import get_config_value

DEFAULT_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"

_loggers: Dict[str, logging.Logger] = {}


def configured_level() -> int:
    """Level named by ``logging.level`` in config.yaml (INFO if unset or unknown)."""
    name = get_config_value("logging", "level", default="INFO")
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for a module.

    Args:
        name: Logger name (e.g., 'tailorbook.customers', 'tailorbook.api')
        level: Logging level; defaults to the configured level

    Returns:
        Configured logger
    """
    if name in _loggers:
        return _loggers[name]

    if level is None:
        level = configured_level()

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(
            get_config_value("logging", "format", default=DEFAULT_FORMAT),
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(handler)

    _loggers[name] = logger
    return logger
