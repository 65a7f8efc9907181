"""
TailorBook Core - Shared services for all modules.

Usage:
    from tailorbook.core import get_db, get_config, get_logger, TB_PATHS
"""

from tailorbook.core.config import get_config, get_config_value, TB_PATHS
from tailorbook.core.db import get_db, migrate_all
from tailorbook.core.errors import ErrorKind, TailorBookError
from tailorbook.core.logging import get_logger

__all__ = [
    "get_config",
    "get_config_value",
    "TB_PATHS",
    "get_db",
    "migrate_all",
    "ErrorKind",
    "TailorBookError",
    "get_logger",
]
