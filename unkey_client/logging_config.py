"""
Logging setup for the client.

The package logs through the standard `unkey_client` logger hierarchy and
stays silent unless a level is configured here or via UNKEY_LOG.
"""

import logging
import sys
from typing import Optional

from .config import get_settings

LOGGER_NAME = "unkey_client"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> Optional[logging.Logger]:
    """
    Attach a stdout handler to the package logger.

    Args:
        level: Log level name; falls back to the UNKEY_LOG setting

    Returns:
        The configured logger, or None if no level was set
    """
    level = level or get_settings().log_level
    if not level:
        return None

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))

    if not any(h.get_name() == LOGGER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(LOGGER_NAME)
        logger.addHandler(handler)

    return logger
