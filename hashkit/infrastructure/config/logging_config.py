"""Logging setup for the hashkit package.

Modules log through ``logging.getLogger(__name__)``; this only decides the
level and where records go. Passwords, salts, digests and encoded hashes are
never part of a log message.
"""

import logging
from typing import Optional

from hashkit.infrastructure.config.settings import get_settings

PACKAGE_LOGGER = "hashkit"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Set the package logger level and attach a stream handler once.

    Args:
        level: Logging level name; defaults to ``Settings.log_level``

    Returns:
        The configured package logger
    """
    if level is None:
        level = get_settings().log_level

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
