"""Configuration and logging setup."""

from hashkit.infrastructure.config.logging_config import configure_logging
from hashkit.infrastructure.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "configure_logging"]
