"""Configuration and logging for emojiconv."""

from .config import ConfigLoader, get_config, reset_config
from .logging import configure_logging, reset_logging

__all__ = ["ConfigLoader", "get_config", "reset_config", "configure_logging", "reset_logging"]
