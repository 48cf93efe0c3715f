#!/usr/bin/env python3
"""Logging setup for the emojiconv command line.

Library modules only log through ``logging.getLogger(__name__)``. They stay
silent until an application attaches handlers to the ``emojiconv`` logger,
which the CLI does once per invocation through ``configure_logging``.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..errors import ConfigError

LOGGER_NAME = "emojiconv"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_MAX_BYTES = 1024 * 1024

# Handlers installed by the last configure_logging call
_installed: list[logging.Handler] = []


def _is_truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes"}


def parse_level(level: str | int) -> int:
    """Turn ``"debug"``/``"INFO"``/``10`` into a logging level number."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ConfigError(f"Unknown log level {level!r}", key="logging.level")
    return value


def log_file_path() -> Path | None:
    """Where the rotating log file lives, or ``None`` if the directory is unusable."""
    env_dir = os.environ.get("EMOJICONV_LOG_DIR")
    logs_dir = Path(env_dir) if env_dir else Path.home() / ".emojiconv" / "logs"
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        return None
    return logs_dir / os.environ.get("EMOJICONV_LOG_FILE", "emojiconv.log")


def _max_bytes() -> int:
    try:
        return int(os.environ.get("EMOJICONV_LOG_MAX_BYTES", DEFAULT_MAX_BYTES))
    except ValueError:
        return DEFAULT_MAX_BYTES


def _remove_installed(logger: logging.Logger) -> None:
    while _installed:
        handler = _installed.pop()
        logger.removeHandler(handler)
        handler.close()


def configure_logging(
    level: str | int = "INFO",
    console: bool | None = None,
    log_file: bool = True,
) -> logging.Logger:
    """Attach file and stderr handlers to the ``emojiconv`` logger.

    Calling it again replaces the handlers from the previous call, so the
    level or sinks can change between CLI invocations in one process.

    Args:
        level: Level name or number for the logger and its handlers
        console: Also log to stderr. If None, uses EMOJICONV_CONSOLE_LOGS
        log_file: Write to the rotating log file under EMOJICONV_LOG_DIR

    Returns:
        The configured ``emojiconv`` logger

    Raises:
        ConfigError: if ``level`` is not a logging level name

    """
    numeric_level = parse_level(level)
    if console is None:
        console = _is_truthy(os.environ.get("EMOJICONV_CONSOLE_LOGS"))

    logger = logging.getLogger(LOGGER_NAME)
    _remove_installed(logger)
    logger.setLevel(numeric_level)
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = []

    if log_file:
        path = log_file_path()
        if path is not None:
            try:
                handlers.append(RotatingFileHandler(path, maxBytes=_max_bytes(), backupCount=3, encoding="utf-8"))
            except OSError:
                # Unwritable log file: fall back to stderr
                console = True

    if console:
        handlers.append(logging.StreamHandler(sys.stderr))

    if not handlers:
        handlers.append(logging.NullHandler())

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        _installed.append(handler)

    return logger


def reset_logging() -> None:
    """Detach and close the handlers installed by ``configure_logging``."""
    logger = logging.getLogger(LOGGER_NAME)
    _remove_installed(logger)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


__all__ = ["LOGGER_NAME", "configure_logging", "reset_logging", "parse_level", "log_file_path"]
