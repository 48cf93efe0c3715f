#!/usr/bin/env python3
"""Tests for the emojiconv logger configuration."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from emojiconv.core.logging import LOGGER_NAME, _is_truthy, configure_logging, parse_level, reset_logging
from emojiconv.errors import ConfigError, EmojiConvError


def _stream_handlers(logger):
    return [h for h in logger.handlers if type(h) is logging.StreamHandler]


def test_configure_attaches_file_handler(tmp_path):
    logger = configure_logging("DEBUG", console=False)
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.DEBUG
    assert logger.propagate is False

    file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename == str(tmp_path / "logs" / "emojiconv.log")


def test_messages_reach_log_file(tmp_path):
    configure_logging("INFO", console=False)
    logging.getLogger("emojiconv.converters.base").info("converted %d tokens", 3)
    for handler in logging.getLogger(LOGGER_NAME).handlers:
        handler.flush()

    content = (tmp_path / "logs" / "emojiconv.log").read_text(encoding="utf-8")
    assert "converted 3 tokens" in content
    assert "emojiconv.converters.base" in content


def test_second_call_replaces_handlers():
    first = configure_logging("DEBUG", console=True)
    count = len(first.handlers)

    second = configure_logging("WARNING", console=True)
    assert second is first
    assert len(second.handlers) == count, "reconfiguring must not stack handlers"
    assert second.level == logging.WARNING
    assert all(h.level == logging.WARNING for h in second.handlers)


def test_console_flag_adds_stderr_handler():
    assert _stream_handlers(configure_logging(console=False)) == []
    assert len(_stream_handlers(configure_logging(console=True))) == 1


def test_console_from_environment(monkeypatch):
    monkeypatch.setenv("EMOJICONV_CONSOLE_LOGS", "yes")
    assert len(_stream_handlers(configure_logging(log_file=False))) == 1


def test_no_sinks_falls_back_to_null_handler():
    logger = configure_logging(console=False, log_file=False)
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.NullHandler)


def test_reset_detaches_handlers():
    logger = configure_logging(console=True)
    reset_logging()
    assert logger.handlers == []
    assert logger.propagate is True


def test_unknown_level_rejected():
    with pytest.raises(ConfigError) as exc_info:
        configure_logging("LOUD")
    assert isinstance(exc_info.value, EmojiConvError)
    assert exc_info.value.key == "logging.level"


@pytest.mark.parametrize(
    "level,expected",
    [("debug", logging.DEBUG), (" Warning ", logging.WARNING), ("INFO", logging.INFO), (40, 40)],
)
def test_parse_level(level, expected):
    assert parse_level(level) == expected


@pytest.mark.parametrize("value,expected", [("1", True), ("TRUE", True), (" yes ", True), ("0", False), (None, False)])
def test_truthy_env_values(value, expected):
    assert _is_truthy(value) is expected
