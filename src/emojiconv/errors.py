#!/usr/bin/env python3
"""Exception hierarchy for emoji conversion and table generation."""

from __future__ import annotations

from pathlib import Path


class EmojiConvError(Exception):
    """Base exception for emojiconv errors."""


class DictionaryError(EmojiConvError):
    """Raised when the source emoji dictionary cannot be loaded."""

    def __init__(self, message: str, path: str | Path | None = None, cause: Exception | None = None):
        self.path = Path(path) if path is not None else None
        self.cause = cause
        super().__init__(message)


class TablesError(EmojiConvError):
    """Raised when a generated tables artifact cannot be read."""

    def __init__(self, message: str, path: str | Path | None = None, cause: Exception | None = None):
        self.path = Path(path) if path is not None else None
        self.cause = cause
        super().__init__(message)


class ConfigError(EmojiConvError):
    """Raised when the configuration file or an override holds a bad value."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        path: str | Path | None = None,
        cause: Exception | None = None,
    ):
        self.key = key
        self.path = Path(path) if path is not None else None
        self.cause = cause
        super().__init__(message)


class CodepointError(EmojiConvError, ValueError):
    """Raised for a malformed codepoint string.

    This only happens when a lookup table is corrupt, user text never
    reaches the codepoint parser.
    """

    def __init__(self, codepoint: str, reason: str):
        self.codepoint = codepoint
        super().__init__(f"Invalid codepoint string {codepoint!r}: {reason}")


__all__ = ["EmojiConvError", "DictionaryError", "TablesError", "ConfigError", "CodepointError"]
