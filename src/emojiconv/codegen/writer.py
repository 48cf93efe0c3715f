#!/usr/bin/env python3
"""Read the source emoji dictionary and persist generated tables.

The tables artifact is a JSON document::

    {"format": 1, "generator": "...", "source": "...", "tables": {...}, "patterns": {...}}

It is written to a temporary file next to the target and moved into place
only once serialization has succeeded, so a failed run never leaves a partial
or truncated artifact behind.
"""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..errors import DictionaryError, TablesError
from ..schemas.dictionary import EmojiDictionary, parse_dictionary
from ..tables import EmojiTables, PATTERN_NAMES, TABLE_NAMES

logger = logging.getLogger(__name__)

ARTIFACT_FORMAT = 1
BUNDLED_DICTIONARY = "emoji.json"


def bundled_dictionary_path() -> Path:
    return Path(str(resources.files("emojiconv.data").joinpath(BUNDLED_DICTIONARY)))


def load_dictionary(path: str | Path | None = None) -> EmojiDictionary:
    """Load and validate an emoji dictionary (the bundled one by default).

    Raises:
        DictionaryError: if the file is missing, is not JSON, or does not match
            the dictionary schema.

    """
    source = Path(path) if path is not None else bundled_dictionary_path()
    try:
        with open(source, encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise DictionaryError(f"Cannot read emoji dictionary {source}: {e}", source, e) from e
    except json.JSONDecodeError as e:
        raise DictionaryError(f"Emoji dictionary {source} is not valid JSON: {e}", source, e) from e

    if not isinstance(raw, dict):
        raise DictionaryError(f"Emoji dictionary {source} must be a JSON object", source)

    try:
        dictionary = parse_dictionary(raw)
    except ValidationError as e:
        raise DictionaryError(
            f"Emoji dictionary {source} failed validation ({e.error_count()} errors)", source, e
        ) from e

    logger.info("Loaded %d emoji from %s", len(dictionary), source)
    return dictionary


def tables_to_document(tables: EmojiTables, source: str | None = None) -> dict[str, Any]:
    from .. import __version__

    document: dict[str, Any] = {
        "format": ARTIFACT_FORMAT,
        "generator": f"emojiconv {__version__}",
        "source": source,
    }
    document.update(tables.as_dict())
    return document


def write_tables(tables: EmojiTables, path: str | Path, source: str | None = None) -> Path:
    """Atomically write a tables artifact and return its path."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(tables_to_document(tables, source), ensure_ascii=False, indent=2) + "\n"

    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(payload)
        os.replace(tmp_name, target)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise

    logger.info("Wrote emoji tables to %s", target)
    return target


def load_tables(path: str | Path) -> EmojiTables:
    """Load a tables artifact written by ``write_tables``.

    Raises:
        TablesError: if the file is unreadable or not a tables artifact.

    """
    source = Path(path)
    try:
        with open(source, encoding="utf-8") as f:
            document = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise TablesError(f"Cannot load emoji tables {source}: {e}", source, e) from e

    if not isinstance(document, dict) or document.get("format") != ARTIFACT_FORMAT:
        raise TablesError(f"{source} is not an emoji tables artifact (format {ARTIFACT_FORMAT})", source)

    tables = document.get("tables") or {}
    patterns = document.get("patterns") or {}
    missing = [name for name in TABLE_NAMES if name not in tables]
    missing += [name for name in PATTERN_NAMES if name not in patterns]
    if missing:
        raise TablesError(f"{source} is missing {', '.join(missing)}", source)

    try:
        return EmojiTables.from_dict(document)
    except re.error as e:
        raise TablesError(f"{source} holds an invalid pattern: {e}", source, e) from e


def generate(source: str | Path | None, output: str | Path) -> Path:
    """Load a dictionary, build its tables, and write the artifact.

    Nothing is written when the dictionary cannot be loaded.
    """
    from .generator import build_tables

    dictionary = load_dictionary(source)
    tables = build_tables(dictionary)
    label = str(source) if source is not None else f"bundled:{BUNDLED_DICTIONARY}"
    return write_tables(tables, output, source=label)


__all__ = [
    "ARTIFACT_FORMAT",
    "bundled_dictionary_path",
    "load_dictionary",
    "tables_to_document",
    "write_tables",
    "load_tables",
    "generate",
]
