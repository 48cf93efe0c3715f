#!/usr/bin/env python3
"""Immutable lookup tables and compiled matchers consumed by the converters."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Mapping

from .patterns import IGNORE_PATTERN, combine_with_ignore

logger = logging.getLogger(__name__)

TABLE_NAMES = (
    "ascii_to_codepoint",
    "codepoint_to_ascii",
    "codepoint_to_shortname",
    "shortname_to_codepoint",
    "shortname_to_category",
)

PATTERN_NAMES = ("ascii_pattern", "shortname_pattern", "unicode_pattern", "ignore_pattern")


def _freeze(mapping: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class EmojiTables:
    """The five lookup tables and the match patterns built from a dictionary.

    Mappings are read-only views; the combined ``IGNORE|target`` regexes are
    compiled once when the value is created.
    """

    ascii_to_codepoint: Mapping[str, str]
    codepoint_to_ascii: Mapping[str, str]
    codepoint_to_shortname: Mapping[str, str]
    shortname_to_codepoint: Mapping[str, str]
    shortname_to_category: Mapping[str, str]
    ascii_pattern: str
    shortname_pattern: str
    unicode_pattern: str
    ignore_pattern: str = IGNORE_PATTERN

    ascii_regex: re.Pattern = field(init=False, repr=False, compare=False)
    shortname_regex: re.Pattern = field(init=False, repr=False, compare=False)
    unicode_regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for name in TABLE_NAMES:
            object.__setattr__(self, name, _freeze(getattr(self, name)))

        object.__setattr__(self, "ascii_regex", re.compile(combine_with_ignore(self.ascii_pattern)))
        object.__setattr__(
            self, "shortname_regex", re.compile(combine_with_ignore(self.shortname_pattern), re.IGNORECASE)
        )
        object.__setattr__(self, "unicode_regex", re.compile(combine_with_ignore(self.unicode_pattern)))

    def as_dict(self) -> dict[str, Any]:
        """Plain-data form used by the tables artifact."""
        return {
            "tables": {name: dict(getattr(self, name)) for name in TABLE_NAMES},
            "patterns": {name: getattr(self, name) for name in PATTERN_NAMES},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EmojiTables":
        tables = data["tables"]
        patterns = data["patterns"]
        return cls(
            **{name: tables[name] for name in TABLE_NAMES},
            **{name: patterns[name] for name in PATTERN_NAMES},
        )


@lru_cache(maxsize=1)
def get_tables() -> EmojiTables:
    """Return the process-wide default tables, building them on first use.

    A generated artifact named by the ``emoji.tables_file`` setting wins;
    otherwise the bundled dictionary is compiled in memory.
    """
    from .codegen import build_tables, load_dictionary, load_tables
    from .core.config import get_config

    tables_file = get_config().tables_file
    if tables_file:
        logger.debug("Loading emoji tables from %s", tables_file)
        return load_tables(tables_file)

    logger.debug("Compiling emoji tables from the bundled dictionary")
    return build_tables(load_dictionary())


__all__ = ["EmojiTables", "TABLE_NAMES", "PATTERN_NAMES", "get_tables"]
