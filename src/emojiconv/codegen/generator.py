#!/usr/bin/env python3
"""Compile an emoji dictionary into lookup tables and match patterns.

``build_tables`` is a pure function of the dictionary: the same input, in the
same order, always yields equal tables and identical pattern strings. Keys that
appear twice overwrite the earlier entry (last write wins), which is how the
dictionary's insertion order resolves data collisions.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from ..patterns import build_ascii_pattern, build_shortname_pattern, build_unicode_pattern
from ..schemas.dictionary import EmojiDefinition
from ..tables import EmojiTables

logger = logging.getLogger(__name__)


def _resolving_codepoints(definition: EmojiDefinition) -> list[str]:
    """Codepoint strings that look up this emoji: base, defaults, then output."""
    codepoints = definition.code_points.base_and_default_matches
    if definition.code_points.output not in codepoints:
        codepoints.append(definition.code_points.output)
    return codepoints


def build_lookup_tables(definitions: Iterable[EmojiDefinition]) -> dict[str, dict[str, str]]:
    ascii_to_codepoint: dict[str, str] = {}
    codepoint_to_ascii: dict[str, str] = {}
    codepoint_to_shortname: dict[str, str] = {}
    shortname_to_codepoint: dict[str, str] = {}
    shortname_to_category: dict[str, str] = {}

    for definition in definitions:
        output = definition.code_points.output
        codepoints = _resolving_codepoints(definition)

        for token in definition.ascii:
            ascii_to_codepoint[token] = output
        if definition.ascii:
            for codepoint in codepoints:
                codepoint_to_ascii[codepoint] = definition.ascii[0]

        for codepoint in codepoints:
            codepoint_to_shortname[codepoint] = definition.shortname

        for shortname in definition.shortnames:
            shortname_to_codepoint[shortname] = output

        shortname_to_category[definition.shortname] = definition.category

    return {
        "ascii_to_codepoint": ascii_to_codepoint,
        "codepoint_to_ascii": codepoint_to_ascii,
        "codepoint_to_shortname": codepoint_to_shortname,
        "shortname_to_codepoint": shortname_to_codepoint,
        "shortname_to_category": shortname_to_category,
    }


def build_patterns(definitions: Iterable[EmojiDefinition]) -> dict[str, str]:
    definitions = list(definitions)
    return {
        "ascii_pattern": build_ascii_pattern(definitions),
        "shortname_pattern": build_shortname_pattern(definitions),
        "unicode_pattern": build_unicode_pattern(definitions),
    }


def build_tables(dictionary: Mapping[str, EmojiDefinition]) -> EmojiTables:
    """Build the lookup tables and patterns for a validated emoji dictionary."""
    definitions = list(dictionary.values())
    tables = EmojiTables(**build_lookup_tables(definitions), **build_patterns(definitions))
    logger.info(
        "Built emoji tables: %d emoji, %d shortnames, %d ascii tokens, %d codepoints",
        len(tables.shortname_to_category),
        len(tables.shortname_to_codepoint),
        len(tables.ascii_to_codepoint),
        len(tables.codepoint_to_shortname),
    )
    return tables


__all__ = ["build_tables", "build_lookup_tables", "build_patterns"]
