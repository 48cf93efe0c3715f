#!/usr/bin/env python3
"""Builders for the dictionary-driven emoji patterns.

Each builder takes the emoji definitions in dictionary order and returns a
pattern string whose first capturing group holds the matched token, ready to be
joined behind ``IGNORE_PATTERN``.
"""

from typing import Iterable, List

from ..codepoints import utf16_length
from ..schemas.dictionary import EmojiDefinition
from .components import (
    ASCII_LEADING_BOUNDARY,
    ASCII_TRAILING_BOUNDARY,
    create_alternation_pattern,
    escape_codepoints,
)


# ==============================================================================
# ASCII EMOTICONS
# ==============================================================================


def build_ascii_pattern(definitions: Iterable[EmojiDefinition]) -> str:
    """Build the ascii emoticon pattern.

    A token only matches after whitespace or at the start of the text, and
    before whitespace, the end of the text, or one of ``!``, ``,`` and ``.``,
    so ``:p`` inside ``http://x.org/:page`` is left alone.
    """
    tokens = [token for definition in definitions for token in definition.ascii]
    return ASCII_LEADING_BOUNDARY + create_alternation_pattern(tokens) + ASCII_TRAILING_BOUNDARY


# ==============================================================================
# SHORTNAMES
# ==============================================================================


def build_shortname_pattern(definitions: Iterable[EmojiDefinition]) -> str:
    """Build the shortname pattern: each canonical shortname then its alternates."""
    shortnames = [shortname for definition in definitions for shortname in definition.shortnames]
    return create_alternation_pattern(shortnames)


# ==============================================================================
# UNICODE SEQUENCES
# ==============================================================================


def ordered_unicode_codepoints(definitions: Iterable[EmojiDefinition]) -> List[str]:
    """Collect every base/default codepoint string, longest sequence first.

    Alternatives are tried left to right, so a flag (two regional indicators)
    or a keycap (``#`` + VS16 + U+20E3) must come before any shorter sequence
    that is a prefix of it. Length is counted in UTF-16 code units and the sort
    is stable, so equal lengths keep dictionary order.
    """
    codepoints = [
        codepoint
        for definition in definitions
        for codepoint in definition.code_points.base_and_default_matches
    ]
    return sorted(codepoints, key=utf16_length, reverse=True)


def build_unicode_pattern(definitions: Iterable[EmojiDefinition]) -> str:
    """Build the unicode pattern from escaped, length-ordered codepoint sequences."""
    escaped = escape_codepoints(ordered_unicode_codepoints(definitions))
    return create_alternation_pattern(escaped, escape=False)
