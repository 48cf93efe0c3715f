#!/usr/bin/env python3
"""Fixed pattern fragments and helpers shared by the pattern builders."""

import re
from typing import Iterable, List

from ..codepoints import to_pattern_escape


# ==============================================================================
# IGNORE REGIONS
# ==============================================================================

# Markup that already holds rendered emoji. A match of this alternative is
# consumed whole and emitted verbatim by every conversion.
IGNORE_TAGS = ("object", "embed", "svg", "img", "div", "span", "p", "a")

IGNORE_PATTERN = (
    r"<object[^>]*>.*?</object>"
    r"|<span[^>]*>.*?</span>"
    r"|<i[^>]*>.*?</i>"
    r"|<(?:" + "|".join(IGNORE_TAGS) + r")[^>]*>"
)


# ==============================================================================
# ASCII BOUNDARIES
# ==============================================================================

# Start of string or preceded by whitespace. Written as an alternation because
# look-behind in ``re`` must be fixed width.
ASCII_LEADING_BOUNDARY = r"(?:^|(?<=\s))"

# Followed by whitespace, end of string, or one of ! , .
ASCII_TRAILING_BOUNDARY = r"(?=\s|$|[!,.])"


# ==============================================================================
# HELPERS
# ==============================================================================


def create_alternation_pattern(items: Iterable[str], escape: bool = True) -> str:
    """Create a capturing regex alternation from a sequence of literals."""
    parts: List[str] = [re.escape(item) if escape else item for item in items]
    if not parts:
        # An empty vocabulary never matches, not even the empty string
        return "((?!))"
    return "(" + "|".join(parts) + ")"


def escape_codepoints(codepoints: Iterable[str]) -> List[str]:
    """Spell each codepoint string as a literal regex escape sequence."""
    return [to_pattern_escape(codepoint) for codepoint in codepoints]


def combine_with_ignore(pattern: str) -> str:
    """Prefix a target pattern with the ignore-region alternative.

    The target pattern must open with its capturing group so that group 1 is
    ``None`` exactly when an ignore region matched.
    """
    return IGNORE_PATTERN + "|" + pattern
