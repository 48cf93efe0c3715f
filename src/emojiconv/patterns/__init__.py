#!/usr/bin/env python3
"""Public API for the emoji regex patterns.

Re-exports the fixed fragments from ``components`` and the dictionary-driven
builders from ``builders``.
"""

# ==============================================================================
# COMPONENTS - Fixed fragments and helpers
# ==============================================================================
from .components import (
    IGNORE_TAGS,
    IGNORE_PATTERN,
    ASCII_LEADING_BOUNDARY,
    ASCII_TRAILING_BOUNDARY,
    create_alternation_pattern,
    escape_codepoints,
    combine_with_ignore,
)

# ==============================================================================
# BUILDERS - Patterns generated from the emoji dictionary
# ==============================================================================
from .builders import (
    build_ascii_pattern,
    build_shortname_pattern,
    build_unicode_pattern,
    ordered_unicode_codepoints,
)

__all__ = [
    # Components
    "IGNORE_TAGS",
    "IGNORE_PATTERN",
    "ASCII_LEADING_BOUNDARY",
    "ASCII_TRAILING_BOUNDARY",
    "create_alternation_pattern",
    "escape_codepoints",
    "combine_with_ignore",
    # Builders
    "build_ascii_pattern",
    "build_shortname_pattern",
    "build_unicode_pattern",
    "ordered_unicode_codepoints",
]
