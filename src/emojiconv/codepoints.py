#!/usr/bin/env python3
"""Codepoint string <-> character conversion.

A codepoint string is one or more lower-case hexadecimal Unicode scalar values
joined by ``-`` (``"1f604"``, ``"1f1fa-1f1f8"``, ``"0023-fe0f-20e3"``). Values
outside the Basic Multilingual Plane are carried through UTF-16 surrogate pairs
when computing code units, which is the form the generated unicode pattern is
ordered by.
"""

from __future__ import annotations

import re

from .errors import CodepointError

BMP_LIMIT = 0x10000
MAX_CODEPOINT = 0x10FFFF

HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF
SURROGATE_SPAN = 0x400

_HEX_SEGMENT = re.compile(r"[0-9a-fA-F]{1,6}")


def is_high_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_START <= unit <= HIGH_SURROGATE_END


def is_low_surrogate(unit: int) -> bool:
    return LOW_SURROGATE_START <= unit <= LOW_SURROGATE_END


def to_surrogate_pair(value: int) -> tuple[int, int]:
    """Split a supplementary-plane value into its (high, low) UTF-16 surrogates.

    Example:
        >>> [hex(u) for u in to_surrogate_pair(0x1F604)]
        ['0xd83d', '0xde04']

    """
    if not BMP_LIMIT <= value <= MAX_CODEPOINT:
        raise ValueError(f"U+{value:04X} does not need a surrogate pair")

    offset = value - BMP_LIMIT
    high = offset // SURROGATE_SPAN + HIGH_SURROGATE_START
    low = offset % SURROGATE_SPAN + LOW_SURROGATE_START
    return high, low


def from_surrogate_pair(high: int, low: int) -> int:
    """Combine a UTF-16 surrogate pair back into the scalar value it encodes."""
    if not (is_high_surrogate(high) and is_low_surrogate(low)):
        raise ValueError(f"0x{high:04X} 0x{low:04X} is not a surrogate pair")

    return (high - HIGH_SURROGATE_START) * SURROGATE_SPAN + (low - LOW_SURROGATE_START) + BMP_LIMIT


def parse_codepoint_string(codepoint: str) -> list[int]:
    """Parse a ``-`` joined codepoint string into scalar values.

    Raises:
        CodepointError: if a segment is empty, not hexadecimal, a surrogate
            or beyond U+10FFFF.

    """
    if not isinstance(codepoint, str) or not codepoint:
        raise CodepointError(str(codepoint), "empty")

    values = []
    for segment in codepoint.split("-"):
        if not _HEX_SEGMENT.fullmatch(segment):
            raise CodepointError(codepoint, f"segment {segment!r} is not hexadecimal")
        value = int(segment, 16)
        if value > MAX_CODEPOINT:
            raise CodepointError(codepoint, f"segment {segment!r} is beyond U+10FFFF")
        if is_high_surrogate(value) or is_low_surrogate(value):
            raise CodepointError(codepoint, f"segment {segment!r} is a surrogate, not a scalar value")
        values.append(value)
    return values


def to_utf16_units(codepoint: str) -> list[int]:
    """Return the UTF-16 code units of a codepoint string.

    Segments below U+10000 contribute one unit, the rest a surrogate pair.
    Mixed sequences such as ``"1f3f3-fe0f-200d-1f308"`` keep segment order.
    """
    units: list[int] = []
    for value in parse_codepoint_string(codepoint):
        if value >= BMP_LIMIT:
            units.extend(to_surrogate_pair(value))
        else:
            units.append(value)
    return units


def utf16_length(codepoint: str) -> int:
    """Number of UTF-16 code units needed to spell a codepoint string."""
    return len(to_utf16_units(codepoint))


def codepoint_string_to_characters(codepoint: str) -> str:
    """Convert a codepoint string to the text it represents.

    Example:
        >>> codepoint_string_to_characters("1f1fa-1f1f8") == chr(0x1F1FA) + chr(0x1F1F8)
        True

    """
    units = to_utf16_units(codepoint)
    chars = []
    index = 0
    while index < len(units):
        unit = units[index]
        if is_high_surrogate(unit):
            chars.append(chr(from_surrogate_pair(unit, units[index + 1])))
            index += 2
        else:
            chars.append(chr(unit))
            index += 1
    return "".join(chars)


def characters_to_codepoint_string(chars: str) -> str:
    """Convert text to its lower-case, ``-`` joined codepoint string.

    A high surrogate followed by a low surrogate (text decoded with
    ``surrogatepass`` or assembled from UTF-16 units) counts as one code point.
    """
    values = []
    index = 0
    while index < len(chars):
        unit = ord(chars[index])
        if is_high_surrogate(unit) and index + 1 < len(chars) and is_low_surrogate(ord(chars[index + 1])):
            values.append(from_surrogate_pair(unit, ord(chars[index + 1])))
            index += 2
        else:
            values.append(unit)
            index += 1
    return "-".join(f"{value:04x}" for value in values)


def normalize_codepoint_string(codepoint: str) -> str:
    """Lower-case a codepoint string after checking it parses."""
    parse_codepoint_string(codepoint)
    return codepoint.lower()


def to_pattern_escape(codepoint: str) -> str:
    r"""Spell a codepoint string as a regex escape sequence.

    BMP values use ``\uXXXX`` and supplementary values ``\UXXXXXXXX``; Python
    patterns match scalar values, so a surrogate escape pair would never match.
    """
    escaped = []
    for value in parse_codepoint_string(codepoint):
        if value >= BMP_LIMIT:
            escaped.append(f"\\U{value:08X}")
        else:
            escaped.append(f"\\u{value:04X}")
    return "".join(escaped)


__all__ = [
    "to_surrogate_pair",
    "from_surrogate_pair",
    "parse_codepoint_string",
    "to_utf16_units",
    "utf16_length",
    "codepoint_string_to_characters",
    "characters_to_codepoint_string",
    "normalize_codepoint_string",
    "to_pattern_escape",
]
