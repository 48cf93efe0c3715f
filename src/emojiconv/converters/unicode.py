#!/usr/bin/env python3
"""Conversions that start from native unicode emoji."""

from __future__ import annotations

from ..codepoints import characters_to_codepoint_string
from ..schemas.options import ConversionOptions


class UnicodeConverterMixin:
    """Mixin providing unicode -> shortname and unicode -> markup.

    Requires ``tables``, ``_substitute``, ``_resolve_options`` and ``_render``
    from the host class.
    """

    def to_short(self, text: str | None) -> str | None:
        """Convert unicode emoji to shortnames.

        Examples:
        - "😄" → ":smile:"
        - "🇺🇸" → ":flag_us:", never two regional indicator halves

        """

        def _replace(unicode: str) -> str | None:
            return self.tables.codepoint_to_shortname.get(characters_to_codepoint_string(unicode))

        return self._substitute(self.tables.unicode_regex, text, _replace)

    def unicode_to_image(
        self,
        text: str | None,
        unicode_alt: bool | None = None,
        svg: bool | None = None,
        sprite: bool | None = None,
        size: int | None = None,
        options: ConversionOptions | None = None,
    ) -> str | None:
        """Convert unicode emoji to image, sprite or SVG markup."""
        resolved = self._resolve_options(options, unicode_alt=unicode_alt, svg=svg, sprite=sprite, size=size)

        def _replace(unicode: str) -> str | None:
            codepoint = characters_to_codepoint_string(unicode)
            shortname = self.tables.codepoint_to_shortname.get(codepoint)
            if shortname is None:
                return None
            return self._render(codepoint, shortname, resolved)

        return self._substitute(self.tables.unicode_regex, text, _replace)
