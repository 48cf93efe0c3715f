#!/usr/bin/env python3
"""Conversions that start from shortname tokens.

Shortnames match case-insensitively but the lookup is exact, so ``:SMILE:``
is recognized as a token and then left as typed.
"""

from __future__ import annotations

from ..codepoints import codepoint_string_to_characters
from ..schemas.options import ConversionOptions


class ShortnameConverterMixin:
    """Mixin providing shortname -> unicode, ascii and markup."""

    def shortname_to_unicode(
        self, text: str | None, ascii: bool | None = None, options: ConversionOptions | None = None
    ) -> str | None:
        """Convert shortnames to unicode, optionally ascii emoticons too."""
        resolved = self._resolve_options(options, use_ascii=ascii)

        def _replace(shortname: str) -> str | None:
            codepoint = self.tables.shortname_to_codepoint.get(shortname)
            if codepoint is None:
                return None
            return codepoint_string_to_characters(codepoint)

        text = self._substitute(self.tables.shortname_regex, text, _replace)
        if resolved.use_ascii:
            text = self.ascii_to_unicode(text)
        return text

    def shortname_to_ascii(self, text: str | None) -> str | None:
        """Convert shortnames to their ascii emoticon, e.g. ":wink:" -> ";)"."""

        def _replace(shortname: str) -> str | None:
            codepoint = self.tables.shortname_to_codepoint.get(shortname)
            if codepoint is None:
                return None
            return self.tables.codepoint_to_ascii.get(codepoint)

        return self._substitute(self.tables.shortname_regex, text, _replace)

    def shortname_to_image(
        self,
        text: str | None,
        ascii: bool | None = None,
        unicode_alt: bool | None = None,
        svg: bool | None = None,
        sprite: bool | None = None,
        size: int | None = None,
        options: ConversionOptions | None = None,
    ) -> str | None:
        """Convert shortnames (and optionally ascii emoticons) to markup."""
        resolved = self._resolve_options(
            options, use_ascii=ascii, unicode_alt=unicode_alt, svg=svg, sprite=sprite, size=size
        )
        if resolved.use_ascii:
            text = self.ascii_to_shortname(text)

        def _replace(shortname: str) -> str | None:
            codepoint = self.tables.shortname_to_codepoint.get(shortname)
            if codepoint is None:
                return None
            return self._render(codepoint, shortname, resolved)

        return self._substitute(self.tables.shortname_regex, text, _replace)
