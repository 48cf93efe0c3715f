#!/usr/bin/env python3
"""Conversions that start from ascii emoticons."""

from __future__ import annotations

from ..codepoints import codepoint_string_to_characters


class AsciiConverterMixin:
    """Mixin providing ascii -> unicode and ascii -> shortname.

    Emoticons only match between whitespace / text boundaries, or before
    ``!``, ``,`` and ``.``.
    """

    def ascii_to_unicode(self, text: str | None) -> str | None:
        """Convert ascii emoticons to unicode, e.g. ";)" -> the winking face."""

        def _replace(token: str) -> str | None:
            codepoint = self.tables.ascii_to_codepoint.get(token)
            if codepoint is None:
                return None
            return codepoint_string_to_characters(codepoint)

        return self._substitute(self.tables.ascii_regex, text, _replace)

    def ascii_to_shortname(self, text: str | None) -> str | None:
        """Convert ascii emoticons to shortnames, e.g. ";)" -> ":wink:"."""

        def _replace(token: str) -> str | None:
            codepoint = self.tables.ascii_to_codepoint.get(token)
            if codepoint is None:
                return None
            return self.tables.codepoint_to_shortname.get(codepoint)

        return self._substitute(self.tables.ascii_regex, text, _replace)
