#!/usr/bin/env python3
"""EmojiConverter: the conversion engine.

Every entry point is a thin policy over ``_substitute``: one left-to-right
``re.sub`` with an ``IGNORE|target`` pattern, where ignore regions come back
verbatim and target tokens go through a lookup that either returns the
replacement or ``None`` to keep the token as typed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from ..codepoints import characters_to_codepoint_string, codepoint_string_to_characters
from ..schemas.options import ConversionOptions, MarkupConfig
from ..tables import EmojiTables, get_tables
from .ascii import AsciiConverterMixin
from .markup import render_markup
from .shortname import ShortnameConverterMixin
from .unicode import UnicodeConverterMixin

Replacement = Callable[[str], "str | None"]


@dataclass(frozen=True)
class EmojiMatch:
    """Everything known about one emoji token."""

    shortname: str
    codepoint: str
    unicode: str
    category: str | None
    ascii: str | None


class EmojiConverter(UnicodeConverterMixin, ShortnameConverterMixin, AsciiConverterMixin):
    """Convert text between unicode, shortname, ascii and markup emoji forms.

    Instances only hold immutable state and may be shared between threads.
    """

    def __init__(
        self,
        tables: EmojiTables | None = None,
        markup: MarkupConfig | None = None,
        options: ConversionOptions | None = None,
    ) -> None:
        self.tables = tables if tables is not None else get_tables()
        self.markup = markup if markup is not None else MarkupConfig()
        self.options = options if options is not None else ConversionOptions()

    # ------------------------------------------------------------------
    # Shared scan/substitute primitive
    # ------------------------------------------------------------------

    def _substitute(self, regex: re.Pattern, text: str | None, replace: Replacement) -> str | None:
        if text is None:
            return None

        def _callback(match: re.Match) -> str:
            token = match.group(1)
            if token is None:
                # ignore region
                return match.group(0)
            replacement = replace(token)
            return match.group(0) if replacement is None else replacement

        return regex.sub(_callback, text)

    def _resolve_options(self, options: ConversionOptions | None = None, **overrides) -> ConversionOptions:
        """Merge per-call keyword flags over an options value (or the defaults)."""
        base = options if options is not None else self.options
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return base
        return ConversionOptions(**{**base.model_dump(), **updates})

    def _render(self, codepoint: str, shortname: str, options: ConversionOptions) -> str:
        return render_markup(
            codepoint,
            shortname,
            self.markup,
            unicode_alt=options.unicode_alt,
            svg=options.svg,
            sprite=options.sprite,
            size=options.size,
        )

    # ------------------------------------------------------------------
    # Composed conversions
    # ------------------------------------------------------------------

    def to_image(
        self,
        text: str | None,
        ascii: bool | None = None,
        unicode_alt: bool | None = None,
        svg: bool | None = None,
        sprite: bool | None = None,
        size: int | None = None,
        options: ConversionOptions | None = None,
    ) -> str | None:
        """Convert unicode emoji and shortnames (and optionally ascii) to markup."""
        resolved = self._resolve_options(
            options, use_ascii=ascii, unicode_alt=unicode_alt, svg=svg, sprite=sprite, size=size
        )
        text = self.unicode_to_image(text, options=resolved)
        return self.shortname_to_image(text, options=resolved)

    def unify_unicode(
        self, text: str | None, ascii: bool | None = None, options: ConversionOptions | None = None
    ) -> str | None:
        """Collapse every accepted unicode variant to its canonical output form."""
        resolved = self._resolve_options(options, use_ascii=ascii)
        return self.shortname_to_unicode(self.to_short(text), options=resolved)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def category(self, shortname: str) -> str | None:
        """Category of a canonical shortname, or ``None`` if unknown."""
        return self.tables.shortname_to_category.get(shortname)

    def lookup(self, token: str) -> EmojiMatch | None:
        """Resolve a single shortname, ascii emoticon or unicode emoji."""
        if not token:
            return None

        tables = self.tables
        codepoint = tables.shortname_to_codepoint.get(token) or tables.ascii_to_codepoint.get(token)
        if codepoint is None:
            candidate = characters_to_codepoint_string(token)
            if candidate in tables.codepoint_to_shortname:
                codepoint = candidate
        if codepoint is None:
            return None

        shortname = tables.codepoint_to_shortname.get(codepoint)
        if shortname is None:
            return None

        return EmojiMatch(
            shortname=shortname,
            codepoint=codepoint,
            unicode=codepoint_string_to_characters(codepoint),
            category=tables.shortname_to_category.get(shortname),
            ascii=tables.codepoint_to_ascii.get(codepoint),
        )


__all__ = ["EmojiConverter", "EmojiMatch"]
