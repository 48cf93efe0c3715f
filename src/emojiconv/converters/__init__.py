#!/usr/bin/env python3
"""Converters module for emoji conversion.

The implementation is split into:
- base.py: EmojiConverter with the shared scan/substitute primitive
- unicode.py: UnicodeConverterMixin for unicode -> shortname/markup
- shortname.py: ShortnameConverterMixin for shortname -> unicode/ascii/markup
- ascii.py: AsciiConverterMixin for ascii -> unicode/shortname
- markup.py: image, sprite and SVG markup emission
"""

from .ascii import AsciiConverterMixin
from .base import EmojiConverter, EmojiMatch
from .markup import render_markup
from .shortname import ShortnameConverterMixin
from .unicode import UnicodeConverterMixin

__all__ = [
    "AsciiConverterMixin",
    "EmojiConverter",
    "EmojiMatch",
    "ShortnameConverterMixin",
    "UnicodeConverterMixin",
    "render_markup",
]
