#!/usr/bin/env python3
"""Module-level conversion functions over a shared default converter.

The default converter is built on first use from the process tables and the
loaded configuration. Configuration is read once; call ``reset_converter``
after changing it (tests, long-running apps reloading settings).
"""

from __future__ import annotations

from functools import lru_cache

from .converters import EmojiConverter, EmojiMatch
from .schemas.options import ConversionOptions


@lru_cache(maxsize=1)
def get_converter() -> EmojiConverter:
    """Get the process-wide converter."""
    from .core.config import get_config
    from .tables import get_tables

    config = get_config()
    return EmojiConverter(get_tables(), config.markup_config(), config.conversion_options())


def reset_converter() -> None:
    get_converter.cache_clear()


def to_image(
    text: str | None,
    ascii: bool | None = None,
    unicode_alt: bool | None = None,
    svg: bool | None = None,
    sprite: bool | None = None,
    size: int | None = None,
    options: ConversionOptions | None = None,
) -> str | None:
    """Translate unicode emoji and shortnames in ``text`` into markup."""
    return get_converter().to_image(
        text, ascii=ascii, unicode_alt=unicode_alt, svg=svg, sprite=sprite, size=size, options=options
    )


def unify_unicode(text: str | None, ascii: bool | None = None, options: ConversionOptions | None = None) -> str | None:
    """Rewrite every unicode emoji variant to its standard form."""
    return get_converter().unify_unicode(text, ascii=ascii, options=options)


def shortname_to_unicode(
    text: str | None, ascii: bool | None = None, options: ConversionOptions | None = None
) -> str | None:
    return get_converter().shortname_to_unicode(text, ascii=ascii, options=options)


def shortname_to_ascii(text: str | None) -> str | None:
    return get_converter().shortname_to_ascii(text)


def shortname_to_image(
    text: str | None,
    ascii: bool | None = None,
    unicode_alt: bool | None = None,
    svg: bool | None = None,
    sprite: bool | None = None,
    size: int | None = None,
    options: ConversionOptions | None = None,
) -> str | None:
    return get_converter().shortname_to_image(
        text, ascii=ascii, unicode_alt=unicode_alt, svg=svg, sprite=sprite, size=size, options=options
    )


def to_short(text: str | None) -> str | None:
    return get_converter().to_short(text)


def unicode_to_image(
    text: str | None,
    unicode_alt: bool | None = None,
    svg: bool | None = None,
    sprite: bool | None = None,
    size: int | None = None,
    options: ConversionOptions | None = None,
) -> str | None:
    return get_converter().unicode_to_image(
        text, unicode_alt=unicode_alt, svg=svg, sprite=sprite, size=size, options=options
    )


def ascii_to_unicode(text: str | None) -> str | None:
    return get_converter().ascii_to_unicode(text)


def ascii_to_shortname(text: str | None) -> str | None:
    return get_converter().ascii_to_shortname(text)


def lookup(token: str) -> EmojiMatch | None:
    return get_converter().lookup(token)


CONVERSIONS = {
    "to_image": to_image,
    "unify_unicode": unify_unicode,
    "shortname_to_unicode": shortname_to_unicode,
    "shortname_to_ascii": shortname_to_ascii,
    "shortname_to_image": shortname_to_image,
    "to_short": to_short,
    "unicode_to_image": unicode_to_image,
    "ascii_to_unicode": ascii_to_unicode,
    "ascii_to_shortname": ascii_to_shortname,
}

__all__ = [
    "get_converter",
    "reset_converter",
    "lookup",
    "CONVERSIONS",
    "to_image",
    "unify_unicode",
    "shortname_to_unicode",
    "shortname_to_ascii",
    "shortname_to_image",
    "to_short",
    "unicode_to_image",
    "ascii_to_unicode",
    "ascii_to_shortname",
]
