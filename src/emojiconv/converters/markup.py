#!/usr/bin/env python3
"""HTML markup emission for resolved emoji."""

from ..codepoints import codepoint_string_to_characters
from ..schemas.options import MarkupConfig, check_size

SPRITE_TEMPLATE = '<span class="emojione emojione-{codepoint}" title="{shortname}">{alt}</span>'
IMAGE_TEMPLATE = '<img class="emojione" alt="{alt}" src="{path}{size}/{codepoint}{extension}" />'
SVG_SPRITE_TEMPLATE = (
    '<svg class="emojione"><description>{alt}</description>'
    '<use xlink:href="{path}emojione-sprite.svg#emoji-{codepoint}"></use></svg>'
)
SVG_OBJECT_TEMPLATE = (
    '<object class="emojione" data="{path}{codepoint}.svg" type="image/svg+xml" standby="{alt}">{alt}</object>'
)


def render_markup(
    codepoint: str,
    shortname: str,
    config: MarkupConfig,
    unicode_alt: bool = True,
    svg: bool = False,
    sprite: bool = False,
    size: int | None = None,
) -> str:
    """Render one emoji as sprite, image, or SVG markup.

    Args:
        codepoint: Resolved codepoint string, used in class names and paths
        shortname: Canonical shortname, used for titles and as alt text
        config: Asset locations, default size and file extension
        unicode_alt: Use the emoji character instead of the shortname as alt text
        svg: Emit SVG markup instead of PNG
        sprite: Emit sprite markup instead of a standalone image
        size: Pixel size for PNG images, defaults to ``config.size``

    Returns:
        The markup string

    """
    alt = codepoint_string_to_characters(codepoint) if unicode_alt else shortname

    if svg:
        if sprite:
            return SVG_SPRITE_TEMPLATE.format(alt=alt, path=config.resolved_sprite_path, codepoint=codepoint)
        return SVG_OBJECT_TEMPLATE.format(alt=alt, path=config.resolved_svg_path, codepoint=codepoint)

    if sprite:
        return SPRITE_TEMPLATE.format(codepoint=codepoint, shortname=shortname, alt=alt)

    return IMAGE_TEMPLATE.format(
        alt=alt,
        path=config.resolved_image_path,
        size=config.size if size is None else check_size(size),
        codepoint=codepoint,
        extension=config.extension,
    )
