#!/usr/bin/env python3
"""Tests for unicode -> shortname, unify and unicode -> markup conversions."""

import pytest

SMILE = chr(0x1F604)
THUMBSUP = chr(0x1F44D)
TONE1 = chr(0x1F3FB)
TONE5 = chr(0x1F3FF)
HEART = chr(0x2764)
VS16 = chr(0xFE0F)
ZWJ = chr(0x200D)
KEYCAP = chr(0x20E3)
RI_S = chr(0x1F1F8)
RI_U = chr(0x1F1FA)
FLAG_US = RI_U + RI_S
WHITE_FLAG = chr(0x1F3F3)
RAINBOW = chr(0x1F308)

CDN_PNG = "https://cdn.jsdelivr.net/emojione/assets/4.0/png/"


class TestToShort:
    """Unicode emoji become shortnames; everything else is untouched."""

    def test_basic(self, converter):
        assert converter.to_short("Hello " + SMILE) == "Hello :smile:"

    def test_flag_is_one_emoji(self, converter):
        assert converter.to_short(FLAG_US) == ":flag_us:"

    def test_reversed_regional_indicators_stay_separate(self, converter):
        assert converter.to_short(RI_S + RI_U) == ":regional_indicator_s::regional_indicator_u:"

    def test_rainbow_flag_beats_white_flag(self, converter):
        assert converter.to_short(WHITE_FLAG + VS16 + ZWJ + RAINBOW) == ":rainbow_flag:"
        assert converter.to_short(WHITE_FLAG + ZWJ + RAINBOW) == ":rainbow_flag:"

    def test_white_flag_then_rainbow(self, converter):
        assert converter.to_short(WHITE_FLAG + VS16 + RAINBOW) == ":flag_white::rainbow:"

    def test_keycap(self, converter):
        assert converter.to_short("#" + VS16 + KEYCAP) == ":hash:"
        assert converter.to_short("#" + KEYCAP) == ":hash:"

    def test_plain_hash_is_text(self, converter):
        assert converter.to_short("#1 on the list") == "#1 on the list"

    @pytest.mark.parametrize(
        "text,expected",
        [
            (THUMBSUP, ":thumbsup:"),
            (THUMBSUP + TONE1, ":thumbsup_tone1:"),
            (THUMBSUP + TONE5, ":thumbsup_tone5:"),
        ],
    )
    def test_skin_tones(self, converter, text, expected):
        assert converter.to_short(text) == expected

    def test_variation_selector_variants(self, converter):
        assert converter.to_short(HEART) == ":heart:"
        assert converter.to_short(HEART + VS16) == ":heart:"

    def test_zwj_sequence(self, converter):
        assert converter.to_short(chr(0x1F469) + ZWJ + chr(0x1F4BB)) == ":woman_technologist:"

    def test_unknown_emoji_unchanged(self, converter):
        dinosaur = chr(0x1F996)
        assert converter.to_short("rawr " + dinosaur) == "rawr " + dinosaur

    def test_none_and_empty(self, converter):
        assert converter.to_short(None) is None
        assert converter.to_short("") == ""

    def test_idempotent(self, converter):
        text = "a " + SMILE + " b " + FLAG_US + THUMBSUP + TONE1
        once = converter.to_short(text)
        assert converter.to_short(once) == once

    @pytest.mark.parametrize(
        "markup",
        [
            '<img class="emojione" alt="{e}" src="x.png" />',
            '<span class="emojione" title=":smile:">{e}</span>',
            '<object data="x.svg">{e}</object>',
            '<i class="icon">{e}</i>',
        ],
    )
    def test_ignore_regions(self, converter, markup):
        region = markup.format(e=SMILE)
        assert converter.to_short(region + " " + SMILE) == region + " :smile:"


class TestUnifyUnicode:
    def test_variant_collapses_to_output(self, converter):
        assert converter.unify_unicode(HEART + VS16) == HEART

    def test_keycap_collapses_to_output(self, converter):
        assert converter.unify_unicode("#" + VS16 + KEYCAP) == "#" + KEYCAP

    def test_canonical_text_unchanged(self, converter):
        text = "I " + HEART + " pizza " + chr(0x1F355)
        assert converter.unify_unicode(text) == text

    def test_ascii_optional(self, converter):
        assert converter.unify_unicode("hi :)") == "hi :)"
        assert converter.unify_unicode("hi :)", ascii=True) == "hi " + chr(0x1F642)


class TestUnicodeToImage:
    def test_default_png(self, converter):
        assert converter.unicode_to_image(SMILE) == (
            f'<img class="emojione" alt="{SMILE}" src="{CDN_PNG}32/1f604.png" />'
        )

    def test_markup_uses_matched_sequence(self, converter):
        result = converter.unicode_to_image(HEART + VS16)
        assert result == f'<img class="emojione" alt="{HEART + VS16}" src="{CDN_PNG}32/2764-fe0f.png" />'

    def test_shortname_alt(self, converter):
        result = converter.unicode_to_image(SMILE, unicode_alt=False)
        assert 'alt=":smile:"' in result

    def test_size(self, converter):
        assert f"{CDN_PNG}64/1f604.png" in converter.unicode_to_image(SMILE, size=64)
        assert f"{CDN_PNG}128/1f604.png" in converter.unicode_to_image(SMILE, size=128)

    def test_unsupported_size(self, converter):
        with pytest.raises(ValueError):
            converter.unicode_to_image(SMILE, size=48)

    def test_sprite(self, converter):
        assert converter.unicode_to_image(SMILE, sprite=True) == (
            f'<span class="emojione emojione-1f604" title=":smile:">{SMILE}</span>'
        )

    def test_svg(self, converter):
        assert converter.unicode_to_image(SMILE, svg=True) == (
            '<object class="emojione" data="https://cdn.jsdelivr.net/emojione/assets/4.0/svg/1f604.svg"'
            f' type="image/svg+xml" standby="{SMILE}">{SMILE}</object>'
        )

    def test_svg_sprite(self, converter):
        assert converter.unicode_to_image(SMILE, svg=True, sprite=True) == (
            f'<svg class="emojione"><description>{SMILE}</description>'
            '<use xlink:href="https://cdn.jsdelivr.net/emojione/assets/4.0/sprites/emojione-sprite.svg#emoji-1f604">'
            "</use></svg>"
        )

    def test_shortnames_untouched(self, converter):
        assert converter.unicode_to_image(":smile:") == ":smile:"

    def test_existing_markup_untouched(self, converter):
        text = converter.unicode_to_image(SMILE)
        assert converter.unicode_to_image(text) == text
