from .dictionary import CodePointSet, EmojiDefinition, EmojiDictionary, parse_dictionary
from .options import SUPPORTED_SIZES, ConversionOptions, MarkupConfig

__all__ = [
    "CodePointSet",
    "EmojiDefinition",
    "EmojiDictionary",
    "parse_dictionary",
    "SUPPORTED_SIZES",
    "ConversionOptions",
    "MarkupConfig",
]
