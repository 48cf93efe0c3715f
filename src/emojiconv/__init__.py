"""emojiconv - convert text between unicode emoji, shortnames, ascii emoticons and markup.

The bundled ``data/emoji.json`` is a 34-emoji sample, enough for the tests and
for common smileys. Anything outside it passes through unchanged. To cover the
whole emojione set, compile a full emojione ``emoji.json`` with
``emojiconv generate --source emoji.json --output tables.json`` and set
``EMOJICONV_TABLES`` (or ``tables_file`` in the config file) to the output.
"""

from importlib import metadata
from importlib import import_module
from pathlib import Path
import tomllib
from typing import TYPE_CHECKING


def _get_version() -> str:
    try:
        return metadata.version("emojiconv")
    except metadata.PackageNotFoundError:
        pass

    try:
        pyproject_path = Path(__file__).resolve().parents[2] / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
        return str(data["project"]["version"])
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        return "unknown"


__version__ = _get_version()

if TYPE_CHECKING:
    from .codegen import build_tables, generate, load_dictionary, load_tables, write_tables
    from .converter import (
        ascii_to_shortname,
        ascii_to_unicode,
        get_converter,
        lookup,
        shortname_to_ascii,
        shortname_to_image,
        shortname_to_unicode,
        to_image,
        to_short,
        unicode_to_image,
        unify_unicode,
    )
    from .converters import EmojiConverter, EmojiMatch
    from .schemas import ConversionOptions, EmojiDefinition, MarkupConfig
    from .tables import EmojiTables, get_tables

_LAZY_EXPORTS = {
    "EmojiConverter": (".converters", "EmojiConverter"),
    "EmojiMatch": (".converters", "EmojiMatch"),
    "EmojiTables": (".tables", "EmojiTables"),
    "get_tables": (".tables", "get_tables"),
    "ConversionOptions": (".schemas", "ConversionOptions"),
    "MarkupConfig": (".schemas", "MarkupConfig"),
    "EmojiDefinition": (".schemas", "EmojiDefinition"),
    "build_tables": (".codegen", "build_tables"),
    "generate": (".codegen", "generate"),
    "load_dictionary": (".codegen", "load_dictionary"),
    "load_tables": (".codegen", "load_tables"),
    "write_tables": (".codegen", "write_tables"),
    "get_converter": (".converter", "get_converter"),
    "lookup": (".converter", "lookup"),
    "to_image": (".converter", "to_image"),
    "unify_unicode": (".converter", "unify_unicode"),
    "shortname_to_unicode": (".converter", "shortname_to_unicode"),
    "shortname_to_ascii": (".converter", "shortname_to_ascii"),
    "shortname_to_image": (".converter", "shortname_to_image"),
    "to_short": (".converter", "to_short"),
    "unicode_to_image": (".converter", "unicode_to_image"),
    "ascii_to_unicode": (".converter", "ascii_to_unicode"),
    "ascii_to_shortname": (".converter", "ascii_to_shortname"),
}


def __getattr__(name):
    if name not in _LAZY_EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attr_name = _LAZY_EXPORTS[name]
    module = import_module(module_name, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


__all__ = ["__version__", *_LAZY_EXPORTS]
