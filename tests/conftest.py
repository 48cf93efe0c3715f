"""
Pytest configuration shared by all emojiconv tests.

Every test runs against an empty configuration (no user config file, no
EMOJICONV_* overrides) and with the process-wide caches cleared.
"""

import pytest

from emojiconv.codegen import build_tables, load_dictionary
from emojiconv.converter import reset_converter
from emojiconv.converters import EmojiConverter
from emojiconv.core.config import reset_config
from emojiconv.core.logging import reset_logging
from emojiconv.schemas import EmojiDefinition, MarkupConfig
from emojiconv.tables import get_tables

ENV_OVERRIDES = (
    "EMOJICONV_IMAGE_PATH",
    "EMOJICONV_SIZE",
    "EMOJICONV_TABLES",
    "EMOJICONV_CONSOLE_LOGS",
)


def _reset_caches():
    reset_config()
    get_tables.cache_clear()
    reset_converter()
    reset_logging()


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("EMOJICONV_CONFIG", str(tmp_path / "no-config.toml"))
    monkeypatch.setenv("EMOJICONV_LOG_DIR", str(tmp_path / "logs"))
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)
    _reset_caches()
    yield
    _reset_caches()


@pytest.fixture(scope="session")
def bundled_dictionary():
    return load_dictionary()


@pytest.fixture(scope="session")
def tables(bundled_dictionary):
    return build_tables(bundled_dictionary)


@pytest.fixture
def converter(tables):
    return EmojiConverter(tables, MarkupConfig())


def make_definition(shortname, codepoint, ascii=(), alternates=(), category="people", default_matches=None):
    """Build an EmojiDefinition the way it would be parsed from emoji.json."""
    return EmojiDefinition.model_validate(
        {
            "shortname": shortname,
            "shortname_alternates": list(alternates),
            "ascii": list(ascii),
            "category": category,
            "code_points": {
                "base": codepoint,
                "output": codepoint,
                "default_matches": list(default_matches) if default_matches is not None else [codepoint],
            },
        }
    )


@pytest.fixture
def definition_factory():
    return make_definition
