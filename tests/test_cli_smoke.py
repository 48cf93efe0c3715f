#!/usr/bin/env python3
"""CLI Smoke Tests - "Does it still work?" tests

These tests detect when the app is fundamentally broken:
- Import errors
- Bundled dictionary or tables corruption
- Basic CLI functionality

NOT testing conversion edge cases - the unit tests cover those.
"""

import json

import pytest
from click.testing import CliRunner

from emojiconv.cli import main

SMILE = chr(0x1F604)
WINK = chr(0x1F609)


@pytest.fixture
def runner():
    return CliRunner()


class TestImports:
    def test_public_api_imports(self):
        import emojiconv

        assert callable(emojiconv.to_image)
        assert callable(emojiconv.shortname_to_unicode)
        assert emojiconv.EmojiConverter is not None
        assert emojiconv.__version__

    def test_unknown_attribute(self):
        import emojiconv

        with pytest.raises(AttributeError):
            emojiconv.not_a_thing  # noqa: B018

    def test_module_level_conversion(self):
        import emojiconv

        assert emojiconv.to_short(SMILE) == ":smile:"
        assert emojiconv.shortname_to_unicode(":smile:") == SMILE


class TestConvertCommand:
    def test_convert_argument(self, runner):
        result = runner.invoke(main, ["convert", "shortname_to_unicode", "hi :smile:"])
        assert result.exit_code == 0, result.output
        assert result.output == "hi " + SMILE

    def test_convert_stdin(self, runner):
        result = runner.invoke(main, ["convert", "to_short"], input=f"hello {SMILE}\n")
        assert result.exit_code == 0, result.output
        assert result.output == "hello :smile:\n"

    def test_convert_ascii_with_size(self, runner):
        result = runner.invoke(main, ["convert", "to_image", "hi ;)", "--ascii", "--size", "64"])
        assert result.exit_code == 0, result.output
        assert "/64/1f609.png" in result.output

    def test_flags_ignored_by_modes_without_them(self, runner):
        result = runner.invoke(main, ["convert", "shortname_to_ascii", ":wink:", "--svg"])
        assert result.exit_code == 0, result.output
        assert result.output == ";)"

    def test_unknown_mode(self, runner):
        result = runner.invoke(main, ["convert", "sideways", "x"])
        assert result.exit_code != 0

    def test_unsupported_size(self, runner):
        result = runner.invoke(main, ["convert", "to_image", ":wink:", "--size", "48"])
        assert result.exit_code != 0


class TestLookupCommand:
    def test_lookup_json(self, runner):
        result = runner.invoke(main, ["lookup", ";)", "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {
            "shortname": ":wink:",
            "codepoint": "1f609",
            "unicode": WINK,
            "category": "people",
            "ascii": ";)",
        }

    def test_lookup_table(self, runner):
        result = runner.invoke(main, ["lookup", ":pizza:"])
        assert result.exit_code == 0, result.output
        assert ":pizza:" in result.output
        assert "1f355" in result.output

    def test_lookup_table_keeps_colon_tokens_literal(self, runner):
        result = runner.invoke(main, ["lookup", ">:["])
        assert result.exit_code == 0, result.output
        assert ":disappointed:" in result.output
        assert "1f61e" in result.output

    def test_lookup_unknown(self, runner):
        result = runner.invoke(main, ["lookup", ":nope:"])
        assert result.exit_code == 1

    def test_lookup_unknown_echoes_token_verbatim(self, runner):
        result = runner.invoke(main, ["lookup", "[bold]:pizza:x"])
        assert result.exit_code == 1
        assert "[bold]:pizza:x" in result.output


class TestConfigErrors:
    def test_bad_size_from_environment(self, runner, monkeypatch):
        monkeypatch.setenv("EMOJICONV_SIZE", "48")
        result = runner.invoke(main, ["convert", "to_image", ":wink:"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error:" in result.output
        assert "markup.size" in result.output

    def test_malformed_config_file(self, runner, tmp_path, monkeypatch):
        config = tmp_path / "config.toml"
        config.write_text("[emoji.markup\n", encoding="utf-8")
        monkeypatch.setenv("EMOJICONV_CONFIG", str(config))
        result = runner.invoke(main, ["convert", "to_short", "x"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Cannot read config file" in result.output

    def test_unknown_log_level(self, runner, tmp_path, monkeypatch):
        config = tmp_path / "config.toml"
        config.write_text('[emoji.logging]\nlevel = "LOUD"\n', encoding="utf-8")
        monkeypatch.setenv("EMOJICONV_CONFIG", str(config))
        result = runner.invoke(main, ["lookup", ":wink:"])
        assert result.exit_code == 1
        assert "Unknown log level" in result.output

    def test_debug_flag_overrides_config_level(self, runner, tmp_path, monkeypatch):
        config = tmp_path / "config.toml"
        config.write_text('[emoji.logging]\nlevel = "LOUD"\n', encoding="utf-8")
        monkeypatch.setenv("EMOJICONV_CONFIG", str(config))
        result = runner.invoke(main, ["--debug", "lookup", ":wink:", "--json"])
        assert result.exit_code == 0, result.output
        assert "1f609" in result.output


class TestGenerateCommand:
    def test_generate_bundled(self, runner, tmp_path):
        output = tmp_path / "tables.json"
        result = runner.invoke(main, ["generate", "--output", str(output)])
        assert result.exit_code == 0, result.output
        document = json.loads(output.read_text(encoding="utf-8"))
        assert document["tables"]["shortname_to_codepoint"][":smile:"] == "1f604"

    def test_generate_bad_source(self, runner, tmp_path):
        source = tmp_path / "broken.json"
        source.write_text("{", encoding="utf-8")
        output = tmp_path / "tables.json"
        result = runner.invoke(main, ["generate", "--source", str(source), "--output", str(output)])
        assert result.exit_code == 1
        assert not output.exists()

    def test_generate_requires_output(self, runner):
        result = runner.invoke(main, ["generate"])
        assert result.exit_code != 0


class TestVersion:
    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "emojiconv" in result.output

    def test_help_mentions_full_tables(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "EMOJICONV_TABLES" in result.output
