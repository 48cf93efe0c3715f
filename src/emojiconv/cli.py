#!/usr/bin/env python3
"""emojiconv command line: generate tables, convert text, look up emoji."""

import json
import sys

import rich_click as click

click.rich_click.USE_RICH_MARKUP = True

click.rich_click.STYLE_OPTION = "#ff79c6"
click.rich_click.STYLE_ARGUMENT = "#8be9fd"
click.rich_click.STYLE_COMMAND = "#50fa7b"
click.rich_click.STYLE_USAGE = "#bd93f9"
click.rich_click.STYLE_HELPTEXT = "#b3b8c0"

from rich.console import Console
from rich.table import Table
from rich.text import Text

from . import __version__
from .errors import EmojiConvError

console = Console(stderr=True)

MODES = (
    "to_image",
    "unify_unicode",
    "shortname_to_unicode",
    "shortname_to_ascii",
    "shortname_to_image",
    "to_short",
    "unicode_to_image",
    "ascii_to_unicode",
    "ascii_to_shortname",
)

# Keyword flags each conversion accepts
_MODE_FLAGS = {
    "to_image": {"ascii", "unicode_alt", "svg", "sprite", "size"},
    "shortname_to_image": {"ascii", "unicode_alt", "svg", "sprite", "size"},
    "unicode_to_image": {"unicode_alt", "svg", "sprite", "size"},
    "unify_unicode": {"ascii"},
    "shortname_to_unicode": {"ascii"},
}


def _fail(message: str) -> None:
    # Text keeps tokens such as :pizza: or [b] out of rich's emoji/markup parsing
    console.print(Text.assemble(("Error:", "bold red"), " ", message))
    sys.exit(1)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="emojiconv")
@click.option("--debug", is_flag=True, help=" 🐛 Log to stderr at DEBUG level")
def main(debug):
    """😄 [bold cyan]emojiconv[/bold cyan] - convert between unicode emoji, :shortnames:, ascii and markup

    \b
    [bold yellow]🎯 Quick Start:[/bold yellow]
    \b
      [green]emojiconv convert shortname_to_unicode "hi :smile:"[/green]
      [green]echo "hi ;)" | emojiconv convert to_image --ascii[/green]
      [green]emojiconv lookup :wink:[/green]
      [green]emojiconv generate --source emoji.json --output tables.json[/green]

    The bundled dictionary is a small sample (34 emoji). For the full set, run
    generate on an emojione emoji.json and point EMOJICONV_TABLES at the output.
    """
    from .core.config import get_config
    from .core.logging import configure_logging

    try:
        level = "DEBUG" if debug else get_config().log_level
        configure_logging(level, console=True if debug else None)
    except EmojiConvError as e:
        _fail(str(e))


@main.command()
@click.option("--source", type=click.Path(dir_okay=False), help=" 📖 Emoji dictionary JSON (default: bundled)")
@click.option("--output", "-o", type=click.Path(dir_okay=False), required=True, help=" 💾 Tables artifact to write")
def generate(source, output):
    """Compile an emoji dictionary into lookup tables and patterns."""
    from .codegen import generate as generate_tables

    try:
        path = generate_tables(source, output)
    except EmojiConvError as e:
        _fail(str(e))
    console.print(Text.assemble(("✓", "green"), f" Wrote {path}"))


@main.command()
@click.argument("mode", type=click.Choice(MODES))
@click.argument("text", required=False)
@click.option("--ascii", "use_ascii", is_flag=True, help=" 🙂 Also convert ascii emoticons")
@click.option("--shortname-alt", is_flag=True, help=" 🏷️  Use the shortname as alt text instead of the emoji")
@click.option("--svg", is_flag=True, help=" 🖼️  Emit SVG markup")
@click.option("--sprite", is_flag=True, help=" 🧩 Emit sprite markup")
@click.option("--size", type=click.Choice(["32", "64", "128"]), help=" 📐 PNG size in pixels")
def convert(mode, text, use_ascii, shortname_alt, svg, sprite, size):
    """Convert TEXT (or stdin) with one of the conversion MODEs."""
    from .converter import CONVERSIONS

    if text is None:
        text = sys.stdin.read()

    flags = {
        "ascii": True if use_ascii else None,
        "unicode_alt": False if shortname_alt else None,
        "svg": True if svg else None,
        "sprite": True if sprite else None,
        "size": int(size) if size else None,
    }
    accepted = _MODE_FLAGS.get(mode, set())
    kwargs = {key: value for key, value in flags.items() if key in accepted and value is not None}

    try:
        result = CONVERSIONS[mode](text, **kwargs)
    except EmojiConvError as e:
        _fail(str(e))
    click.echo(result, nl=False)


@main.command()
@click.argument("token")
@click.option("--json", "as_json", is_flag=True, help=" 📄 Output JSON")
def lookup(token, as_json):
    """Show what is known about a shortname, ascii emoticon or emoji."""
    from .converter import lookup as lookup_token

    try:
        match = lookup_token(token)
    except EmojiConvError as e:
        _fail(str(e))

    if match is None:
        _fail(f"Unknown emoji token {token!r}")

    if as_json:
        click.echo(
            json.dumps(
                {
                    "shortname": match.shortname,
                    "codepoint": match.codepoint,
                    "unicode": match.unicode,
                    "category": match.category,
                    "ascii": match.ascii,
                },
                ensure_ascii=False,
            )
        )
        return

    table = Table(show_header=False, box=None)
    rows = (
        ("emoji", match.unicode),
        ("shortname", match.shortname),
        ("codepoint", match.codepoint),
        ("category", match.category or "-"),
        ("ascii", match.ascii or "-"),
    )
    for label, value in rows:
        table.add_row(label, Text(value))
    Console(emoji=False, markup=False).print(table)


if __name__ == "__main__":
    main()
