"""Offline compilation of the emoji dictionary into tables and patterns."""

from .generator import build_lookup_tables, build_patterns, build_tables
from .writer import (
    bundled_dictionary_path,
    generate,
    load_dictionary,
    load_tables,
    tables_to_document,
    write_tables,
)

__all__ = [
    "build_tables",
    "build_lookup_tables",
    "build_patterns",
    "bundled_dictionary_path",
    "generate",
    "load_dictionary",
    "load_tables",
    "tables_to_document",
    "write_tables",
]
