"""Bundled emoji dictionary: a 34-emoji sample, not the full emojione set."""
