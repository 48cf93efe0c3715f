#!/usr/bin/env python3
"""Configuration loader that reads from config files."""
import copy
import logging
import os
from pathlib import Path
from typing import Any, TypeVar

import tomllib

from pydantic import BaseModel, ValidationError

from ..errors import ConfigError
from ..schemas.options import ConversionOptions, MarkupConfig

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

DEFAULT_CONFIG: dict[str, Any] = {
    "markup": {
        "version": "4.0",
        "image_path": "https://cdn.jsdelivr.net/emojione/assets/{version}/png/",
        "svg_path": "https://cdn.jsdelivr.net/emojione/assets/{version}/svg/",
        "sprite_path": "https://cdn.jsdelivr.net/emojione/assets/{version}/sprites/",
        "size": 32,
        "extension": ".png",
    },
    "conversion": {
        "use_ascii": False,
        "unicode_alt": True,
        "svg": False,
        "sprite": False,
    },
    # Generated tables artifact; empty means compile the bundled dictionary.
    "tables_file": "",
    "logging": {"level": "INFO"},
}


class ConfigLoader:
    """Load configuration from config files."""

    def __init__(self, config_path: str | Path | None = None) -> None:
        if config_path is None:
            config_path = self._default_config_path()

        self.config_file = str(config_path)
        config_path = Path(config_path)
        if config_path.exists():
            try:
                with open(config_path, "rb") as f:
                    full_config = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise ConfigError(f"Cannot read config file {config_path}: {e}", path=config_path, cause=e) from e
            emoji_config = full_config.get("emoji", {})
        else:
            emoji_config = {}

        if not isinstance(emoji_config, dict):
            raise ConfigError(f"[emoji] in {config_path} must be a table", key="emoji", path=config_path)

        self._config = self._merge_dicts(copy.deepcopy(DEFAULT_CONFIG), emoji_config)
        self._apply_env_overrides()

    def _default_config_path(self) -> Path:
        env_path = os.environ.get("EMOJICONV_CONFIG")
        if env_path:
            return Path(env_path)
        return Path.home() / ".emojiconv" / "config.toml"

    def _apply_env_overrides(self) -> None:
        markup = self._config.setdefault("markup", {})
        env_image_path = os.environ.get("EMOJICONV_IMAGE_PATH")
        if env_image_path:
            markup["image_path"] = env_image_path

        env_size = os.environ.get("EMOJICONV_SIZE")
        if env_size:
            try:
                markup["size"] = int(env_size)
            except ValueError:
                logger.warning("Ignoring non-integer EMOJICONV_SIZE=%r", env_size)

        env_tables = os.environ.get("EMOJICONV_TABLES")
        if env_tables:
            self._config["tables_file"] = env_tables

    def _merge_dicts(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        merged = base.copy()
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self._merge_dicts(merged[key], value)
            else:
                merged[key] = value
        return merged

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get a value using dot notation (e.g., 'markup.size')"""
        keys = key_path.split(".")
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    @property
    def tables_file(self) -> str | None:
        value = str(self.get("tables_file", "") or "")
        return value or None

    @property
    def log_level(self) -> str:
        return str(self.get("logging.level", "INFO"))

    @property
    def image_size(self) -> int:
        return int(self.get("markup.size", 32))

    def _build(self, section: str, model: type[ModelT]) -> ModelT:
        values = self.get(section, {})
        if not isinstance(values, dict):
            raise ConfigError(f"emoji.{section} must be a table", key=section, path=self.config_file)
        try:
            return model(**values)
        except ValidationError as e:
            problems = "; ".join(
                f"{section}.{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in e.errors()
            )
            raise ConfigError(f"Invalid configuration ({problems})", key=section, path=self.config_file, cause=e) from e

    def markup_config(self) -> MarkupConfig:
        """Build the markup settings (raises ``ConfigError`` on bad values)."""
        return self._build("markup", MarkupConfig)

    def conversion_options(self) -> ConversionOptions:
        return self._build("conversion", ConversionOptions)


# Global config instance
_config_loader: ConfigLoader | None = None


def get_config() -> ConfigLoader:
    """Get the global configuration instance."""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader


def reset_config() -> None:
    """Drop the cached configuration so the next ``get_config`` re-reads it."""
    global _config_loader
    _config_loader = None


__all__ = ["DEFAULT_CONFIG", "ConfigLoader", "get_config", "reset_config"]
