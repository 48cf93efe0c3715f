from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

SUPPORTED_SIZES = (32, 64, 128)

CDN_ROOT = "https://cdn.jsdelivr.net/emojione/assets/{version}/"


def check_size(size: int) -> int:
    if size not in SUPPORTED_SIZES:
        raise ValueError(f"Unsupported emoji size {size}; expected one of {SUPPORTED_SIZES}")
    return size


class ConversionOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    use_ascii: bool = False
    unicode_alt: bool = True
    svg: bool = False
    sprite: bool = False
    size: int | None = None

    @field_validator("size")
    @classmethod
    def _check_size(cls, value: int | None) -> int | None:
        return None if value is None else check_size(value)


class MarkupConfig(BaseModel):
    """Asset locations used when emitting markup.

    ``{version}`` in any path is replaced with ``version`` at emission time.
    """

    model_config = ConfigDict(frozen=True)

    version: str = "4.0"
    image_path: str = CDN_ROOT + "png/"
    svg_path: str = CDN_ROOT + "svg/"
    sprite_path: str = CDN_ROOT + "sprites/"
    size: int = 32
    extension: str = ".png"

    @field_validator("size")
    @classmethod
    def _check_size(cls, value: int) -> int:
        return check_size(value)

    @field_validator("extension")
    @classmethod
    def _dotted(cls, value: str) -> str:
        return value if value.startswith(".") else f".{value}"

    def resolve(self, path: str) -> str:
        return path.replace("{version}", self.version)

    @property
    def resolved_image_path(self) -> str:
        return self.resolve(self.image_path)

    @property
    def resolved_svg_path(self) -> str:
        return self.resolve(self.svg_path)

    @property
    def resolved_sprite_path(self) -> str:
        return self.resolve(self.sprite_path)
