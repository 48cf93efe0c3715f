from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from ..codepoints import normalize_codepoint_string


class CodePointSet(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    base: str
    output: str
    default_matches: list[str] = Field(default_factory=list)

    @field_validator("base", "output")
    @classmethod
    def _normalize(cls, value: str) -> str:
        return normalize_codepoint_string(value)

    @field_validator("default_matches")
    @classmethod
    def _normalize_matches(cls, value: list[str]) -> list[str]:
        return [normalize_codepoint_string(item) for item in value]

    @property
    def base_and_default_matches(self) -> list[str]:
        """Every codepoint string that must resolve to this emoji, base first."""
        seen: dict[str, None] = {self.base: None}
        for match in self.default_matches:
            seen.setdefault(match, None)
        return list(seen)


class EmojiDefinition(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    shortname: str
    shortname_alternates: list[str] = Field(default_factory=list)
    ascii: list[str] = Field(default_factory=list)
    category: str = ""
    code_points: CodePointSet

    @property
    def shortnames(self) -> list[str]:
        return [self.shortname, *self.shortname_alternates]


EmojiDictionary = dict[str, EmojiDefinition]

_DICTIONARY_ADAPTER: TypeAdapter[EmojiDictionary] = TypeAdapter(EmojiDictionary)


def parse_dictionary(raw: Mapping[str, Any]) -> EmojiDictionary:
    """Validate a decoded emoji.json mapping, keeping its key order."""
    return _DICTIONARY_ADAPTER.validate_python(raw)
