"""Data models for cocktail-vibe."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def to_slug(name: str) -> str:
    """Build a URL slug from a display name."""
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


class Cocktail(BaseModel):
    """A single catalog entry."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    slug: str = ""
    base_spirit: str = ""
    ingredients: list[str] = Field(default_factory=list)
    body_level: str = ""
    method: str = ""
    glassware: str = ""
    story: str = ""
    related_ids: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _default_slug(cls, data):
        if isinstance(data, dict) and not str(data.get("slug") or "").strip():
            data = {**data, "slug": to_slug(str(data.get("name") or ""))}
        return data

    @field_validator("ingredients", "related_ids", mode="before")
    @classmethod
    def _split_comma_values(cls, value):
        # Spreadsheet exports keep list cells as "a, b, c".
        if isinstance(value, str):
            return [token.strip() for token in value.split(",") if token.strip()]
        return value
