"""Data models for recommendation output."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from cocktail_vibe.schema import Cocktail

FlavorFamily = Literal[
    "AMARO_APERITIF",
    "HERBAL_LIQUEUR",
    "ANISE",
    "CHERRY_LIQUEUR",
    "ORANGE_LIQUEUR",
    "NUT_LIQUEUR",
    "COFFEE_LIQUEUR",
    "VERMOUTH_FORTIFIED",
    "SWEETENER",
    "ACID",
    "CARBONATED",
    "BITTER",
    "DAIRY",
    "BASE_SPIRIT",
]


class ScoreBreakdownItem(BaseModel):
    """One named contribution to a similarity score."""

    model_config = ConfigDict(frozen=True)

    reason: str
    points: int


class ScoredRecommendation(BaseModel):
    """A recommended cocktail with its score and how it was reached."""

    model_config = ConfigDict(frozen=True)

    cocktail: Cocktail
    score: int
    breakdown: list[ScoreBreakdownItem] = Field(default_factory=list)
    is_manual: bool = False
