"""Content-based recommendation engine for cocktail-vibe."""

from cocktail_vibe.recommendation.classifier import classify, ingredient_families
from cocktail_vibe.recommendation.distribution import IngredientDistribution, analyze_distribution
from cocktail_vibe.recommendation.engine import (
    RecommendationConfig,
    RecommendationEngine,
    ScoreResult,
    recommend,
)
from cocktail_vibe.recommendation.types import FlavorFamily, ScoreBreakdownItem, ScoredRecommendation

__all__ = [
    "FlavorFamily",
    "IngredientDistribution",
    "RecommendationConfig",
    "RecommendationEngine",
    "ScoreBreakdownItem",
    "ScoreResult",
    "ScoredRecommendation",
    "analyze_distribution",
    "classify",
    "ingredient_families",
    "recommend",
]
