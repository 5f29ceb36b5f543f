"""cocktail-vibe: Find cocktails that drink like the one you're looking at."""

from cocktail_vibe.catalog import CocktailFilters, filter_cocktails, filter_options, find_cocktail, load_catalog
from cocktail_vibe.recommendation import (
    RecommendationConfig,
    ScoreBreakdownItem,
    ScoredRecommendation,
    classify,
    recommend,
)
from cocktail_vibe.schema import Cocktail

__version__ = "0.1.0"

__all__ = [
    "recommend",
    "classify",
    "load_catalog",
    "find_cocktail",
    "filter_cocktails",
    "filter_options",
    "Cocktail",
    "CocktailFilters",
    "RecommendationConfig",
    "ScoreBreakdownItem",
    "ScoredRecommendation",
    "__version__",
]
