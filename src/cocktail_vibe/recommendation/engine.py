"""Hybrid recommendation engine for cocktail detail pages."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, field
from typing import Sequence

from cocktail_vibe.recommendation.classifier import ingredient_families
from cocktail_vibe.recommendation.distribution import (
    DEFAULT_RARITY_RATIO,
    IngredientDistribution,
    analyze_distribution,
)
from cocktail_vibe.recommendation.rules import SWEET_FAMILIES
from cocktail_vibe.recommendation.types import ScoreBreakdownItem, ScoredRecommendation
from cocktail_vibe.schema import Cocktail

logger = logging.getLogger(__name__)


def _safe_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _safe_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        parsed = float(value)
    except ValueError:
        return default
    return parsed if math.isfinite(parsed) else default


@dataclass(frozen=True)
class RecommendationConfig:
    max_results: int = 6
    min_score: int = 40
    manual_score: int = 10000
    manual_reason: str = "Bartender's Choice"
    structure_synergy_bonus: int = 20
    rare_family_bonus: int = 30
    common_family_bonus: int = 5
    base_spirit_bonus: int = 15
    body_mismatch_penalty: int = 10
    complexity_base: int = 20
    complexity_step: int = 7
    rarity_ratio: float = DEFAULT_RARITY_RATIO

    @classmethod
    def from_env(cls) -> "RecommendationConfig":
        return cls(
            max_results=max(0, _safe_int(os.getenv("COCKTAIL_VIBE_MAX_RESULTS"), cls.max_results)),
            min_score=_safe_int(os.getenv("COCKTAIL_VIBE_MIN_SCORE"), cls.min_score),
            rarity_ratio=max(
                0.0,
                min(1.0, _safe_float(os.getenv("COCKTAIL_VIBE_RARITY_RATIO"), cls.rarity_ratio)),
            ),
        )


@dataclass(frozen=True)
class ScoreResult:
    score: int
    breakdown: list[ScoreBreakdownItem] = field(default_factory=list)


@dataclass(frozen=True)
class _Structure:
    sour: bool
    highball: bool


class RecommendationEngine:
    """Scores cocktails against a target and merges curated picks."""

    def __init__(self, config: RecommendationConfig | None = None):
        self.config = config or RecommendationConfig()

    def recommend(
        self,
        target: Cocktail,
        catalog: Sequence[Cocktail],
        manual_related_ids: Sequence[str] | None = None,
    ) -> list[ScoredRecommendation]:
        """Rank up to ``max_results`` cocktails similar to ``target``.

        Curated ids come first in the order given, the remaining slots are
        filled by score, and algorithmic picks under ``min_score`` are
        dropped afterwards without backfilling.

        Args:
            target: Cocktail being viewed. It never appears in the result.
            catalog: Every known cocktail.
            manual_related_ids: Curated ids. Defaults to ``target.related_ids``.

        Returns:
            Recommendations sorted by score, highest first.
        """
        config = self.config
        if manual_related_ids is None:
            manual_related_ids = target.related_ids

        # First occurrence of a repeated id wins.
        by_id: dict[str, Cocktail] = {}
        for cocktail in catalog:
            by_id.setdefault(cocktail.id, cocktail)
        unique = list(by_id.values())

        distribution = analyze_distribution(unique, rarity_ratio=config.rarity_ratio)
        used: set[str] = {target.id}
        result: list[ScoredRecommendation] = []

        for cocktail_id in manual_related_ids:
            if len(result) >= config.max_results:
                break
            cocktail = by_id.get(cocktail_id)
            if cocktail is None or cocktail_id in used:
                continue
            result.append(self._scored(target, cocktail, distribution, is_manual=True))
            used.add(cocktail_id)
        manual_count = len(result)

        if len(result) < config.max_results:
            candidates = [
                self._scored(target, cocktail, distribution, is_manual=False)
                for cocktail in unique
                if cocktail.id not in used
            ]
            candidates.sort(key=lambda rec: rec.score, reverse=True)
            for rec in candidates:
                if len(result) >= config.max_results:
                    break
                result.append(rec)
                used.add(rec.cocktail.id)

        result.sort(key=lambda rec: rec.score, reverse=True)
        kept = [rec for rec in result if rec.is_manual or rec.score >= config.min_score]

        logger.debug(
            "Recommendations for %s: manual=%d algorithmic=%d dropped=%d",
            target.id,
            manual_count,
            len(result) - manual_count,
            len(result) - len(kept),
        )
        return kept

    def score(
        self,
        target: Cocktail,
        candidate: Cocktail,
        distribution: IngredientDistribution,
        *,
        is_manual_pick: bool = False,
    ) -> ScoreResult:
        """Similarity of ``candidate`` to ``target`` with a per-rule breakdown."""

        config = self.config
        if is_manual_pick:
            return ScoreResult(
                score=config.manual_score,
                breakdown=[ScoreBreakdownItem(reason=config.manual_reason, points=0)],
            )

        breakdown: list[ScoreBreakdownItem] = []
        target_families = ingredient_families(target)
        candidate_families = set(ingredient_families(candidate))

        target_structure = _structure(target, set(target_families))
        candidate_structure = _structure(candidate, candidate_families)
        if target_structure.sour and candidate_structure.sour:
            breakdown.append(_item("Structure Synergy (Sour/Daisy)", config.structure_synergy_bonus))
        elif target_structure.highball and candidate_structure.highball:
            breakdown.append(_item("Structure Synergy (Highball)", config.structure_synergy_bonus))

        for family in target_families:
            # Base spirit has its own rule below.
            if family == "BASE_SPIRIT" or family not in candidate_families:
                continue
            if distribution.is_rare(family):
                breakdown.append(_item(f"Rare Family Match: {family}", config.rare_family_bonus))
            elif distribution.is_common(family):
                breakdown.append(_item(f"Common Family Match: {family}", config.common_family_bonus))
            else:
                breakdown.append(_item(f"Family Match: {family}", config.common_family_bonus))

        target_spirit = _normalize_field(target.base_spirit)
        if target_spirit and target_spirit == _normalize_field(candidate.base_spirit):
            breakdown.append(_item("Base Spirit Match", config.base_spirit_bonus))

        if _normalize_field(target.body_level) != _normalize_field(candidate.body_level):
            breakdown.append(_item("Body Level Mismatch", -config.body_mismatch_penalty))

        diff = abs(len(target.ingredients) - len(candidate.ingredients))
        breakdown.append(
            _item(
                f"Complexity Adjustment (diff: {diff})",
                config.complexity_base - config.complexity_step * diff,
            )
        )

        return ScoreResult(score=sum(item.points for item in breakdown), breakdown=breakdown)

    def _scored(
        self,
        target: Cocktail,
        cocktail: Cocktail,
        distribution: IngredientDistribution,
        *,
        is_manual: bool,
    ) -> ScoredRecommendation:
        result = self.score(target, cocktail, distribution, is_manual_pick=is_manual)
        return ScoredRecommendation(
            cocktail=cocktail,
            score=result.score,
            breakdown=result.breakdown,
            is_manual=is_manual,
        )


def recommend(
    target: Cocktail,
    catalog: Sequence[Cocktail],
    manual_related_ids: Sequence[str] | None = None,
    *,
    config: RecommendationConfig | None = None,
) -> list[ScoredRecommendation]:
    """Hybrid recommendations for ``target`` using default or given weights."""

    engine = RecommendationEngine(config=config)
    return engine.recommend(target, catalog, manual_related_ids)


def _structure(cocktail: Cocktail, families: set[str]) -> _Structure:
    has_spirit = bool(_normalize_field(cocktail.base_spirit))
    has_acid = "ACID" in families
    has_sweet = not SWEET_FAMILIES.isdisjoint(families)
    has_carbonated = "CARBONATED" in families
    return _Structure(
        sour=has_spirit and has_acid and has_sweet,
        highball=has_spirit and has_carbonated,
    )


def _item(reason: str, points: int) -> ScoreBreakdownItem:
    return ScoreBreakdownItem(reason=reason, points=points)


def _normalize_field(value: str) -> str:
    return value.lower().strip()
