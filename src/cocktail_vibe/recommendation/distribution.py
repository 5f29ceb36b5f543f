"""Catalog-wide flavor family frequencies."""

from __future__ import annotations

import logging
import math
from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Sequence

from cocktail_vibe.recommendation.classifier import ingredient_families, is_rule_family
from cocktail_vibe.schema import Cocktail

logger = logging.getLogger(__name__)

DEFAULT_RARITY_RATIO = 0.10


@dataclass(frozen=True)
class IngredientDistribution:
    """How many cocktails use each flavor family.

    A family is rare when fewer than ``threshold`` cocktails use it.
    """

    counts: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    total: int = 0
    threshold: int = 1
    rare: frozenset[str] = frozenset()
    common: frozenset[str] = frozenset()
    unclassified: frozenset[str] = frozenset()

    def is_rare(self, family: str) -> bool:
        return family in self.rare

    def is_common(self, family: str) -> bool:
        return family in self.common


def rarity_threshold(total: int, rarity_ratio: float = DEFAULT_RARITY_RATIO) -> int:
    return max(1, math.floor(total * rarity_ratio))


def analyze_distribution(
    catalog: Sequence[Cocktail],
    *,
    rarity_ratio: float = DEFAULT_RARITY_RATIO,
) -> IngredientDistribution:
    """Count, per flavor family, the cocktails containing it."""

    counts: Counter[str] = Counter()
    for cocktail in catalog:
        counts.update(ingredient_families(cocktail))

    total = len(catalog)
    threshold = rarity_threshold(total, rarity_ratio)
    rare = frozenset(family for family, count in counts.items() if count < threshold)
    common = frozenset(family for family, count in counts.items() if count >= threshold)
    unclassified = frozenset(family for family in counts if not is_rule_family(family))

    logger.debug(
        "Analyzed %d cocktails: %d families, threshold=%d, rare=%d",
        total,
        len(counts),
        threshold,
        len(rare),
    )
    return IngredientDistribution(
        counts=MappingProxyType(dict(counts)),
        total=total,
        threshold=threshold,
        rare=rare,
        common=common,
        unclassified=unclassified,
    )
