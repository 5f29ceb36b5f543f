"""Ingredient to flavor family classification."""

from __future__ import annotations

from cocktail_vibe.recommendation.rules import FAMILY_RULES, FamilyRule
from cocktail_vibe.schema import Cocktail


def classify(ingredient: str, rules: list[FamilyRule] | None = None) -> str:
    """Return the flavor family of a free-text ingredient.

    Ingredients no rule recognizes come back as their normalized text, so
    they still compare equal to the same ingredient in another recipe.
    """
    text = _normalize_ingredient(ingredient)
    for rule in rules if rules is not None else FAMILY_RULES:
        if rule.matches(text):
            return rule.family
    return text


def ingredient_families(cocktail: Cocktail) -> list[str]:
    """Distinct families of a cocktail's ingredients, in recipe order."""
    families: list[str] = []
    seen: set[str] = set()
    for ingredient in cocktail.ingredients:
        family = classify(ingredient)
        if family in seen:
            continue
        seen.add(family)
        families.append(family)
    return families


def is_rule_family(family: str) -> bool:
    return any(rule.family == family for rule in FAMILY_RULES)


def _normalize_ingredient(value: str) -> str:
    return value.lower().strip()
