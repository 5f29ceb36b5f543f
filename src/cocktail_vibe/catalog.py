"""Catalog loading, lookup and filtering."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Sequence

from pydantic import BaseModel, Field, ValidationError

from cocktail_vibe.exceptions import CatalogError
from cocktail_vibe.schema import Cocktail, to_slug

logger = logging.getLogger(__name__)

__all__ = [
    "CocktailFilters",
    "FilterOptions",
    "filter_cocktails",
    "filter_options",
    "find_cocktail",
    "load_catalog",
    "sort_by_name",
    "to_slug",
]

_LEADING_ARTICLES = ("the ", "a ", "an ")


class CocktailFilters(BaseModel):
    """Attribute filters. An empty list means no constraint."""

    base: list[str] = Field(default_factory=list)
    body: list[str] = Field(default_factory=list)
    method: list[str] = Field(default_factory=list)
    ingredients: list[str] = Field(default_factory=list)
    glassware: list[str] = Field(default_factory=list)

    def is_active(self) -> bool:
        return any([self.base, self.body, self.method, self.ingredients, self.glassware])


class FilterOptions(BaseModel):
    """Distinct values available to each filter."""

    base_spirit: list[str] = Field(default_factory=list)
    ingredients: list[str] = Field(default_factory=list)
    method: list[str] = Field(default_factory=list)
    body_level: list[str] = Field(default_factory=list)


def load_catalog(path: str | Path) -> list[Cocktail]:
    """Load cocktails from a JSON array file.

    Rows without an id or name are skipped. When an id repeats, the first
    row wins.

    Raises:
        CatalogError: If the file is missing, is not a JSON array, or a row
            fails validation.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise CatalogError(f"Catalog not found: {path}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Catalog is not valid JSON: {path}: {e}") from e

    if not isinstance(data, list):
        raise CatalogError(f"Catalog must be a JSON array: {path}")

    cocktails: list[Cocktail] = []
    seen: set[str] = set()
    for index, row in enumerate(data):
        if not isinstance(row, dict):
            raise CatalogError(f"Catalog row {index} is not an object")
        if not str(row.get("id") or "").strip() or not str(row.get("name") or "").strip():
            logger.debug("Skipping catalog row %d without id or name", index)
            continue

        try:
            cocktail = Cocktail.model_validate(row)
        except ValidationError as e:
            raise CatalogError(f"Invalid catalog row {index}: {e}") from e

        if not cocktail.slug:
            logger.debug("Skipping catalog row %d without a usable slug", index)
            continue
        if cocktail.id in seen:
            logger.warning("Duplicate cocktail id %s in %s; keeping the first row", cocktail.id, path)
            continue
        seen.add(cocktail.id)
        cocktails.append(cocktail)

    return cocktails


def find_cocktail(catalog: Iterable[Cocktail], key: str) -> Cocktail | None:
    """Find a cocktail by id, falling back to slug."""
    catalog = list(catalog)
    key = key.strip()
    for cocktail in catalog:
        if cocktail.id == key:
            return cocktail
    for cocktail in catalog:
        if cocktail.slug == key:
            return cocktail
    return None


def sort_by_name(catalog: Iterable[Cocktail]) -> list[Cocktail]:
    """Sort alphabetically, ignoring a leading article."""
    return sorted(catalog, key=lambda cocktail: _strip_article(cocktail.name).lower())


def filter_cocktails(
    catalog: Sequence[Cocktail],
    filters: CocktailFilters | None = None,
    query: str | None = None,
) -> list[Cocktail]:
    """Return cocktails matching every active filter and the search query."""
    filters = filters or CocktailFilters()
    query = (query or "").strip().lower()

    matched: list[Cocktail] = []
    for cocktail in catalog:
        if not _matches_any(cocktail.base_spirit, filters.base):
            continue
        if not _matches_any(cocktail.body_level, filters.body):
            continue
        if not _matches_any(cocktail.method, filters.method):
            continue
        if not _matches_any(cocktail.glassware, filters.glassware):
            continue
        if filters.ingredients and not any(
            _matches_any(ingredient, filters.ingredients) for ingredient in cocktail.ingredients
        ):
            continue
        if query and query not in _search_text(cocktail):
            continue
        matched.append(cocktail)
    return matched


def filter_options(catalog: Iterable[Cocktail]) -> FilterOptions:
    """Collect the sorted, distinct non-empty values of each filterable field."""
    base_spirit: set[str] = set()
    ingredients: set[str] = set()
    method: set[str] = set()
    body_level: set[str] = set()

    for cocktail in catalog:
        if cocktail.base_spirit:
            base_spirit.add(cocktail.base_spirit)
        if cocktail.method:
            method.add(cocktail.method)
        if cocktail.body_level:
            body_level.add(cocktail.body_level)
        ingredients.update(ingredient for ingredient in cocktail.ingredients if ingredient)

    return FilterOptions(
        base_spirit=sorted(base_spirit),
        ingredients=sorted(ingredients),
        method=sorted(method),
        body_level=sorted(body_level),
    )


def _matches_any(value: str, options: list[str]) -> bool:
    if not options:
        return True
    return any(value.lower() == option.lower() for option in options)


def _search_text(cocktail: Cocktail) -> str:
    parts = [cocktail.name, cocktail.story, cocktail.base_spirit, " ".join(cocktail.ingredients)]
    return " ".join(parts).lower()


def _strip_article(name: str) -> str:
    trimmed = name.strip()
    lower = trimmed.lower()
    for article in _LEADING_ARTICLES:
        if lower.startswith(article):
            return trimmed[len(article):].strip()
    return trimmed
