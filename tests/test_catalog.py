"""Tests for catalog loading, lookup and filtering."""

import json
import logging

import pytest

from cocktail_vibe import Cocktail, CocktailFilters, filter_cocktails, filter_options, find_cocktail, load_catalog
from cocktail_vibe.catalog import sort_by_name
from cocktail_vibe.exceptions import CatalogError


def _write(tmp_path, data) -> str:
    path = tmp_path / "cocktails.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_load_catalog(tmp_path):
    path = _write(
        tmp_path,
        [
            {"id": "101", "name": "Old Fashioned", "ingredients": "Rye Whisky, Bitters, Sugar"},
            {"id": "102", "name": "Negroni", "ingredients": ["Gin", "Campari", "Sweet Vermouth"]},
        ],
    )

    catalog = load_catalog(path)

    assert [cocktail.id for cocktail in catalog] == ["101", "102"]
    assert catalog[0].ingredients == ["Rye Whisky", "Bitters", "Sugar"]


def test_load_catalog_skips_incomplete_rows(tmp_path):
    path = _write(
        tmp_path,
        [
            {"id": "", "name": "No Id"},
            {"id": "2", "name": "   "},
            {"id": "3", "name": "!!!"},
            {"id": "4", "name": "Daiquiri"},
        ],
    )

    catalog = load_catalog(path)

    assert [cocktail.id for cocktail in catalog] == ["4"]


def test_load_catalog_keeps_first_duplicate(tmp_path, caplog):
    path = _write(tmp_path, [{"id": "1", "name": "First"}, {"id": "1", "name": "Second"}])

    with caplog.at_level(logging.WARNING, logger="cocktail_vibe.catalog"):
        catalog = load_catalog(path)

    assert [cocktail.name for cocktail in catalog] == ["First"]
    assert "Duplicate cocktail id 1" in caplog.text


def test_load_catalog_missing_file(tmp_path):
    with pytest.raises(CatalogError, match="not found"):
        load_catalog(tmp_path / "missing.json")


def test_load_catalog_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(CatalogError, match="not valid JSON"):
        load_catalog(path)


def test_load_catalog_requires_array(tmp_path):
    with pytest.raises(CatalogError, match="JSON array"):
        load_catalog(_write(tmp_path, {"id": "1", "name": "Negroni"}))


def test_load_catalog_invalid_row(tmp_path):
    path = _write(tmp_path, [{"id": "1", "name": "Negroni", "ingredients": 5}])

    with pytest.raises(CatalogError, match="row 0"):
        load_catalog(path)


def test_find_cocktail_by_id_then_slug(catalog):
    assert find_cocktail(catalog, "negroni").name == "Negroni"
    assert find_cocktail(catalog, "gin-tonic").name == "Gin & Tonic"
    assert find_cocktail(catalog, " mojito ").id == "mojito"
    assert find_cocktail(catalog, "zombie") is None


def test_find_cocktail_prefers_id_over_slug():
    catalog = [
        Cocktail(id="1", name="Negroni", slug="2"),
        Cocktail(id="2", name="Boulevardier"),
    ]

    assert find_cocktail(catalog, "2").name == "Boulevardier"


def test_sort_by_name_ignores_articles():
    catalog = [
        Cocktail(id="1", name="The Last Word"),
        Cocktail(id="2", name="Aviation"),
        Cocktail(id="3", name="An Old Pal"),
        Cocktail(id="4", name="Amaretto Sour"),
    ]

    names = [cocktail.name for cocktail in sort_by_name(catalog)]

    assert names == ["Amaretto Sour", "Aviation", "The Last Word", "An Old Pal"]


def test_filter_by_attributes(catalog):
    filters = CocktailFilters(base=["gin"], body=["LIGHT"])

    result = filter_cocktails(catalog, filters)

    assert [cocktail.id for cocktail in result] == ["gin-tonic", "gimlet"]


def test_filter_by_ingredient(catalog):
    result = filter_cocktails(catalog, CocktailFilters(ingredients=["campari", "Kahlua"]))

    assert [cocktail.id for cocktail in result] == [
        "negroni",
        "boulevardier",
        "old-pal",
        "white-russian",
        "mudslide",
    ]


def test_filter_by_query(catalog):
    result = filter_cocktails(catalog, query="  MINT ")

    assert [cocktail.id for cocktail in result] == ["mojito"]


def test_filter_without_criteria_returns_everything(catalog):
    assert filter_cocktails(catalog) == catalog
    assert not CocktailFilters().is_active()
    assert CocktailFilters(glassware=["Coupe"]).is_active()


def test_filter_options_collects_sorted_distinct_values(catalog):
    options = filter_options(catalog)

    assert options.base_spirit == ["Bourbon", "Gin", "Rum", "Rye", "Tequila", "Vodka"]
    assert options.method == ["Blend", "Build", "Shake", "Stir"]
    assert options.body_level == ["Heavy", "Light", "Medium"]
    assert options.ingredients.count("Campari") == 1
    assert options.ingredients == sorted(options.ingredients)
    assert "Heavy Cream" in options.ingredients


def test_filter_options_skips_empty_values():
    options = filter_options([Cocktail(id="1", name="Water"), Cocktail(id="2", name="Gin", base_spirit="Gin")])

    assert options.base_spirit == ["Gin"]
    assert options.method == []
    assert options.body_level == []
    assert options.ingredients == []
