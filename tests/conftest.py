import pytest

from cocktail_vibe import Cocktail

CATALOG_ROWS = [
    {"id": "negroni", "name": "Negroni", "base_spirit": "Gin", "body_level": "Medium", "method": "Stir",
     "ingredients": ["Gin", "Campari", "Sweet Vermouth"], "related_ids": ["boulevardier"]},
    {"id": "boulevardier", "name": "Boulevardier", "base_spirit": "Bourbon", "body_level": "Medium",
     "method": "Stir", "ingredients": ["Bourbon", "Campari", "Sweet Vermouth"]},
    {"id": "old-pal", "name": "Old Pal", "base_spirit": "Rye", "body_level": "Medium", "method": "Stir",
     "ingredients": ["Rye Whiskey", "Campari", "Dry Vermouth"]},
    {"id": "martinez", "name": "Martinez", "base_spirit": "Gin", "body_level": "Medium", "method": "Stir",
     "ingredients": ["Gin", "Sweet Vermouth", "Maraschino Liqueur", "Angostura Bitters"]},
    {"id": "gin-tonic", "name": "Gin & Tonic", "base_spirit": "Gin", "body_level": "Light", "method": "Build",
     "ingredients": ["Gin", "Tonic Water"]},
    {"id": "margarita", "name": "Margarita", "base_spirit": "Tequila", "body_level": "Light", "method": "Shake",
     "ingredients": ["Tequila", "Triple Sec", "Lime"]},
    {"id": "daiquiri", "name": "Daiquiri", "base_spirit": "Rum", "body_level": "Light", "method": "Shake",
     "ingredients": ["Rum", "Lime", "Simple Syrup"]},
    {"id": "gimlet", "name": "Gimlet", "base_spirit": "Gin", "body_level": "Light", "method": "Shake",
     "ingredients": ["Gin", "Lime", "Simple Syrup"]},
    {"id": "mojito", "name": "Mojito", "base_spirit": "Rum", "body_level": "Light", "method": "Build",
     "ingredients": ["Rum", "Lime", "Sugar", "Mint", "Soda Water"]},
    {"id": "white-russian", "name": "White Russian", "base_spirit": "Vodka", "body_level": "Heavy",
     "method": "Build", "ingredients": ["Vodka", "Kahlua", "Heavy Cream"]},
    {"id": "mudslide", "name": "Mudslide", "base_spirit": "Vodka", "body_level": "Heavy", "method": "Blend",
     "ingredients": ["Vodka", "Kahlua", "Irish Cream", "Heavy Cream", "Ice"]},
]


@pytest.fixture
def catalog() -> list[Cocktail]:
    return [Cocktail.model_validate(row) for row in CATALOG_ROWS]


@pytest.fixture
def by_id(catalog) -> dict[str, Cocktail]:
    return {cocktail.id: cocktail for cocktail in catalog}


@pytest.fixture
def catalog_rows() -> list[dict]:
    return [dict(row) for row in CATALOG_ROWS]
