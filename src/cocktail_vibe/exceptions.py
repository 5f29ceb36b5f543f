"""Custom exceptions for cocktail-vibe."""


class CocktailVibeError(Exception):
    """Base exception for cocktail-vibe."""

    pass


class CatalogError(CocktailVibeError):
    """Raised when a catalog file cannot be read or is invalid."""

    pass


class CocktailNotFoundError(CocktailVibeError):
    """Raised when a cocktail id or slug is not in the catalog."""

    pass
