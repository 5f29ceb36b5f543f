"""Flavor family rules for ingredient classification.

Rules are evaluated top to bottom and the first rule with a trigger contained
in the ingredient text wins. Text is padded with a space on both sides, so a
trigger such as " cola" only matches at a word start. Triggers overlap
("maraschino cherry", "ginger beer"), so the order of FAMILY_RULES is part
of the classification.
"""

from __future__ import annotations

from dataclasses import dataclass

from cocktail_vibe.recommendation.types import FlavorFamily


@dataclass(frozen=True)
class FamilyRule:
    family: FlavorFamily
    triggers: tuple[str, ...]

    def matches(self, text: str) -> bool:
        padded = f" {text} "
        return any(trigger in padded for trigger in self.triggers)


FAMILY_RULES: list[FamilyRule] = [
    FamilyRule(
        "AMARO_APERITIF",
        (
            "campari",
            "aperol",
            "amaro",
            "cynar",
            "fernet",
            "suze",
            "aperitivo",
            "averna",
            "montenegro",
            "gran classico",
        ),
    ),
    FamilyRule(
        "HERBAL_LIQUEUR",
        (
            "chartreuse",
            "benedictine",
            "bénédictine",
            "galliano",
            "drambuie",
            "strega",
            "jägermeister",
            "jagermeister",
            "elderflower",
            "st-germain",
            "st. germain",
            "herbal liqueur",
        ),
    ),
    FamilyRule(
        "ANISE",
        ("absinthe", "pastis", "pernod", "ricard", "herbsaint", "anisette", "sambuca", "ouzo", "anise"),
    ),
    FamilyRule("CHERRY_LIQUEUR", ("maraschino", "cherry", "kirsch")),
    FamilyRule(
        "ORANGE_LIQUEUR",
        ("triple sec", "cointreau", "curacao", "curaçao", "grand marnier", "orange liqueur"),
    ),
    FamilyRule(
        "NUT_LIQUEUR",
        ("amaretto", "frangelico", "nocino", "hazelnut liqueur", "almond liqueur"),
    ),
    FamilyRule("COFFEE_LIQUEUR", ("kahlua", "kahlúa", "tia maria", "coffee", "espresso")),
    FamilyRule(
        "VERMOUTH_FORTIFIED",
        (
            "vermouth",
            "lillet",
            "cocchi",
            "dubonnet",
            "punt e mes",
            "sherry",
            "madeira",
            "port wine",
            "ruby port",
            "tawny port",
        ),
    ),
    FamilyRule(
        "SWEETENER",
        ("syrup", "sugar", "honey", "agave", "grenadine", "orgeat", "falernum", "gomme", "demerara", "maple"),
    ),
    FamilyRule("ACID", ("lime", "lemon", "grapefruit", "yuzu", "orange juice", "citrus")),
    FamilyRule(
        "CARBONATED",
        (
            "soda",
            "tonic",
            "ginger beer",
            "ginger ale",
            "coca-cola",
            "coke",
            " cola",
            "champagne",
            "prosecco",
            "cava",
            "sparkling",
        ),
    ),
    FamilyRule("BITTER", ("bitters", "angostura", "peychaud")),
    FamilyRule("DAIRY", ("cream", "milk", "butter", "yogurt")),
    FamilyRule(
        "BASE_SPIRIT",
        (
            "gin",
            "vodka",
            "rum",
            "whisky",
            "whiskey",
            "bourbon",
            "rye",
            "scotch",
            "tequila",
            "mezcal",
            "brandy",
            "cognac",
            "armagnac",
            "calvados",
            "pisco",
            "cachaça",
            "cachaca",
            "genever",
        ),
    ),
]

# Families that supply the sweet side of a sour.
SWEET_FAMILIES: frozenset[str] = frozenset(
    {
        "SWEETENER",
        "ORANGE_LIQUEUR",
        "NUT_LIQUEUR",
        "CHERRY_LIQUEUR",
        "HERBAL_LIQUEUR",
        "COFFEE_LIQUEUR",
        "AMARO_APERITIF",
        "VERMOUTH_FORTIFIED",
    }
)
