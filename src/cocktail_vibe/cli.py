"""Command-line interface for cocktail-vibe."""

import argparse
import dataclasses
import json
import logging
import sys

from cocktail_vibe import __version__
from cocktail_vibe.catalog import find_cocktail, load_catalog
from cocktail_vibe.exceptions import CocktailNotFoundError, CocktailVibeError
from cocktail_vibe.recommendation import RecommendationConfig, RecommendationEngine, ScoredRecommendation


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="cocktail-vibe",
        description="Recommend cocktails similar to a given one",
    )
    parser.add_argument("catalog", help="Path to a JSON catalog of cocktails")
    parser.add_argument("target", help="Id or slug of the cocktail to match")
    parser.add_argument(
        "--related-ids",
        nargs="*",
        metavar="ID",
        help="Curated related ids (default: the target's related_ids)",
    )
    parser.add_argument("--max-results", type=int, help="Maximum recommendations to return")
    parser.add_argument("--min-score", type=int, help="Minimum score for algorithmic picks")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"cocktail-vibe {__version__}",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = RecommendationConfig.from_env()
    overrides = {}
    if args.max_results is not None:
        overrides["max_results"] = args.max_results
    if args.min_score is not None:
        overrides["min_score"] = args.min_score
    if overrides:
        config = dataclasses.replace(config, **overrides)

    try:
        catalog = load_catalog(args.catalog)
        target = find_cocktail(catalog, args.target)
        if target is None:
            raise CocktailNotFoundError(f"No cocktail with id or slug '{args.target}'")
        results = RecommendationEngine(config).recommend(target, catalog, args.related_ids)
    except CocktailVibeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        payload = {
            "target": target.model_dump(),
            "recommendations": [rec.model_dump() for rec in results],
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        _print_formatted(target.name, results)

    return 0


def _print_formatted(target_name: str, results: list[ScoredRecommendation]) -> None:
    """Print results in human-readable format."""
    print()
    print(f"  If you like {target_name}")
    print()

    if not results:
        print("  No recommendations.")
        print()
        return

    for rank, rec in enumerate(results, start=1):
        label = "Bartender's pick" if rec.is_manual else f"{rec.score} pts"
        print(f"  {rank}. {rec.cocktail.name:<24} {label}")
        if not rec.is_manual:
            for item in rec.breakdown:
                print(f"       {_format_points(item.points):>4}  {item.reason}")
    print()


def _format_points(points: int) -> str:
    return f"+{points}" if points > 0 else str(points)


if __name__ == "__main__":
    sys.exit(main())
