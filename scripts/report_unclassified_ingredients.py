"""Report ingredients that no flavor family rule recognizes.

Usage:
  python scripts/report_unclassified_ingredients.py --input data/cocktails.json
"""

from __future__ import annotations

import argparse
import json
from collections import defaultdict
from pathlib import Path

from cocktail_vibe.catalog import load_catalog
from cocktail_vibe.recommendation import analyze_distribution, classify
from cocktail_vibe.schema import Cocktail


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Report unclassified catalog ingredients")
    parser.add_argument("--input", required=True, help="Path to JSON catalog file")
    parser.add_argument("--top", type=int, default=50, help="Top records to show (default: 50)")
    parser.add_argument(
        "--format",
        choices=["json", "table"],
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument("--output", help="Optional output file path")
    return parser.parse_args(argv)


def summarize(catalog: list[Cocktail]) -> list[dict]:
    distribution = analyze_distribution(catalog)
    examples: dict[str, list[str]] = defaultdict(list)

    for cocktail in catalog:
        for ingredient in cocktail.ingredients:
            family = classify(ingredient)
            if family not in distribution.unclassified:
                continue
            if cocktail.name not in examples[family]:
                examples[family].append(cocktail.name)

    rows = [
        {
            "ingredient": family,
            "count": distribution.counts[family],
            "cocktails": examples[family][:3],
        }
        for family in distribution.unclassified
    ]
    rows.sort(key=lambda row: (-row["count"], row["ingredient"]))
    return rows


def render_table(rows: list[dict], top: int) -> str:
    head = "count | ingredient | cocktails"
    sep = "--- | --- | ---"
    lines = [head, sep]
    for row in rows[:top]:
        lines.append(f"{row['count']} | {row['ingredient']} | {', '.join(row['cocktails'])}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    catalog = load_catalog(Path(args.input))
    rows = summarize(catalog)

    if args.format == "json":
        output = json.dumps(rows[: args.top], ensure_ascii=False, indent=2)
    else:
        output = render_table(rows, args.top)

    if args.output:
        Path(args.output).write_text(output + "\n", encoding="utf-8")
    else:
        print(output)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
