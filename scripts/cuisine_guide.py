#!/usr/bin/env python3
"""
Command line client for the Cultural Cuisine API.

Posts a recipe and pantry to the guide endpoint and prints substitutions,
the authenticity score and regional dining notes.

Usage:
    python scripts/cuisine_guide.py --ingredient "fish sauce" --ingredient galangal \
        --pantry "Light Soy Sauce" --region southeast_asia [--api-url http://localhost:8000]
"""
import argparse
import json
import sys
from pathlib import Path

import httpx

sys.path.insert(0, str(Path(__file__).parent.parent))

from configs import get_settings  # noqa: E402


def build_guide_payload(
    ingredients: list[str],
    pantry: list[str],
    region: str = None,
    recipe_name: str = ""
) -> dict:
    return {
        "recipe": {
            "name": recipe_name,
            "authentic_ingredients": ingredients,
            "region": region,
        },
        "pantry": [{"name": name} for name in pantry],
        "region": region,
    }


def call_api(api_url: str, payload: dict) -> dict:
    response = httpx.post(
        f"{api_url}/cuisine/guide",
        json=payload,
        timeout=30.0
    )
    response.raise_for_status()
    return response.json()


def _section(title: str, values: list[str]) -> list[str]:
    if not values:
        return []
    return [f"   {title}:"] + [f"     • {value}" for value in values]


def format_guide(guide: dict) -> str:
    title = guide.get("recipe_name") or "Recipe"
    lines = [
        "=" * 60,
        f"🍲 {title.upper()} ({guide.get('region') or 'no region'})",
        "=" * 60,
    ]

    substitutions = guide.get("substitutions", [])
    lines.append(f"\n🔁 Substitutions ({len(substitutions)}):")
    for sub in substitutions:
        lines.append(
            f"   • {sub['original']} → {sub['substitute']} [{sub['flavor_impact']}]"
        )
        if sub.get("notes"):
            lines.append(f"     └─ {sub['notes']}")

    authenticity = guide.get("authenticity", {})
    lines.append(f"\n⭐ Authenticity: {authenticity.get('score', 100)}/100")
    for line in authenticity.get("feedback", []):
        lines.append(f"   • {line}")

    pairings = guide.get("pairings", {})
    pairing_lines = (
        _section("Main dishes", pairings.get("main_dishes", []))
        + _section("Side dishes", pairings.get("side_dishes", []))
        + _section("Desserts", pairings.get("desserts", []))
        + _section("Beverages", pairings.get("beverages", []))
    )
    if pairing_lines:
        lines.append("\n🍽️  Pairings:")
        lines.extend(pairing_lines)

    etiquette = guide.get("etiquette", {})
    etiquette_lines = (
        _section("Presentation", etiquette.get("presentation", []))
        + _section("Customs", etiquette.get("customs", []))
        + _section("Taboos", etiquette.get("taboos", []))
        + _section("Serving order", etiquette.get("serving_order", []))
    )
    if etiquette_lines:
        lines.append("\n🙏 Etiquette:")
        lines.extend(etiquette_lines)

    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(description="Print a cultural cuisine guide for a recipe")
    parser.add_argument(
        "--api-url",
        default=get_settings().api_url,
        help="API base URL (default: API_URL setting)"
    )
    parser.add_argument(
        "--ingredient",
        action="append",
        default=[],
        help="Authentic ingredient (repeatable)"
    )
    parser.add_argument(
        "--pantry",
        action="append",
        default=[],
        help="Pantry item name (repeatable)"
    )
    parser.add_argument("--region", help="Region code, e.g. east_asia")
    parser.add_argument("--name", default="", help="Recipe name")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output raw JSON"
    )
    args = parser.parse_args()

    if not args.ingredient:
        print("❌ Provide at least one --ingredient")
        sys.exit(1)

    payload = build_guide_payload(args.ingredient, args.pantry, args.region, args.name)

    try:
        guide = call_api(args.api_url, payload)
    except httpx.ConnectError:
        print(f"❌ Cannot connect to API at {args.api_url}")
        print("   Start it with: python -m src.api.main")
        sys.exit(1)
    except httpx.HTTPStatusError as e:
        print(f"❌ API returned {e.response.status_code}: {e.response.text}")
        sys.exit(1)

    if args.json:
        print(json.dumps(guide, indent=2))
    else:
        print(format_guide(guide))


if __name__ == "__main__":
    main()
