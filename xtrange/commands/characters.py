"""``xtrange characters``: list the cast and the daily rules."""
from __future__ import annotations

from backend.app.content.repository import CAST_REPOSITORY


def register(subparsers) -> None:
    p = subparsers.add_parser("characters", help="List the cast and daily rules")
    p.set_defaults(func=run)


def run(args) -> int:
    try:
        characters = CAST_REPOSITORY.list_characters()
        rules = CAST_REPOSITORY.list_daily_rules()
    except FileNotFoundError as e:
        print(f"  ERROR: {e}")
        print("         Set XTRANGE_CAST_PACK_PATHS to a directory with characters.yaml")
        return 1

    print("Cast:")
    for c in characters:
        kb_size = len(c.knowledge_base or [])
        print(f"- {c.id}: {c.name} ({kb_size} scripted answers)")

    print("\nDaily rules:")
    for r in rules:
        print(f"- day {r.day} {r.id}: mechanic={r.mechanic or '-'}")
    return 0
