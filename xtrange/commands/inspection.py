"""``xtrange inspect``: inspect a character's eyes, teeth or pockets."""
from __future__ import annotations

from backend.app.content.repository import CAST_REPOSITORY, UnknownCharacterError
from backend.app.core.rng import seeded_rng
from backend.app.inspection.inspection_resolver import get_inspection_result
from backend.app.models.character import InspectionTool


def register(subparsers) -> None:
    p = subparsers.add_parser("inspect", help="Inspect a character")
    p.add_argument("character_id", help="Character id (see `xtrange characters`)")
    p.add_argument("tool", choices=[t.value for t in InspectionTool], help="What to inspect")
    p.add_argument("--xtrange", action="store_true", help="Treat the character as an impostor")
    p.add_argument("--seed", type=str, help="Seed for reproducible rolls")
    p.set_defaults(func=run)


def run(args) -> int:
    try:
        character = CAST_REPOSITORY.get_character(args.character_id)
    except UnknownCharacterError:
        print(f"  ERROR: Unknown character '{args.character_id}'")
        return 1
    except FileNotFoundError as e:
        print(f"  ERROR: {e}")
        return 1

    result = get_inspection_result(character, args.tool, args.xtrange, rng=seeded_rng(args.seed))
    print(result.text)
    if result.image:
        print(f"[image] {result.image}")
    return 0
