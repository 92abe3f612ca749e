"""``xtrange ask``: ask a character a question from the terminal."""
from __future__ import annotations

from backend.app.constants import KNOWN_MECHANICS
from backend.app.content.repository import (
    CAST_REPOSITORY,
    UnknownCharacterError,
    UnknownDailyRuleError,
)
from backend.app.core.rng import seeded_rng
from backend.app.core.text_utils import normalize_identifier
from backend.app.dialogue.response_resolver import resolve_character_response
from backend.app.models.character import DailyRule


def register(subparsers) -> None:
    p = subparsers.add_parser("ask", help="Ask a character a question")
    p.add_argument("character_id", help="Character id (see `xtrange characters`)")
    p.add_argument("message", help="Question text")
    p.add_argument("--xtrange", action="store_true", help="Treat the character as an impostor")
    group = p.add_mutually_exclusive_group()
    group.add_argument("--rule", type=str, help="Daily rule id")
    group.add_argument("--day", type=int, help="Game day (selects the scheduled rule)")
    group.add_argument(
        "--mechanic",
        type=normalize_identifier,
        choices=KNOWN_MECHANICS,
        help="Corruption mechanic (bypasses daily rules)",
    )
    p.add_argument("--seed", type=str, help="Seed for reproducible rolls")
    p.set_defaults(func=run)


def _rule_from_args(args) -> DailyRule:
    if args.mechanic:
        return DailyRule(id="cli", mechanic=args.mechanic)
    if args.rule:
        return CAST_REPOSITORY.get_daily_rule(args.rule)
    return CAST_REPOSITORY.rule_for_day(args.day or 1)


def run(args) -> int:
    try:
        character = CAST_REPOSITORY.get_character(args.character_id)
        rule = _rule_from_args(args)
    except UnknownCharacterError:
        print(f"  ERROR: Unknown character '{args.character_id}'")
        return 1
    except UnknownDailyRuleError as e:
        print(f"  ERROR: Unknown daily rule {e}")
        return 1
    except FileNotFoundError as e:
        print(f"  ERROR: {e}")
        return 1

    resolved = resolve_character_response(
        character, args.xtrange, rule, args.message, rng=seeded_rng(args.seed)
    )
    print(f"{character.name}: {resolved.text}")
    return 0
