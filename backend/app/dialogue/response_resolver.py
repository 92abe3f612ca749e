"""Answer a player's question to a character at the door.

Pipeline: normalize + knowledge-base lookup, fallback line when nothing
matches, then Xtrange corruption chosen by the daily rule.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from backend.app.constants import FALLBACK_RESPONSES
from backend.app.dialogue.corruption import apply_corruption
from backend.app.dialogue.knowledge_base import find_canonical_response
from backend.app.models.character import CharacterData, DailyRule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedResponse:
    text: str
    matched: bool
    corrupted: bool


def pick_fallback(rng: random.Random | None = None) -> str:
    rng = rng or random
    return rng.choice(FALLBACK_RESPONSES)


def resolve_character_response(
    character: CharacterData,
    is_xtrange: bool,
    daily_rule: DailyRule,
    user_message: str,
    *,
    rng: random.Random | None = None,
) -> ResolvedResponse:
    """Same as get_character_response but reports whether the answer matched and was corrupted."""
    canonical = find_canonical_response(character, user_message)
    response = canonical if canonical else pick_fallback(rng)
    matched = bool(canonical)

    corrupted = False
    if is_xtrange:
        mutated = apply_corruption(response, daily_rule.mechanic, rng)
        corrupted = mutated != response
        response = mutated

    logger.debug(
        "Response for %s (matched=%s, xtrange=%s, mechanic=%s)",
        character.id,
        matched,
        is_xtrange,
        daily_rule.mechanic or "-",
    )
    return ResolvedResponse(text=response, matched=matched, corrupted=corrupted)


def get_character_response(
    character: CharacterData,
    is_xtrange: bool,
    daily_rule: DailyRule,
    user_message: str,
    *,
    rng: random.Random | None = None,
) -> str:
    """Return the character's reply to ``user_message``."""
    return resolve_character_response(
        character, is_xtrange, daily_rule, user_message, rng=rng
    ).text
