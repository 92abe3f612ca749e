"""
FastAPI endpoints for talking to and inspecting the character at the door.
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException

from backend.app.content.repository import (
    CAST_REPOSITORY,
    UnknownCharacterError,
    UnknownDailyRuleError,
)
from backend.app.core.rng import seeded_rng
from backend.app.dialogue.response_resolver import resolve_character_response
from backend.app.inspection.inspection_resolver import get_inspection_result
from backend.app.models.character import CharacterData, DailyRule
from backend.app.models.interrogation import (
    AskRequest,
    AskResponse,
    CharacterSummary,
    InspectRequest,
    InspectResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["interrogation"])


def _get_character(character_id: str) -> CharacterData:
    try:
        return CAST_REPOSITORY.get_character(character_id)
    except UnknownCharacterError:
        raise HTTPException(status_code=404, detail=f"Character '{character_id}' not found")


def _resolve_daily_rule(body: AskRequest) -> DailyRule:
    """Pick the rule by id, then by day, then the first scheduled one; ``mechanic`` overrides it."""
    try:
        if body.daily_rule_id:
            rule = CAST_REPOSITORY.get_daily_rule(body.daily_rule_id)
        else:
            rule = CAST_REPOSITORY.rule_for_day(body.day or 1)
    except UnknownDailyRuleError as e:
        # Missing schedule: humans and explicit mechanics get a no-op rule.
        if body.mechanic is None and (body.is_xtrange or body.daily_rule_id):
            raise HTTPException(status_code=404, detail=f"Daily rule {e} not found")
        rule = DailyRule(id="adhoc", day=body.day or 1)
    if body.mechanic is not None:
        rule = rule.model_copy(update={"mechanic": body.mechanic.strip().lower()})
    return rule


@router.get("/characters", response_model=List[CharacterSummary])
def list_characters():
    """List the cast (knowledge bases are not exposed)."""
    return [
        CharacterSummary(id=c.id, name=c.name, description=c.description, tags=c.tags)
        for c in CAST_REPOSITORY.list_characters()
    ]


@router.get("/daily-rules", response_model=List[DailyRule])
def list_daily_rules():
    return CAST_REPOSITORY.list_daily_rules()


@router.post("/characters/{character_id}/ask", response_model=AskResponse)
def ask_character(character_id: str, body: AskRequest):
    """Ask the character a question and get the (possibly corrupted) reply."""
    character = _get_character(character_id)
    rule = _resolve_daily_rule(body)
    resolved = resolve_character_response(
        character,
        body.is_xtrange,
        rule,
        body.message,
        rng=seeded_rng(body.seed),
    )
    logger.info(
        "ask character=%s matched=%s corrupted=%s rule=%s",
        character.id,
        resolved.matched,
        resolved.corrupted,
        rule.id,
    )
    return AskResponse(
        character_id=character.id,
        response=resolved.text,
        matched=resolved.matched,
        corrupted=resolved.corrupted,
    )


@router.post("/characters/{character_id}/inspect", response_model=InspectResponse)
def inspect_character(character_id: str, body: InspectRequest):
    """Inspect the character's eyes, teeth or pockets."""
    character = _get_character(character_id)
    result = get_inspection_result(character, body.tool, body.is_xtrange, rng=seeded_rng(body.seed))
    return InspectResponse(
        character_id=character.id,
        tool=body.tool,
        text=result.text,
        image=result.image,
    )
