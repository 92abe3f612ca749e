"""Inspection flavor text: eyes, teeth and pockets of the character at the door."""
from __future__ import annotations

import logging
import random

from backend.app.config import CONTRABAND_CHANCE, XTRANGE_EYE_PRIMARY_CHANCE
from backend.app.constants import (
    ASSETS,
    CONTRABAND_CARRIERS,
    CONTRABAND_HUMAN_TEXT,
    CONTRABAND_XTRANGE_TEXT,
    EYES_SCAN_TEXT,
    INCONCLUSIVE_TEXT,
    POCKET_ITEMS,
    POCKETS_GENERIC_TEMPLATE,
    SIGNATURE_POCKET_ITEMS,
    TEETH_SCAN_TEXT,
)
from backend.app.models.character import CharacterData, InspectionResult, InspectionTool

logger = logging.getLogger(__name__)


def _tool_key(tool: InspectionTool | str) -> str:
    if isinstance(tool, InspectionTool):
        return tool.value
    return str(tool or "").strip().lower()


def carries_contraband(
    character: CharacterData,
    rng: random.Random | None = None,
    chance: float | None = None,
) -> bool:
    """Fixed carriers always do; everyone else rolls against ``chance``."""
    if character.id in CONTRABAND_CARRIERS:
        return True
    rng = rng or random
    if chance is None:
        chance = CONTRABAND_CHANCE
    return rng.random() > 1.0 - chance


def inspect_pockets(
    character: CharacterData,
    is_xtrange: bool,
    rng: random.Random | None = None,
    contraband_chance: float | None = None,
) -> InspectionResult:
    signature = SIGNATURE_POCKET_ITEMS.get(character.id)
    if signature is not None:
        return InspectionResult(text=signature)

    if carries_contraband(character, rng, contraband_chance):
        return InspectionResult(text=CONTRABAND_XTRANGE_TEXT if is_xtrange else CONTRABAND_HUMAN_TEXT)

    rng = rng or random
    item = rng.choice(POCKET_ITEMS)
    return InspectionResult(text=POCKETS_GENERIC_TEMPLATE.format(item=item))


def inspect_eyes(is_xtrange: bool, rng: random.Random | None = None) -> InspectionResult:
    if not is_xtrange:
        return InspectionResult(text=EYES_SCAN_TEXT, image=ASSETS["EYE_NORMAL"])
    rng = rng or random
    image = ASSETS["EYE_XTRANGE"] if rng.random() > 1.0 - XTRANGE_EYE_PRIMARY_CHANCE else ASSETS["EYE_XTRANGE_2"]
    return InspectionResult(text=EYES_SCAN_TEXT, image=image)


def inspect_teeth(is_xtrange: bool) -> InspectionResult:
    image = ASSETS["TEETH_XTRANGE"] if is_xtrange else ASSETS["TEETH_NORMAL"]
    return InspectionResult(text=TEETH_SCAN_TEXT, image=image)


def get_inspection_result(
    character: CharacterData,
    tool: InspectionTool | str,
    is_xtrange: bool,
    *,
    rng: random.Random | None = None,
    contraband_chance: float | None = None,
) -> InspectionResult:
    """Inspect ``character`` with ``tool``; unknown tools give the inconclusive text."""
    key = _tool_key(tool)
    logger.debug("Inspecting %s with %s (xtrange=%s)", character.id, key, is_xtrange)
    if key == InspectionTool.POCKETS.value:
        return inspect_pockets(character, is_xtrange, rng, contraband_chance)
    if key == InspectionTool.EYES.value:
        return inspect_eyes(is_xtrange, rng)
    if key == InspectionTool.TEETH.value:
        return inspect_teeth(is_xtrange)
    return InspectionResult(text=INCONCLUSIVE_TEXT)
