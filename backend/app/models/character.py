"""Cast records: characters at the door, daily rules, inspection results.

Characters and daily rules are loaded from the YAML cast pack (see
``backend.app.content``) and handed to the resolvers as plain records.
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from backend.app.core.text_utils import normalize_identifier


class CharacterId(str, Enum):
    """Identities the inspection table treats specially."""
    FAB = "fab"
    CLERITON = "cleriton"
    CARLOS = "carlos"
    VINICIUS = "vinicius"
    KOUTH = "kouth"
    MATHEUS = "matheus"


class InspectionTool(str, Enum):
    EYES = "eyes"
    TEETH = "teeth"
    POCKETS = "pockets"


class CharacterData(BaseModel):
    """A character who knocks on the door.

    knowledge_base lines use the format ``q: <question> -> A: <answer>``.
    Lines that do not follow it are kept as-is and simply never match.
    """
    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1, description="Stable character id (e.g. 'fab')")
    name: str = Field(..., description="Display name")
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    knowledge_base: list[str] | None = Field(default=None, description="Scripted Q->A lines")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v):
        if v is None:
            return None
        if isinstance(v, CharacterId):
            return v.value
        return normalize_identifier(v)

    @field_validator("knowledge_base", mode="before")
    @classmethod
    def _drop_non_string_lines(cls, v):
        if v is None:
            return None
        if isinstance(v, str):
            return [v]
        if not isinstance(v, (list, tuple)):
            raise ValueError("knowledge_base must be a list of lines")
        return [str(line) for line in v if isinstance(line, (str, int, float))]


class DailyRule(BaseModel):
    """Per-session configuration; ``mechanic`` selects the Xtrange text corruption."""
    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    day: int = Field(default=1, ge=1)
    description: str = ""
    mechanic: str = Field(default="", description="repetition | grammar | aggression | nonsensical | visual_distortion")

    @field_validator("mechanic", mode="before")
    @classmethod
    def _normalize_mechanic(cls, v):
        return str(v or "").strip().lower()


class InspectionResult(BaseModel):
    """Flavor text plus an optional image reference for the UI."""
    text: str
    image: str | None = None


class CastPack(BaseModel):
    """Merged content of every cast pack root."""
    characters: list[CharacterData] = Field(default_factory=list)
    daily_rules: list[DailyRule] = Field(default_factory=list)
