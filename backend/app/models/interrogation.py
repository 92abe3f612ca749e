"""Request/response payloads for the interrogation API."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from backend.app.models.character import InspectionTool


class CharacterSummary(BaseModel):
    """Public view of a character (knowledge base stays server-side)."""
    id: str
    name: str
    description: str = ""
    tags: List[str] = Field(default_factory=list)


class AskRequest(BaseModel):
    """Question typed by the player."""
    message: str = Field(..., description="Free-text question")
    is_xtrange: bool = Field(False, description="Whether the character is an impostor")
    daily_rule_id: Optional[str] = Field(None, description="Daily rule id (takes precedence over day)")
    day: Optional[int] = Field(None, ge=1, description="Game day; selects the scheduled daily rule")
    mechanic: Optional[str] = Field(None, description="Explicit corruption mechanic (overrides the rule's)")
    seed: Optional[str] = Field(None, description="Seed for reproducible fallback/corruption rolls")


class AskResponse(BaseModel):
    character_id: str
    response: str
    matched: bool
    corrupted: bool


class InspectRequest(BaseModel):
    tool: InspectionTool
    is_xtrange: bool = False
    seed: Optional[str] = None


class InspectResponse(BaseModel):
    character_id: str
    tool: InspectionTool
    text: str
    image: Optional[str] = None
