"""Application models (cast records, inspection results, API payloads)."""
from .character import (
    CastPack,
    CharacterData,
    CharacterId,
    DailyRule,
    InspectionResult,
    InspectionTool,
)

__all__ = [
    "CastPack",
    "CharacterData",
    "CharacterId",
    "DailyRule",
    "InspectionResult",
    "InspectionTool",
]
