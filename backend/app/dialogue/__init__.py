from backend.app.dialogue.corruption import apply_corruption
from backend.app.dialogue.knowledge_base import find_canonical_response
from backend.app.dialogue.response_resolver import get_character_response, resolve_character_response

__all__ = [
    "apply_corruption",
    "find_canonical_response",
    "get_character_response",
    "resolve_character_response",
]
