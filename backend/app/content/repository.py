from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from backend.app.content.loader import load_stacked_cast
from backend.app.core.text_utils import normalize_identifier
from backend.app.models.character import CastPack, CharacterData, DailyRule

logger = logging.getLogger(__name__)


class UnknownCharacterError(KeyError):
    """Raised when a character id is not part of the loaded cast."""


class UnknownDailyRuleError(KeyError):
    """Raised when a daily rule id (or day) cannot be resolved."""


def _validate_entries(model, raw_items: list[dict[str, Any]], section: str) -> list:
    out = []
    for raw in raw_items:
        try:
            out.append(model.model_validate(raw))
        except ValidationError as e:
            logger.warning("Skipping invalid %s entry %r: %s", section, raw.get("id"), e)
    return out


class CastRepository:
    """App-lifetime cast repository: characters and daily rules from the stacked packs."""

    def __init__(self, roots: list[Path] | None = None) -> None:
        self._roots = roots
        self._lock = threading.RLock()
        self._pack: CastPack | None = None

    def get_pack(self) -> CastPack:
        with self._lock:
            if self._pack is not None:
                return self._pack
            merged = load_stacked_cast(self._roots)
            pack = CastPack(
                characters=_validate_entries(CharacterData, merged.get("characters", []), "characters"),
                daily_rules=_validate_entries(DailyRule, merged.get("daily_rules", []), "daily_rules"),
            )
            pack.daily_rules.sort(key=lambda r: (r.day, r.id))
            self._pack = pack
            return pack

    def list_characters(self) -> list[CharacterData]:
        return list(self.get_pack().characters)

    def get_character(self, character_id: str) -> CharacterData:
        key = normalize_identifier(character_id)
        for character in self.get_pack().characters:
            if normalize_identifier(character.id) == key:
                return character
        raise UnknownCharacterError(character_id)

    def list_daily_rules(self) -> list[DailyRule]:
        return list(self.get_pack().daily_rules)

    def get_daily_rule(self, rule_id: str) -> DailyRule:
        key = normalize_identifier(rule_id)
        for rule in self.get_pack().daily_rules:
            if normalize_identifier(rule.id) == key:
                return rule
        raise UnknownDailyRuleError(rule_id)

    def rule_for_day(self, day: int) -> DailyRule:
        """Rule scheduled for ``day``; days past the schedule wrap around it."""
        rules = self.get_pack().daily_rules
        if not rules:
            raise UnknownDailyRuleError(f"day {day}")
        for rule in rules:
            if rule.day == day:
                return rule
        return rules[(max(day, 1) - 1) % len(rules)]

    def reload(self) -> CastPack:
        self.clear_cache()
        return self.get_pack()

    def clear_cache(self) -> None:
        with self._lock:
            self._pack = None


CAST_REPOSITORY = CastRepository()
