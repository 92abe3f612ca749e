"""Response resolver: canonical answers, fallbacks, Xtrange corruption."""
from __future__ import annotations

import random
import unittest

from backend.app.constants import FALLBACK_RESPONSES
from backend.app.dialogue.response_resolver import get_character_response, resolve_character_response
from backend.app.models.character import CharacterData, DailyRule


def test_canonical_answer_for_human(fab, aggression_rule) -> None:
    assert get_character_response(fab, False, aggression_rule, "qual é o seu nome") == "Fab. Fab Godamn."


def test_unmatched_input_returns_a_fallback(fab, aggression_rule) -> None:
    for seed in range(30):
        reply = get_character_response(fab, False, aggression_rule, "cadê o açúcar?", rng=random.Random(seed))
        assert reply in FALLBACK_RESPONSES


def test_fallback_uses_rng_choice(stranger, aggression_rule, rng_factory) -> None:
    rng = rng_factory(choice_index=2)
    assert get_character_response(stranger, False, aggression_rule, "???", rng=rng) == "Pode repetir?"


def test_xtrange_aggression_appends_suffix_to_canonical(fab, aggression_rule) -> None:
    reply = get_character_response(fab, True, aggression_rule, "Qual é o seu nome?")
    assert reply == "Fab. Fab Godamn. ...SEU VERME INÚTIL."


def test_xtrange_corrupts_fallback_too(stranger, aggression_rule, rng_factory) -> None:
    reply = get_character_response(stranger, True, aggression_rule, "nada a ver", rng=rng_factory(choice_index=3))
    assert reply == "Só me deixa entrar. ...SEU VERME INÚTIL."


def test_empty_answer_falls_back(rng_factory) -> None:
    character = CharacterData(id="mudo", name="Mudo", knowledge_base=["q: Oi -> A: ''"])
    resolved = resolve_character_response(
        character, False, DailyRule(id="d"), "oi", rng=rng_factory(choice_index=1)
    )
    assert resolved.text == "..."
    assert resolved.matched is False


class TestResolvedResponseFlags(unittest.TestCase):
    def setUp(self) -> None:
        self.character = CharacterData(id="beto", name="Beto", knowledge_base=["q: Oi -> A: Oi, tudo bem?"])

    def test_matched_and_corrupted(self) -> None:
        resolved = resolve_character_response(self.character, True, DailyRule(id="d", mechanic="nonsensical"), "oi")
        self.assertTrue(resolved.matched)
        self.assertTrue(resolved.corrupted)
        self.assertEqual(resolved.text, "Oi, tudo bem? As paredes têm gosto de roxo.")

    def test_unknown_mechanic_not_corrupted(self) -> None:
        resolved = resolve_character_response(self.character, True, DailyRule(id="d", mechanic="mystery"), "oi")
        self.assertTrue(resolved.matched)
        self.assertFalse(resolved.corrupted)
        self.assertEqual(resolved.text, "Oi, tudo bem?")

    def test_human_ignores_mechanic(self) -> None:
        resolved = resolve_character_response(self.character, False, DailyRule(id="d", mechanic="aggression"), "Oi!")
        self.assertFalse(resolved.corrupted)
        self.assertEqual(resolved.text, "Oi, tudo bem?")

    def test_grammar_rule(self) -> None:
        character = CharacterData(id="c", name="C", knowledge_base=["q: cadê? -> A: o gato comeu a janta"])
        resolved = resolve_character_response(character, True, DailyRule(id="d", mechanic="grammar"), "cade")
        self.assertEqual(resolved.text, "a gata comeu o janta")
