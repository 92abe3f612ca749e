"""Pytest setup: shared cast fixtures and pinned random generators."""
from __future__ import annotations

import random
from unittest.mock import Mock

import pytest

from backend.app.models.character import CharacterData, DailyRule


@pytest.fixture
def rng_factory():
    """Build mocks of random.Random with fixed outcomes."""

    def _make(*, random_value: float = 0.5, choice_index: int = 0, randrange_value: int = 0) -> Mock:
        rng = Mock(spec=random.Random)
        rng.random.return_value = random_value
        rng.choice.side_effect = lambda seq: seq[choice_index]
        rng.randrange.return_value = randrange_value
        return rng

    return _make


@pytest.fixture
def fab() -> CharacterData:
    return CharacterData(
        id="fab",
        name="Fab Godamn",
        knowledge_base=[
            "q: Qual é o seu nome? -> A: 'Fab. Fab Godamn.'",
            "Q:Por que o machado? -> A: \"Ele é meu primo.\"",
            "linha sem separador nenhum",
            "q: Você é humano? -> resposta sem delimitador",
        ],
    )


@pytest.fixture
def stranger() -> CharacterData:
    return CharacterData(id="beto", name="Beto", knowledge_base=["q: Oi -> A: Oi, tudo bem?"])


@pytest.fixture
def aggression_rule() -> DailyRule:
    return DailyRule(id="raiva", day=3, mechanic="aggression")
