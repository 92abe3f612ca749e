from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from backend.app.content.loader import load_stacked_cast
from backend.app.content.repository import (
    CastRepository,
    UnknownCharacterError,
    UnknownDailyRuleError,
)
from backend.app.models.character import CharacterData


def _write_core(root: Path) -> None:
    root.mkdir(parents=True)
    (root / "characters.yaml").write_text(
        """
characters:
  - id: fab
    name: Fab Godamn
    knowledge_base:
      - "q: Qual é o seu nome? -> A: 'Fab.'"
  - id: beto
    name: Beto
  - id: sem_nome
""",
        encoding="utf-8",
    )
    (root / "daily_rules.yaml").write_text(
        """
- id: eco
  day: 1
  mechanic: repetition
- id: raiva
  day: 2
  mechanic: Aggression
""",
        encoding="utf-8",
    )


def _write_override(root: Path) -> None:
    (root / "characters").mkdir(parents=True)
    (root / "characters" / "extra.yaml").write_text(
        """
- id: beto
  disabled: true
- id: fab
  description: Agora com descrição.
  knowledge_base:
    - "q: Oi -> A: Oi."
- id: dona_cida
  name: Dona Cida
""",
        encoding="utf-8",
    )


def test_stacking_disable_and_override(tmp_path: Path) -> None:
    core = tmp_path / "core"
    override = tmp_path / "override"
    _write_core(core)
    _write_override(override)

    repo = CastRepository(roots=[core, override])
    ids = [c.id for c in repo.list_characters()]
    assert ids == ["fab", "dona_cida"]

    fab = repo.get_character("FAB")
    assert fab.name == "Fab Godamn"
    assert fab.description == "Agora com descrição."
    assert fab.knowledge_base == ["q: Oi -> A: Oi."]


def test_invalid_entries_are_skipped(tmp_path: Path) -> None:
    core = tmp_path / "core"
    _write_core(core)
    repo = CastRepository(roots=[core])
    with pytest.raises(UnknownCharacterError):
        repo.get_character("sem_nome")


def test_malformed_character_entries_do_not_break_the_pack(tmp_path: Path) -> None:
    root = tmp_path / "core"
    root.mkdir()
    (root / "characters.yaml").write_text(
        """
- id: fab
  name: Fab Godamn
- id: numero
  name: Numero
  knowledge_base: 5
- id: booleano
  name: Booleano
  knowledge_base: true
- id: mapa
  name: Mapa
  knowledge_base:
    "q: Oi": "A: Oi"
- id:
  name: Sem Id
""",
        encoding="utf-8",
    )
    repo = CastRepository(roots=[root])
    assert [c.id for c in repo.list_characters()] == ["fab"]


def test_character_ids_are_normalized() -> None:
    assert CharacterData(id=" Fab ", name="Fab").id == "fab"
    assert CharacterData(id="Dona-Cida", name="Dona Cida").id == "dona_cida"
    with pytest.raises(ValidationError):
        CharacterData(id=None, name="Ninguém")
    with pytest.raises(ValidationError):
        CharacterData(id="   ", name="Ninguém")


def test_daily_rules_lookup_and_day_wrap(tmp_path: Path) -> None:
    core = tmp_path / "core"
    _write_core(core)
    repo = CastRepository(roots=[core])

    assert repo.get_daily_rule("raiva").mechanic == "aggression"
    assert repo.rule_for_day(1).id == "eco"
    assert repo.rule_for_day(2).id == "raiva"
    assert repo.rule_for_day(3).id == "eco"
    assert repo.rule_for_day(4).id == "raiva"
    with pytest.raises(UnknownDailyRuleError):
        repo.get_daily_rule("nope")


def test_missing_roots_raise(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_stacked_cast([tmp_path / "missing"])


def test_env_roots_are_used(tmp_path: Path) -> None:
    core = tmp_path / "core"
    _write_core(core)
    with patch.dict(os.environ, {"XTRANGE_CAST_PACK_PATHS": str(core)}, clear=False):
        repo = CastRepository()
        assert [c.id for c in repo.list_characters()] == ["fab", "beto"]


def test_reload_picks_up_changes(tmp_path: Path) -> None:
    core = tmp_path / "core"
    _write_core(core)
    repo = CastRepository(roots=[core])
    assert len(repo.list_characters()) == 2
    (core / "characters.yaml").write_text("- id: solo\n  name: Solo\n", encoding="utf-8")
    assert len(repo.list_characters()) == 2
    repo.reload()
    assert [c.id for c in repo.list_characters()] == ["solo"]


def test_bundled_cast_pack_loads() -> None:
    repo = CastRepository()
    ids = {c.id for c in repo.list_characters()}
    assert {"fab", "cleriton", "carlos", "vinicius", "kouth", "matheus"} <= ids
    mechanics = {r.mechanic for r in repo.list_daily_rules()}
    assert mechanics == {"repetition", "grammar", "aggression", "nonsensical", "visual_distortion"}


def test_daily_rule_fragments_override_across_roots(tmp_path: Path) -> None:
    core = tmp_path / "core"
    override = tmp_path / "override"
    _write_core(core)
    (override / "daily_rules").mkdir(parents=True)
    (override / "daily_rules" / "extra.yml").write_text(
        """
daily_rules:
  - id: eco
    disabled: true
  - id: raiva
    mechanic: grammar
  - id: delirio
    day: 3
    mechanic: nonsensical
""",
        encoding="utf-8",
    )
    (override / "characters.yml").write_text("- id: beto\n  description: De volta.\n", encoding="utf-8")

    repo = CastRepository(roots=[core, override])
    assert [(r.id, r.day, r.mechanic) for r in repo.list_daily_rules()] == [
        ("raiva", 2, "grammar"),
        ("delirio", 3, "nonsensical"),
    ]
    assert repo.rule_for_day(1).id == "raiva"
    assert repo.get_character("beto").description == "De volta."
