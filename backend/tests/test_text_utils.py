from __future__ import annotations

from backend.app.core.text_utils import normalize_identifier, normalize_text


def test_normalize_text_strips_accents_case_and_punctuation() -> None:
    assert normalize_text("  Você é HUMANO?! ") == "voce e humano"
    assert normalize_text("Qual é o seu nome...") == "qual e o seu nome"
    assert normalize_text("Ação, coração") == "acao, coracao"


def test_normalize_text_keeps_inner_whitespace_and_other_punctuation() -> None:
    assert normalize_text("oi,  tudo bem") == "oi,  tudo bem"


def test_normalize_text_empty() -> None:
    assert normalize_text("") == ""
    assert normalize_text("?!.") == ""


def test_normalize_identifier() -> None:
    assert normalize_identifier("Visual-Distortion ") == "visual_distortion"
    assert normalize_identifier("  Fab  ") == "fab"
