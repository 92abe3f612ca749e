"""Centralized game text and asset tables shared across the app."""
from __future__ import annotations

from backend.app.config import ASSET_BASE_URL
from backend.app.models.character import CharacterId

# Knowledge-base line format: "q: <question> -> A: <answer>"
KB_KEY_SEPARATOR = "->"
KB_ANSWER_DELIMITER = "-> A: "

# Generic lines when the question has no scripted answer
FALLBACK_RESPONSES: tuple[str, ...] = (
    "Não sei do que você está falando.",
    "...",
    "Pode repetir?",
    "Só me deixa entrar.",
    "Eu já disse tudo o que tinha pra dizer.",
)

# Corruption mechanics (DailyRule.mechanic)
MECHANIC_REPETITION = "repetition"
MECHANIC_GRAMMAR = "grammar"
MECHANIC_AGGRESSION = "aggression"
MECHANIC_NONSENSICAL = "nonsensical"
MECHANIC_VISUAL_DISTORTION = "visual_distortion"

KNOWN_MECHANICS: tuple[str, ...] = (
    MECHANIC_REPETITION,
    MECHANIC_GRAMMAR,
    MECHANIC_AGGRESSION,
    MECHANIC_NONSENSICAL,
    MECHANIC_VISUAL_DISTORTION,
)

REPETITION_COUNT = 3

CORRUPTION_SUFFIXES: dict[str, str] = {
    MECHANIC_AGGRESSION: " ...SEU VERME INÚTIL.",
    MECHANIC_NONSENSICAL: " As paredes têm gosto de roxo.",
    MECHANIC_VISUAL_DISTORTION: " (m-minha c-cara d-dói)",
}

# Applied in one pass; longer endings listed first so "os " wins over "o ".
GRAMMAR_SWAPS: dict[str, str] = {
    "os ": "is ",
    "as ": "us ",
    "o ": "a ",
    "a ": "o ",
}


def _asset(name: str) -> str:
    return f"{ASSET_BASE_URL}/{name}" if ASSET_BASE_URL else name


ASSETS: dict[str, str] = {
    "EYE_NORMAL": _asset("eye_normal.png"),
    "EYE_XTRANGE": _asset("eye_xtrange.png"),
    "EYE_XTRANGE_2": _asset("eye_xtrange_2.png"),
    "TEETH_NORMAL": _asset("teeth_normal.png"),
    "TEETH_XTRANGE": _asset("teeth_xtrange.png"),
}

# Inspection text
EYES_SCAN_TEXT = "SISTEMA: CAPTURANDO IMAGEM BIOMÉTRICA OCULAR... (Analise a imagem abaixo)"
TEETH_SCAN_TEXT = "SISTEMA: CAPTURANDO IMAGEM DENTÁRIA... (Analise a imagem abaixo)"
INCONCLUSIVE_TEXT = "SISTEMA: Inspeção inconclusiva."
POCKETS_GENERIC_TEMPLATE = "SISTEMA: Você revistou os bolsos e encontrou: {item}"

CONTRABAND_XTRANGE_TEXT = (
    "SISTEMA: INCRIMINADOR: Você encontrou um tijolo de MACONHA PRENSADA "
    "(fedida, cheia de galhos e sementes). Típico de um impostor."
)
CONTRABAND_HUMAN_TEXT = (
    "SISTEMA: ALÍVIO: Você encontrou um ziplock com MACONHA NATURAL (SKANK/FLOR). "
    "O cheiro é doce e cítrico. É coisa boa (Humano)."
)

# Fixed pocket contents, independent of the Xtrange flag
SIGNATURE_POCKET_ITEMS: dict[str, str] = {
    CharacterId.FAB.value: (
        "SISTEMA: Você encontrou um papel timbrado com selo médico: 'LAUDO PSICOLÓGICO: "
        "O paciente Fab Godamn sofre de delírios psicóticos. Acredita que objetos inanimados "
        "(machado) são familiares. Não representa perigo se a ilusão for respeitada.'"
    ),
    CharacterId.CLERITON.value: (
        "SISTEMA: Você encontrou um PENDRIVE PRATEADO com a palavra 'TEMPO' escrita à mão. "
        "(Item adicionado ao inventário)"
    ),
    CharacterId.CARLOS.value: (
        "SISTEMA: Você encontrou um CD-ROM pirata escrito 'HITS DO JAPÃO'. "
        "(Item adicionado ao inventário)"
    ),
    CharacterId.VINICIUS.value: (
        "SISTEMA: Você encontrou um COGUMELO ESTRANHO que brilha com uma cor roxa pulsante. "
        "Parece... comestível?"
    ),
    CharacterId.KOUTH.value: (
        "SISTEMA: Você encontrou uma MINI GUITARRA ELÉTRICA. (Item adicionado). "
        "OBS: Conecte a guitarra no NOTEBOOK do quarto para usar."
    ),
}

# Characters that always carry contraband
CONTRABAND_CARRIERS: frozenset[str] = frozenset({CharacterId.MATHEUS.value})

POCKET_ITEMS: tuple[str, ...] = (
    "um isqueiro sem gás.",
    "três moedas de dez centavos e um botão.",
    "um recibo amassado de padaria.",
    "um chiclete mascado embrulhado no papel.",
    "um bilhete de ônibus usado.",
    "uma chave que não parece abrir nada.",
    "um santinho de candidato a vereador.",
    "nada além de fiapos.",
)
