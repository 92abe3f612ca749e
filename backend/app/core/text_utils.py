"""Text normalization utilities."""
from __future__ import annotations

import re
import unicodedata

_COMBINING_MARKS_RE = re.compile(r"[\u0300-\u036f]")
_QUESTION_PUNCT_RE = re.compile(r"[?.!]")


def normalize_text(text: str) -> str:
    """
    Normalize free text for question matching.

    Lowercases, strips diacritics (NFD + combining marks), removes ``? . !``
    and trims surrounding whitespace. Inner whitespace is left untouched.

    Examples:
        >>> normalize_text("  Você é HUMANO?! ")
        'voce e humano'
        >>> normalize_text("Qual é o seu nome...")
        'qual e o seu nome'
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text.lower())
    stripped = _COMBINING_MARKS_RE.sub("", decomposed)
    return _QUESTION_PUNCT_RE.sub("", stripped).strip()


def normalize_identifier(value: str) -> str:
    """
    Normalize string to lowercase identifier format.

    Converts dashes to underscores and strips whitespace.
    Used for character ids, daily rule ids and mechanic names.

    Examples:
        >>> normalize_identifier("visual-distortion")
        'visual_distortion'
        >>> normalize_identifier("  Fab  ")
        'fab'
    """
    return str(value).strip().lower().replace("-", "_")
