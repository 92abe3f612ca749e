"""Xtrange text corruption: mechanical mutations selected by the daily rule."""
from __future__ import annotations

import random
import re

from backend.app.constants import (
    CORRUPTION_SUFFIXES,
    GRAMMAR_SWAPS,
    MECHANIC_GRAMMAR,
    MECHANIC_REPETITION,
    REPETITION_COUNT,
)
from backend.app.core.text_utils import normalize_identifier

_GRAMMAR_RE = re.compile("|".join(re.escape(k) for k in GRAMMAR_SWAPS))


def repeat_random_word(text: str, rng: random.Random | None = None) -> str:
    """Repeat one randomly chosen space-separated word three times in place."""
    rng = rng or random
    words = text.split(" ")
    target = rng.randrange(len(words))
    words[target] = " ".join([words[target]] * REPETITION_COUNT)
    return " ".join(words)


def swap_grammar(text: str) -> str:
    """Swap article-like endings before a space (o/a, os->is, as->us) in a single pass."""
    return _GRAMMAR_RE.sub(lambda m: GRAMMAR_SWAPS[m.group(0)], text)


def apply_corruption(text: str, mechanic: str, rng: random.Random | None = None) -> str:
    """Apply the named corruption mechanic; unknown mechanics leave the text unchanged."""
    key = normalize_identifier(mechanic or "")
    if key == MECHANIC_REPETITION:
        return repeat_random_word(text, rng)
    if key == MECHANIC_GRAMMAR:
        return swap_grammar(text)
    suffix = CORRUPTION_SUFFIXES.get(key)
    if suffix is not None:
        return text + suffix
    return text
