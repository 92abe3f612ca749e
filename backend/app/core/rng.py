"""Reproducible random generators for resolvers that roll dice."""
from __future__ import annotations

import hashlib
import random


def derive_seed(seed: str | int) -> int:
    """Derive a stable integer seed from any string/int (sha256, first 64 bits)."""
    digest = hashlib.sha256(str(seed).encode("utf-8")).hexdigest()[:16]
    return int(digest, 16)


def seeded_rng(seed: str | int | None) -> random.Random | None:
    """Return a seeded generator, or None so callers fall back to the module RNG."""
    if seed is None:
        return None
    return random.Random(derive_seed(seed))
