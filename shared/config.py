"""Shared configuration constants used by the backend and the CLI."""
from __future__ import annotations

import math
import os
from pathlib import Path
from typing import Mapping


def _env_flag(name: str, default: bool = False, environ: Mapping[str, str] | None = None) -> bool:
    """Read a boolean env value (1/true/yes/on); blank means default."""
    env = os.environ if environ is None else environ
    val = env.get(name, "").strip().lower()
    if not val:
        return default
    return val in ("1", "true", "yes", "on")


def _env_float(name: str, default: float) -> float:
    """Read float env value; blank, unparsable or non-finite values fall back to default."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if not math.isfinite(value):
        return default
    return value


# Project root: resolve relative to this file's location
_PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Data directories (shared) - use absolute paths to avoid CWD dependency
DATA_ROOT = Path(os.environ.get("XTRANGE_DATA_ROOT", str(_PROJECT_ROOT / "data")))
CAST_PACK_DIR = os.environ.get("XTRANGE_CAST_PACK_DIR", str(DATA_ROOT / "static" / "cast"))
