"""App config: cast pack roots, inspection tuning, asset references and API security, env overrides.

Pack stacking: XTRANGE_CAST_PACK_PATHS lists pack roots separated by ';'.
Later roots override earlier ones (merge by id, ``disabled: true`` removes).
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from shared.config import (
    CAST_PACK_DIR,
    DATA_ROOT,
    _PROJECT_ROOT,
    _env_flag,
    _env_float,
)

logger = logging.getLogger(__name__)


def resolve_cast_pack_roots(raw: str | None = None) -> list[Path]:
    """
    Resolve cast pack roots in stacking order.

    Precedence:
    1) explicit raw argument
    2) XTRANGE_CAST_PACK_PATHS env var
    3) CAST_PACK_DIR (data/static/cast)
    """
    if raw is None:
        raw = os.environ.get("XTRANGE_CAST_PACK_PATHS", "")
    roots: list[Path] = []
    for part in (raw or "").split(";"):
        part = part.strip()
        if not part:
            continue
        p = Path(part)
        roots.append(p if p.is_absolute() else _PROJECT_ROOT / p)
    if not roots:
        roots.append(Path(CAST_PACK_DIR))
    return roots


# Pocket inspection: chance that an ordinary character carries contraband.
CONTRABAND_CHANCE = min(max(_env_float("XTRANGE_CONTRABAND_CHANCE", 0.15), 0.0), 1.0)

# Eye inspection: chance an Xtrange shows the first distortion variant.
XTRANGE_EYE_PRIMARY_CHANCE = 0.5

# Image references handed to the UI are ASSET_BASE_URL + "/" + file name.
ASSET_BASE_URL = os.environ.get("XTRANGE_ASSET_BASE_URL", "/assets").strip().rstrip("/")

# Browser origins allowed when XTRANGE_CORS_ALLOW_ORIGINS is unset (local game UI dev servers).
DEFAULT_CORS_ALLOW_ORIGINS: tuple[str, ...] = (
    "http://localhost",
    "http://127.0.0.1",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


@dataclass(frozen=True)
class SecuritySettings:
    """Token auth and CORS settings for the interrogation API."""

    dev_mode: bool
    api_token: str
    cors_allow_origins: tuple[str, ...]

    @property
    def auth_enabled(self) -> bool:
        return bool(self.api_token)

    def check_startup(self) -> None:
        """Refuse to serve outside dev mode with a wildcard origin or without a token."""
        if self.dev_mode:
            return
        if "*" in self.cors_allow_origins:
            raise RuntimeError(
                "Unsafe CORS config: '*' is only allowed in dev mode. "
                "Set XTRANGE_CORS_ALLOW_ORIGINS to explicit origins."
            )
        if not self.api_token:
            raise RuntimeError("XTRANGE_API_TOKEN is required when XTRANGE_DEV_MODE=0.")


def parse_origins(raw: str | None) -> tuple[str, ...]:
    """Comma-separated origins; blank falls back to DEFAULT_CORS_ALLOW_ORIGINS."""
    origins = tuple(o.strip().rstrip("/") for o in (raw or "").split(",") if o.strip())
    return origins or DEFAULT_CORS_ALLOW_ORIGINS


def load_security_settings(environ: Mapping[str, str] | None = None) -> SecuritySettings:
    env = os.environ if environ is None else environ
    return SecuritySettings(
        dev_mode=_env_flag("XTRANGE_DEV_MODE", default=True, environ=env),
        api_token=env.get("XTRANGE_API_TOKEN", "").strip(),
        cors_allow_origins=parse_origins(env.get("XTRANGE_CORS_ALLOW_ORIGINS")),
    )


def log_resolved_config() -> None:
    """Log resolved runtime config at startup (no secrets)."""
    lines = ["Xtrange config:"]
    lines.append(f"  data_root={DATA_ROOT}")
    lines.append(f"  cast_pack_roots={[str(r) for r in resolve_cast_pack_roots()]}")
    lines.append(f"  contraband_chance={CONTRABAND_CHANCE}")
    lines.append(f"  asset_base_url={ASSET_BASE_URL or '(empty)'}")
    logger.info("\n".join(lines))
