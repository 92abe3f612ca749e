"""Cast pack loading: YAML characters/daily rules stacked across pack roots.

Layout of a pack root (every file optional)::

    characters.yaml        # list, or {"characters": [...]}
    characters/*.yaml      # extra character fragments
    daily_rules.yaml       # list, or {"daily_rules": [...]}
    daily_rules/*.yaml

Lists merge by ``id`` across roots; ``disabled: true`` drops an entry.
"""
from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from backend.app.config import resolve_cast_pack_roots

logger = logging.getLogger(__name__)

CAST_SECTIONS: tuple[str, ...] = ("characters", "daily_rules")


def _load_yaml(path: Path) -> Any:
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def _coerce_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, dict):
        return [value]
    return []


def deep_merge(base: Any, incoming: Any) -> Any:
    if isinstance(base, dict) and isinstance(incoming, dict):
        out = copy.deepcopy(base)
        for k, v in incoming.items():
            if k in out:
                out[k] = deep_merge(out[k], v)
            else:
                out[k] = copy.deepcopy(v)
        return out
    if isinstance(base, list) and isinstance(incoming, list):
        if all(isinstance(i, dict) and i.get("id") for i in (base + incoming)):
            return merge_list_by_id(base, incoming)
        return copy.deepcopy(incoming)
    return copy.deepcopy(incoming)


def merge_list_by_id(base: list[dict[str, Any]], incoming: list[dict[str, Any]]) -> list[dict[str, Any]]:
    out: list[dict[str, Any]] = []
    index_by_id: dict[str, int] = {}

    def _rebuild_index() -> None:
        index_by_id.clear()
        for idx, existing in enumerate(out):
            existing_id = str(existing.get("id") or "")
            if existing_id:
                index_by_id[existing_id] = idx

    def _apply(item: dict[str, Any]) -> None:
        item_id = str(item.get("id") or "")
        if not item_id:
            out.append(copy.deepcopy(item))
            return
        if item.get("disabled") is True:
            if item_id in index_by_id:
                out.pop(index_by_id[item_id])
                _rebuild_index()
            return
        if item_id in index_by_id:
            # knowledge_base is a line list: an override replaces it wholesale
            out[index_by_id[item_id]] = deep_merge(out[index_by_id[item_id]], item)
        else:
            out.append(copy.deepcopy(item))
            index_by_id[item_id] = len(out) - 1

    for i in base:
        if isinstance(i, dict):
            _apply(i)
    for i in incoming:
        if isinstance(i, dict):
            _apply(i)
    return out


def _load_list_section(dir_path: Path, key: str) -> list[dict[str, Any]]:
    items: list[dict[str, Any]] = []
    for ext in (".yaml", ".yml"):
        fp = dir_path / f"{key}{ext}"
        if fp.exists() and fp.is_file():
            data = _load_yaml(fp)
            data = data.get(key) if isinstance(data, dict) and key in data else data
            items.extend([x for x in _coerce_list(data) if isinstance(x, dict)])
    section_dir = dir_path / key
    if section_dir.exists() and section_dir.is_dir():
        for fp in sorted(section_dir.glob("*.yml")) + sorted(section_dir.glob("*.yaml")):
            data = _load_yaml(fp)
            data = data.get(key) if isinstance(data, dict) and key in data else data
            items.extend([x for x in _coerce_list(data) if isinstance(x, dict)])
    return items


def load_pack_root(root: Path) -> dict[str, list[dict[str, Any]]]:
    """Raw entries of one pack root, file order preserved (merging happens when stacking)."""
    return {section: _load_list_section(root, section) for section in CAST_SECTIONS}


def load_stacked_cast(roots: list[Path] | None = None) -> dict[str, list[dict[str, Any]]]:
    """Merge every existing pack root in order. Raises FileNotFoundError when none exist."""
    if roots is None:
        roots = resolve_cast_pack_roots()
    merged: dict[str, list[dict[str, Any]]] = {section: [] for section in CAST_SECTIONS}
    found = False
    for root in roots:
        if not root.exists() or not root.is_dir():
            logger.debug("Cast pack root missing, skipping: %s", root)
            continue
        found = True
        layer = load_pack_root(root)
        for section in CAST_SECTIONS:
            merged[section] = merge_list_by_id(merged[section], layer.get(section, []))
        logger.info(
            "Loaded cast pack root %s (%d characters, %d daily rules)",
            root,
            len(layer.get("characters", [])),
            len(layer.get("daily_rules", [])),
        )
    if not found:
        raise FileNotFoundError(f"No cast pack found in roots: {[str(r) for r in roots]}")
    return merged
