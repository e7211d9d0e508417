"""Generation parameter loader."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from georand.utils.dict_merge import deep_update
from .schema import GenerationParameters

__all__ = ["load_parameters", "dump_parameters"]

TOP_LEVEL_KEY = "georand"


def _read_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"parameter file not found: {path}")
    with p.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"cannot parse YAML at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top-level YAML at {path} must be a mapping")
    return data


def _ensure_only_top_level(d: Mapping[str, Any]) -> None:
    extra = set(d.keys()) - {TOP_LEVEL_KEY}
    if extra:
        raise ValueError(f"unexpected top-level keys: {sorted(extra)}")


def load_parameters(
    path: Optional[str | Path] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> GenerationParameters:
    """Read ``{"georand": {...}}`` from YAML and return validated parameters.

    ``path=None`` starts from the built-in defaults.  ``overrides`` uses the
    same ``{"georand": {...}}`` shape and is deep-merged last.
    """
    cfg: Dict[str, Any] = {}
    if path is not None:
        raw = _read_yaml(path)
        _ensure_only_top_level(raw)
        cfg = deep_update(cfg, raw.get(TOP_LEVEL_KEY) or {})

    if overrides:
        _ensure_only_top_level(overrides)
        cfg = deep_update(cfg, overrides.get(TOP_LEVEL_KEY) or {})

    return GenerationParameters.from_mapping(cfg)


def dump_parameters(params: GenerationParameters) -> Dict[str, Any]:
    """Return ``params`` as a YAML-ready ``{"georand": {...}}`` mapping."""
    return {TOP_LEVEL_KEY: params.model_dump(mode="json")}
