# heroviz/utils/config.py
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from heroviz.config.schemas import EngineConfig

CONF_DIR = "conf"
ENGINE_FILE = "engine.yaml"
ENGINE_EXAMPLE_FILE = "engine.example.yaml"


def _read_yaml(path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}
    with p.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
        if not isinstance(data, dict):
            raise ValueError(f"YAML at {path} must be a mapping/object.")
        return data


def _deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(a)
    for k, v in (b or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _base_layer(path: Optional[str], conf_dir: str) -> Dict[str, Any]:
    if path:
        return _read_yaml(path)
    primary = Path(conf_dir) / ENGINE_FILE
    if primary.exists():
        return _read_yaml(primary)
    return _read_yaml(Path(conf_dir) / ENGINE_EXAMPLE_FILE)


def _profile_overlay(profile: Optional[str], conf_dir: str) -> Dict[str, Any]:
    if not profile:
        return {}
    return _read_yaml(Path(conf_dir) / "profiles" / f"{profile}.yaml")


def _env_overlay() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    level = os.getenv("HEROVIZ_LOG_LEVEL")
    if level:
        out.setdefault("logging", {})["level"] = level.strip().upper()
    pending = os.getenv("HEROVIZ_PENDING_AS_STATIC")
    if pending:
        out.setdefault("motion", {})["pending_as_static"] = pending.strip().lower() in (
            "1",
            "true",
            "yes",
            "on",
        )
    return out


def load_engine_config(
    path: Optional[str] = None,
    *,
    profile: Optional[str] = None,
    cli_overrides: Optional[Dict[str, Any]] = None,
    conf_dir: str = CONF_DIR,
) -> EngineConfig:
    """
    Load and validate the engine config with strict precedence.
    Precedence (low -> high):
      1) Defaults baked into models
      2) conf/engine.yaml (or conf/engine.example.yaml, or an explicit path)
      3) Profile overlay from conf/profiles/<profile>.yaml
      4) Environment variables
      5) CLI overrides

    Raises ValueError for non-mapping YAML and pydantic.ValidationError for
    values outside the schema.
    """
    profile = profile or os.getenv("HEROVIZ_PROFILE") or None

    merged: Dict[str, Any] = EngineConfig().model_dump()
    merged = _deep_merge(merged, _base_layer(path, conf_dir))
    merged = _deep_merge(merged, _profile_overlay(profile, conf_dir))
    merged = _deep_merge(merged, _env_overlay())
    if cli_overrides:
        merged = _deep_merge(merged, cli_overrides)
    if profile:
        merged["profile"] = profile

    return EngineConfig(**merged)
