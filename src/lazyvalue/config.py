"""Configuration loader for lazy value instances."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from jsonschema import Draft7Validator

CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "ttl_sec": {"type": ["number", "null"], "minimum": 0},
        "reset_ttl_on_error": {"type": "boolean"},
        "strict": {"type": "boolean"},
    },
    "additionalProperties": False,
}

_validator = Draft7Validator(CONFIG_SCHEMA)


def validate_config(payload: Dict[str, Any]) -> None:
    errors = sorted(_validator.iter_errors(payload), key=lambda e: list(e.path))
    if errors:
        messages = ", ".join(error.message for error in errors)
        raise ValueError(f"lazy config validation failed: {messages}")


@dataclass(frozen=True)
class LazyConfig:
    # None disables TTL; 0 is a real (immediately stale) TTL.
    ttl_sec: Optional[float] = None
    reset_ttl_on_error: bool = True
    strict: bool = False

    @property
    def with_ttl(self) -> bool:
        return self.ttl_sec is not None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LazyConfig":
        validate_config(data)
        ttl = data.get("ttl_sec")
        return cls(
            ttl_sec=None if ttl is None else float(ttl),
            reset_ttl_on_error=bool(data.get("reset_ttl_on_error", True)),
            strict=bool(data.get("strict", False)),
        )


ENV_MAP = {
    "ttl_sec": "LAZY_TTL_SEC",
    "reset_ttl_on_error": "LAZY_RESET_TTL_ON_ERROR",
    "strict": "LAZY_STRICT",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_NULL_VALUES = {"", "none", "null", "off"}


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in _TRUE_VALUES


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def merge_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
    merged = json.loads(json.dumps(config_data))  # deep copy via json

    for key, env_name in ENV_MAP.items():
        if env_name not in os.environ:
            continue
        raw = os.environ[env_name]
        value: Any
        if key == "ttl_sec":
            value = None if raw.strip().lower() in _NULL_VALUES else float(raw)
        else:
            value = _parse_bool(raw)
        merged[key] = value

    return merged


def load_config(config_path: str | Path = "config/lazy.defaults.yml") -> LazyConfig:
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = load_yaml(path)
    data = merge_env_overrides(data)
    return LazyConfig.from_dict(data)
