"""YAML config loader, dotted-key lookup and provider credential lookup."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from weatherdash.config.defaults import DEFAULT_CITIES
from weatherdash.config.schema import DashboardConfig, ProviderConfig


def load_config(path: str | Path | None = None) -> DashboardConfig:
    """Load and validate config from a YAML file.

    With no path the built-in defaults are returned. If no cities are
    specified in the YAML, injects DEFAULT_CITIES.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raise ValueError(
                f"Config root must be a mapping, got {type(raw).__name__}"
            )

    if "cities" not in raw or not raw["cities"]:
        raw["cities"] = [c.model_dump() for c in DEFAULT_CITIES]

    return DashboardConfig(**raw)


def get_config_value(config: DashboardConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'provider.units'.

    Only model fields, dict keys and list indices are followed.
    """
    obj: Any = config
    for part in dotted_key.split("."):
        if isinstance(obj, BaseModel) and part in type(obj).model_fields:
            obj = getattr(obj, part)
        elif isinstance(obj, dict) and part in obj:
            obj = obj[part]
        elif isinstance(obj, list) and part.isdigit() and int(part) < len(obj):
            obj = obj[int(part)]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def load_api_key(
    provider: ProviderConfig, environ: Mapping[str, str] | None = None
) -> str | None:
    """Read the provider credential once. Blank values count as absent."""
    env = os.environ if environ is None else environ
    value = env.get(provider.api_key_env, "").strip()
    return value or None
