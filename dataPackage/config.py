from __future__ import annotations

"""Loader for resource-map settings shared by the library and the CLI."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from dataPackage.kg.iri import DEFAULT_RESOLVE_BASE
from dataPackage.kg.serializer import DEFAULT_SYNTAX, SYNTAXES

CONFIG_ENV = "DATAPACKAGE_CONFIG"
RESOLVE_BASE_ENV = "DATAPACKAGE_RESOLVE_BASE"


@dataclass(slots=True)
class PackageConfig:
    """Runtime settings for building and serializing resource maps."""

    resolve_base: str = DEFAULT_RESOLVE_BASE
    default_syntax: str = DEFAULT_SYNTAX
    # namespace URI -> prefix, merged with the default table at serialization
    namespaces: Dict[str, str] = field(default_factory=dict)
    logging_enabled: bool = True
    max_details_bytes: int = 4096


def _coerce_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):  # pragma: no cover
        return default


def _load_namespaces(data: Any) -> Dict[str, str]:
    """Accept ``{prefix: uri}`` as written in YAML and return ``{uri: prefix}``."""

    if not data:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError("namespaces must be a mapping of prefix to URI")
    return {str(uri).strip(): str(prefix).strip() for prefix, uri in data.items()}


def config_path() -> Path | None:
    env = os.getenv(CONFIG_ENV)
    if env:
        return Path(env)
    return None


def load_config(path: Path | None = None) -> PackageConfig:
    """Load settings from YAML with safe defaults and environment overrides."""

    if path is None:
        path = config_path()
    raw: Mapping[str, Any] = {}
    if path is not None and path.exists():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    syntax = str(raw.get("default_syntax", DEFAULT_SYNTAX)).strip().lower()
    if syntax not in SYNTAXES:
        raise ValueError(f"unknown default_syntax {syntax!r}")
    logging_cfg = raw.get("logging", {}) or {}
    cfg = PackageConfig(
        resolve_base=str(raw.get("resolve_base", DEFAULT_RESOLVE_BASE)),
        default_syntax=syntax,
        namespaces=_load_namespaces(raw.get("namespaces")),
        logging_enabled=bool(logging_cfg.get("enabled", True)),
        max_details_bytes=max(0, _coerce_int(logging_cfg.get("max_details_bytes"), 4096)),
    )
    env_base = os.getenv(RESOLVE_BASE_ENV)
    if env_base:
        cfg.resolve_base = env_base
    return cfg


__all__ = ["CONFIG_ENV", "RESOLVE_BASE_ENV", "PackageConfig", "config_path", "load_config"]
