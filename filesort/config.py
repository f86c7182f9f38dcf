"""Load ~/.filesort.config (TOML) with env-var overrides."""
from __future__ import annotations
import os
try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]  # Python < 3.11 backport
from pathlib import Path
from typing import Any, Mapping

from filesort.registry import build_registry

_DEFAULT: dict[str, Any] = {
    "server": {
        "url": "http://localhost:8766",
    },
    "cli": {
        "progress": True,
    },
    # Extra extension → category mappings layered over the built-in table
    "categories": {},
}


def _deep_merge(base: dict, override: dict) -> dict:
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def config_path() -> Path:
    # FILESORT_CONFIG_PATH wins over ~/.filesort.config
    if "FILESORT_CONFIG_PATH" in os.environ:
        return Path(os.environ["FILESORT_CONFIG_PATH"])
    return Path.home() / ".filesort.config"


def load_config() -> dict[str, Any]:
    cfg = dict(_DEFAULT)
    for section in cfg:
        cfg[section] = dict(cfg[section])

    path = config_path()
    if path.exists():
        with open(path, "rb") as f:
            user_cfg = tomllib.load(f)
        cfg = _deep_merge(cfg, user_cfg)

    # Env var overrides
    if url := os.environ.get("FILESORT_SERVER"):
        cfg["server"]["url"] = url

    return cfg


# Module-level singleton — loaded once per process
_config: dict[str, Any] | None = None
_registry: Mapping[str, str] | None = None


def get_config() -> dict[str, Any]:
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_server_url() -> str:
    return get_config()["server"]["url"]


def get_cli_config() -> dict[str, Any]:
    return get_config()["cli"]


def get_registry() -> Mapping[str, str]:
    """Effective extension registry: built-ins plus the [categories] section."""
    global _registry
    if _registry is None:
        _registry = build_registry(get_config().get("categories") or {})
    return _registry
