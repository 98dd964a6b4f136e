# themekit/utils/config.py
"""
Minimal config loader with caching and environment overrides.

- Reads ./config.yaml if present; a missing file means "all defaults".
- Merges THEMEKIT_* environment overrides (see `schemas.settings`).
- `get_config()` returns a plain dict so callers can do .get(...) safely.
- `load_settings()` returns the validated `ThemeKitSettings` model.
- Exposes reload_config() for tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from themekit.exceptions import ConfigurationError
from themekit.schemas.config import ThemeKitSettings
from themekit.schemas.settings import EnvOverrides

CONFIG_FILE = "config.yaml"

_CONFIG_CACHE: Dict[str, Any] | None = None


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping at the top level.")
    return data


def _apply_env_overrides(cfg: Dict[str, Any]) -> Dict[str, Any]:
    try:
        env = EnvOverrides()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid THEMEKIT_* environment override: {e}") from e

    if env.log_level:
        logging_cfg = dict(cfg.get("logging") or {})
        logging_cfg["level"] = env.log_level
        cfg["logging"] = logging_cfg
    if env.templates_dir:
        templates_cfg = dict(cfg.get("templates") or {})
        templates_cfg["dir"] = env.templates_dir
        cfg["templates"] = templates_cfg
    return cfg


def get_config() -> Dict[str, Any]:
    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    cfg = _read_yaml(Path(CONFIG_FILE))
    cfg = _apply_env_overrides(cfg)
    _CONFIG_CACHE = cfg
    return _CONFIG_CACHE


def reload_config() -> Dict[str, Any]:
    """Clear cache and reload (primarily for tests)."""
    global _CONFIG_CACHE
    _CONFIG_CACHE = None
    return get_config()


def load_settings() -> ThemeKitSettings:
    """Validates the merged configuration into a `ThemeKitSettings` model.

    :raises ConfigurationError: If a section has the wrong shape or an invalid value.
    """
    try:
        return ThemeKitSettings.model_validate(get_config())
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {CONFIG_FILE}: {e}") from e
