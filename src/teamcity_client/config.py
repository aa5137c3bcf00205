# -*- coding: utf-8 -*-
"""Settings persistence and validation."""

from __future__ import annotations

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any

from teamcity_client.constants import DEFAULT_SETTINGS_FILE
from teamcity_client.utils.file_utils import read_env_file, read_json_object, write_json_object


DEFAULT_CONFIG: dict[str, Any] = {
    "workers": {"max_workers": 4},
    "logging": {"level": "INFO", "log_dir": "logs", "session_file": True},
    "timeouts": {"idle_wait_seconds": 30.0},
}

ENV_OVERRIDES = {
    "TEAMCITY_CLIENT_MAX_WORKERS": ("workers", "max_workers", int),
    "TEAMCITY_CLIENT_LOG_LEVEL": ("logging", "level", str),
    "TEAMCITY_CLIENT_LOG_DIR": ("logging", "log_dir", str),
}

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class ConfigError(ValueError):
    """Raised when settings are invalid."""


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default config."""
    return deepcopy(DEFAULT_CONFIG)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _apply_env_overrides(config: dict[str, Any], env_values: dict[str, str]) -> dict[str, Any]:
    """Apply environment-based overrides to runtime config."""
    merged = deepcopy(config)
    for env_name, (section, key, cast) in ENV_OVERRIDES.items():
        raw = env_values.get(env_name, "").strip()
        if not raw:
            continue
        try:
            value = cast(raw)
        except ValueError as exc:
            raise ConfigError(f"{env_name} has an invalid value: {raw!r}") from exc
        merged.setdefault(section, {})
        merged[section][key] = value
    return merged


def validate_config(config: dict[str, Any]) -> None:
    """Validate the fields used to build the model."""
    max_workers = config.get("workers", {}).get("max_workers")
    if isinstance(max_workers, bool) or not isinstance(max_workers, int) or not (1 <= max_workers <= 32):
        raise ConfigError("workers.max_workers must be an int in range 1..32")

    level = config.get("logging", {}).get("level")
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of {sorted(LOG_LEVELS)}")

    log_dir = config.get("logging", {}).get("log_dir")
    if not isinstance(log_dir, str) or not log_dir.strip():
        raise ConfigError("logging.log_dir must be a non-empty path")

    if not isinstance(config.get("logging", {}).get("session_file"), bool):
        raise ConfigError("logging.session_file must be a boolean")

    idle_wait = config.get("timeouts", {}).get("idle_wait_seconds")
    if isinstance(idle_wait, bool) or not isinstance(idle_wait, (int, float)) or idle_wait <= 0:
        raise ConfigError("timeouts.idle_wait_seconds must be a positive number")


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config from JSON, merge into defaults and apply .env overrides."""
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    env_values = read_env_file(config_path.parent / ".env")
    if config_path.exists():
        try:
            stored = read_json_object(config_path)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
        merged = _deep_merge(get_default_config(), stored)
    else:
        logging.getLogger(__name__).debug("No settings file at %s, using defaults", config_path)
        merged = get_default_config()
    merged = _apply_env_overrides(merged, env_values)
    validate_config(merged)
    return merged


def save_config(config: dict[str, Any], path: str | Path | None = None) -> Path:
    """Validate and save config as JSON."""
    validate_config(config)
    return write_json_object(Path(path or DEFAULT_SETTINGS_FILE), config)
