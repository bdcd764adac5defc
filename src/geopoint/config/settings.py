# src/geopoint/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/geopoint/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `GEOPOINT_CONFIG_PATH`
- environment variables (e.g., `GEOPOINT_LOG_LEVEL`)

Distance constants and the binary record layout are fixed contracts and are
deliberately absent here.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `geopoint.config`."""
    text = resources.files("geopoint.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "geopoint"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}:
            raise ValueError(f"Unknown log level: {value!r}")
        return level


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    data = dict(data)
    log_level = os.getenv("GEOPOINT_LOG_LEVEL")
    if log_level:
        data["app"] = {**data.get("app", {}), "log_level": log_level}
    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    config_path = os.getenv("GEOPOINT_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
