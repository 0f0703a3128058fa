"""Playdeck config models and loading helpers."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class DebounceSettings(BaseModel):
    """Keystroke coalescing for expensive search commands."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    quiet_interval_ms: int = Field(default=500, ge=0)


class SearchSettings(BaseModel):
    """Search fan-out configuration."""

    model_config = ConfigDict(extra="forbid")

    artwork_workers: int = Field(default=8, ge=1, le=64)


class PlaydeckConfig(BaseModel):
    """Root Playdeck configuration model."""

    model_config = ConfigDict(extra="forbid")

    service_name: str = "Spotify"
    action_keyword: str = "sp"
    icon_path: str = "icon.png"
    debounce: DebounceSettings = DebounceSettings()
    search: SearchSettings = SearchSettings()


class ConfigError(RuntimeError):
    """Raised when config cannot be decoded or validated."""


def _decode_config_payload(path: Path) -> dict[str, object]:
    """Decode config payload from JSON or YAML.

    Args:
        path: Config file path.

    Returns:
        Parsed mapping payload.

    Raises:
        ConfigError: If decode fails or payload is not an object.
    """
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid config JSON: {exc}") from exc
    else:
        try:
            payload = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid config YAML: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigError("Invalid config payload: root must be an object")
    return payload


def load_config(path: Path) -> PlaydeckConfig:
    """Load Playdeck config from disk, defaulting when missing.

    Args:
        path: Config file path.

    Returns:
        Parsed config payload, or defaults when file does not exist.

    Raises:
        ConfigError: If payload decode or validation fails.
    """
    if not path.exists():
        return PlaydeckConfig()
    payload = _decode_config_payload(path)
    try:
        return PlaydeckConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config payload: {exc}") from exc
