"""Playdeck configuration loading."""

from playdeck.config.settings import (
    ConfigError,
    DebounceSettings,
    PlaydeckConfig,
    SearchSettings,
    load_config,
)

__all__ = [
    "ConfigError",
    "DebounceSettings",
    "PlaydeckConfig",
    "SearchSettings",
    "load_config",
]
