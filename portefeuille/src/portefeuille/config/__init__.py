"""Configuration package."""

from portefeuille.config.settings import (
    NETWORK_PRESETS,
    NetworkOptions,
    get_settings,
    load_config,
    reset_settings,
)

__all__ = [
    "NETWORK_PRESETS",
    "NetworkOptions",
    "get_settings",
    "load_config",
    "reset_settings",
]
