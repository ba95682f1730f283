"""
Portefeuille configuration with hybrid YAML + ENV support.

Network options handed to every wallet through WalletOptions.

Priority: Environment variables > YAML config > Pydantic defaults
"""

import os
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Endpoints used when a network is selected without explicit URLs
NETWORK_PRESETS: Dict[str, Dict[str, str]] = {
    "mainnet": {
        "node_url": "https://rpc.mainnet.near.org",
        "wallet_url": "https://app.mynearwallet.com",
        "helper_url": "https://helper.mainnet.near.org",
        "explorer_url": "https://nearblocks.io",
    },
    "testnet": {
        "node_url": "https://rpc.testnet.near.org",
        "wallet_url": "https://testnet.mynearwallet.com",
        "helper_url": "https://helper.testnet.near.org",
        "explorer_url": "https://testnet.nearblocks.io",
    },
    "betanet": {
        "node_url": "https://rpc.betanet.near.org",
        "wallet_url": "https://wallet.betanet.near.org",
        "helper_url": "https://helper.betanet.near.org",
        "explorer_url": "https://explorer.betanet.near.org",
    },
    "localnet": {
        "node_url": "http://127.0.0.1:3030",
        "wallet_url": "http://127.0.0.1:4000",
        "helper_url": "http://127.0.0.1:3000",
        "explorer_url": "http://127.0.0.1:9001",
    },
}


class NetworkOptions(BaseSettings):
    """
    Network and application configuration schema.

    Immutable once built; shared by all wallets created from the same
    WalletOptions.
    """

    model_config = SettingsConfigDict(
        env_prefix="PORTEFEUILLE_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Network
    network_id: str = Field(default="testnet")
    node_url: Optional[str] = Field(default=None)
    wallet_url: Optional[str] = Field(default=None)
    helper_url: Optional[str] = Field(default=None)
    explorer_url: Optional[str] = Field(default=None)

    # Application
    contract_id: Optional[str] = Field(
        default=None,
        description="Default receiver and sign-in contract",
    )
    method_names: List[str] = Field(default_factory=list)

    # Storage
    storage_prefix: str = Field(default="portefeuille")

    # Provider
    rpc_timeout: float = Field(default=10.0, ge=1.0, le=120.0)

    # Logging
    log_level: str = Field(default="info")
    log_dir: Optional[str] = Field(default=None)
    debug: bool = Field(default=False)

    @field_validator("network_id")
    @classmethod
    def validate_network(cls, v: str) -> str:
        """Validate network id."""
        allowed = list(NETWORK_PRESETS.keys())
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid network_id. Must be one of: {allowed}")
        return v_lower

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["debug", "info", "warning", "error", "critical"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid log_level. Must be one of: {allowed}")
        return v_lower

    @model_validator(mode="before")
    @classmethod
    def apply_network_presets(cls, data):
        """Fill unset endpoint URLs from the selected network preset."""
        if not isinstance(data, dict):
            return data

        network = str(data.get("network_id") or "testnet").lower()
        preset = NETWORK_PRESETS.get(network, {})
        for key, url in preset.items():
            if not data.get(key):
                data[key] = url
        return data

    def storage_key(self, wallet_id: str, name: str) -> str:
        """Build namespaced storage key for a wallet."""
        return f"{self.storage_prefix}:{wallet_id}:{name}"


def load_config(
    config_file: Optional[str] = None,
    config_dir: Optional[Path] = None,
) -> NetworkOptions:
    """
    Load configuration from YAML files.

    Priority: Environment variables > environment-specific YAML > default YAML

    Args:
        config_file: Optional YAML filename override
        config_dir: Optional directory holding the YAML files

    Returns:
        NetworkOptions instance
    """
    env = os.getenv("ENV", "production")

    config_map = {
        "production": "production.yaml",
        "development": "development.yaml",
        "test": "test.yaml",
    }

    if config_dir is None:
        current_file = Path(__file__).resolve()
        project_root = current_file.parent.parent.parent.parent
        config_dir = project_root / "config"

    default_config_path = config_dir / "default.yaml"
    merged_config = {}

    if default_config_path.exists():
        with open(default_config_path, "r") as f:
            loaded = yaml.safe_load(f)
            if loaded:
                merged_config = loaded

    if config_file is None:
        config_file = os.getenv("PORTEFEUILLE_CONFIG")
        if not config_file:
            config_file = config_map.get(env, "production.yaml")

    env_config_path = config_dir / config_file

    if env_config_path.exists():
        with open(env_config_path, "r") as f:
            loaded = yaml.safe_load(f)
            if loaded:
                merged_config.update(loaded)

    # Environment variables override YAML values
    for field_name in NetworkOptions.model_fields:
        if os.getenv(f"PORTEFEUILLE_{field_name.upper()}") is not None:
            merged_config.pop(field_name, None)

    return NetworkOptions(**merged_config)


# Global settings instance
_settings: Optional[NetworkOptions] = None


def get_settings() -> NetworkOptions:
    """
    Get singleton settings instance.

    Returns:
        NetworkOptions instance
    """
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings (used by tests)."""
    global _settings
    _settings = None
