"""
Unit tests for NetworkOptions and configuration loading.

Usage:
    pytest portefeuille/tests/unit/infrastructure/test_settings.py
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from portefeuille.config.settings import (
    NETWORK_PRESETS,
    NetworkOptions,
    get_settings,
    load_config,
)


class TestNetworkOptions:
    """Unit tests for NetworkOptions."""

    def test_presets_fill_urls(self):
        options = NetworkOptions(network_id="mainnet")

        assert options.node_url == NETWORK_PRESETS["mainnet"]["node_url"]
        assert options.wallet_url == NETWORK_PRESETS["mainnet"]["wallet_url"]

    def test_explicit_url_wins(self):
        options = NetworkOptions(network_id="testnet", node_url="http://node:3030")

        assert options.node_url == "http://node:3030"
        assert options.helper_url == NETWORK_PRESETS["testnet"]["helper_url"]

    def test_network_is_normalized(self):
        assert NetworkOptions(network_id="TestNet").network_id == "testnet"

    def test_invalid_network(self):
        with pytest.raises(PydanticValidationError):
            NetworkOptions(network_id="devnet")

    def test_invalid_log_level(self):
        with pytest.raises(PydanticValidationError):
            NetworkOptions(log_level="loud")

    def test_frozen(self):
        options = NetworkOptions()

        with pytest.raises(PydanticValidationError):
            options.contract_id = "other.near"

    def test_storage_key(self):
        options = NetworkOptions(storage_prefix="app")

        assert options.storage_key("ledger", "session") == "app:ledger:session"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("PORTEFEUILLE_CONTRACT_ID", "env.near")

        assert NetworkOptions().contract_id == "env.near"


class TestLoadConfig:
    """Unit tests for YAML configuration loading."""

    def _write(self, directory, name, content):
        (directory / name).write_text(content, encoding="utf-8")

    def test_merges_default_and_env_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ENV", "development")
        self._write(tmp_path, "default.yaml", "network_id: testnet\nrpc_timeout: 5\n")
        self._write(tmp_path, "development.yaml", "contract_id: dev.testnet\n")

        options = load_config(config_dir=tmp_path)

        assert options.network_id == "testnet"
        assert options.rpc_timeout == 5
        assert options.contract_id == "dev.testnet"

    def test_env_vars_override_yaml(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ENV", "production")
        monkeypatch.setenv("PORTEFEUILLE_CONTRACT_ID", "env.near")
        self._write(tmp_path, "production.yaml", "contract_id: yaml.near\n")

        options = load_config(config_dir=tmp_path)

        assert options.contract_id == "env.near"

    def test_explicit_config_file(self, tmp_path):
        self._write(tmp_path, "custom.yaml", "network_id: localnet\n")

        options = load_config(config_file="custom.yaml", config_dir=tmp_path)

        assert options.network_id == "localnet"
        assert options.node_url == NETWORK_PRESETS["localnet"]["node_url"]

    def test_bundled_test_config(self, monkeypatch):
        monkeypatch.setenv("ENV", "test")

        options = get_settings()

        assert options.network_id == "localnet"
        assert options.contract_id == "guest-book.test.near"
        assert get_settings() is options
