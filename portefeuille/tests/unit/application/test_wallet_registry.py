"""
Unit tests for WalletModule, WalletRegistry and WalletOptions.

Usage:
    pytest portefeuille/tests/unit/application/test_wallet_registry.py
"""

import pytest

from helpers import (
    FakeBridgeRelay,
    FakeBrowserNavigator,
    FakeHardwareDevice,
    FakeInjectedExtension,
    make_metadata,
)
from portefeuille.application.wallet_module import WalletModule
from portefeuille.application.wallet_options import WalletOptions
from portefeuille.application.wallet_registry import WalletRegistry
from portefeuille.application.wallets import (
    WALLET_VARIANTS,
    BridgeWallet,
    BrowserWallet,
    HardwareWallet,
    InjectedWallet,
)
from portefeuille.domain.entities import WalletType
from portefeuille.domain.exceptions import DuplicateWalletError, WalletNotFoundError
from portefeuille.domain.value_objects import WalletState
from portefeuille.infrastructure.events import EventEmitter
from portefeuille.infrastructure.providers import JsonRpcProvider
from portefeuille.infrastructure.storage import InMemoryStorage

DOWNLOAD_URL = "https://wallet.example/download"


class TestWalletModule:
    """Unit tests for WalletModule."""

    def test_exposes_metadata(self):
        metadata = make_metadata(WalletType.HARDWARE, "ledger")
        module = HardwareWallet.module(metadata, device=FakeHardwareDevice())

        assert module.id == "ledger"
        assert module.name == "Ledger"
        assert module.type is WalletType.HARDWARE
        assert module.icon_url.endswith("ledger.svg")
        assert module.description == "Test hardware wallet"

    def test_wallet_is_pure_construction(self, wallet_options):
        device = FakeHardwareDevice()
        module = HardwareWallet.module(make_metadata(WalletType.HARDWARE), device=device)

        wallet = module.wallet(wallet_options)

        assert isinstance(wallet, HardwareWallet)
        assert wallet.state is WalletState.UNINITIALIZED
        assert device.interactions == []

    def test_factory_type_mismatch(self, wallet_options):
        injected = InjectedWallet.module(
            make_metadata(WalletType.INJECTED),
            extension=FakeInjectedExtension(),
            download_url=DOWNLOAD_URL,
        )
        module = WalletModule(
            make_metadata(WalletType.BRIDGE),
            lambda metadata, options: injected.wallet(options),
        )

        with pytest.raises(TypeError):
            module.wallet(wallet_options)

    def test_factory_returns_non_wallet(self, wallet_options):
        module = WalletModule(
            make_metadata(WalletType.BRIDGE),
            lambda metadata, options: object(),
        )

        with pytest.raises(TypeError):
            module.wallet(wallet_options)

    def test_variants_cover_every_type(self):
        assert set(WALLET_VARIANTS) == set(WalletType)
        for wallet_type, cls in WALLET_VARIANTS.items():
            assert cls.type is wallet_type


class TestWalletRegistry:
    """Unit tests for WalletRegistry."""

    # ================================================================
    # Helper Methods
    # ================================================================

    def _registry(self, installed: bool = False) -> WalletRegistry:
        registry = WalletRegistry(reporter=self.reporter)
        registry.register(
            BrowserWallet.module(
                make_metadata(WalletType.BROWSER), navigator=FakeBrowserNavigator()
            )
        )
        registry.register(
            InjectedWallet.module(
                make_metadata(WalletType.INJECTED),
                extension=FakeInjectedExtension(installed=installed),
                download_url=DOWNLOAD_URL,
            )
        )
        registry.register(
            HardwareWallet.module(
                make_metadata(WalletType.HARDWARE), device=FakeHardwareDevice()
            )
        )
        registry.register(
            BridgeWallet.module(make_metadata(WalletType.BRIDGE), relay=FakeBridgeRelay())
        )
        return registry

    # ================================================================
    # Test Methods
    # ================================================================

    def test_register_and_get(self):
        registry = self._registry()

        assert len(registry) == 4
        assert "hardware-wallet" in registry
        assert registry.get("bridge-wallet").type is WalletType.BRIDGE

    def test_duplicate_id(self):
        registry = self._registry()

        with pytest.raises(DuplicateWalletError):
            registry.register(
                HardwareWallet.module(
                    make_metadata(WalletType.HARDWARE), device=FakeHardwareDevice()
                )
            )

    def test_unknown_id(self):
        with pytest.raises(WalletNotFoundError):
            self._registry().get("trezor")

    def test_unregister(self):
        registry = self._registry()

        module = registry.unregister("bridge-wallet")

        assert module.id == "bridge-wallet"
        assert "bridge-wallet" not in registry

    def test_list_modules_in_order(self):
        registry = self._registry()

        assert [m.id for m in registry.list_modules()] == [
            "browser-wallet",
            "injected-wallet",
            "hardware-wallet",
            "bridge-wallet",
        ]
        assert [m.id for m in registry.list_modules(WalletType.INJECTED)] == [
            "injected-wallet"
        ]

    def test_build(self, wallet_options):
        wallet = self._registry().build("bridge-wallet", wallet_options)

        assert isinstance(wallet, BridgeWallet)

    def test_build_available_skips_missing_extension(self, wallet_options):
        wallets = self._registry(installed=False).build_available(wallet_options)

        assert [w.id for w in wallets] == [
            "browser-wallet",
            "hardware-wallet",
            "bridge-wallet",
        ]

    def test_build_available_with_extension(self, wallet_options):
        wallets = self._registry(installed=True).build_available(wallet_options)

        assert len(wallets) == 4


class TestWalletOptions:
    """Unit tests for WalletOptions.build."""

    def test_defaults(self, monkeypatch):
        monkeypatch.setenv("ENV", "test")

        options = WalletOptions.build()

        assert options.options.network_id == "localnet"
        assert isinstance(options.provider, JsonRpcProvider)
        assert options.provider.node_url == options.options.node_url
        assert options.provider.timeout == 2.0
        assert isinstance(options.emitter, EventEmitter)
        assert isinstance(options.storage, InMemoryStorage)

    def test_given_collaborators_kept(self, network_options, provider, reporter):
        emitter = EventEmitter()

        options = WalletOptions.build(
            options=network_options,
            provider=provider,
            emitter=emitter,
            logger=reporter,
        )

        assert options.provider is provider
        assert options.emitter is emitter
        assert options.logger is reporter

    def test_is_frozen(self, wallet_options):
        with pytest.raises(AttributeError):
            wallet_options.storage = None
