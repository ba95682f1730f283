"""
Portefeuille - Wallet capability layer for NEAR dApps

Uniform behaviour contract over browser, injected, hardware and bridge
wallets, with a registry hosts use to list and build them.
"""

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
from portefeuille.config import NetworkOptions, get_settings
from portefeuille.domain.entities import AccountState, WalletMetadata, WalletType
from portefeuille.domain.value_objects import WalletState

__version__ = "0.1.0"
__all__ = [
    "WalletModule",
    "WalletOptions",
    "WalletRegistry",
    "WALLET_VARIANTS",
    "BrowserWallet",
    "InjectedWallet",
    "HardwareWallet",
    "BridgeWallet",
    "NetworkOptions",
    "get_settings",
    "AccountState",
    "WalletMetadata",
    "WalletType",
    "WalletState",
]
