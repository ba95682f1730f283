"""
Wallet variants.

Closed set of four variants; WALLET_VARIANTS maps each WalletType to
its implementation so hosts can dispatch exhaustively.
"""

from typing import Dict, Type, Union

from portefeuille.application.wallets.base_wallet import BaseWallet, SessionGrant
from portefeuille.application.wallets.bridge_wallet import BridgeWallet
from portefeuille.application.wallets.browser_wallet import BrowserWallet
from portefeuille.application.wallets.hardware_wallet import HardwareWallet
from portefeuille.application.wallets.injected_wallet import InjectedWallet
from portefeuille.domain.entities.wallet_metadata import WalletType

Wallet = Union[BrowserWallet, InjectedWallet, HardwareWallet, BridgeWallet]

WALLET_VARIANTS: Dict[WalletType, Type[BaseWallet]] = {
    WalletType.BROWSER: BrowserWallet,
    WalletType.INJECTED: InjectedWallet,
    WalletType.HARDWARE: HardwareWallet,
    WalletType.BRIDGE: BridgeWallet,
}

__all__ = [
    "BaseWallet",
    "SessionGrant",
    "BrowserWallet",
    "InjectedWallet",
    "HardwareWallet",
    "BridgeWallet",
    "Wallet",
    "WALLET_VARIANTS",
]
