"""Domain service interfaces."""

from portefeuille.domain.services.i_bridge_relay import IBridgeRelay, RelaySession
from portefeuille.domain.services.i_browser_navigator import IBrowserNavigator
from portefeuille.domain.services.i_hardware_device import IHardwareDevice
from portefeuille.domain.services.i_injected_extension import IInjectedExtension
from portefeuille.domain.services.i_persistent_storage import IPersistentStorage
from portefeuille.domain.services.i_provider import IProvider
from portefeuille.domain.services.i_wallet_behaviour import (
    IBridgeWalletBehaviour,
    IBrowserWalletBehaviour,
    IHardwareWalletBehaviour,
    IInjectedWalletBehaviour,
    IWalletBehaviour,
)

__all__ = [
    "IProvider",
    "IPersistentStorage",
    "IHardwareDevice",
    "IInjectedExtension",
    "IBridgeRelay",
    "RelaySession",
    "IBrowserNavigator",
    "IWalletBehaviour",
    "IBrowserWalletBehaviour",
    "IInjectedWalletBehaviour",
    "IHardwareWalletBehaviour",
    "IBridgeWalletBehaviour",
]
