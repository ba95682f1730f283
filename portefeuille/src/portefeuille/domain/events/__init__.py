"""
Wallet event schemas.

All events inherit from BaseEvent and follow the schema structure.
"""

from portefeuille.domain.events.base import BaseEvent, EventMetadata
from portefeuille.domain.events.wallet_events import (
    AccountsChangedData,
    AccountsChangedEvent,
    ConnectedData,
    ConnectedEvent,
    DisconnectedEvent,
    InitData,
    InitEvent,
    NetworkChangedEvent,
    UninstalledEvent,
    WalletEvent,
    WalletEventType,
)

__all__ = [
    # Base
    "BaseEvent",
    "EventMetadata",
    "WalletEvent",
    "WalletEventType",
    # Lifecycle
    "InitEvent",
    "InitData",
    "ConnectedEvent",
    "ConnectedData",
    "DisconnectedEvent",
    "AccountsChangedEvent",
    "AccountsChangedData",
    "NetworkChangedEvent",
    "UninstalledEvent",
]
