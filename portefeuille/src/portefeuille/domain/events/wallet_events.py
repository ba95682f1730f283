"""
Wallet lifecycle event schemas.

Events emitted by every wallet variant as it moves through
init -> connect -> disconnect (and uninstalled).
"""

from enum import Enum
from typing import List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from portefeuille.domain.entities.account_state import AccountState
from portefeuille.domain.events.base import BaseEvent


class WalletEventType(str, Enum):
    """Event names published on the emitter."""

    INIT = "init"
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
    ACCOUNTS_CHANGED = "accountsChanged"
    NETWORK_CHANGED = "networkChanged"
    UNINSTALLED = "uninstalled"


class InitData(BaseModel):
    """Data schema for init event."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    accounts: List[AccountState] = Field(
        default_factory=list,
        description="Accounts restored from the persisted session",
    )


class ConnectedData(BaseModel):
    """Data schema for connected event."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    pending: bool = Field(
        default=False,
        description="Authorization awaits external confirmation",
    )
    accounts: List[AccountState] = Field(default_factory=list)


class AccountsChangedData(BaseModel):
    """Data schema for accountsChanged event."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    accounts: List[AccountState] = Field(...)


class InitEvent(BaseEvent):
    """Wallet initialized (session possibly restored)."""

    type: Literal["init"] = "init"
    data: InitData = Field(default_factory=InitData)


class ConnectedEvent(BaseEvent):
    """Wallet session established (or pending confirmation)."""

    type: Literal["connected"] = "connected"
    data: ConnectedData = Field(default_factory=ConnectedData)


class DisconnectedEvent(BaseEvent):
    """Wallet session ended."""

    type: Literal["disconnected"] = "disconnected"
    data: None = None


class AccountsChangedEvent(BaseEvent):
    """Account set changed while connected."""

    type: Literal["accountsChanged"] = "accountsChanged"
    data: AccountsChangedData


class NetworkChangedEvent(BaseEvent):
    """Wallet switched network."""

    type: Literal["networkChanged"] = "networkChanged"
    data: None = None


class UninstalledEvent(BaseEvent):
    """Wallet software removed; terminal."""

    type: Literal["uninstalled"] = "uninstalled"
    data: None = None


WalletEvent = Union[
    InitEvent,
    ConnectedEvent,
    DisconnectedEvent,
    AccountsChangedEvent,
    NetworkChangedEvent,
    UninstalledEvent,
]
