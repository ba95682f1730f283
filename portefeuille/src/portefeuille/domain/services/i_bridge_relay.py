"""
Bridge relay interface.

A relay carries requests to a companion app (e.g. a mobile wallet
paired over a relay server) and returns its answers.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, List, Sequence

from portefeuille.domain.entities.account_state import AccountState
from portefeuille.domain.value_objects.transaction import Transaction

Unsubscribe = Callable[[], None]


@dataclass(frozen=True)
class RelaySession:
    """
    Result of a relay session request.

    Attributes:
        topic: Relay session identifier
        accounts: Accounts approved so far (empty while pending)
        pending: Companion app has not approved yet
    """

    topic: str
    accounts: List[AccountState] = field(default_factory=list)
    pending: bool = False


class IBridgeRelay(ABC):
    """Abstract relay to a companion signing app."""

    @abstractmethod
    def is_reachable(self) -> bool:
        """Check relay configuration without network I/O."""

    @abstractmethod
    async def restore_session(self, topic: str) -> List[AccountState]:
        """Return accounts of a previously approved session (empty if expired)."""

    @abstractmethod
    async def request_session(
        self,
        network_id: str,
        contract_id: str,
        method_names: Sequence[str],
    ) -> RelaySession:
        """
        Open a session with the companion app.

        Raises:
            RequestRejectedError: If the companion app declines
            SignerUnavailableError: If the relay cannot be reached
        """

    @abstractmethod
    async def request_signature(self, topic: str, transaction: Transaction) -> bytes:
        """
        Have the companion app sign a resolved transaction.

        Raises:
            RequestRejectedError: If the companion app declines
        """

    @abstractmethod
    async def close_session(self, topic: str) -> None:
        """Terminate the relay session."""

    @abstractmethod
    def on(self, event: str, listener: Callable[..., None]) -> Unsubscribe:
        """
        Subscribe to relay notifications.

        Events: 'sessionApproved' (accounts), 'accountsChanged'
        (accounts), 'sessionDeleted'.
        """
