"""
Injected wallet extension interface.

Models a wallet object injected into the host environment by a
browser extension or native app.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Sequence

from portefeuille.domain.entities.account_state import AccountState
from portefeuille.domain.value_objects.transaction import Transaction

Unsubscribe = Callable[[], None]


class IInjectedExtension(ABC):
    """Abstract injected wallet extension."""

    @abstractmethod
    def is_installed(self) -> bool:
        """Check if the extension is present (no side effects)."""

    @abstractmethod
    async def get_accounts(self) -> List[AccountState]:
        """Return accounts of an already authorized session (may be empty)."""

    @abstractmethod
    async def request_sign_in(
        self,
        contract_id: str,
        method_names: Sequence[str],
    ) -> List[AccountState]:
        """
        Ask the user to authorize the host.

        Raises:
            RequestRejectedError: If the user declines
        """

    @abstractmethod
    async def sign_out(self) -> None:
        """Revoke the extension session."""

    @abstractmethod
    async def sign_transaction(self, transaction: Transaction) -> bytes:
        """
        Ask the user to sign a resolved transaction.

        Returns:
            Signature bytes

        Raises:
            RequestRejectedError: If the user declines
        """

    @abstractmethod
    def on(self, event: str, listener: Callable[..., None]) -> Unsubscribe:
        """
        Subscribe to extension notifications.

        Events: 'accountsChanged' (accounts), 'networkChanged',
        'signedOut', 'uninstalled'.

        Returns:
            Callable that removes the listener
        """
