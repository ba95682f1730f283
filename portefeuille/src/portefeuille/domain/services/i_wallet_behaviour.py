"""
Wallet behaviour contract.

Every wallet variant (browser, injected, hardware, bridge) implements
this interface. Operations that may involve user interaction, device
I/O or network RPC are coroutines; availability probes are synchronous.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from portefeuille.domain.entities.account_state import AccountState
from portefeuille.domain.entities.wallet_metadata import WalletMetadata, WalletType
from portefeuille.domain.value_objects.params import (
    HardwareWalletConnectParams,
    SignAndSendTransactionParams,
    SignAndSendTransactionsParams,
)
from portefeuille.domain.value_objects.transaction import ExecutionOutcome
from portefeuille.domain.value_objects.wallet_state import WalletState


class IWalletBehaviour(ABC):
    """
    Abstract wallet shared by all variants.

    Lifecycle: init -> connect -> sign/send* -> disconnect.
    """

    type: WalletType

    @property
    @abstractmethod
    def metadata(self) -> WalletMetadata:
        """Static description of this wallet."""

    @property
    @abstractmethod
    def state(self) -> WalletState:
        """Current lifecycle state."""

    @abstractmethod
    async def init(self) -> None:
        """
        Prepare SDK/extension/device support and restore a persisted session.

        Raises:
            InitializationError: If preparation fails
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this wallet can be offered right now (pure, never raises)."""

    @abstractmethod
    async def connect(self, params: Optional[object] = None) -> None:
        """
        Request user authorization and open a session.

        Raises:
            ConnectionRejectedError: If the user or device declines
            UnavailableError: If the wallet disappeared mid-flow
            BusyError: If another operation is in flight
        """

    @abstractmethod
    async def disconnect(self) -> None:
        """Tear down the session. Never raises; no-op when not connected."""

    @abstractmethod
    async def get_accounts(self) -> List[AccountState]:
        """Accounts of the current session (empty when disconnected)."""

    @abstractmethod
    async def sign_and_send_transaction(
        self,
        params: SignAndSendTransactionParams,
    ) -> Optional[ExecutionOutcome]:
        """
        Sign actions and broadcast them as one transaction.

        Raises:
            NotConnectedError: If there is no active session
            SigningRejectedError: If the user or device declines
            BusyError: If another operation is in flight
            ProviderError: Transport errors, unwrapped
        """

    @abstractmethod
    async def sign_and_send_transactions(
        self,
        params: SignAndSendTransactionsParams,
    ) -> Optional[List[ExecutionOutcome]]:
        """
        Sign and broadcast transactions in the given order.

        Stops at the first failure; transactions after it are not sent.
        """


class IBrowserWalletBehaviour(IWalletBehaviour):
    """Redirect wallet: signing leaves the current page and returns None."""

    type = WalletType.BROWSER

    @abstractmethod
    async def sign_and_send_transaction(
        self,
        params: SignAndSendTransactionParams,
    ) -> None:
        """Redirect to the wallet site with the transaction."""

    @abstractmethod
    async def sign_and_send_transactions(
        self,
        params: SignAndSendTransactionsParams,
    ) -> None:
        """Redirect to the wallet site with all transactions, in order."""


class IInjectedWalletBehaviour(IWalletBehaviour):
    """Extension wallet: adds an install URL for when it is missing."""

    type = WalletType.INJECTED

    @abstractmethod
    def get_download_url(self) -> str:
        """Install URL for the extension (always non-empty)."""


class IHardwareWalletBehaviour(IWalletBehaviour):
    """Device wallet: connect needs an account id and a derivation path."""

    type = WalletType.HARDWARE

    @abstractmethod
    async def connect(self, params: HardwareWalletConnectParams) -> None:
        """Handshake with the device and read the account public key."""


class IBridgeWalletBehaviour(IWalletBehaviour):
    """Relay wallet: signing happens in a companion app."""

    type = WalletType.BRIDGE
