"""
Wallet contract exceptions.

Every wallet variant maps its internal failures onto these kinds.
Provider (transport) errors are not part of this hierarchy and are
propagated to the caller unwrapped.
"""

from typing import Optional

from portefeuille.domain.exceptions.base import PortefeuilleException


class WalletError(PortefeuilleException):
    """Base exception for wallet lifecycle and signing failures."""

    def __init__(
        self,
        message: str,
        wallet_id: Optional[str] = None,
        code: Optional[str] = None,
    ):
        """
        Initialize wallet error.

        Args:
            message: Error message
            wallet_id: Id of the wallet that raised the error
            code: Optional machine-readable error code
        """
        super().__init__(message, code=code)
        self.wallet_id = wallet_id


class InitializationError(WalletError):
    """Raised when the SDK, extension or device cannot be prepared."""

    def __init__(self, message: str, wallet_id: Optional[str] = None):
        super().__init__(message, wallet_id, code="INITIALIZATION_FAILED")


class UnavailableError(WalletError):
    """Raised when the wallet became unavailable between probe and use."""

    def __init__(self, message: str, wallet_id: Optional[str] = None):
        super().__init__(message, wallet_id, code="WALLET_UNAVAILABLE")


class ConnectionRejectedError(WalletError):
    """Raised when the user or device declines authorization."""

    def __init__(self, message: str, wallet_id: Optional[str] = None):
        super().__init__(message, wallet_id, code="CONNECTION_REJECTED")


class NotConnectedError(WalletError):
    """Raised when signing is requested without an active session."""

    def __init__(self, message: str, wallet_id: Optional[str] = None):
        super().__init__(message, wallet_id, code="NOT_CONNECTED")


class SigningRejectedError(WalletError):
    """Raised when the user or device declines a specific transaction."""

    def __init__(
        self,
        message: str,
        wallet_id: Optional[str] = None,
        transaction_index: Optional[int] = None,
    ):
        """
        Initialize signing rejected error.

        Args:
            message: Error message
            wallet_id: Id of the wallet that raised the error
            transaction_index: Position of the rejected transaction in a batch
        """
        super().__init__(message, wallet_id, code="SIGNING_REJECTED")
        self.transaction_index = transaction_index


class BusyError(WalletError):
    """Raised when a conflicting operation is already in flight."""

    def __init__(self, operation: str, wallet_id: Optional[str] = None):
        super().__init__(
            f"Cannot run {operation}: another operation is in progress",
            wallet_id,
            code="WALLET_BUSY",
        )
        self.operation = operation
