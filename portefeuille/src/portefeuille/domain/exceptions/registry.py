"""
Wallet registry exceptions.
"""

from portefeuille.domain.exceptions.base import PortefeuilleException


class DuplicateWalletError(PortefeuilleException):
    """Raised when a wallet module id is registered twice."""

    def __init__(self, wallet_id: str):
        super().__init__(
            f"Wallet module with id {wallet_id} already registered",
            code="DUPLICATE_WALLET",
        )
        self.wallet_id = wallet_id


class WalletNotFoundError(PortefeuilleException):
    """Raised when no module is registered under the requested id."""

    def __init__(self, wallet_id: str):
        super().__init__(
            f"Wallet module with id {wallet_id} not found",
            code="WALLET_NOT_FOUND",
        )
        self.wallet_id = wallet_id
