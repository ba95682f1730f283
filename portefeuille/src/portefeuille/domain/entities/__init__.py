"""Domain entities."""

from portefeuille.domain.entities.account_state import AccountState
from portefeuille.domain.entities.wallet_metadata import WalletMetadata, WalletType

__all__ = [
    "AccountState",
    "WalletMetadata",
    "WalletType",
]
