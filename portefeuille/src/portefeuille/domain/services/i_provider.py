"""
RPC provider interface.

Defines how signed transactions reach the ledger.
"""

from abc import ABC, abstractmethod

from portefeuille.domain.value_objects.transaction import (
    ExecutionOutcome,
    SignedTransaction,
)


class IProvider(ABC):
    """
    Abstract interface for the ledger RPC transport.

    Retry and backoff policy, if any, belongs to implementations.
    Wallets propagate provider errors without wrapping them.
    """

    @abstractmethod
    async def submit(self, transaction: SignedTransaction) -> ExecutionOutcome:
        """
        Broadcast signed transaction and wait for its outcome.

        Args:
            transaction: Signed transaction

        Returns:
            Final execution outcome

        Raises:
            ProviderError: If the node cannot be reached or rejects the call
        """

    async def close(self) -> None:
        """Release transport resources (default: nothing to release)."""
