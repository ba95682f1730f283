"""Domain value objects."""

from portefeuille.domain.value_objects.params import (
    ConnectParams,
    HardwareWalletConnectParams,
    SignAndSendTransactionParams,
    SignAndSendTransactionsParams,
)
from portefeuille.domain.value_objects.transaction import (
    Action,
    ExecutionOutcome,
    ExecutionStatus,
    SignedTransaction,
    Transaction,
)
from portefeuille.domain.value_objects.wallet_state import WalletState

__all__ = [
    "Action",
    "Transaction",
    "SignedTransaction",
    "ExecutionOutcome",
    "ExecutionStatus",
    "ConnectParams",
    "HardwareWalletConnectParams",
    "SignAndSendTransactionParams",
    "SignAndSendTransactionsParams",
    "WalletState",
]
