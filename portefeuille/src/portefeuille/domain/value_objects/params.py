"""
Parameter objects accepted by wallet operations.
"""

import re
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from portefeuille.domain.value_objects.transaction import (
    Action,
    Transaction,
    as_transactions,
)

# Hardened BIP-32 style path, e.g. 44'/397'/0'/0'/1' (optional m/ prefix)
_DERIVATION_PATH_RE = re.compile(r"^(m/)?(\d+'?)(/\d+'?)*$")


@dataclass(frozen=True)
class ConnectParams:
    """
    Sign-in request for browser, injected and bridge wallets.

    Attributes:
        contract_id: Contract the session is scoped to (None = configured)
        method_names: Contract methods the access key may call (empty = all)
    """

    contract_id: Optional[str] = None
    method_names: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "method_names", tuple(self.method_names))


@dataclass(frozen=True)
class HardwareWalletConnectParams:
    """
    Hardware sign-in request.

    Business rules:
    - account_id is required
    - derivation_path must be a BIP-32 style path
    """

    account_id: str
    derivation_path: str

    def __post_init__(self):
        """Validate connect parameters."""
        if not self.account_id:
            raise ValueError("Account id cannot be empty")

        if not _DERIVATION_PATH_RE.match(self.derivation_path or ""):
            raise ValueError(f"Invalid derivation path: {self.derivation_path!r}")


@dataclass(frozen=True)
class SignAndSendTransactionParams:
    """Single transaction request; signer and receiver are optional."""

    actions: Tuple[Action, ...]
    signer_id: Optional[str] = None
    receiver_id: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "actions", tuple(self.actions))

        if not self.actions:
            raise ValueError("At least one action is required")

    def to_transaction(self) -> Transaction:
        """Build the unresolved transaction."""
        return Transaction(
            actions=self.actions,
            signer_id=self.signer_id,
            receiver_id=self.receiver_id,
        )


@dataclass(frozen=True)
class SignAndSendTransactionsParams:
    """Ordered batch of transactions, each signer_id optional."""

    transactions: Tuple[Transaction, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "transactions", as_transactions(self.transactions))

        if not self.transactions:
            raise ValueError("At least one transaction is required")

    @classmethod
    def of(cls, transactions: Sequence[Transaction]) -> "SignAndSendTransactionsParams":
        return cls(transactions=tuple(transactions))
