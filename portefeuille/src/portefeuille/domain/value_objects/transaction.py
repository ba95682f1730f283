"""
Transaction value objects.

Actions are opaque, ledger-defined units of intent. They are carried
verbatim from the caller to the signer and never interpreted here.
"""

import base64
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Action:
    """
    Opaque ledger action (transfer, function call, ...).

    Attributes:
        type: Ledger action kind (e.g. 'Transfer', 'FunctionCall')
        params: Action payload, passed through untouched
    """

    type: str
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate action on creation."""
        if not self.type:
            raise ValueError("Action type cannot be empty")

    @classmethod
    def transfer(cls, deposit: str) -> "Action":
        """Build a Transfer action (deposit in the ledger's smallest unit)."""
        return cls(type="Transfer", params={"deposit": deposit})

    @classmethod
    def function_call(
        cls,
        method_name: str,
        args: Optional[Dict[str, Any]] = None,
        gas: str = "30000000000000",
        deposit: str = "0",
    ) -> "Action":
        """Build a FunctionCall action."""
        return cls(
            type="FunctionCall",
            params={
                "method_name": method_name,
                "args": args or {},
                "gas": gas,
                "deposit": deposit,
            },
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert action to dictionary representation."""
        return {"type": self.type, "params": dict(self.params)}


@dataclass(frozen=True)
class Transaction:
    """
    Ordered list of actions from a signer to a receiver.

    Business rules:
    - At least one action is required
    - signer_id may be omitted (defaults to the session's active account)
    - receiver_id may be omitted (defaults to the configured contract)
    """

    actions: Tuple[Action, ...]
    signer_id: Optional[str] = None
    receiver_id: Optional[str] = None

    def __post_init__(self):
        """Normalize and validate transaction data."""
        object.__setattr__(self, "actions", tuple(self.actions))

        if not self.actions:
            raise ValueError("Transaction requires at least one action")

    def with_parties(self, signer_id: str, receiver_id: str) -> "Transaction":
        """Return a copy with signer and receiver resolved."""
        return Transaction(
            actions=self.actions,
            signer_id=signer_id,
            receiver_id=receiver_id,
        )

    @property
    def is_resolved(self) -> bool:
        """Check if both signer and receiver are known."""
        return bool(self.signer_id) and bool(self.receiver_id)

    def to_dict(self) -> Dict[str, Any]:
        """Convert transaction to dictionary representation."""
        return {
            "signer_id": self.signer_id,
            "receiver_id": self.receiver_id,
            "actions": [action.to_dict() for action in self.actions],
        }

    def to_bytes(self) -> bytes:
        """Canonical JSON bytes handed to signers."""
        return json.dumps(
            self.to_dict(), sort_keys=True, separators=(",", ":")
        ).encode("utf-8")


@dataclass(frozen=True)
class SignedTransaction:
    """
    Resolved transaction together with the wallet's signature.

    Attributes:
        transaction: Transaction with signer and receiver filled in
        signature: Raw signature bytes produced by the signer
        public_key: Public key that produced the signature (if known)
    """

    transaction: Transaction
    signature: bytes
    public_key: Optional[str] = None

    def __post_init__(self):
        """Validate signed transaction."""
        if not self.transaction.is_resolved:
            raise ValueError("Signed transaction must have signer and receiver")

        if not self.signature:
            raise ValueError("Signature cannot be empty")

    @property
    def signer_id(self) -> str:
        """Account that signed the transaction."""
        return self.transaction.signer_id

    def encode(self) -> str:
        """
        Encode to the base64 wire form handed to the provider.

        Returns:
            Base64 string of the canonical JSON document
        """
        document = {
            "transaction": self.transaction.to_dict(),
            "signature": base64.b64encode(self.signature).decode("ascii"),
            "public_key": self.public_key,
        }
        payload = json.dumps(document, sort_keys=True, separators=(",", ":"))
        return base64.b64encode(payload.encode("utf-8")).decode("ascii")


class ExecutionStatus(str, Enum):
    """Final status of a submitted transaction."""

    SUCCESS = "success"
    FAILURE = "failure"
    PENDING = "pending"


@dataclass(frozen=True)
class ExecutionOutcome:
    """
    Ledger confirmation for a submitted transaction.

    Attributes:
        transaction_hash: Hash assigned by the ledger
        signer_id: Account that signed
        receiver_id: Account that received
        status: Final execution status
        raw: Unparsed node response
    """

    transaction_hash: str
    signer_id: str
    receiver_id: str
    status: ExecutionStatus = ExecutionStatus.SUCCESS
    raw: Mapping[str, Any] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        """Check if the transaction executed successfully."""
        return self.status == ExecutionStatus.SUCCESS

    @classmethod
    def from_rpc(cls, result: Mapping[str, Any]) -> "ExecutionOutcome":
        """
        Parse a final execution outcome returned by the RPC node.

        Args:
            result: JSON-RPC 'result' object

        Returns:
            ExecutionOutcome instance

        Raises:
            ValueError: If the result lacks the transaction section
        """
        transaction = result.get("transaction")
        if not isinstance(transaction, Mapping):
            raise ValueError("RPC result has no transaction section")

        status_field = result.get("status", {})
        if isinstance(status_field, Mapping) and "Failure" in status_field:
            status = ExecutionStatus.FAILURE
        elif isinstance(status_field, Mapping) and (
            "SuccessValue" in status_field or "SuccessReceiptId" in status_field
        ):
            status = ExecutionStatus.SUCCESS
        else:
            status = ExecutionStatus.PENDING

        return cls(
            transaction_hash=transaction["hash"],
            signer_id=transaction["signer_id"],
            receiver_id=transaction["receiver_id"],
            status=status,
            raw=dict(result),
        )


def as_transactions(items: Sequence[Any]) -> Tuple[Transaction, ...]:
    """Normalize a sequence of Transaction objects or dicts."""
    normalized = []
    for item in items:
        if isinstance(item, Transaction):
            normalized.append(item)
            continue
        normalized.append(
            Transaction(
                actions=tuple(
                    a if isinstance(a, Action) else Action(**a)
                    for a in item["actions"]
                ),
                signer_id=item.get("signer_id"),
                receiver_id=item.get("receiver_id"),
            )
        )
    return tuple(normalized)
