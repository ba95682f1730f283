"""
AccountState entity - Account identity owned by a connected wallet.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class AccountState:
    """
    Account identity exposed by a wallet session.

    Business rules:
    - account_id is required and never blank
    - public_key is optional (browser wallets may not expose it)
    - Immutable once created
    """

    account_id: str
    public_key: Optional[str] = None

    def __post_init__(self):
        """Validate account state on creation."""
        if not self.account_id or not self.account_id.strip():
            raise ValueError("Account id cannot be empty")

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary representation."""
        return {
            "account_id": self.account_id,
            "public_key": self.public_key,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AccountState":
        """Create entity from dictionary representation."""
        return cls(
            account_id=data["account_id"],
            public_key=data.get("public_key"),
        )
