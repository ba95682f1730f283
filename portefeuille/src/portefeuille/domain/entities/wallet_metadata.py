"""
WalletMetadata entity - Static description of a wallet kind.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class WalletType(str, Enum):
    """Closed set of wallet variants."""

    BROWSER = "browser"
    INJECTED = "injected"
    HARDWARE = "hardware"
    BRIDGE = "bridge"


@dataclass(frozen=True)
class WalletMetadata:
    """
    Descriptive record used by the host to list and select wallets.

    Business rules:
    - id, name and icon_url are required
    - id is unique inside a wallet registry
    - type is one of the four wallet variants
    """

    id: str
    name: str
    icon_url: str
    type: WalletType
    description: Optional[str] = None

    def __post_init__(self):
        """Validate metadata on creation."""
        if not self.id:
            raise ValueError("Wallet id cannot be empty")

        if not self.name:
            raise ValueError("Wallet name cannot be empty")

        if not self.icon_url:
            raise ValueError("Wallet icon_url cannot be empty")

        # Accept raw strings ("hardware") as well as enum members
        object.__setattr__(self, "type", WalletType(self.type))

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "icon_url": self.icon_url,
            "type": self.type.value,
        }
