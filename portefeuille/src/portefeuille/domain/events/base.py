"""
Base event schemas for wallet lifecycle notifications.

All wallet events must inherit from BaseEvent to ensure consistent structure.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class EventMetadata(BaseModel):
    """
    Metadata common to all wallet events.

    Attributes:
        wallet_id: Id of the wallet instance that emitted the event
        timestamp: ISO 8601 timestamp
    """

    model_config = ConfigDict(frozen=True)

    wallet_id: str = Field(..., description="Emitting wallet id")
    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc)
        .isoformat()
        .replace("+00:00", "Z"),
        description="ISO 8601 timestamp with Z suffix",
    )


class BaseEvent(BaseModel):
    """
    Base event that all wallet events inherit from.

    Attributes:
        type: Event name (e.g. 'connected')
        metadata: Event metadata (wallet id, timestamp)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str = Field(..., description="Event name")
    metadata: EventMetadata = Field(..., description="Event metadata")

    @property
    def wallet_id(self) -> str:
        """Id of the wallet that emitted this event."""
        return self.metadata.wallet_id

    @classmethod
    def create(cls, wallet_id: str, **payload) -> "BaseEvent":
        """Build an event for the given wallet."""
        return cls(metadata=EventMetadata(wallet_id=wallet_id), **payload)
