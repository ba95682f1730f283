"""Persistent key/value storage interface."""

from abc import ABC, abstractmethod
from typing import Optional


class IPersistentStorage(ABC):
    """Abstract key/value storage used to persist wallet sessions."""

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Retrieve value by key.

        Args:
            key: Storage key

        Returns:
            Stored value, or None if absent
        """

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """
        Store value under key (overwrites).

        Args:
            key: Storage key
            value: Value to store
        """

    @abstractmethod
    async def remove(self, key: str) -> None:
        """
        Delete key (no-op if absent).

        Args:
            key: Storage key
        """
