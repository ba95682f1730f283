"""In-memory key/value storage."""

from typing import Dict, Optional

from portefeuille.domain.services.i_persistent_storage import IPersistentStorage


class InMemoryStorage(IPersistentStorage):
    """
    Dictionary-backed storage.

    NOT PERSISTENT - data lost on restart.
    Use RedisStorage for sessions that must survive the process.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._store: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._store.get(key)

    async def set(self, key: str, value: str) -> None:
        self._store[key] = value

    async def remove(self, key: str) -> None:
        self._store.pop(key, None)

    def keys(self) -> list:
        """Stored keys (test helper)."""
        return list(self._store.keys())
