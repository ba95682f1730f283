"""Redis-backed key/value storage."""

from typing import Optional

import redis.asyncio as aioredis

from portefeuille.domain.services.i_persistent_storage import IPersistentStorage


class RedisStorage(IPersistentStorage):
    """
    Persistent storage using the async redis client.

    Connection is opened lazily on first use.
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        password: Optional[str] = None,
        client: Optional[aioredis.Redis] = None,
    ):
        """
        Initialize Redis storage configuration.

        Args:
            host: Redis server host
            port: Redis server port
            db: Redis database number (0-15)
            password: Redis password (None if no auth)
            client: Pre-built client (skips connect)
        """
        self.host = host
        self.port = port
        self.db = db
        self.password = password if password else None
        self._client: Optional[aioredis.Redis] = client

    async def connect(self) -> None:
        """Establish connection to Redis server."""
        if self._client is not None:
            return

        self._client = aioredis.from_url(
            f"redis://{self.host}:{self.port}/{self.db}",
            password=self.password,
            encoding="utf-8",
            decode_responses=True,
        )

    async def disconnect(self) -> None:
        """Close connection to Redis server."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get(self, key: str) -> Optional[str]:
        if self._client is None:
            await self.connect()

        return await self._client.get(key)

    async def set(self, key: str, value: str) -> None:
        if self._client is None:
            await self.connect()

        await self._client.set(key, value)

    async def remove(self, key: str) -> None:
        if self._client is None:
            await self.connect()

        await self._client.delete(key)
