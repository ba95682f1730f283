"""Storage infrastructure."""

from portefeuille.infrastructure.storage.in_memory_storage import InMemoryStorage
from portefeuille.infrastructure.storage.redis_storage import RedisStorage

__all__ = ["InMemoryStorage", "RedisStorage"]
