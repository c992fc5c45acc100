"""Redis implementation of CacheStore.

Each record is stored as a JSON string under ``<namespace>:<key>``. The
namespace keeps ripped elements apart from anything else living in the same
Redis database.
"""

import json
import logging
import re
from typing import Any

import redis.asyncio as redis

from jsonapi_cache.config import get_redis_client, settings
from jsonapi_cache.exceptions import NotFoundError

logger = logging.getLogger(__name__)

# Characters with a meaning in Redis MATCH patterns
_GLOB_CHARS = re.compile(r"([*?\[\]\\])")


class RedisCacheRepository:
    """Redis implementation using plain string keys.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        namespace: str | None = None,
    ) -> None:
        """Initialize the Redis cache repository.

        Args:
            redis_client: Async Redis client instance. If None, creates default.
            namespace: Prefix for every stored key. Defaults to settings.
        """
        self._client = redis_client or get_redis_client()
        self._namespace = namespace or settings.cache_namespace

    @classmethod
    def create(
        cls,
        redis_client: redis.Redis | None = None,
        namespace: str | None = None,
    ) -> "RedisCacheRepository":
        """Factory method to create RedisCacheRepository with defaults.

        Args:
            redis_client: Async Redis client. If None, built from settings.
            namespace: Key namespace. If None, uses settings.

        Returns:
            Configured RedisCacheRepository
        """
        return cls(redis_client=redis_client, namespace=namespace)

    def _storage_key(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    def _cache_key(self, storage_key: str | bytes) -> str:
        if isinstance(storage_key, bytes):
            storage_key = storage_key.decode()
        return storage_key[len(self._namespace) + 1 :]

    async def get(self, key: str) -> dict[str, Any]:
        """Read and decode a record.

        Raises:
            NotFoundError: If the key is absent
        """
        raw = await self._client.get(self._storage_key(key))
        if raw is None:
            raise NotFoundError(key)
        return json.loads(raw)

    async def set(self, key: str, record: dict[str, Any]) -> None:
        await self._client.set(self._storage_key(key), json.dumps(record))

    async def delete_by_key(self, key: str) -> bool:
        result: int = await self._client.delete(self._storage_key(key))
        return result > 0

    async def scan_keys(self, prefix: str = "") -> list[str]:
        pattern = _GLOB_CHARS.sub(r"\\\1", self._storage_key(prefix)) + "*"
        return [self._cache_key(key) async for key in self._client.scan_iter(match=pattern)]

    async def clear_all(self) -> int:
        """Delete every record in the namespace.

        Returns:
            Number of records deleted
        """
        count = 0
        for key in await self.scan_keys():
            if await self._client.delete(self._storage_key(key)):
                count += 1
        logger.info("Cleared %d Redis cache records in namespace %s", count, self._namespace)
        return count

    async def count_all(self) -> int:
        return len(await self.scan_keys())

    async def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(await self._client.ping())
        except redis.RedisError as e:
            logger.warning("Redis health check failed: %s", e)
            return False

    async def get_stats(self) -> dict[str, Any]:
        return {
            "backend": "redis",
            "namespace": self._namespace,
            "total_entries": await self.count_all(),
        }

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
