"""Repository layer for data access.

This layer abstracts the key-value store behind the CacheStore protocol.
This enables:
- Easy swapping of implementations (memory -> Redis, etc.)
- Unit testing with fake clients
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from jsonapi_cache.config import settings
from jsonapi_cache.protocols import CacheStore

from .memory_repository import MemoryCacheRepository
from .redis_repository import RedisCacheRepository


def create_repository() -> CacheStore:
    """Create the store configured by settings.cache_backend."""
    if settings.uses_redis:
        return RedisCacheRepository.create()
    return MemoryCacheRepository.create()


__all__ = [
    "CacheStore",
    "MemoryCacheRepository",
    "RedisCacheRepository",
    "create_repository",
]
