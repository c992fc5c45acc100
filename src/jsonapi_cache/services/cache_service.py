"""Cache service for core business logic.

This service orchestrates cache operations by coordinating the ripper
(write path), the assembler (read path) and the repository (data access).
"""

import asyncio
import logging
import time
from collections.abc import Sequence
from typing import Any

from jsonapi_cache.assembler import JsonAssembler
from jsonapi_cache.entities import CacheElement, Resource, ResourceCollection
from jsonapi_cache.exceptions import NotFoundError
from jsonapi_cache.keys import resource_key
from jsonapi_cache.protocols import AttributeParser, CacheStore
from jsonapi_cache.repositories import create_repository
from jsonapi_cache.ripper import JsonRipper

logger = logging.getLogger(__name__)


def now_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)


class CacheService:
    """Cache facade over a key-value store.

    This service depends on PROTOCOLS, not concrete implementations:
    - CacheStore: can be in-memory, Redis, etc.
    - AttributeParser: converts attributes before they are cached

    Example:
        ```python
        from jsonapi_cache.repositories import MemoryCacheRepository
        from jsonapi_cache.services import CacheService

        cache = CacheService.create(repository=MemoryCacheRepository())

        await cache.save_resource(book, include=["author"])
        document = await cache.get_resource("books.5", include=["author"])
        ```
    """

    def __init__(
        self,
        repository: CacheStore,
        attribute_parser: AttributeParser | None = None,
    ) -> None:
        """Initialize the cache service.

        Args:
            repository: Cache storage backend (required).
            attribute_parser: Attribute conversion applied while ripping.
        """
        self._repository = repository
        self._ripper = JsonRipper(attribute_parser=attribute_parser)
        self._assembler = JsonAssembler(store=repository)

    @classmethod
    def create(
        cls,
        repository: CacheStore | None = None,
        attribute_parser: AttributeParser | None = None,
    ) -> "CacheService":
        """Factory method to create CacheService with sensible defaults.

        Args:
            repository: Cache storage backend. If None, the backend named by
                settings.cache_backend is created.
            attribute_parser: Attribute conversion. If None, attributes are
                stored unchanged.

        Returns:
            Configured CacheService instance
        """
        if repository is None:
            repository = create_repository()
        return cls(repository=repository, attribute_parser=attribute_parser)

    async def save_resource(
        self,
        resource: Resource,
        include: Sequence[str] = (),
        key: str | None = None,
    ) -> list[CacheElement]:
        """Rip a resource and write every element to the store.

        Args:
            resource: The resource to cache
            include: Relationship names whose loaded targets are cached too
            key: Primary key. Defaults to the resource's entity key.

        Returns:
            The elements written
        """
        if key is None:
            key = resource_key(resource)
        elements = self._ripper.rip_resource(key, resource, include)
        await self._write(elements)
        logger.info("Saved resource %s (%d elements)", key, len(elements))
        return elements

    async def save_collection(
        self,
        key: str,
        collection: ResourceCollection,
        include: Sequence[str] = (),
    ) -> list[CacheElement]:
        """Rip a collection and write every element to the store.

        Args:
            key: Logical key (route, URL) the collection is cached under
            collection: Ordered members
            include: Relationship names whose loaded targets are cached too

        Returns:
            The elements written
        """
        elements = self._ripper.rip_collection(key, collection, include)
        await self._write(elements)
        logger.info("Saved collection %s (%d elements)", key, len(elements))
        return elements

    async def get_resource(self, key: str, include: Sequence[str] = ()) -> dict[str, Any]:
        """Assemble a cached resource document.

        Raises:
            NotFoundError: If no resource is cached under key
        """
        return await self._assembler.assemble_resource(key, include)

    async def get_collection(self, key: str, include: Sequence[str] = ()) -> dict[str, Any]:
        """Assemble a cached collection document.

        Raises:
            NotFoundError: If no collection is cached under key
        """
        return await self._assembler.assemble_collection(key, include)

    async def deprecate_collections(self, prefix: str) -> int:
        """Mark cached collections as stale without dropping them.

        Every collection index whose key starts with prefix gets its
        write timestamp reset to 0. Resource elements are left alone.

        Args:
            prefix: Key prefix ("" deprecates every collection)

        Returns:
            Number of collection indexes deprecated
        """
        count = 0
        for key in await self._repository.scan_keys(prefix):
            try:
                record = await self._repository.get(key)
            except NotFoundError:
                continue
            if "keys" not in record["content"]:
                continue
            record["updated_at"] = 0
            await self._repository.set(key, record)
            count += 1

        logger.info("Deprecated %d collections with prefix %r", count, prefix)
        return count

    @staticmethod
    def is_fresh(document: dict[str, Any], ttl_seconds: float) -> bool:
        """Check whether an assembled document is younger than ttl_seconds."""
        updated_at = document.get("meta", {}).get("_cache_updated_at", 0)
        return now_ms() - updated_at <= ttl_seconds * 1000

    async def delete(self, key: str) -> bool:
        """Delete a single cache element.

        Args:
            key: Entity key or logical key

        Returns:
            True if deleted, False otherwise
        """
        return await self._repository.delete_by_key(key)

    async def clear(self) -> int:
        """Clear all cache elements.

        Returns:
            Number of elements deleted
        """
        return await self._repository.clear_all()

    async def get_stats(self) -> dict[str, Any]:
        return await self._repository.get_stats()

    async def is_healthy(self) -> bool:
        return await self._repository.health_check()

    async def _write(self, elements: Sequence[CacheElement]) -> None:
        updated_at = now_ms()
        await asyncio.gather(
            *(self._repository.set(element.key, element.to_record(updated_at)) for element in elements)
        )

    @property
    def repository(self) -> CacheStore:
        """Get the underlying repository (for testing)."""
        return self._repository

    @property
    def ripper(self) -> JsonRipper:
        return self._ripper
