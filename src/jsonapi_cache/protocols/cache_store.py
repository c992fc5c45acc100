"""Cache storage protocol.

Defines the interface for any asynchronous key-value backend that can hold
ripped cache records.

Implementations can include:
- In-process dictionary (default, tests)
- Redis
- Any other key-value store with get/set/delete by string key
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for cache storage backends.

    Records are JSON-serializable dictionaries. Writes to one key replace the
    previous record wholesale; the store does not merge.

    Example:
        ```python
        from jsonapi_cache.protocols import CacheStore

        store: CacheStore = MemoryCacheRepository()
        store: CacheStore = RedisCacheRepository.create()
        ```
    """

    async def get(self, key: str) -> dict[str, Any]:
        """Read the record stored under a key.

        Args:
            key: The storage key

        Returns:
            The stored record

        Raises:
            NotFoundError: If nothing is stored under the key
        """
        ...

    async def set(self, key: str, record: dict[str, Any]) -> None:
        """Store a record, replacing any previous one.

        Args:
            key: The storage key
            record: JSON-serializable record
        """
        ...

    async def delete_by_key(self, key: str) -> bool:
        """Delete a specific record by key.

        Args:
            key: The storage key to delete

        Returns:
            True if deleted, False otherwise
        """
        ...

    async def scan_keys(self, prefix: str = "") -> list[str]:
        """List stored keys starting with a prefix.

        Args:
            prefix: Key prefix to match ("" matches everything)

        Returns:
            Matching keys, in no particular order
        """
        ...

    async def clear_all(self) -> int:
        """Clear all records.

        Returns:
            Number of records deleted
        """
        ...

    async def count_all(self) -> int:
        """Count stored records.

        Returns:
            Total number of records
        """
        ...

    async def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...

    async def get_stats(self) -> dict[str, Any]:
        """Get store statistics.

        Returns:
            Dictionary with stats (implementation-specific)
        """
        ...
