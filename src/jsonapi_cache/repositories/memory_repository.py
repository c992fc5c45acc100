"""In-process implementation of CacheStore.

Keeps records in a dictionary for the lifetime of the process. Used as the
default backend and in tests.
"""

import copy
import logging
from typing import Any

from jsonapi_cache.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class MemoryCacheRepository:
    """Dictionary-backed implementation of the CacheStore protocol.

    Records are deep-copied on the way in and out, so callers never share
    mutable state with the store.
    """

    def __init__(self) -> None:
        self._records: dict[str, dict[str, Any]] = {}

    @classmethod
    def create(cls) -> "MemoryCacheRepository":
        """Factory method, mirrors RedisCacheRepository.create()."""
        return cls()

    async def get(self, key: str) -> dict[str, Any]:
        try:
            record = self._records[key]
        except KeyError:
            raise NotFoundError(key) from None
        return copy.deepcopy(record)

    async def set(self, key: str, record: dict[str, Any]) -> None:
        self._records[key] = copy.deepcopy(record)

    async def delete_by_key(self, key: str) -> bool:
        return self._records.pop(key, None) is not None

    async def scan_keys(self, prefix: str = "") -> list[str]:
        return [key for key in self._records if key.startswith(prefix)]

    async def clear_all(self) -> int:
        count = len(self._records)
        self._records.clear()
        logger.info("Cleared %d in-memory cache records", count)
        return count

    async def count_all(self) -> int:
        return len(self._records)

    async def health_check(self) -> bool:
        return True

    async def get_stats(self) -> dict[str, Any]:
        return {
            "backend": "memory",
            "total_entries": len(self._records),
        }
