"""Assembly: rebuild wire documents from ripped cache elements.

The primary element (a resource or a collection index) must exist; every
other lookup is best-effort. A collection member or an included resource
that was never ripped is left out of the document instead of failing it.
"""

import asyncio
import logging
from collections.abc import Iterable, Sequence
from typing import Any

from jsonapi_cache.exceptions import NotFoundError
from jsonapi_cache.keys import identifier_key
from jsonapi_cache.protocols import CacheStore

logger = logging.getLogger(__name__)


def _identifiers(linkage: Any) -> list[dict[str, str]]:
    if linkage is None:
        return []
    if isinstance(linkage, list):
        return linkage
    return [linkage]


class JsonAssembler:
    """Reads cache records and assembles JSON:API documents.

    Returned documents have the shape::

        {
            "data": <resource> | [<resource>, ...],
            "included": [<resource>, ...],
            "meta": {"_cache_updated_at": <ms since epoch>},
        }
    """

    def __init__(self, store: CacheStore) -> None:
        self._store = store

    async def assemble_resource(self, key: str, include: Sequence[str] = ()) -> dict[str, Any]:
        """Assemble a single-resource document.

        Args:
            key: Entity key or logical key the resource was saved under
            include: Relationship names to expand into ``included``

        Returns:
            The wire document

        Raises:
            NotFoundError: If no resource is stored under key
        """
        record = await self._store.get(key)
        resource = record["content"].get("data")
        if resource is None:
            logger.debug("Key %s holds a collection index, not a resource", key)
            raise NotFoundError(key)

        included = await self._resolve_included([resource], include)
        return {
            "data": resource,
            "included": included,
            "meta": {"_cache_updated_at": record["updated_at"]},
        }

    async def assemble_collection(self, key: str, include: Sequence[str] = ()) -> dict[str, Any]:
        """Assemble a collection document.

        Args:
            key: Logical key the collection was saved under
            include: Relationship names to expand into ``included``

        Returns:
            The wire document; ``data`` follows the stored member order

        Raises:
            NotFoundError: If no collection index is stored under key
        """
        record = await self._store.get(key)
        member_keys = record["content"].get("keys")
        if member_keys is None:
            logger.debug("Key %s holds a resource, not a collection index", key)
            raise NotFoundError(key)

        resources = await self._get_resources(member_keys)
        included = await self._resolve_included(resources, include)
        return {
            "data": resources,
            "included": included,
            "meta": {"_cache_updated_at": record["updated_at"]},
        }

    async def _resolve_included(
        self,
        resources: Sequence[dict[str, Any]],
        include: Sequence[str],
    ) -> list[dict[str, Any]]:
        if not include:
            return []

        # Resources already in data never appear in included
        seen = {identifier_key(resource) for resource in resources}
        keys: list[str] = []
        for resource in resources:
            relationships = resource.get("relationships", {})
            for name in include:
                linkage = relationships.get(name, {}).get("data")
                for identifier in _identifiers(linkage):
                    key = identifier_key(identifier)
                    if key not in seen:
                        seen.add(key)
                        keys.append(key)

        return await self._get_resources(keys)

    async def _get_resources(self, keys: Iterable[str]) -> list[dict[str, Any]]:
        records = await asyncio.gather(*(self._get_optional(key) for key in keys))
        return [
            record["content"]["data"]
            for record in records
            if record is not None and "data" in record["content"]
        ]

    async def _get_optional(self, key: str) -> dict[str, Any] | None:
        try:
            return await self._store.get(key)
        except NotFoundError:
            logger.debug("Cache element %s not found, skipped", key)
            return None
