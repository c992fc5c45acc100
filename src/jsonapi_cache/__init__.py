"""JSON:API Cache - flatten JSON:API documents into cacheable elements.

This package provides a layered architecture for document caching:

Layers:
    - entities: Domain models (Resource, ResourceCollection, CacheElement)
    - keys / ripper / assembler: Key derivation, flattening, reassembly
    - protocols: Interface contracts (CacheStore, AttributeParser)
    - repositories: Data access implementations
    - services: The cache facade
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (JSON:API wire format, API contracts)

Usage:
    ```python
    from jsonapi_cache.services import CacheService

    cache = CacheService.create()
    await cache.save_collection("/books?page=1", books, include=["author"])
    document = await cache.get_collection("/books?page=1", include=["author"])
    ```

For HTTP API:
    ```python
    from jsonapi_cache.api.app import app
    ```
"""

from jsonapi_cache.assembler import JsonAssembler
from jsonapi_cache.config import get_redis_client, settings
from jsonapi_cache.entities import CacheElement, Relationship, Resource, ResourceCollection
from jsonapi_cache.exceptions import JsonApiCacheError, NotFoundError
from jsonapi_cache.handlers import CacheHandler
from jsonapi_cache.keys import entity_key, identifier_key, resource_key
from jsonapi_cache.protocols import AttributeParser, CacheStore
from jsonapi_cache.repositories import MemoryCacheRepository, RedisCacheRepository
from jsonapi_cache.ripper import JsonRipper
from jsonapi_cache.services import CacheService

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Errors
    "JsonApiCacheError",
    "NotFoundError",
    # Protocols (interfaces)
    "AttributeParser",
    "CacheStore",
    # Core
    "entity_key",
    "identifier_key",
    "resource_key",
    "JsonRipper",
    "JsonAssembler",
    # Services (business logic)
    "CacheService",
    # Handlers (HTTP)
    "CacheHandler",
    # Repositories (data access)
    "MemoryCacheRepository",
    "RedisCacheRepository",
    # Entities (domain models)
    "CacheElement",
    "Relationship",
    "Resource",
    "ResourceCollection",
]
