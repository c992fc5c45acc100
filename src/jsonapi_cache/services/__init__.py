"""Service layer for business logic.

This layer contains the cache facade. Services depend on protocols
(interfaces), not concrete implementations, making them testable and
flexible.

Architecture:
    Handler -> Service -> Ripper / Assembler -> Repository
    (HTTP)  -> (Facade) -> (Core)            -> (Data Access)

Usage:
    ```python
    from jsonapi_cache.services import CacheService

    # Using factory method (recommended)
    cache = CacheService.create()

    # Or manual creation
    cache = CacheService(repository=repo, attribute_parser=parser)
    ```
"""

from .cache_service import CacheService

__all__ = [
    "CacheService",
]
