"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of store backends (memory -> Redis -> anything else)
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from jsonapi_cache.protocols import CacheStore

    store: CacheStore = MemoryCacheRepository()  # works
    store: CacheStore = RedisCacheRepository()   # also works
    ```
"""

from .attribute_parser import AttributeParser, PassthroughAttributeParser
from .cache_store import CacheStore

__all__ = [
    "AttributeParser",
    "CacheStore",
    "PassthroughAttributeParser",
]
