"""Exceptions raised by the cache."""


class JsonApiCacheError(Exception):
    """Base class for cache errors."""


class NotFoundError(JsonApiCacheError, KeyError):
    """Raised when a requested cache key is absent from the store.

    Attributes:
        key: The key that was looked up
    """

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Cache key not found: {self.key}"
