"""Cache key derivation.

Both the ripper (write path) and the assembler (read path) derive entity
keys here, so the key a relationship target is written under is always the
key it is looked up by.

Logical keys (routes, URLs, caller-chosen strings) are used verbatim as
collection keys: no escaping, no normalization.
"""

from collections.abc import Mapping

from jsonapi_cache.entities import Resource

KEY_SEPARATOR = "."


def entity_key(type: str, id: str) -> str:
    """Build the cache key of an entity: ``"<type>.<id>"``.

    Raises:
        ValueError: If type contains the separator, which would make
            ``("a.b", "c")`` and ``("a", "b.c")`` collide.
    """
    if KEY_SEPARATOR in type:
        raise ValueError(f"Resource type must not contain {KEY_SEPARATOR!r}: {type!r}")
    return f"{type}{KEY_SEPARATOR}{id}"


def resource_key(resource: Resource) -> str:
    """Cache key of a resource entity."""
    return entity_key(resource.type, resource.id)


def identifier_key(identifier: Mapping[str, str]) -> str:
    """Cache key of a ``{id, type}`` resource identifier."""
    return entity_key(identifier["type"], identifier["id"])
