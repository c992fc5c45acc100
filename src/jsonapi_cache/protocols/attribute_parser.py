"""Attribute parser protocol.

Resources may need their attributes converted before they are cached
(dates to strings, client-only fields removed, etc.). That capability is
injected into the ripper instead of being looked up from a global
service registry.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class AttributeParser(Protocol):
    """Protocol for attribute conversion before caching."""

    def parse_to_server(self, type: str, attributes: dict[str, Any]) -> dict[str, Any]:
        """Convert the attributes of a resource of the given type.

        Args:
            type: Resource type the attributes belong to
            attributes: The resource's attributes (must not be mutated)

        Returns:
            The attributes to store
        """
        ...


class PassthroughAttributeParser:
    """Default AttributeParser: stores attributes unchanged (shallow copy)."""

    def parse_to_server(self, type: str, attributes: dict[str, Any]) -> dict[str, Any]:
        return dict(attributes)
