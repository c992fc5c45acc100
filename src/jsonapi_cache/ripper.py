"""Ripping: flatten resources and collections into cache elements.

A resource becomes one element holding its wire representation, with every
relationship reduced to ``{id, type}`` linkage. Relationships named in the
include list additionally produce one element per related resource, keyed
by its entity key, so they can be fetched and expanded independently.

A collection becomes an index element holding the ordered member keys,
followed by the members' own elements and their includes.
"""

import logging
from collections.abc import Sequence
from typing import Any

from jsonapi_cache.entities import CacheElement, Resource, ResourceCollection
from jsonapi_cache.keys import resource_key
from jsonapi_cache.protocols import AttributeParser, PassthroughAttributeParser

logger = logging.getLogger(__name__)


class _ElementBuffer:
    """Ordered element list that keeps the first element seen per key."""

    def __init__(self) -> None:
        self.elements: list[CacheElement] = []
        self._keys: set[str] = set()

    def add(self, key: str, content: dict[str, Any]) -> None:
        if key in self._keys:
            logger.debug("Skipping duplicate cache element %s", key)
            return
        self._keys.add(key)
        self.elements.append(CacheElement(key=key, content=content))


class JsonRipper:
    """Converts domain resources into flat cache elements.

    Stateless apart from the injected attribute parser; one instance can
    rip any number of documents.
    """

    def __init__(self, attribute_parser: AttributeParser | None = None) -> None:
        """Initialize the ripper.

        Args:
            attribute_parser: Converts attributes before they are cached.
                Defaults to a passthrough parser.
        """
        self._parser = attribute_parser or PassthroughAttributeParser()

    def to_wire_resource(self, resource: Resource) -> dict[str, Any]:
        """JSON:API resource object with reference-only relationships.

        Raises:
            ValueError: If a linked resource has no valid entity key
        """
        for relationship in resource.relationships.values():
            for target in relationship.targets():
                resource_key(target)

        return {
            "id": resource.id,
            "type": resource.type,
            "attributes": self._parser.parse_to_server(resource.type, resource.attributes),
            "relationships": {
                name: {"data": relationship.linkage()}
                for name, relationship in resource.relationships.items()
            },
        }

    def rip_resource(
        self,
        key: str,
        resource: Resource,
        include: Sequence[str] = (),
    ) -> list[CacheElement]:
        """Flatten a single resource.

        Args:
            key: Key of the primary element (entity key or logical key)
            resource: The resource to rip
            include: Relationship names whose targets are ripped too

        Returns:
            The primary element first, then one element per distinct loaded
            related resource, in include order then linkage order

        Raises:
            ValueError: If the resource is an identifier-only reference
        """
        if not resource.loaded:
            raise ValueError(f"Cannot rip identifier-only resource {resource_key(resource)}")

        buffer = _ElementBuffer()
        buffer.add(key, {"data": self.to_wire_resource(resource)})
        self._rip_included(buffer, resource, include)

        logger.debug("Ripped resource %s into %d elements", key, len(buffer.elements))
        return buffer.elements

    def rip_collection(
        self,
        key: str,
        collection: ResourceCollection,
        include: Sequence[str] = (),
    ) -> list[CacheElement]:
        """Flatten a collection.

        Args:
            key: Logical key of the collection (route, URL, ...)
            collection: Ordered members to rip
            include: Relationship names whose targets are ripped too

        Returns:
            The index element first, then for each member (in collection
            order) its own element followed by its included resources.
            Members that are identifier-only references are listed in the
            index but produce no element.
        """
        member_keys = [resource_key(resource) for resource in collection]

        buffer = _ElementBuffer()
        buffer.add(key, {"keys": member_keys})
        for member_key, resource in zip(member_keys, collection):
            if not resource.loaded:
                logger.debug("Collection %s member %s is not loaded, not ripped", key, member_key)
                continue
            buffer.add(member_key, {"data": self.to_wire_resource(resource)})
            self._rip_included(buffer, resource, include)

        logger.debug(
            "Ripped collection %s (%d members) into %d elements",
            key,
            len(member_keys),
            len(buffer.elements),
        )
        return buffer.elements

    def _rip_included(
        self,
        buffer: _ElementBuffer,
        resource: Resource,
        include: Sequence[str],
    ) -> None:
        for name in include:
            relationship = resource.relationships.get(name)
            if relationship is None:
                continue
            for target in relationship.targets():
                target_key = resource_key(target)
                if not target.loaded:
                    logger.debug("Related resource %s is not loaded, not ripped", target_key)
                    continue
                buffer.add(target_key, {"data": self.to_wire_resource(target)})
