"""Conversion of JSON:API documents into domain entities.

Resources present in ``data`` or ``included`` become loaded entities.
Relationship identifiers pointing at them are linked to those entities;
identifiers with no matching resource in the document stay references.
"""

from jsonapi_cache.entities import Relationship, Resource, ResourceCollection
from jsonapi_cache.keys import entity_key

from .documents import (
    CollectionDocument,
    RelationshipObject,
    ResourceDocument,
    ResourceIdentifier,
    ResourceObject,
)


def parse_resource_document(document: ResourceDocument) -> Resource:
    """Build the primary Resource of a single-resource document."""
    return _to_entities([document.data], document.included)[0]


def parse_collection_document(document: CollectionDocument) -> ResourceCollection:
    """Build a ResourceCollection from a collection document, keeping order."""
    return ResourceCollection(data=_to_entities(document.data, document.included))


def _to_entities(
    primary: list[ResourceObject],
    included: list[ResourceObject],
) -> list[Resource]:
    objects = [*primary, *included]

    # First occurrence of a (type, id) wins
    index: dict[str, Resource] = {}
    sources: dict[str, ResourceObject] = {}
    for obj in objects:
        key = entity_key(obj.type, obj.id)
        if key not in index:
            index[key] = Resource(type=obj.type, id=obj.id, attributes=dict(obj.attributes))
            sources[key] = obj

    def resolve(identifier: ResourceIdentifier) -> Resource:
        key = entity_key(identifier.type, identifier.id)
        return index.get(key) or Resource.reference(identifier.type, identifier.id)

    def link(relationship: RelationshipObject) -> Relationship:
        if relationship.data is None:
            return Relationship(data=None)
        if isinstance(relationship.data, list):
            return Relationship(data=[resolve(identifier) for identifier in relationship.data])
        return Relationship(data=resolve(relationship.data))

    for key, obj in sources.items():
        index[key].relationships = {
            name: link(relationship) for name, relationship in obj.relationships.items()
        }

    return [index[entity_key(obj.type, obj.id)] for obj in primary]
