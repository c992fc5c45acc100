"""Resource domain entity."""

from dataclasses import dataclass, field
from typing import Any, Union

RelationshipData = Union["Resource", list["Resource"], None]


@dataclass
class Relationship:
    """Linkage from a resource to zero, one or many related resources.

    Attributes:
        data: None (empty to-one), a Resource (to-one) or an ordered
            list of Resources (to-many). Targets may be fully loaded
            resources or identifier-only references.
    """

    data: RelationshipData = None

    @property
    def is_to_many(self) -> bool:
        return isinstance(self.data, list)

    def targets(self) -> list["Resource"]:
        """Related resources in linkage order."""
        if self.data is None:
            return []
        if isinstance(self.data, list):
            return list(self.data)
        return [self.data]

    def linkage(self) -> dict[str, str] | list[dict[str, str]] | None:
        """Reference-only linkage: ``{id, type}`` pairs, no inlined data."""
        if self.data is None:
            return None
        if self.is_to_many:
            return [resource.identifier for resource in self.data]
        return self.data.identifier


@dataclass
class Resource:
    """Domain entity for a single JSON:API resource.

    Attributes:
        type: Pluralized resource type (e.g. "books")
        id: Identifier, unique within type
        attributes: Opaque attribute payload, passed through untouched
        relationships: Relationship name to linkage
        loaded: False when only the identifier is known. Such resources can
            be linked to but carry no content of their own.
    """

    type: str
    id: str
    attributes: dict[str, Any] = field(default_factory=dict)
    relationships: dict[str, Relationship] = field(default_factory=dict)
    loaded: bool = True

    @classmethod
    def reference(cls, type: str, id: str) -> "Resource":
        """Create an identifier-only resource."""
        return cls(type=type, id=id, loaded=False)

    @property
    def identifier(self) -> dict[str, str]:
        return {"id": self.id, "type": self.type}

    def add_relationship(self, resource: "Resource", name: str | None = None) -> None:
        """Link a related resource.

        With an explicit name the relationship is to-one, unless it already
        holds a list. Without a name the resource type is used and the
        relationship is to-many, appending in call order.
        """
        if name is None:
            name = resource.type
            relationship = self.relationships.setdefault(name, Relationship(data=[]))
            if not isinstance(relationship.data, list):
                relationship.data = [] if relationship.data is None else [relationship.data]
            relationship.data.append(resource)
            return

        relationship = self.relationships.get(name)
        if relationship is not None and isinstance(relationship.data, list):
            relationship.data.append(resource)
        else:
            self.relationships[name] = Relationship(data=resource)
