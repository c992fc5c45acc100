"""JSON:API document DTOs."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResourceIdentifier(BaseModel):
    """Resource linkage: type and id only."""

    id: str = Field(..., description="Resource id, unique within type")
    type: str = Field(..., description="Pluralized resource type")


class RelationshipObject(BaseModel):
    """Relationship payload.

    ``data`` is null for an empty to-one, an identifier for a to-one and a
    list of identifiers for a to-many relationship.
    """

    data: ResourceIdentifier | list[ResourceIdentifier] | None = None


class ResourceObject(BaseModel):
    """JSON:API resource object."""

    id: str = Field(..., description="Resource id, unique within type")
    type: str = Field(..., description="Pluralized resource type")
    attributes: dict[str, Any] = Field(default_factory=dict)
    relationships: dict[str, RelationshipObject] = Field(default_factory=dict)


class DocumentMeta(BaseModel):
    """Cache metadata attached to assembled documents."""

    model_config = ConfigDict(populate_by_name=True)

    cache_updated_at: int = Field(
        ...,
        alias="_cache_updated_at",
        description="When the cache entry was written (ms since epoch, 0 when deprecated)",
    )


class ResourceDocument(BaseModel):
    """Single-resource document, as sent by an API or assembled from cache."""

    data: ResourceObject
    included: list[ResourceObject] = Field(default_factory=list)
    meta: DocumentMeta | None = None


class CollectionDocument(BaseModel):
    """Collection document, as sent by an API or assembled from cache."""

    data: list[ResourceObject]
    included: list[ResourceObject] = Field(default_factory=list)
    meta: DocumentMeta | None = None
