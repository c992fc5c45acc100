"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field

from .documents import CollectionDocument, ResourceDocument


class SaveResourceRequest(BaseModel):
    """Request DTO for caching a single resource.

    The handler will convert the document to domain entities before
    calling the service layer.
    """

    document: ResourceDocument = Field(..., description="JSON:API document to rip")
    include: list[str] = Field(
        default_factory=list,
        description="Relationship names whose included resources are cached too",
    )
    key: str | None = Field(
        None,
        description="Cache key for the resource (defaults to '<type>.<id>')",
        min_length=1,
    )


class SaveCollectionRequest(BaseModel):
    """Request DTO for caching a collection."""

    key: str = Field(..., description="Logical key (route or URL) of the collection", min_length=1)
    document: CollectionDocument = Field(..., description="JSON:API collection document to rip")
    include: list[str] = Field(
        default_factory=list,
        description="Relationship names whose included resources are cached too",
    )


class DeprecateRequest(BaseModel):
    """Request DTO for marking cached collections as stale."""

    prefix: str = Field(
        "",
        description="Deprecate collections whose key starts with this prefix (empty = all)",
    )
