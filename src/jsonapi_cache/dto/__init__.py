"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract and the JSON:API
wire format. They are used for request/response validation and
serialization.

Internal domain logic should use entities from the entities package.
"""

from .documents import (
    CollectionDocument,
    DocumentMeta,
    RelationshipObject,
    ResourceDocument,
    ResourceIdentifier,
    ResourceObject,
)
from .parsing import parse_collection_document, parse_resource_document
from .requests import DeprecateRequest, SaveCollectionRequest, SaveResourceRequest
from .responses import (
    CacheDeprecateResponse,
    CacheSaveResponse,
    CacheStatsResponse,
    HealthCheckResponse,
)

__all__ = [
    "ResourceIdentifier",
    "RelationshipObject",
    "ResourceObject",
    "DocumentMeta",
    "ResourceDocument",
    "CollectionDocument",
    "parse_resource_document",
    "parse_collection_document",
    "SaveResourceRequest",
    "SaveCollectionRequest",
    "DeprecateRequest",
    "CacheSaveResponse",
    "CacheDeprecateResponse",
    "CacheStatsResponse",
    "HealthCheckResponse",
]
