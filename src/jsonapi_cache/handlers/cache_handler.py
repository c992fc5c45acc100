"""HTTP handlers for cache operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes, validation, and error handling.
"""

import logging

from fastapi import HTTPException, status

from jsonapi_cache.dto import (
    CacheDeprecateResponse,
    CacheSaveResponse,
    CacheStatsResponse,
    CollectionDocument,
    DeprecateRequest,
    HealthCheckResponse,
    ResourceDocument,
    SaveCollectionRequest,
    SaveResourceRequest,
    parse_collection_document,
    parse_resource_document,
)
from jsonapi_cache.exceptions import NotFoundError
from jsonapi_cache.keys import resource_key
from jsonapi_cache.services import CacheService

logger = logging.getLogger(__name__)


def parse_include(include: str | None) -> list[str]:
    """Split a JSON:API ``include`` query value ("author,photos")."""
    if not include:
        return []
    return [name.strip() for name in include.split(",") if name.strip()]


class CacheHandler:
    """HTTP handlers for cache operations.

    This handler delegates business logic to CacheService
    and handles HTTP-specific concerns like:
    - Converting DTOs to entities and documents to DTOs
    - Setting appropriate status codes
    - Error handling and responses

    Example:
        ```python
        cache_service = CacheService.create()
        handler = CacheHandler(cache_service=cache_service)

        @app.get("/cache/resources/{key}", response_model=ResourceDocument)
        async def get_resource(key: str, include: str | None = None):
            return await handler.get_resource(key, include)
        ```
    """

    def __init__(self, cache_service: CacheService) -> None:
        """Initialize the cache handler.

        Args:
            cache_service: The cache service for business logic (required).
        """
        self._cache = cache_service

    async def save_resource(self, request: SaveResourceRequest) -> CacheSaveResponse:
        """Handle POST /cache/resources requests.

        Raises:
            HTTPException: 400 for unusable documents, 500 for store failures
        """
        try:
            resource = parse_resource_document(request.document)
            key = request.key or resource_key(resource)
            elements = await self._cache.save_resource(resource, request.include, key=key)
        except ValueError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid resource document: {e}",
            ) from e
        except Exception as e:
            logger.exception("Failed to save resource")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to save resource: {e}",
            ) from e

        return CacheSaveResponse(
            success=True,
            key=key,
            element_count=len(elements),
            message="Resource cached successfully",
        )

    async def save_collection(self, request: SaveCollectionRequest) -> CacheSaveResponse:
        """Handle POST /cache/collections requests.

        Raises:
            HTTPException: 400 for unusable documents, 500 for store failures
        """
        try:
            collection = parse_collection_document(request.document)
            elements = await self._cache.save_collection(request.key, collection, request.include)
        except ValueError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid collection document: {e}",
            ) from e
        except Exception as e:
            logger.exception("Failed to save collection %s", request.key)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to save collection: {e}",
            ) from e

        return CacheSaveResponse(
            success=True,
            key=request.key,
            element_count=len(elements),
            message="Collection cached successfully",
        )

    async def get_resource(self, key: str, include: str | None = None) -> ResourceDocument:
        """Handle GET /cache/resources/{key} requests.

        Raises:
            HTTPException: 404 if the resource is not cached
        """
        try:
            document = await self._cache.get_resource(key, parse_include(include))
        except NotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
        except Exception as e:
            logger.exception("Failed to read resource %s", key)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to read resource: {e}",
            ) from e

        return ResourceDocument.model_validate(document)

    async def get_collection(self, key: str, include: str | None = None) -> CollectionDocument:
        """Handle GET /cache/collections/{key} requests.

        Raises:
            HTTPException: 404 if the collection is not cached
        """
        try:
            document = await self._cache.get_collection(key, parse_include(include))
        except NotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
        except Exception as e:
            logger.exception("Failed to read collection %s", key)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to read collection: {e}",
            ) from e

        return CollectionDocument.model_validate(document)

    async def deprecate(self, request: DeprecateRequest) -> CacheDeprecateResponse:
        """Handle POST /cache/deprecate requests."""
        try:
            count = await self._cache.deprecate_collections(request.prefix)
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to deprecate collections: {e}",
            ) from e

        return CacheDeprecateResponse(
            success=True,
            deprecated_count=count,
            message=f"Deprecated {count} collections",
        )

    async def get_stats(self) -> CacheStatsResponse:
        """Handle GET /cache/stats requests."""
        try:
            stats = await self._cache.get_stats()
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to get stats: {e}",
            ) from e

        return CacheStatsResponse(**stats)

    async def clear_cache(self) -> dict:
        """Handle DELETE /cache requests."""
        try:
            count = await self._cache.clear()
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to clear cache: {e}",
            ) from e

        return {
            "success": True,
            "deleted_count": count,
            "message": "Cache cleared successfully",
        }

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        is_healthy = await self._cache.is_healthy()

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            cache_healthy=is_healthy,
        )
