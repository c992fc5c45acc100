from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jsonapi_cache.api.dependencies import HandlerDep, lifespan
from jsonapi_cache.config import settings
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
)
from jsonapi_cache.services import CacheService


def create_app(cache_service: CacheService | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        cache_service: Pre-built service to serve. If None, the lifespan
            creates one from settings.
    """
    app = FastAPI(
        title="JSON:API Cache",
        description="Rips JSON:API documents into cache elements and assembles them back",
        version="0.1.0",
        lifespan=lifespan,
    )
    if cache_service is not None:
        app.state.cache_service = cache_service

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "JSON:API Cache",
            "version": "0.1.0",
            "endpoints": {
                "resources": "/cache/resources",
                "collections": "/cache/collections",
                "stats": "/cache/stats",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        return await handler.health_check()

    @app.get("/cache/stats", response_model=CacheStatsResponse)
    async def stats(handler: HandlerDep) -> CacheStatsResponse:
        return await handler.get_stats()

    @app.post("/cache/resources", response_model=CacheSaveResponse)
    async def save_resource(request: SaveResourceRequest, handler: HandlerDep) -> CacheSaveResponse:
        return await handler.save_resource(request)

    @app.post("/cache/collections", response_model=CacheSaveResponse)
    async def save_collection(
        request: SaveCollectionRequest, handler: HandlerDep
    ) -> CacheSaveResponse:
        return await handler.save_collection(request)

    @app.get("/cache/resources/{key:path}", response_model=ResourceDocument)
    async def get_resource(
        key: str, handler: HandlerDep, include: str | None = None
    ) -> ResourceDocument:
        return await handler.get_resource(key, include)

    @app.get("/cache/collections/{key:path}", response_model=CollectionDocument)
    async def get_collection(
        key: str, handler: HandlerDep, include: str | None = None
    ) -> CollectionDocument:
        return await handler.get_collection(key, include)

    @app.post("/cache/deprecate", response_model=CacheDeprecateResponse)
    async def deprecate(request: DeprecateRequest, handler: HandlerDep) -> CacheDeprecateResponse:
        return await handler.deprecate(request)

    @app.delete("/cache")
    async def clear(handler: HandlerDep) -> dict:
        return await handler.clear_cache()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "jsonapi_cache.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
