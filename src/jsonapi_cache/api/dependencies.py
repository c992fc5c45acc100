"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from jsonapi_cache.config import configure_logging, settings
from jsonapi_cache.handlers import CacheHandler
from jsonapi_cache.repositories import RedisCacheRepository, create_repository
from jsonapi_cache.services import CacheService

logger = logging.getLogger(__name__)


def get_cache_service(request: Request) -> CacheService:
    """Dependency injection for CacheService from app.state.

    Raises:
        RuntimeError: If service is not initialized
    """
    service = getattr(request.app.state, "cache_service", None)
    if service is None:
        raise RuntimeError("CacheService not initialized. Check lifespan setup.")
    return service


def get_handler(request: Request) -> CacheHandler:
    """Dependency injection for CacheHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "cache_handler", None)
    if handler is None:
        raise RuntimeError("CacheHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Repository (data access) - from settings.cache_backend, unless a
       service was already placed on app.state (tests)
    2. Service (business logic) - stored in app.state.cache_service
    3. Handler (HTTP endpoints) - stored in app.state.cache_handler

    Cleanup:
        Closes the Redis connection pool and removes services from app.state
    """
    configure_logging()

    cache_service: CacheService | None = getattr(app.state, "cache_service", None)
    if cache_service is None:
        cache_service = CacheService.create(repository=create_repository())
    cache_handler = CacheHandler(cache_service=cache_service)

    app.state.cache_service = cache_service
    app.state.cache_handler = cache_handler

    logger.info("Cache service initialized (backend=%s)", settings.cache_backend)

    yield

    repository = cache_service.repository
    if isinstance(repository, RedisCacheRepository):
        await repository.client.aclose()

    del app.state.cache_handler
    del app.state.cache_service
    logger.info("Cache service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[CacheHandler, Depends(get_handler)]
ServiceDep = Annotated[CacheService, Depends(get_cache_service)]
