"""Response DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class CacheSaveResponse(BaseModel):
    """Response DTO for cache save operations."""

    success: bool = Field(..., description="Whether the operation succeeded")
    key: str = Field(..., description="The primary cache key")
    element_count: int = Field(..., description="Number of cache elements written", ge=1)
    message: str = Field(..., description="Human-readable status message")


class CacheDeprecateResponse(BaseModel):
    """Response DTO for collection deprecation."""

    success: bool = Field(..., description="Whether the operation succeeded")
    deprecated_count: int = Field(..., description="Number of collections deprecated", ge=0)
    message: str = Field(..., description="Human-readable status message")


class CacheStatsResponse(BaseModel):
    """Response DTO for cache statistics."""

    model_config = ConfigDict(extra="allow")

    backend: str = Field(..., description="Store backend: 'memory' or 'redis'")
    total_entries: int = Field(..., description="Total number of cache elements", ge=0)


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
