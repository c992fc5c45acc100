import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import redis.asyncio as redis
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Store
    cache_backend: str = os.getenv("CACHE_BACKEND", "memory")
    cache_namespace: str = os.getenv("CACHE_NAMESPACE", "jsonapi_cache")

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def uses_redis(self) -> bool:
        """Check if the configured backend is Redis."""
        return self.cache_backend == "redis"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_backend not in ("memory", "redis"):
            raise ValueError(
                f"CACHE_BACKEND must be one of ['memory', 'redis'], got {self.cache_backend!r}"
            )

        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"LOG_LEVEL is not a valid logging level: {self.log_level!r}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create an async Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the service.

    Args:
        level: Logging level name. Defaults to settings.log_level.
    """
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
