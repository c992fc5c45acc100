"""Shared fixtures."""

import pytest
from fakes import FakeRedisClient

from jsonapi_cache.repositories import MemoryCacheRepository, RedisCacheRepository
from jsonapi_cache.services import CacheService


@pytest.fixture
def repository() -> MemoryCacheRepository:
    return MemoryCacheRepository()


@pytest.fixture
def cache_service(repository: MemoryCacheRepository) -> CacheService:
    return CacheService(repository=repository)


@pytest.fixture
def redis_client() -> FakeRedisClient:
    return FakeRedisClient()


@pytest.fixture
def redis_repository(redis_client: FakeRedisClient) -> RedisCacheRepository:
    return RedisCacheRepository(redis_client=redis_client, namespace="test")
