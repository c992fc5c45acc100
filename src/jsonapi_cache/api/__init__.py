"""FastAPI surface over the cache service."""
