"""Fake collaborators for tests."""

import asyncio
import re
from collections.abc import AsyncIterator

import redis


def _glob_to_regex(pattern: str) -> re.Pattern[str]:
    """Translate a Redis MATCH pattern (``*``, ``?``, backslash escapes)."""
    parts: list[str] = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "\\" and i + 1 < len(pattern):
            parts.append(re.escape(pattern[i + 1]))
            i += 2
            continue
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
        i += 1
    return re.compile("".join(parts) + r"\Z")


class FakeRedisClient:
    """Fake async Redis client for testing (duck typing)."""

    def __init__(self, healthy: bool = True) -> None:
        self._store: dict[str, str] = {}
        self._healthy = healthy
        self.closed = False

    async def get(self, key: str) -> str | None:
        await asyncio.sleep(0)
        return self._store.get(key)

    async def set(self, key: str, value: str) -> bool:
        await asyncio.sleep(0)
        self._store[key] = value
        return True

    async def delete(self, key: str) -> int:
        await asyncio.sleep(0)
        if key in self._store:
            del self._store[key]
            return 1
        return 0

    async def scan_iter(self, match: str | None = None) -> AsyncIterator[str]:
        regex = _glob_to_regex(match) if match else None
        for key in list(self._store):
            if regex is None or regex.match(key):
                yield key

    async def ping(self) -> bool:
        if not self._healthy:
            raise redis.ConnectionError("Connection refused")
        return True

    async def aclose(self) -> None:
        self.closed = True
