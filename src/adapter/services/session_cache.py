"""Session Cache Implementations

Provides Redis-backed and in-memory TTL caches for active tokens and the
logout blacklist.
"""

import logging
import time
from typing import Dict, Optional, Tuple
import redis.asyncio as redis
from src.app.services.session_cache import SessionCache

logger = logging.getLogger(__name__)


class RedisSessionCache(SessionCache):
    """
    Session cache stored in Redis

    Keys expire natively through SET ... EX.
    """

    def __init__(self, url: str):
        """
        Args:
            url: Redis connection URL (redis://host:port/db)
        """
        self.url = url
        self.client = redis.Redis.from_url(url, decode_responses=True)

    async def get(self, key: str) -> Optional[str]:
        return await self.client.get(key)

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        await self.client.set(key, value, ex=max(1, int(ttl_seconds)))

    async def delete(self, key: str) -> None:
        await self.client.delete(key)

    async def close(self) -> None:
        await self.client.aclose()


class InMemorySessionCache(SessionCache):
    """
    Process-local session cache

    Useful for development and testing. Entries are dropped lazily on read
    once their deadline has passed.
    """

    def __init__(self):
        self._entries: Dict[str, Tuple[str, float]] = {}

    async def get(self, key: str) -> Optional[str]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, deadline = entry
        if time.monotonic() >= deadline:
            self._entries.pop(key, None)
            return None
        return value

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        self._entries[key] = (value, time.monotonic() + max(1, int(ttl_seconds)))

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    async def close(self) -> None:
        self._entries.clear()


def create_session_cache(backend: str, redis_url: Optional[str] = None) -> SessionCache:
    """
    Factory function to create the configured session cache

    Args:
        backend: "redis" or "memory"
        redis_url: Required for the redis backend

    Returns:
        Configured SessionCache
    """
    if backend == "memory":
        logger.info("Using in-memory session cache")
        return InMemorySessionCache()

    if backend == "redis":
        if not redis_url:
            raise ValueError("REDIS_URL is required for the redis cache backend")
        logger.info(f"Using Redis session cache at {redis_url}")
        return RedisSessionCache(redis_url)

    raise ValueError(f"Unknown CACHE_BACKEND: {backend}")
