"""Unit tests for session cache implementations"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from src.adapter.services.session_cache import (
    InMemorySessionCache,
    RedisSessionCache,
    create_session_cache,
)
from src.app.services.session_cache import active_token_key, blacklist_key


class TestKeys:
    def test_key_layout(self):
        assert active_token_key("admin_1") == "token:admin_1"
        assert blacklist_key("abc.def.ghi") == "blacklist:abc.def.ghi"


@pytest.mark.asyncio
class TestInMemorySessionCache:
    async def test_set_then_get(self):
        cache = InMemorySessionCache()

        await cache.set("token:admin_1", "jwt", ttl_seconds=60)

        assert await cache.get("token:admin_1") == "jwt"

    async def test_missing_key_is_none(self):
        assert await InMemorySessionCache().get("token:nobody") is None

    async def test_entry_expires(self):
        """
        Given: A key written with a 1 second TTL
        When: The clock moves past the deadline
        Then: The key reads as absent
        """
        # Arrange
        cache = InMemorySessionCache()
        with patch("src.adapter.services.session_cache.time.monotonic", return_value=1000.0):
            await cache.set("blacklist:t", "1", ttl_seconds=1)

        # Act
        with patch("src.adapter.services.session_cache.time.monotonic", return_value=1001.5):
            value = await cache.get("blacklist:t")

        # Assert
        assert value is None

    async def test_delete_is_idempotent(self):
        cache = InMemorySessionCache()
        await cache.set("token:admin_1", "jwt", ttl_seconds=60)

        await cache.delete("token:admin_1")
        await cache.delete("token:admin_1")

        assert await cache.get("token:admin_1") is None


@pytest.mark.asyncio
class TestRedisSessionCache:
    @patch("src.adapter.services.session_cache.redis.Redis.from_url")
    async def test_set_uses_expiry(self, mock_from_url):
        # Arrange
        client = MagicMock()
        client.set = AsyncMock()
        mock_from_url.return_value = client
        cache = RedisSessionCache("redis://localhost:6379/0")

        # Act
        await cache.set("token:admin_1", "jwt", ttl_seconds=0)

        # Assert
        mock_from_url.assert_called_once_with("redis://localhost:6379/0", decode_responses=True)
        client.set.assert_called_once_with("token:admin_1", "jwt", ex=1)

    @patch("src.adapter.services.session_cache.redis.Redis.from_url")
    async def test_close_releases_client(self, mock_from_url):
        client = MagicMock()
        client.aclose = AsyncMock()
        mock_from_url.return_value = client

        await RedisSessionCache("redis://localhost:6379/0").close()

        client.aclose.assert_called_once()


class TestCreateSessionCache:
    def test_memory_backend(self):
        assert isinstance(create_session_cache("memory"), InMemorySessionCache)

    @patch("src.adapter.services.session_cache.redis.Redis.from_url")
    def test_redis_backend(self, mock_from_url):
        cache = create_session_cache("redis", "redis://cache:6379/1")

        assert isinstance(cache, RedisSessionCache)
        assert cache.url == "redis://cache:6379/1"

    def test_redis_backend_requires_url(self):
        with pytest.raises(ValueError, match="REDIS_URL"):
            create_session_cache("redis", None)

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown CACHE_BACKEND"):
            create_session_cache("memcached")
