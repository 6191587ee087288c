"""Unit tests for Logout use case"""

import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

from src.adapter.services.session_cache import InMemorySessionCache
from src.app.services.session_cache import active_token_key, blacklist_key
from src.app.services.token_service import UnverifiedToken
from src.app.use_cases.auth import Logout


@pytest.fixture
def cache():
    return InMemorySessionCache()


@pytest.fixture
def mock_token_service():
    service = MagicMock()
    service.decode_unsafe.return_value = UnverifiedToken(
        id="admin_1", expires_at=datetime(2099, 1, 1)
    )
    service.remaining_ttl.return_value = 1800
    return service


@pytest.fixture
def logout_use_case(mock_token_service, cache):
    return Logout(token_service=mock_token_service, session_cache=cache)


@pytest.mark.asyncio
class TestLogout:
    async def test_blacklists_token_and_clears_active_session(self, logout_use_case, cache):
        """
        Given: token_a is admin_1's active session
        When: token_a logs out
        Then: token_a is blacklisted and token:admin_1 is removed
        """
        # Arrange
        await cache.set(active_token_key("admin_1"), "token_a", 3600)

        # Act
        result = await logout_use_case.execute("token_a")

        # Assert
        assert result.is_ok()
        assert await cache.get(blacklist_key("token_a")) == "1"
        assert await cache.get(active_token_key("admin_1")) is None

    async def test_old_token_logout_clears_active_session(self, logout_use_case, cache):
        """
        Given: admin_1 logged in again, so token_b is the active session
        When: The old token_a logs out
        Then: token:admin_1 is removed and token_a is blacklisted
        """
        # Arrange
        await cache.set(active_token_key("admin_1"), "token_b", 3600)

        # Act
        await logout_use_case.execute("token_a")

        # Assert
        assert await cache.get(active_token_key("admin_1")) is None
        assert await cache.get(blacklist_key("token_a")) == "1"

    async def test_without_token_succeeds(self, logout_use_case, mock_token_service):
        result = await logout_use_case.execute(None)

        assert result.is_ok()
        mock_token_service.decode_unsafe.assert_not_called()

    async def test_repeated_logout_is_idempotent(self, mock_token_service):
        """
        Given: token_a was already logged out
        When: Logout runs again with token_a
        Then: It succeeds without writing anything
        """
        # Arrange
        cache = MagicMock()
        cache.get = AsyncMock(return_value="1")
        cache.set = AsyncMock()
        cache.delete = AsyncMock()
        use_case = Logout(token_service=mock_token_service, session_cache=cache)

        # Act
        result = await use_case.execute("token_a")

        # Assert
        assert result.is_ok()
        cache.get.assert_called_once_with(blacklist_key("token_a"))
        cache.set.assert_not_called()
        cache.delete.assert_not_called()

    async def test_uses_token_ttl_for_blacklist(self, mock_token_service):
        cache = MagicMock()
        cache.get = AsyncMock(return_value=None)
        cache.set = AsyncMock()
        use_case = Logout(token_service=mock_token_service, session_cache=cache)

        await use_case.execute("token_a")

        cache.set.assert_called_once_with(blacklist_key("token_a"), "1", 1800)

    async def test_undecodable_token_is_still_blacklisted(self, mock_token_service, cache):
        # Arrange
        mock_token_service.decode_unsafe.return_value = None
        mock_token_service.remaining_ttl.return_value = 86400
        use_case = Logout(token_service=mock_token_service, session_cache=cache)

        # Act
        result = await use_case.execute("garbage")

        # Assert
        assert result.is_ok()
        assert await cache.get(blacklist_key("garbage")) == "1"

    async def test_cache_failure_is_swallowed(self, mock_token_service):
        cache = MagicMock()
        cache.get = AsyncMock(side_effect=ConnectionError("cache down"))
        use_case = Logout(token_service=mock_token_service, session_cache=cache)

        result = await use_case.execute("token_a")

        assert result.is_ok()
