"""Unit tests for Login use case

Tests cover:
- Successful login records the token as the active session
- Unknown username and wrong password fail identically
- Failed logins never touch the cache
- Cache failure does not fail the login
"""

import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

from src.app.services.session_cache import active_token_key
from src.app.use_cases.auth import Login, LoginCommandDTO
from src.domain.admin import Admin, Role


@pytest.fixture
def mock_admin_repo():
    return MagicMock()


@pytest.fixture
def mock_token_service():
    service = MagicMock()
    service.issue.return_value = "signed.jwt.token"
    service.remaining_ttl.return_value = 3600
    return service


@pytest.fixture
def mock_password_hasher():
    return MagicMock()


@pytest.fixture
def sample_admin():
    return Admin(
        id="admin_1",
        username="superadmin1",
        email="superadmin1@example.com",
        name="Super Admin One",
        password_hash="$2b$04$stored",
        role=Role.SUPERADMIN,
        created_at=datetime.utcnow(),
        updated_at=datetime.utcnow(),
    )


@pytest.fixture
def login_use_case(mock_admin_repo, mock_token_service, mock_password_hasher, mock_session_cache):
    return Login(
        admin_repo=mock_admin_repo,
        token_service=mock_token_service,
        password_hasher=mock_password_hasher,
        session_cache=mock_session_cache,
    )


@pytest.mark.asyncio
class TestLoginSuccess:
    async def test_returns_token_and_profile(
        self, login_use_case, mock_admin_repo, mock_password_hasher, mock_session_cache, sample_admin
    ):
        """
        Given: superadmin1 exists and the password matches
        When: Login is executed
        Then: A token is returned and stored as token:{id} with the token TTL
        """
        # Arrange
        mock_admin_repo.get_by_username = AsyncMock(return_value=sample_admin)
        mock_password_hasher.verify.return_value = True

        # Act
        result = await login_use_case.execute(
            LoginCommandDTO(username="superadmin1", password="password123")
        )

        # Assert
        assert result.is_ok()
        assert result.value.token == "signed.jwt.token"
        assert result.value.user.role == "SUPERADMIN"
        assert result.value.expires_in == 3600
        mock_session_cache.set.assert_called_once_with(
            active_token_key("admin_1"), "signed.jwt.token", 3600
        )

    async def test_profile_never_exposes_password_hash(
        self, login_use_case, mock_admin_repo, mock_password_hasher, sample_admin
    ):
        mock_admin_repo.get_by_username = AsyncMock(return_value=sample_admin)
        mock_password_hasher.verify.return_value = True

        result = await login_use_case.execute(
            LoginCommandDTO(username="superadmin1", password="password123")
        )

        assert "password_hash" not in result.value.user.model_dump()

    async def test_cache_failure_still_logs_in(
        self, login_use_case, mock_admin_repo, mock_password_hasher, mock_session_cache, sample_admin
    ):
        """
        Given: The session cache is down
        When: Login is executed with valid credentials
        Then: Login still succeeds
        """
        # Arrange
        mock_admin_repo.get_by_username = AsyncMock(return_value=sample_admin)
        mock_password_hasher.verify.return_value = True
        mock_session_cache.set = AsyncMock(side_effect=ConnectionError("cache down"))

        # Act
        result = await login_use_case.execute(
            LoginCommandDTO(username="superadmin1", password="password123")
        )

        # Assert
        assert result.is_ok()


@pytest.mark.asyncio
class TestLoginFailure:
    async def test_wrong_password(
        self, login_use_case, mock_admin_repo, mock_password_hasher, mock_session_cache, sample_admin
    ):
        """
        Given: superadmin1 exists
        When: Login is executed with the wrong password
        Then: INVALID_CREDENTIALS is returned and nothing is cached
        """
        # Arrange
        mock_admin_repo.get_by_username = AsyncMock(return_value=sample_admin)
        mock_password_hasher.verify.return_value = False

        # Act
        result = await login_use_case.execute(
            LoginCommandDTO(username="superadmin1", password="wrong")
        )

        # Assert
        assert result.is_err()
        assert result.error.code == "INVALID_CREDENTIALS"
        assert result.error.message == "Username atau password salah."
        mock_session_cache.set.assert_not_called()

    async def test_unknown_username_matches_wrong_password(
        self, login_use_case, mock_admin_repo, mock_password_hasher, mock_session_cache, mock_token_service
    ):
        # Arrange
        mock_admin_repo.get_by_username = AsyncMock(return_value=None)

        # Act
        result = await login_use_case.execute(
            LoginCommandDTO(username="nobody1", password="password123")
        )

        # Assert
        assert result.error.code == "INVALID_CREDENTIALS"
        assert result.error.message == "Username atau password salah."
        mock_password_hasher.verify.assert_not_called()
        mock_token_service.issue.assert_not_called()
        mock_session_cache.set.assert_not_called()
