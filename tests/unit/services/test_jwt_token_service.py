"""Unit tests for JwtTokenService"""

import jwt
import pytest
from datetime import datetime, timedelta, timezone
from src.adapter.services.token_service import JwtTokenService
from src.app.services.token_service import InvalidTokenError, TokenClaims

SECRET = "test-secret"


@pytest.fixture
def token_service():
    return JwtTokenService(secret=SECRET, expires_minutes=60)


@pytest.fixture
def claims():
    return TokenClaims(id="admin_1", username="superadmin1", role="SUPERADMIN")


def _encode(payload, secret=SECRET):
    return jwt.encode(payload, secret, algorithm="HS256")


class TestIssueAndVerify:
    def test_verify_returns_issued_claims(self, token_service, claims):
        # Act
        token = token_service.issue(claims)

        # Assert
        assert token_service.verify(token) == claims

    def test_two_tokens_for_same_claims_differ(self, token_service, claims):
        """Test two logins within the same second still get distinct tokens"""
        assert token_service.issue(claims) != token_service.issue(claims)

    def test_wrong_secret_is_invalid(self, claims):
        token = JwtTokenService(secret="other-secret").issue(claims)

        with pytest.raises(InvalidTokenError):
            JwtTokenService(secret=SECRET).verify(token)

    def test_expired_token_is_invalid(self, token_service):
        # Arrange
        now = datetime.now(timezone.utc)
        token = _encode({
            "id": "admin_1",
            "username": "superadmin1",
            "role": "SUPERADMIN",
            "iat": now - timedelta(hours=2),
            "exp": now - timedelta(hours=1),
        })

        # Act & Assert
        with pytest.raises(InvalidTokenError):
            token_service.verify(token)

    def test_malformed_token_is_invalid(self, token_service):
        with pytest.raises(InvalidTokenError):
            token_service.verify("not-a-jwt")

    def test_missing_claim_is_invalid(self, token_service):
        token = _encode({
            "id": "admin_1",
            "exp": datetime.now(timezone.utc) + timedelta(hours=1),
        })

        with pytest.raises(InvalidTokenError, match="Missing claim"):
            token_service.verify(token)


class TestDecodeUnsafe:
    def test_reads_id_and_expiry_of_expired_token(self, token_service):
        """
        Given: A token that expired an hour ago
        When: decode_unsafe is called
        Then: id and naive UTC expiry are still readable
        """
        # Arrange
        exp = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
        token = _encode({"id": "admin_1", "exp": exp})

        # Act
        decoded = token_service.decode_unsafe(token)

        # Assert
        assert decoded.id == "admin_1"
        assert decoded.expires_at == datetime(2025, 1, 1, 12, 0)

    def test_ignores_signature(self, token_service):
        token = _encode({"id": "admin_1"}, secret="someone-else")

        decoded = token_service.decode_unsafe(token)

        assert decoded.id == "admin_1"
        assert decoded.expires_at is None

    def test_garbage_returns_none(self, token_service):
        assert token_service.decode_unsafe("garbage") is None


class TestRemainingTtl:
    def test_seconds_until_expiry(self, token_service, claims):
        # Arrange
        token = token_service.issue(claims)

        # Act
        ttl = token_service.remaining_ttl(token, datetime.utcnow(), fallback_seconds=10)

        # Assert
        assert 3590 <= ttl <= 3600

    def test_at_least_one_second_for_expired_token(self, token_service):
        token = _encode({"id": "admin_1", "exp": datetime(2020, 1, 1, tzinfo=timezone.utc)})

        assert token_service.remaining_ttl(token, datetime.utcnow(), fallback_seconds=10) == 1

    def test_fallback_when_expiry_unreadable(self, token_service):
        assert token_service.remaining_ttl("garbage", datetime.utcnow(), fallback_seconds=86400) == 86400
