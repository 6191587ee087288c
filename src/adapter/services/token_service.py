"""JWT Token Service

Signs session tokens with PyJWT (HS256 by default).
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4
import jwt
from src.app.services.token_service import (
    TokenService,
    TokenClaims,
    UnverifiedToken,
    InvalidTokenError,
)

logger = logging.getLogger(__name__)


class JwtTokenService(TokenService):
    """
    TokenService backed by PyJWT

    Token payload: {id, username, role, iat, exp, jti}

    jti makes every issued token distinct, even two logins within the same
    second.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expires_minutes: int = 60):
        """
        Args:
            secret: HMAC signing secret
            algorithm: JWT algorithm
            expires_minutes: Token lifetime
        """
        self.secret = secret
        self.algorithm = algorithm
        self.expires_minutes = expires_minutes

    def issue(self, claims: TokenClaims) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "id": claims.id,
            "username": claims.username,
            "role": claims.role,
            "iat": now,
            "exp": now + timedelta(minutes=self.expires_minutes),
            "jti": uuid4().hex,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token expired") from e
        except jwt.PyJWTError as e:
            raise InvalidTokenError(str(e)) from e

        try:
            return TokenClaims(
                id=str(payload["id"]),
                username=str(payload["username"]),
                role=str(payload["role"]),
            )
        except KeyError as e:
            raise InvalidTokenError(f"Missing claim: {e}") from e

    def decode_unsafe(self, token: str) -> Optional[UnverifiedToken]:
        try:
            payload = jwt.decode(
                token,
                options={"verify_signature": False, "verify_exp": False},
                algorithms=[self.algorithm],
            )
        except jwt.PyJWTError:
            logger.debug("Could not decode token for bookkeeping")
            return None

        expires_at = None
        exp = payload.get("exp")
        if isinstance(exp, (int, float)):
            # Naive UTC, matching datetime.utcnow() used by callers
            expires_at = datetime.fromtimestamp(exp, tz=timezone.utc).replace(tzinfo=None)

        admin_id = payload.get("id")
        return UnverifiedToken(
            id=str(admin_id) if admin_id is not None else None,
            expires_at=expires_at,
        )
