"""AuthenticateToken Use Case

Access-control checks applied to every protected request.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.session_cache import SessionCache, active_token_key, blacklist_key
from src.app.services.token_service import TokenService, InvalidTokenError
from src.domain.admin import Role
from .dtos import AuthenticatedAdmin

logger = logging.getLogger(__name__)


def _prefix(token: str) -> str:
    return f"{token[:12]}..."


class AuthenticateToken:
    """
    Use Case: Resolve a presented token to an authenticated admin

    Checks, in order:
    1. blacklist:{token} absent          -> TOKEN_REVOKED
    2. signature and expiry valid        -> INVALID_TOKEN
    3. token:{id} equals the token       -> SESSION_SUPERSEDED
    4. role claim is ADMIN or SUPERADMIN -> INVALID_ROLE

    Cache reads are not best effort here: a failing cache raises and the
    request fails as an internal error.
    """

    def __init__(self, token_service: TokenService, session_cache: SessionCache):
        self.token_service = token_service
        self.session_cache = session_cache

    async def execute(self, token: str) -> Result[AuthenticatedAdmin]:
        token = token.strip()

        if await self.session_cache.get(blacklist_key(token)) is not None:
            logger.warning(f"Rejected revoked token {_prefix(token)}")
            return Return.err(Error(code="TOKEN_REVOKED", message="Token sudah logout"))

        try:
            claims = self.token_service.verify(token)
        except InvalidTokenError as e:
            logger.warning(f"Rejected invalid token {_prefix(token)}: {e}")
            return Return.err(
                Error(code="INVALID_TOKEN", message="Token tidak valid", reason=str(e))
            )

        active = await self.session_cache.get(active_token_key(claims.id))
        if active is None or active.strip() != token:
            logger.warning(f"Rejected superseded session for admin {claims.id}")
            return Return.err(
                Error(
                    code="SESSION_SUPERSEDED",
                    message="Token tidak aktif lagi. Silakan login ulang.",
                )
            )

        try:
            role = Role.parse(claims.role)
        except ValueError:
            return Return.err(Error(code="INVALID_ROLE", message="Role tidak valid"))

        return Return.ok(AuthenticatedAdmin(id=claims.id, username=claims.username, role=role))
