"""Logout Use Case"""

import logging
from datetime import datetime
from typing import Optional
from libs.result import Result, Return
from src.app.services.session_cache import SessionCache, active_token_key, blacklist_key
from src.app.services.token_service import TokenService

logger = logging.getLogger(__name__)

BLACKLIST_MARKER = "1"


class Logout:
    """
    Use Case: Revoke a session token

    Business Rules:
    1. Always succeeds, with or without a token, and when repeated
    2. blacklist:{token} lives until the token would have expired, or for
       fallback_ttl_seconds when the expiry cannot be read
    3. token:{admin_id} is removed, ending the admin's active session
    4. Cache failures are logged, never returned
    """

    def __init__(
        self,
        token_service: TokenService,
        session_cache: SessionCache,
        fallback_ttl_seconds: int = 86400,
    ):
        self.token_service = token_service
        self.session_cache = session_cache
        self.fallback_ttl_seconds = fallback_ttl_seconds

    async def execute(self, token: Optional[str]) -> Result[None]:
        if not token:
            return Return.ok(None)

        token = token.strip()
        decoded = self.token_service.decode_unsafe(token)
        ttl = self.token_service.remaining_ttl(
            token, datetime.utcnow(), self.fallback_ttl_seconds
        )

        try:
            if await self.session_cache.get(blacklist_key(token)) is not None:
                # Already logged out
                return Return.ok(None)

            await self.session_cache.set(blacklist_key(token), BLACKLIST_MARKER, ttl)

            if decoded is not None and decoded.id:
                await self.session_cache.delete(active_token_key(decoded.id))
        except Exception as e:
            logger.warning(f"Logout cache bookkeeping failed: {e}")

        return Return.ok(None)
