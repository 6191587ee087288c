"""Token Service Interface

Issues and verifies signed, time-limited session tokens. Pure: no I/O.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class TokenClaims(BaseModel):
    """Claims carried by a session token"""
    id: str
    username: str
    role: str


class UnverifiedToken(BaseModel):
    """Claims read without signature verification (bookkeeping only)"""
    id: Optional[str] = None
    expires_at: Optional[datetime] = None


class InvalidTokenError(Exception):
    """Token signature is invalid, the token is malformed, or it expired"""
    pass


class TokenService(ABC):
    """
    Abstract token service

    decode_unsafe() must never be used for authorization decisions; it only
    helps compute TTLs for cache bookkeeping.
    """

    @abstractmethod
    def issue(self, claims: TokenClaims) -> str:
        """Sign claims with an absolute expiry"""
        pass

    @abstractmethod
    def verify(self, token: str) -> TokenClaims:
        """
        Verify signature and expiry

        Raises:
            InvalidTokenError: signature invalid or token expired
        """
        pass

    @abstractmethod
    def decode_unsafe(self, token: str) -> Optional[UnverifiedToken]:
        """Read id/expiry without verifying; None if the token cannot be decoded"""
        pass

    def remaining_ttl(self, token: str, now: datetime, fallback_seconds: int) -> int:
        """
        Seconds until the token expires, at least 1

        Falls back to fallback_seconds when the token has no readable expiry.
        """
        decoded = self.decode_unsafe(token)
        if decoded is None or decoded.expires_at is None:
            return fallback_seconds
        return max(1, int((decoded.expires_at - now).total_seconds()))
