"""Session Cache Interface

TTL key-value store holding the active token per admin and the logout
blacklist. Treated as a soft index: the database stays the source of truth.
"""

from abc import ABC, abstractmethod
from typing import Optional

ACTIVE_TOKEN_PREFIX = "token"
BLACKLIST_PREFIX = "blacklist"


def active_token_key(admin_id: str) -> str:
    return f"{ACTIVE_TOKEN_PREFIX}:{admin_id}"


def blacklist_key(token: str) -> str:
    return f"{BLACKLIST_PREFIX}:{token}"


class SessionCache(ABC):
    """
    Abstract TTL key-value cache

    Implementations:
    - Redis (production)
    - In-memory (development and tests)
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Read a key

        Returns:
            Stored value, or None if absent or expired
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """
        Write a key that expires after ttl_seconds (minimum 1)
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove a key; missing keys are ignored"""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying client"""
        pass
