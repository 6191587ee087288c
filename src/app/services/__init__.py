from .unit_of_work import UnitOfWork
from .session_cache import SessionCache, active_token_key, blacklist_key
from .token_service import TokenService, TokenClaims, UnverifiedToken, InvalidTokenError
from .password_hasher import PasswordHasher

__all__ = [
    "UnitOfWork",
    "SessionCache",
    "active_token_key",
    "blacklist_key",
    "TokenService",
    "TokenClaims",
    "UnverifiedToken",
    "InvalidTokenError",
    "PasswordHasher",
]
