from .unit_of_work import SqlAlchemyUnitOfWork
from .token_service import JwtTokenService
from .password_hasher import BcryptPasswordHasher
from .session_cache import (
    RedisSessionCache,
    InMemorySessionCache,
    create_session_cache,
)

__all__ = [
    "SqlAlchemyUnitOfWork",
    "JwtTokenService",
    "BcryptPasswordHasher",
    "RedisSessionCache",
    "InMemorySessionCache",
    "create_session_cache",
]
