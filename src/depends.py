from typing import AsyncGenerator
from fastapi import Request
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.password_hasher import PasswordHasher
from src.app.services.session_cache import SessionCache
from src.app.services.token_service import TokenService


def get_config(request: Request):
    return request.app.state.config


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    async with request.app.state.session_factory() as session:
        yield session


def get_session_cache(request: Request) -> SessionCache:
    return request.app.state.session_cache


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher
