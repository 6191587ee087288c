"""FastAPI application factory

Client handles (database engine, session factory, session cache) are built
in the lifespan from the given config and released on shutdown.
"""

import logging
from contextlib import asynccontextmanager
import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401  registers tables on SQLModel.metadata
from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.adapter.services.session_cache import create_session_cache
from src.adapter.services.token_service import JwtTokenService
from src.api.error import register_exception_handlers
from src.api.middleware import RequestLoggingMiddleware
from src.api.routes import admin, auth, dashboard, debt, payment, system, user

logger = logging.getLogger(__name__)


def create_lifespan(config):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_async_engine(config.DB_URI, echo=False, future=True)
        app.state.engine = engine
        app.state.session_factory = sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )
        app.state.session_cache = create_session_cache(config.CACHE_BACKEND, config.REDIS_URL)

        if config.AUTO_CREATE_TABLES:
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)

        logger.info("Application started")
        try:
            yield
        finally:
            await app.state.session_cache.close()
            await engine.dispose()
            logger.info("Application stopped")

    return lifespan


def create_app(config) -> FastAPI:
    logging.basicConfig(
        level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if config.ENABLE_SENTRY and config.DSN_SENTRY:
        sentry_sdk.init(dsn=config.DSN_SENTRY, environment=config.SENTRY_ENVIRONMENT)

    app = FastAPI(
        title="Utang Back Office API",
        description="Customer debts, debt cycles and payments for a shop back office",
        version="1.0.0",
        lifespan=create_lifespan(config),
    )

    app.state.config = config
    app.state.token_service = JwtTokenService(
        secret=config.JWT_SECRET,
        algorithm=config.JWT_ALGORITHM,
        expires_minutes=config.JWT_EXPIRES_MINUTES,
    )
    app.state.password_hasher = BcryptPasswordHasher(rounds=config.BCRYPT_ROUNDS)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if config.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    for module in (system, auth, admin, user, debt, payment, dashboard):
        app.include_router(module.router, prefix=config.API_PREFIX)

    @app.get("/health", include_in_schema=False)
    async def health():
        return {"status": "ok"}

    return app
