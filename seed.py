"""Seed the default admin accounts

Usage:
    python seed.py
"""

import asyncio
import logging
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401
from config import ApplicationConfig
from src.adapter.repositories.admin_repository import SqlAlchemyAdminRepository
from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.admins import SeedAdmins

logger = logging.getLogger(__name__)


async def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
    session_factory = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )

    try:
        if ApplicationConfig.AUTO_CREATE_TABLES:
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)

        async with session_factory() as session:
            use_case = SeedAdmins(
                SqlAlchemyUnitOfWork(session),
                SqlAlchemyAdminRepository(session),
                BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS),
            )
            result = await use_case.execute(ApplicationConfig.SEED_ADMIN_PASSWORD)

        if result.is_err():
            raise SystemExit(f"Seeding failed: {result.error.reason}")

        print(f"Created: {', '.join(result.value.created) or '-'}")
        print(f"Updated: {', '.join(result.value.updated) or '-'}")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
