"""SQLAlchemy Unit of Work

Wraps the request (or worker) AsyncSession. Repositories built on the same
session only flush; nothing reaches the database until commit().
"""

from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        # Rolling back also expires every instance loaded by the session
        await self.session.rollback()
