"""SQLAlchemy implementation of AdminRepository"""

from typing import List, Optional, Tuple
from sqlalchemy import func, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.admin_repository import AdminRepository
from src.domain.admin import Admin


class SqlAlchemyAdminRepository(AdminRepository):
    """SQLAlchemy implementation of AdminRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, admin_id: str) -> Optional[Admin]:
        stmt = select(Admin).where(Admin.id == admin_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[Admin]:
        stmt = select(Admin).where(Admin.username == username)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[Admin]:
        stmt = select(Admin).where(Admin.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list(
        self, search: Optional[str] = None, limit: int = 7, offset: int = 0
    ) -> Tuple[List[Admin], int]:
        """
        List admins newest first, filtered by name/email/username substring

        Returns:
            Tuple of (admins on this page, total matching admins)
        """
        conditions = []
        if search:
            pattern = f"%{search}%"
            conditions.append(
                or_(
                    Admin.name.ilike(pattern),
                    Admin.email.ilike(pattern),
                    Admin.username.ilike(pattern),
                )
            )

        count_stmt = select(func.count()).select_from(Admin).where(*conditions)
        count_result = await self.session.execute(count_stmt)
        total = count_result.scalar() or 0

        stmt = (
            select(Admin)
            .where(*conditions)
            .order_by(Admin.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def create(self, admin: Admin) -> Admin:
        self.session.add(admin)
        await self.session.flush()
        await self.session.refresh(admin)
        return admin

    async def update(self, admin: Admin) -> Admin:
        self.session.add(admin)
        await self.session.flush()
        await self.session.refresh(admin)
        return admin

    async def delete(self, admin: Admin) -> None:
        await self.session.delete(admin)
        await self.session.flush()
