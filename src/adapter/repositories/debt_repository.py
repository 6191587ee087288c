"""SQLAlchemy implementation of DebtRepository"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.debt_repository import DebtRepository
from src.domain.debt import Debt
from ._helpers import to_decimal


class SqlAlchemyDebtRepository(DebtRepository):
    """SQLAlchemy implementation of DebtRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, debt: Debt) -> Debt:
        self.session.add(debt)
        await self.session.flush()
        await self.session.refresh(debt)
        return debt

    async def get_by_id(self, debt_id: str) -> Optional[Debt]:
        stmt = select(Debt).where(Debt.id == debt_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_cycle(self, cycle_id: str) -> List[Debt]:
        stmt = (
            select(Debt)
            .where(Debt.cycle_id == cycle_id)
            .order_by(Debt.date, Debt.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def sum_by_cycle(self, cycle_id: str) -> Decimal:
        stmt = select(func.sum(Debt.amount)).where(Debt.cycle_id == cycle_id)
        result = await self.session.execute(stmt)
        return to_decimal(result.scalar())

    async def sum_amount(
        self, date_from: Optional[datetime] = None, date_to: Optional[datetime] = None
    ) -> Decimal:
        stmt = select(func.sum(Debt.amount))
        if date_from is not None:
            stmt = stmt.where(Debt.date >= date_from)
        if date_to is not None:
            stmt = stmt.where(Debt.date <= date_to)
        result = await self.session.execute(stmt)
        return to_decimal(result.scalar())

    async def delete(self, debt: Debt) -> None:
        await self.session.delete(debt)
        await self.session.flush()

    async def delete_by_cycle(self, cycle_id: str) -> int:
        stmt = delete(Debt).where(Debt.cycle_id == cycle_id).execution_options(
            synchronize_session=False
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0
