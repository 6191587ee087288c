"""SQLAlchemy implementation of DebtCycleRepository

total and is_paid are changed with single UPDATE statements:
- increment_total adds in SQL (total = total + :amount)
- mark_paid only matches rows still unpaid, so exactly one caller wins
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple
from sqlalchemy import func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.debt_cycle_repository import DebtCycleRepository, CycleRecord
from src.domain.customer import Customer
from src.domain.debt_cycle import DebtCycle


class SqlAlchemyDebtCycleRepository(DebtCycleRepository):
    """
    SQLAlchemy implementation of DebtCycleRepository

    Features:
    - Optional SELECT FOR UPDATE on reads inside write transactions
    - Atomic total increments and conditional settlement
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, cycle_id: str, for_update: bool = False) -> Optional[DebtCycle]:
        stmt = select(DebtCycle).where(DebtCycle.id == cycle_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_open_by_customer(
        self, customer_id: str, for_update: bool = False
    ) -> Optional[DebtCycle]:
        stmt = select(DebtCycle).where(
            DebtCycle.customer_id == customer_id,
            DebtCycle.is_paid == False,  # noqa: E712
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, cycle: DebtCycle) -> DebtCycle:
        self.session.add(cycle)
        await self.session.flush()
        await self.session.refresh(cycle)
        return cycle

    async def increment_total(self, cycle_id: str, amount: Decimal) -> Decimal:
        stmt = (
            update(DebtCycle)
            .where(DebtCycle.id == cycle_id)
            .values(total=DebtCycle.total + amount, updated_at=datetime.utcnow())
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)
        cycle = await self._reload(cycle_id)
        return cycle.total

    async def mark_paid(self, cycle_id: str, paid_at: datetime) -> bool:
        stmt = (
            update(DebtCycle)
            .where(
                DebtCycle.id == cycle_id,
                DebtCycle.is_paid == False,  # noqa: E712
            )
            .values(is_paid=True, paid_at=paid_at, updated_at=datetime.utcnow())
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self._reload(cycle_id)
        return result.rowcount == 1

    async def list_with_customer(
        self, search: Optional[str] = None, limit: int = 7, offset: int = 0
    ) -> Tuple[List[CycleRecord], int]:
        conditions = []
        if search:
            conditions.append(Customer.name.ilike(f"%{search}%"))

        count_stmt = (
            select(func.count())
            .select_from(DebtCycle)
            .join(Customer, Customer.id == DebtCycle.customer_id)
            .where(*conditions)
        )
        count_result = await self.session.execute(count_stmt)
        total = count_result.scalar() or 0

        stmt = (
            select(DebtCycle, Customer.name)
            .join(Customer, Customer.id == DebtCycle.customer_id)
            .where(*conditions)
            .order_by(DebtCycle.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [CycleRecord(cycle=cycle, customer_name=name) for cycle, name in result.all()], total

    async def list_open_with_customer(
        self, search: Optional[str] = None, limit: int = 50
    ) -> List[CycleRecord]:
        stmt = (
            select(DebtCycle, Customer.name)
            .join(Customer, Customer.id == DebtCycle.customer_id)
            .where(DebtCycle.is_paid == False)  # noqa: E712
        )
        if search:
            stmt = stmt.where(Customer.name.ilike(f"%{search}%"))
        stmt = stmt.order_by(Customer.name).limit(limit)

        result = await self.session.execute(stmt)
        return [CycleRecord(cycle=cycle, customer_name=name) for cycle, name in result.all()]

    async def list_by_customer(self, customer_id: str) -> List[DebtCycle]:
        stmt = (
            select(DebtCycle)
            .where(DebtCycle.customer_id == customer_id)
            .order_by(DebtCycle.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_open(self) -> List[DebtCycle]:
        stmt = select(DebtCycle).where(DebtCycle.is_paid == False)  # noqa: E712
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_open_by_customers(self, customer_ids: List[str]) -> List[DebtCycle]:
        if not customer_ids:
            return []
        stmt = select(DebtCycle).where(
            DebtCycle.customer_id.in_(customer_ids),
            DebtCycle.is_paid == False,  # noqa: E712
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_customers_with_paid_cycle(self) -> int:
        stmt = select(func.count(func.distinct(DebtCycle.customer_id))).where(
            DebtCycle.is_paid == True  # noqa: E712
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def delete(self, cycle: DebtCycle) -> None:
        await self.session.delete(cycle)
        await self.session.flush()

    async def _reload(self, cycle_id: str) -> Optional[DebtCycle]:
        # Bulk UPDATEs bypass the identity map; refresh any loaded instance.
        cycle = await self.session.get(DebtCycle, cycle_id)
        if cycle is not None:
            await self.session.refresh(cycle)
        return cycle
