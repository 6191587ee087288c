"""SQLAlchemy implementation of PaymentRepository

Active payments are rows with deleted_at IS NULL.
"""

from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional, Tuple
from sqlalchemy import delete, func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.payment_repository import PaymentRepository, PaymentRecord
from src.domain.customer import Customer
from src.domain.debt import Debt
from src.domain.debt_cycle import DebtCycle
from src.domain.payment import Payment
from ._helpers import to_decimal


class SqlAlchemyPaymentRepository(PaymentRepository):
    """SQLAlchemy implementation of PaymentRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, payment: Payment) -> Payment:
        self.session.add(payment)
        await self.session.flush()
        await self.session.refresh(payment)
        return payment

    async def get_by_id(self, payment_id: str) -> Optional[Payment]:
        stmt = select(Payment).where(Payment.id == payment_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def soft_delete(self, payment_id: str, deleted_at: datetime) -> None:
        stmt = (
            update(Payment)
            .where(Payment.id == payment_id, Payment.deleted_at.is_(None))
            .values(deleted_at=deleted_at)
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)
        payment = await self.session.get(Payment, payment_id)
        if payment is not None:
            await self.session.refresh(payment)

    async def sum_active_by_debt(self, cycle_id: str) -> Dict[str, Decimal]:
        stmt = (
            select(Payment.debt_id, func.sum(Payment.amount))
            .where(
                Payment.cycle_id == cycle_id,
                Payment.debt_id.is_not(None),
                Payment.deleted_at.is_(None),
            )
            .group_by(Payment.debt_id)
        )
        result = await self.session.execute(stmt)
        return {debt_id: to_decimal(total) for debt_id, total in result.all()}

    async def sum_active_for_debt(self, debt_id: str) -> Decimal:
        stmt = select(func.sum(Payment.amount)).where(
            Payment.debt_id == debt_id,
            Payment.deleted_at.is_(None),
        )
        result = await self.session.execute(stmt)
        return to_decimal(result.scalar())

    async def sum_active_by_cycle(self, cycle_ids: List[str]) -> Dict[str, Decimal]:
        if not cycle_ids:
            return {}
        stmt = (
            select(Payment.cycle_id, func.sum(Payment.amount))
            .where(Payment.cycle_id.in_(cycle_ids), Payment.deleted_at.is_(None))
            .group_by(Payment.cycle_id)
        )
        result = await self.session.execute(stmt)
        return {cycle_id: to_decimal(total) for cycle_id, total in result.all()}

    def _with_context(self):
        return (
            select(Payment, DebtCycle, Customer.name, Debt.amount)
            .join(DebtCycle, DebtCycle.id == Payment.cycle_id)
            .join(Customer, Customer.id == Payment.customer_id)
            .outerjoin(Debt, Debt.id == Payment.debt_id)
        )

    async def list_active_with_context(self, search: Optional[str] = None) -> List[PaymentRecord]:
        stmt = self._with_context().where(Payment.deleted_at.is_(None))
        if search:
            stmt = stmt.where(Customer.name.ilike(f"%{search}%"))
        stmt = stmt.order_by(Payment.paid_at.desc(), Payment.created_at.desc())

        result = await self.session.execute(stmt)
        return [
            PaymentRecord(payment=payment, cycle=cycle, customer_name=name, debt_amount=debt_amount)
            for payment, cycle, name, debt_amount in result.all()
        ]

    async def list_deleted_with_context(self) -> List[PaymentRecord]:
        stmt = (
            self._with_context()
            .where(Payment.deleted_at.is_not(None))
            .order_by(Payment.paid_at.desc())
        )
        result = await self.session.execute(stmt)
        return [
            PaymentRecord(payment=payment, cycle=cycle, customer_name=name, debt_amount=debt_amount)
            for payment, cycle, name, debt_amount in result.all()
        ]

    async def sum_active_amount(
        self, paid_from: Optional[datetime] = None, paid_to: Optional[datetime] = None
    ) -> Decimal:
        stmt = select(func.sum(Payment.amount)).where(Payment.deleted_at.is_(None))
        if paid_from is not None:
            stmt = stmt.where(Payment.paid_at >= paid_from)
        if paid_to is not None:
            stmt = stmt.where(Payment.paid_at <= paid_to)
        result = await self.session.execute(stmt)
        return to_decimal(result.scalar())

    async def list_active_paid_between(
        self, paid_from: datetime, paid_to: datetime
    ) -> List[Tuple[datetime, Decimal]]:
        stmt = (
            select(Payment.paid_at, Payment.amount)
            .where(
                Payment.deleted_at.is_(None),
                Payment.paid_at >= paid_from,
                Payment.paid_at <= paid_to,
            )
            .order_by(Payment.paid_at)
        )
        result = await self.session.execute(stmt)
        return [(paid_at, to_decimal(amount)) for paid_at, amount in result.all()]

    async def delete_by_debt(self, debt_id: str) -> int:
        stmt = delete(Payment).where(Payment.debt_id == debt_id).execution_options(
            synchronize_session=False
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0

    async def delete_by_cycle(self, cycle_id: str) -> int:
        stmt = delete(Payment).where(Payment.cycle_id == cycle_id).execution_options(
            synchronize_session=False
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0

    async def purge_deleted_before(self, cutoff: datetime) -> int:
        stmt = (
            delete(Payment)
            .where(Payment.deleted_at.is_not(None), Payment.deleted_at <= cutoff)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0
