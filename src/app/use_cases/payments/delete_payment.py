"""DeletePayment Use Case"""

import logging
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.repositories.debt_cycle_repository import DebtCycleRepository
from src.app.repositories.debt_repository import DebtRepository
from src.app.repositories.payment_repository import PaymentRepository
from src.app.services.unit_of_work import UnitOfWork
from .dtos import PaymentDTO

logger = logging.getLogger(__name__)


class DeletePayment:
    """
    Use Case: Soft-delete a payment

    Business Rules:
    1. Only a payment whose debt is fully paid may be deleted:
       - allocated payment: its line item is covered by non-deleted payments
       - cycle payment: its cycle is settled
    2. Deleting sets deleted_at only; is_paid is never reverted
    3. Deleting an already deleted payment is PAYMENT_NOT_FOUND
    """

    def __init__(
        self,
        uow: UnitOfWork,
        payment_repo: PaymentRepository,
        debt_repo: DebtRepository,
        cycle_repo: DebtCycleRepository,
    ):
        self.uow = uow
        self.payment_repo = payment_repo
        self.debt_repo = debt_repo
        self.cycle_repo = cycle_repo

    async def execute(self, payment_id: str) -> Result[PaymentDTO]:
        try:
            payment = await self.payment_repo.get_by_id(payment_id)
            if payment is None or payment.deleted_at is not None:
                return Return.err(
                    Error(code="PAYMENT_NOT_FOUND", message="Pembayaran tidak ditemukan.")
                )

            if not await self._is_settled(payment):
                return Return.err(
                    Error(
                        code="DEBT_NOT_SETTLED",
                        message="Pembayaran tidak bisa dihapus karena utang belum lunas.",
                    )
                )

            await self.payment_repo.soft_delete(payment.id, datetime.utcnow())
            await self.uow.commit()

            logger.info(f"Payment {payment.id} soft-deleted")
            return Return.ok(PaymentDTO.from_payment(payment))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DELETE_PAYMENT_FAILED",
                    message="Failed to delete payment",
                    reason=str(e),
                )
            )

    async def _is_settled(self, payment) -> bool:
        if payment.debt_id is not None:
            debt = await self.debt_repo.get_by_id(payment.debt_id)
            if debt is None:
                return False
            paid = await self.payment_repo.sum_active_for_debt(debt.id)
            return paid >= debt.amount

        cycle = await self.cycle_repo.get_by_id(payment.cycle_id)
        return cycle is not None and cycle.is_paid
