"""DeleteDebt and DeleteCycle Use Cases

Both are guarded: nothing belonging to an unsettled cycle is removed.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.debt_cycle_repository import DebtCycleRepository
from src.app.repositories.debt_repository import DebtRepository
from src.app.repositories.payment_repository import PaymentRepository
from src.app.services.unit_of_work import UnitOfWork
from .dtos import DebtDTO, DeletedCycleDTO

logger = logging.getLogger(__name__)

UNSETTLED_MESSAGE = "Tidak bisa menghapus utang karena masih ada utang yang belum lunas."


class DeleteDebt:
    """
    Use Case: Delete one debt line item

    Business Rules:
    1. The line item's cycle must be settled
    2. The customer must have no open cycle at all
    3. Payments allocated to the line item are removed with it
    """

    def __init__(
        self,
        uow: UnitOfWork,
        debt_repo: DebtRepository,
        cycle_repo: DebtCycleRepository,
        payment_repo: PaymentRepository,
    ):
        self.uow = uow
        self.debt_repo = debt_repo
        self.cycle_repo = cycle_repo
        self.payment_repo = payment_repo

    async def execute(self, debt_id: str) -> Result[DebtDTO]:
        try:
            debt = await self.debt_repo.get_by_id(debt_id)
            if debt is None:
                return Return.err(
                    Error(code="DEBT_NOT_FOUND", message="Data utang tidak ditemukan.")
                )

            cycle = await self.cycle_repo.get_by_id(debt.cycle_id, for_update=True)
            open_cycle = await self.cycle_repo.get_open_by_customer(debt.customer_id)
            if cycle is None or not cycle.is_paid or open_cycle is not None:
                return Return.err(Error(code="UNSETTLED_DEBT", message=UNSETTLED_MESSAGE))

            response = DebtDTO.from_debt(debt)
            await self.payment_repo.delete_by_debt(debt.id)
            await self.debt_repo.delete(debt)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DELETE_DEBT_FAILED",
                    message="Failed to delete debt",
                    reason=str(e),
                )
            )

        logger.info(f"Debt {debt_id} deleted")
        return Return.ok(response)


class DeleteCycle:
    """
    Use Case: Delete a settled cycle with its line items and payments

    Open cycles are never deleted (UNSETTLED_DEBT).
    """

    def __init__(
        self,
        uow: UnitOfWork,
        cycle_repo: DebtCycleRepository,
        debt_repo: DebtRepository,
        payment_repo: PaymentRepository,
    ):
        self.uow = uow
        self.cycle_repo = cycle_repo
        self.debt_repo = debt_repo
        self.payment_repo = payment_repo

    async def execute(self, cycle_id: str) -> Result[DeletedCycleDTO]:
        try:
            cycle = await self.cycle_repo.get_by_id(cycle_id, for_update=True)
            if cycle is None:
                return Return.err(
                    Error(code="CYCLE_NOT_FOUND", message="Data utang tidak ditemukan.")
                )
            if not cycle.is_paid:
                return Return.err(Error(code="UNSETTLED_DEBT", message=UNSETTLED_MESSAGE))

            customer_id = cycle.customer_id
            payments_deleted = await self.payment_repo.delete_by_cycle(cycle_id)
            debts_deleted = await self.debt_repo.delete_by_cycle(cycle_id)
            await self.cycle_repo.delete(cycle)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DELETE_CYCLE_FAILED",
                    message="Failed to delete debt cycle",
                    reason=str(e),
                )
            )

        logger.info(
            f"Cycle {cycle_id} deleted with {debts_deleted} debts and {payments_deleted} payments"
        )
        return Return.ok(
            DeletedCycleDTO(
                cycle_id=cycle_id,
                customer_id=customer_id,
                debts_deleted=debts_deleted,
                payments_deleted=payments_deleted,
            )
        )
