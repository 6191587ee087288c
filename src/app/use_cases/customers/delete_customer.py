"""DeleteCustomer Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.debt_cycle_repository import DebtCycleRepository
from src.app.repositories.debt_repository import DebtRepository
from src.app.repositories.payment_repository import PaymentRepository
from src.app.services.unit_of_work import UnitOfWork
from .dtos import CustomerDTO

logger = logging.getLogger(__name__)


class DeleteCustomer:
    """
    Use Case: Delete a customer and its settled history

    Business Rules:
    1. Rejected with UNSETTLED_DEBT while the customer has an open cycle
    2. Otherwise payments, debts and cycles of the customer are removed
       together with the customer, in one transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        customer_repo: CustomerRepository,
        cycle_repo: DebtCycleRepository,
        debt_repo: DebtRepository,
        payment_repo: PaymentRepository,
    ):
        self.uow = uow
        self.customer_repo = customer_repo
        self.cycle_repo = cycle_repo
        self.debt_repo = debt_repo
        self.payment_repo = payment_repo

    async def execute(self, customer_id: str) -> Result[CustomerDTO]:
        try:
            customer = await self.customer_repo.get_by_id(customer_id)
            if customer is None:
                return Return.err(
                    Error(code="CUSTOMER_NOT_FOUND", message="User tidak ditemukan")
                )

            open_cycle = await self.cycle_repo.get_open_by_customer(customer_id, for_update=True)
            if open_cycle is not None:
                return Return.err(
                    Error(
                        code="UNSETTLED_DEBT",
                        message="User tidak bisa dihapus karena masih memiliki utang yang belum lunas.",
                        reason=f"Open cycle {open_cycle.id} total={open_cycle.total}",
                    )
                )

            response = CustomerDTO.from_customer(customer)
            for cycle in await self.cycle_repo.list_by_customer(customer_id):
                await self.payment_repo.delete_by_cycle(cycle.id)
                await self.debt_repo.delete_by_cycle(cycle.id)
                await self.cycle_repo.delete(cycle)

            await self.customer_repo.delete(customer)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DELETE_CUSTOMER_FAILED",
                    message="Failed to delete customer",
                    reason=str(e),
                )
            )

        logger.info(f"Customer {customer_id} deleted")
        return Return.ok(response)
