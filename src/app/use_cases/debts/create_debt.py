"""CreateDebt Use Case

Appends a line item to the customer's open cycle, opening one if needed.
"""

import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.debt_cycle_repository import DebtCycleRepository
from src.app.repositories.debt_repository import DebtRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.debt import Debt
from src.domain.debt_cycle import DebtCycle
from .dtos import CreateDebtCommandDTO, CreateDebtResponseDTO, DebtDTO

logger = logging.getLogger(__name__)


class CreateDebt:
    """
    Use Case: Record a debt line item

    Business Rules:
    1. The customer must exist
    2. At most one open cycle per customer; the partial unique index decides
       concurrent find-or-create races
    3. The cycle total grows by exactly the line item amount, computed in SQL

    Flow:
    1. Load the customer
    2. Find the open cycle (locked) or create it
    3. On a lost creation race: roll back (nothing written yet) and re-read
       the winner's cycle
    4. Insert the line item and increment the cycle total
    5. Commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        customer_repo: CustomerRepository,
        cycle_repo: DebtCycleRepository,
        debt_repo: DebtRepository,
    ):
        self.uow = uow
        self.customer_repo = customer_repo
        self.cycle_repo = cycle_repo
        self.debt_repo = debt_repo

    async def execute(self, command: CreateDebtCommandDTO) -> Result[CreateDebtResponseDTO]:
        try:
            customer = await self.customer_repo.get_by_id(command.customer_id)
            if customer is None:
                return Return.err(
                    Error(
                        code="CUSTOMER_NOT_FOUND",
                        message="User yang dipilih tidak ditemukan.",
                    )
                )
            # Rollback expires loaded instances
            customer_name = customer.name

            cycle = await self._open_cycle(command.customer_id)

            debt = await self.debt_repo.create(
                Debt(
                    cycle_id=cycle.id,
                    customer_id=command.customer_id,
                    amount=command.amount,
                    date=command.date,
                    note=command.note,
                )
            )
            new_total = await self.cycle_repo.increment_total(cycle.id, command.amount)

            await self.uow.commit()

            logger.info(
                f"Debt {debt.id} of {command.amount} added to cycle {cycle.id}, total={new_total}"
            )
            return Return.ok(
                CreateDebtResponseDTO(
                    cycle_id=cycle.id,
                    customer_id=command.customer_id,
                    customer_name=customer_name,
                    total=new_total,
                    debt=DebtDTO.from_debt(debt),
                )
            )

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_DEBT_FAILED",
                    message="Failed to record debt",
                    reason=str(e),
                )
            )

    async def _open_cycle(self, customer_id: str) -> DebtCycle:
        cycle: Optional[DebtCycle] = await self.cycle_repo.get_open_by_customer(
            customer_id, for_update=True
        )
        if cycle is not None:
            return cycle

        try:
            return await self.cycle_repo.create(DebtCycle(customer_id=customer_id))
        except IntegrityError:
            logger.info(f"Open cycle for customer {customer_id} created concurrently, re-reading")
            await self.uow.rollback()

        cycle = await self.cycle_repo.get_open_by_customer(customer_id, for_update=True)
        if cycle is None:
            raise RuntimeError(f"Open cycle for customer {customer_id} vanished after race")
        return cycle
