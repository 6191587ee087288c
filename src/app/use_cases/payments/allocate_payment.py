"""AllocatePayment Use Case

Oldest-first allocation of a payment over the open cycle's line items.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.debt_cycle_repository import DebtCycleRepository
from src.app.repositories.debt_repository import DebtRepository
from src.app.repositories.payment_repository import PaymentRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.allocation import (
    ExcessPaymentError,
    OutstandingDebt,
    allocate_oldest_first,
    total_outstanding,
)
from src.domain.payment import Payment
from . import _messages
from .dtos import CreatePaymentCommandDTO, PaymentResultDTO, PaymentDTO

logger = logging.getLogger(__name__)


class AllocatePayment:
    """
    Use Case: Spread a payment over outstanding line items, oldest first

    Business Rules:
    1. Outstanding balance of a line item = amount - sum of non-deleted payments
    2. One Payment row per line item touched, carrying that item's remaining
    3. An amount above the total outstanding is rejected whole (EXCESS_PAYMENT)
    4. Nothing outstanding is NO_UNPAID_DEBT
    5. The cycle is marked paid once nothing remains outstanding
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

    async def execute(self, command: CreatePaymentCommandDTO) -> Result[PaymentResultDTO]:
        no_unpaid_debt = Return.err(
            Error(code="NO_UNPAID_DEBT", message=_messages.NO_ACTIVE_CYCLE)
        )

        try:
            customer = await self.customer_repo.get_by_id(command.customer_id)
            if customer is None:
                return Return.err(
                    Error(code="CUSTOMER_NOT_FOUND", message=_messages.CUSTOMER_NOT_FOUND)
                )

            cycle = await self.cycle_repo.get_open_by_customer(
                command.customer_id, for_update=True
            )
            if cycle is None:
                return no_unpaid_debt

            debts = await self.debt_repo.list_by_cycle(cycle.id)
            paid = await self.payment_repo.sum_active_by_debt(cycle.id)
            outstanding = [
                OutstandingDebt(debt_id=debt.id, balance=debt.amount - paid.get(debt.id, 0))
                for debt in debts
            ]
            owed = total_outstanding(outstanding)
            if owed <= 0:
                return no_unpaid_debt

            try:
                allocations = allocate_oldest_first(outstanding, command.amount)
            except ExcessPaymentError as e:
                return Return.err(
                    Error(
                        code="EXCESS_PAYMENT",
                        message="Nominal pembayaran melebihi total sisa utang user.",
                        reason=str(e),
                        details={"amount": [f"Maksimal {e.outstanding}."]},
                    )
                )

            payments = []
            for allocation in allocations:
                payments.append(
                    await self.payment_repo.create(
                        Payment(
                            cycle_id=cycle.id,
                            customer_id=command.customer_id,
                            debt_id=allocation.debt_id,
                            amount=allocation.amount,
                            remaining=allocation.remaining,
                            paid_at=command.paid_at,
                        )
                    )
                )

            settled = command.amount == owed
            if settled and not await self.cycle_repo.mark_paid(cycle.id, command.paid_at):
                await self.uow.rollback()
                logger.warning(f"Lost settlement race on cycle {cycle.id}")
                return Return.err(
                    Error(code="SETTLEMENT_CONFLICT", message=_messages.SETTLEMENT_CONFLICT)
                )

            await self.uow.commit()

            logger.info(
                f"Payment of {command.amount} allocated over {len(payments)} debts "
                f"of cycle {cycle.id} (settled={settled})"
            )
            return Return.ok(
                PaymentResultDTO(
                    cycle_id=cycle.id,
                    customer_id=command.customer_id,
                    customer_name=customer.name,
                    total=cycle.total,
                    amount=command.amount,
                    is_paid=settled,
                    paid_at=command.paid_at,
                    payments=[PaymentDTO.from_payment(payment) for payment in payments],
                )
            )

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_PAYMENT_FAILED",
                    message="Failed to record payment",
                    reason=str(e),
                )
            )
