"""SettleCycle Use Case

Exact settlement: one payment pays off the customer's open cycle in full.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.debt_cycle_repository import DebtCycleRepository
from src.app.repositories.payment_repository import PaymentRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.payment import Payment
from . import _messages
from .dtos import CreatePaymentCommandDTO, PaymentResultDTO, PaymentDTO

logger = logging.getLogger(__name__)


class SettleCycle:
    """
    Use Case: Settle the open cycle with a single payment

    Business Rules:
    1. The customer must have an open cycle (NO_ACTIVE_CYCLE)
    2. amount must equal the cycle total exactly (AMOUNT_MISMATCH)
    3. is_paid flips false -> true through a conditional update; when
       another payment won the race the whole operation is rolled back
       (SETTLEMENT_CONFLICT)

    Flow:
    1. Load customer and open cycle (locked)
    2. Compare amount with total
    3. Insert the payment (remaining = 0)
    4. Mark the cycle paid
    5. Commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        customer_repo: CustomerRepository,
        cycle_repo: DebtCycleRepository,
        payment_repo: PaymentRepository,
    ):
        self.uow = uow
        self.customer_repo = customer_repo
        self.cycle_repo = cycle_repo
        self.payment_repo = payment_repo

    async def execute(self, command: CreatePaymentCommandDTO) -> Result[PaymentResultDTO]:
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
                return Return.err(
                    Error(code="NO_ACTIVE_CYCLE", message=_messages.NO_ACTIVE_CYCLE)
                )

            if command.amount != cycle.total:
                return Return.err(
                    Error(
                        code="AMOUNT_MISMATCH",
                        message=f"Nominal pembayaran harus sama dengan total utang ({cycle.total}).",
                        reason=f"amount={command.amount}, total={cycle.total}",
                        details={"amount": [f"Nominal harus {cycle.total}."]},
                    )
                )

            payment = await self.payment_repo.create(
                Payment(
                    cycle_id=cycle.id,
                    customer_id=command.customer_id,
                    amount=command.amount,
                    remaining=cycle.total - command.amount,
                    paid_at=command.paid_at,
                )
            )

            if not await self.cycle_repo.mark_paid(cycle.id, command.paid_at):
                await self.uow.rollback()
                logger.warning(f"Lost settlement race on cycle {cycle.id}")
                return Return.err(
                    Error(code="SETTLEMENT_CONFLICT", message=_messages.SETTLEMENT_CONFLICT)
                )

            await self.uow.commit()

            logger.info(f"Cycle {cycle.id} settled by payment {payment.id}")
            return Return.ok(
                PaymentResultDTO(
                    cycle_id=cycle.id,
                    customer_id=command.customer_id,
                    customer_name=customer.name,
                    total=cycle.total,
                    amount=command.amount,
                    is_paid=True,
                    paid_at=command.paid_at,
                    payments=[PaymentDTO.from_payment(payment)],
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
