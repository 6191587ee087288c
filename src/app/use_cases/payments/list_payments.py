"""Payment listings with derived balances"""

from collections import defaultdict
from decimal import Decimal
from typing import Dict, List, Optional
from libs.result import Result, Return
from src.app.repositories.debt_cycle_repository import DebtCycleRepository
from src.app.repositories.payment_repository import PaymentRepository, PaymentRecord
from src.app.use_cases.pagination import build_pagination, page_offset
from src.domain.balances import PaymentLine, cycle_outstanding, running_remaining
from .dtos import PaymentListDTO, PaymentListItemDTO, DeletedPaymentDTO


def _group_of(record: PaymentRecord) -> PaymentLine:
    payment = record.payment
    if payment.debt_id is not None and record.debt_amount is not None:
        group_id, group_amount = payment.debt_id, record.debt_amount
    else:
        group_id, group_amount = payment.cycle_id, record.cycle.total
    return PaymentLine(
        payment_id=payment.id,
        group_id=group_id,
        group_amount=group_amount,
        amount=payment.amount,
        paid_at=payment.paid_at,
        created_at=payment.created_at,
    )


class ListPayments:
    """
    Use Case: Paged non-deleted payments, most recent first

    Derived fields, recomputed on every call:
    - remaining_calculated: balance of the payment's line item (or cycle)
      right after that payment
    - total_remaining: what the customer still owes on its open cycle
    """

    def __init__(self, payment_repo: PaymentRepository, cycle_repo: DebtCycleRepository):
        self.payment_repo = payment_repo
        self.cycle_repo = cycle_repo

    async def execute(
        self, search: Optional[str] = None, page: int = 1, page_size: int = 7
    ) -> Result[PaymentListDTO]:
        records = await self.payment_repo.list_active_with_context(search=search or None)
        remaining = running_remaining(_group_of(record) for record in records)

        offset = page_offset(page, page_size)
        page_records = records[offset:offset + page_size]

        outstanding = await self._outstanding_by_customer(
            list({record.payment.customer_id for record in page_records})
        )

        items = [
            PaymentListItemDTO(
                id=record.payment.id,
                cycle_id=record.payment.cycle_id,
                debt_id=record.payment.debt_id,
                customer_id=record.payment.customer_id,
                customer_name=record.customer_name,
                amount=record.payment.amount,
                remaining=record.payment.remaining,
                remaining_calculated=remaining[record.payment.id],
                total_remaining=outstanding.get(record.payment.customer_id, Decimal("0")),
                cycle_total=record.cycle.total,
                is_paid=record.cycle.is_paid,
                paid_at=record.payment.paid_at,
            )
            for record in page_records
        ]
        return Return.ok(
            PaymentListDTO(items=items, pagination=build_pagination(page, page_size, len(records)))
        )

    async def _outstanding_by_customer(self, customer_ids: List[str]) -> Dict[str, Decimal]:
        cycles = await self.cycle_repo.list_open_by_customers(customer_ids)
        paid = await self.payment_repo.sum_active_by_cycle([cycle.id for cycle in cycles])

        outstanding: Dict[str, Decimal] = defaultdict(lambda: Decimal("0"))
        for cycle in cycles:
            outstanding[cycle.customer_id] += cycle_outstanding(
                cycle.total, cycle.is_paid, paid.get(cycle.id, Decimal("0"))
            )
        return dict(outstanding)


class ListDeletedPayments:
    """Soft-deleted payments for history display"""

    def __init__(self, payment_repo: PaymentRepository):
        self.payment_repo = payment_repo

    async def execute(self) -> Result[List[DeletedPaymentDTO]]:
        records = await self.payment_repo.list_deleted_with_context()
        return Return.ok(
            [
                DeletedPaymentDTO(
                    id=record.payment.id,
                    customer_id=record.payment.customer_id,
                    customer_name=record.customer_name,
                    amount=record.payment.amount,
                    remaining=record.payment.remaining,
                    total_debt=(
                        record.debt_amount
                        if record.debt_amount is not None
                        else record.cycle.total
                    ),
                    paid_at=record.payment.paid_at,
                    deleted_at=record.payment.deleted_at,
                )
                for record in records
            ]
        )
