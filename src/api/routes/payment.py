"""Payment API Routes"""

from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyDebtCycleRepository,
    SqlAlchemyDebtRepository,
    SqlAlchemyPaymentRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.schemas.debt_request import CreatePaymentRequestSchema
from src.api.schemas.response import ApiResponse, ok
from src.api.security import get_current_admin
from src.app.use_cases.payments import (
    CreatePaymentCommandDTO,
    DeletedPaymentDTO,
    DeletePayment,
    ListDeletedPayments,
    ListPayments,
    PaymentDTO,
    PaymentListItemDTO,
    PaymentResultDTO,
    create_payment_use_case,
)
from src.depends import get_config, get_session

router = APIRouter(prefix="/payment", tags=["Payment"], dependencies=[Depends(get_current_admin)])


@router.get("", response_model=ApiResponse[list[PaymentListItemDTO]])
async def list_payments(
    search: Optional[str] = Query(default=None, description="Customer name substring"),
    page: int = Query(default=1, ge=1),
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """
    Non-deleted payments, most recent first.

    Each row carries `remaining_calculated` (balance right after the
    payment) and `total_remaining` (what the customer still owes).
    """
    use_case = ListPayments(SqlAlchemyPaymentRepository(session), SqlAlchemyDebtCycleRepository(session))
    result = await use_case.execute(search=search, page=page, page_size=config.PAGE_SIZE)
    return ok(result.value.items, pagination=result.value.pagination)


@router.post(
    "",
    response_model=ApiResponse[PaymentResultDTO],
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "No open cycle, amount mismatch or excess payment"},
        409: {"description": "Cycle settled concurrently by another payment"},
    },
)
async def create_payment(
    request: CreatePaymentRequestSchema,
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """
    Record a payment.

    With the default `cycle` settlement policy the amount must equal the
    open cycle total exactly and the cycle is marked paid. With
    `allocation` the amount is spread over line items oldest first.
    """
    use_case = create_payment_use_case(
        config.SETTLEMENT_POLICY,
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyDebtCycleRepository(session),
        SqlAlchemyDebtRepository(session),
        SqlAlchemyPaymentRepository(session),
    )
    command = CreatePaymentCommandDTO(
        customer_id=request.customer_id,
        amount=request.amount,
        paid_at=request.paid_at or datetime.utcnow(),
    )
    result = await use_case.execute(command)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return ok(
        result.value,
        message=f"Pembayaran {result.value.customer_name} berhasil dicatat.",
        status_code=status.HTTP_201_CREATED,
    )


@router.get("/deleted", response_model=ApiResponse[list[DeletedPaymentDTO]])
async def list_deleted_payments(session: AsyncSession = Depends(get_session)):
    """Soft-deleted payments for history display."""
    result = await ListDeletedPayments(SqlAlchemyPaymentRepository(session)).execute()
    return ok(result.value)


@router.delete("/{payment_id}", response_model=ApiResponse[PaymentDTO])
async def delete_payment(payment_id: str, session: AsyncSession = Depends(get_session)):
    """
    Soft-delete a payment.

    **Returns:**
    - 200: deleted
    - 400: the debt it paid is not settled
    - 404: unknown or already deleted payment
    """
    use_case = DeletePayment(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyPaymentRepository(session),
        SqlAlchemyDebtRepository(session),
        SqlAlchemyDebtCycleRepository(session),
    )
    result = await use_case.execute(payment_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return ok(result.value, message="Pembayaran berhasil dihapus.")
