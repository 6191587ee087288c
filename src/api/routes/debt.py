"""Debt API Routes

Debt line items and the cycles that group them.
"""

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
from src.api.schemas.debt_request import CreateDebtRequestSchema
from src.api.schemas.response import ApiResponse, ok
from src.api.security import get_current_admin, require_superadmin
from src.app.use_cases.debts import (
    CreateDebt,
    CreateDebtCommandDTO,
    CreateDebtResponseDTO,
    DebtCycleDTO,
    DebtDTO,
    DeleteCycle,
    DeleteDebt,
    DeletedCycleDTO,
    ListDebtCycles,
    ListOpenCycles,
    ListPublicDebts,
    PublicDebtDTO,
)
from src.depends import get_config, get_session

router = APIRouter(prefix="/debt", tags=["Debt"])


@router.get(
    "",
    response_model=ApiResponse[list[DebtCycleDTO]],
    dependencies=[Depends(get_current_admin)],
)
async def list_debt_cycles(
    search: Optional[str] = Query(default=None, description="Customer name substring"),
    page: int = Query(default=1, ge=1),
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """Debt cycles with customer name, total and settlement state, newest first."""
    result = await ListDebtCycles(SqlAlchemyDebtCycleRepository(session)).execute(
        search=search, page=page, page_size=config.PAGE_SIZE
    )
    return ok(result.value.items, pagination=result.value.pagination)


@router.post(
    "",
    response_model=ApiResponse[CreateDebtResponseDTO],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)],
)
async def create_debt(
    request: CreateDebtRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Record a debt line item.

    The amount is added to the customer's open cycle; a cycle is opened
    when the customer has none.

    **Example request:**
    ```json
    {"customer_id": "…", "amount": "150000", "date": "2025-06-01T09:30:00"}
    ```

    **Returns:**
    - 201: line item and new cycle total
    - 400: validation failed
    - 404: unknown customer
    """
    use_case = CreateDebt(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyDebtCycleRepository(session),
        SqlAlchemyDebtRepository(session),
    )
    command = CreateDebtCommandDTO(
        customer_id=request.customer_id,
        amount=request.amount,
        date=request.date or datetime.utcnow(),
        note=request.note,
    )
    result = await use_case.execute(command)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return ok(
        result.value,
        message=f"{result.value.customer_name} berhasil menambahkan utang.",
        status_code=status.HTTP_201_CREATED,
    )


@router.get(
    "/open",
    response_model=ApiResponse[list[DebtCycleDTO]],
    dependencies=[Depends(get_current_admin)],
)
async def list_open_cycles(
    search: Optional[str] = Query(default=None, description="Customer name substring"),
    limit: Optional[int] = Query(default=None, ge=1),
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """Unpaid cycles for the payment form."""
    use_case = ListOpenCycles(SqlAlchemyDebtCycleRepository(session), config.OPEN_CYCLE_LIMIT)
    result = await use_case.execute(search=search, limit=limit)
    return ok(result.value)


@router.get("/public", response_model=ApiResponse[list[PublicDebtDTO]])
async def list_public_debts(
    search: Optional[str] = Query(default=None, description="Customer name substring"),
    page: int = Query(default=1, ge=1),
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """Public debt listing. No authentication."""
    result = await ListPublicDebts(SqlAlchemyDebtCycleRepository(session)).execute(
        search=search, page=page, page_size=config.PAGE_SIZE
    )
    return ok(result.value.items, pagination=result.value.pagination)


@router.delete(
    "/cycles/{cycle_id}",
    response_model=ApiResponse[DeletedCycleDTO],
    dependencies=[Depends(require_superadmin)],
)
async def delete_cycle(cycle_id: str, session: AsyncSession = Depends(get_session)):
    """Delete a settled cycle with its line items and payments (SUPERADMIN)."""
    use_case = DeleteCycle(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyDebtCycleRepository(session),
        SqlAlchemyDebtRepository(session),
        SqlAlchemyPaymentRepository(session),
    )
    result = await use_case.execute(cycle_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return ok(result.value, message="Berhasil menghapus data utang.")


@router.delete(
    "/{debt_id}",
    response_model=ApiResponse[DebtDTO],
    dependencies=[Depends(get_current_admin)],
)
async def delete_debt(debt_id: str, session: AsyncSession = Depends(get_session)):
    """
    Delete one line item.

    Only allowed once its cycle is settled and the customer owes nothing.
    """
    use_case = DeleteDebt(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyDebtRepository(session),
        SqlAlchemyDebtCycleRepository(session),
        SqlAlchemyPaymentRepository(session),
    )
    result = await use_case.execute(debt_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return ok(result.value, message="Berhasil menghapus data utang.")
