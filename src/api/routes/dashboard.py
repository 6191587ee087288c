"""Dashboard API Routes"""

from datetime import date, datetime, time
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyDebtCycleRepository,
    SqlAlchemyDebtRepository,
    SqlAlchemyPaymentRepository,
)
from src.api.error import ClientError
from src.api.schemas.response import ApiResponse, ok
from src.api.security import get_current_admin
from src.app.use_cases.dashboard import (
    CompareTotals,
    CompareTotalsDTO,
    DailyPaymentTrendsDTO,
    DashboardCardsDTO,
    GetDailyPaymentTrends,
    GetDashboardCards,
)
from src.depends import get_session

router = APIRouter(prefix="/dashboard", tags=["Dashboard"], dependencies=[Depends(get_current_admin)])


@router.get("/cards", response_model=ApiResponse[DashboardCardsDTO])
async def dashboard_cards(session: AsyncSession = Depends(get_session)):
    """Customer count, debt and payment totals, customers with a settled cycle."""
    use_case = GetDashboardCards(
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyDebtCycleRepository(session),
        SqlAlchemyDebtRepository(session),
        SqlAlchemyPaymentRepository(session),
    )
    result = await use_case.execute()
    return ok(result.value, message="Data dashboard berhasil diambil")


@router.get("/compare", response_model=ApiResponse[CompareTotalsDTO])
async def compare_totals(
    date_from: Optional[date] = Query(default=None, alias="from"),
    date_to: Optional[date] = Query(default=None, alias="to"),
    session: AsyncSession = Depends(get_session),
):
    """Debt recorded vs payments received over an inclusive date range (or all time)."""
    use_case = CompareTotals(SqlAlchemyDebtRepository(session), SqlAlchemyPaymentRepository(session))
    result = await use_case.execute(
        datetime.combine(date_from, time.min) if date_from else None,
        datetime.combine(date_to, time.max) if date_to else None,
    )
    if result.is_err():
        raise ClientError.from_error(result.error)
    return ok(result.value, message="Data comparison berhasil diambil")


@router.get("/trends/daily-payments", response_model=ApiResponse[DailyPaymentTrendsDTO])
async def daily_payment_trends(
    days: int = Query(default=7, ge=1),
    date_from: Optional[date] = Query(default=None, alias="from"),
    date_to: Optional[date] = Query(default=None, alias="to"),
    session: AsyncSession = Depends(get_session),
):
    """Payments per day, zero-filled: the last `days` days, or `from`..`to`."""
    use_case = GetDailyPaymentTrends(SqlAlchemyPaymentRepository(session))
    result = await use_case.execute(days=days, date_from=date_from, date_to=date_to)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return ok(result.value, message="Data pembayaran harian berhasil diambil")
