"""Dashboard Use Cases

Read-only aggregates for the back office home page.
"""

from collections import defaultdict
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Dict, Optional
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.debt_cycle_repository import DebtCycleRepository
from src.app.repositories.debt_repository import DebtRepository
from src.app.repositories.payment_repository import PaymentRepository
from .dtos import CompareTotalsDTO, DailyPaymentDTO, DailyPaymentTrendsDTO, DashboardCardsDTO

MAX_TREND_DAYS = 366


class GetDashboardCards:
    def __init__(
        self,
        customer_repo: CustomerRepository,
        cycle_repo: DebtCycleRepository,
        debt_repo: DebtRepository,
        payment_repo: PaymentRepository,
    ):
        self.customer_repo = customer_repo
        self.cycle_repo = cycle_repo
        self.debt_repo = debt_repo
        self.payment_repo = payment_repo

    async def execute(self) -> Result[DashboardCardsDTO]:
        return Return.ok(
            DashboardCardsDTO(
                total_customers=await self.customer_repo.count(),
                total_debt=await self.debt_repo.sum_amount(),
                total_paid=await self.payment_repo.sum_active_amount(),
                settled_customers=await self.cycle_repo.count_customers_with_paid_cycle(),
            )
        )


class CompareTotals:
    """
    Debt recorded vs payments received

    Debts are bounded by their date, payments by paid_at. Without bounds
    the comparison covers all time.
    """

    def __init__(self, debt_repo: DebtRepository, payment_repo: PaymentRepository):
        self.debt_repo = debt_repo
        self.payment_repo = payment_repo

    async def execute(
        self, date_from: Optional[datetime] = None, date_to: Optional[datetime] = None
    ) -> Result[CompareTotalsDTO]:
        if date_from and date_to and date_from > date_to:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Validasi gagal",
                    details={"from": ["Tanggal awal harus sebelum tanggal akhir."]},
                )
            )

        return Return.ok(
            CompareTotalsDTO(
                date_from=date_from,
                date_to=date_to,
                total_debt=await self.debt_repo.sum_amount(date_from, date_to),
                total_paid=await self.payment_repo.sum_active_amount(date_from, date_to),
            )
        )


class GetDailyPaymentTrends:
    """
    Non-deleted payments summed per calendar day (UTC), zero-filled

    Either the last `days` days ending today, or the inclusive range
    date_from..date_to.
    """

    def __init__(self, payment_repo: PaymentRepository):
        self.payment_repo = payment_repo

    async def execute(
        self,
        days: int = 7,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        today: Optional[date] = None,
    ) -> Result[DailyPaymentTrendsDTO]:
        if date_from is None or date_to is None:
            end = date_to or today or datetime.utcnow().date()
            start = end - timedelta(days=max(days, 1) - 1)
        else:
            start, end = date_from, date_to

        if start > end or (end - start).days + 1 > MAX_TREND_DAYS:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Validasi gagal",
                    details={"days": [f"Rentang maksimal {MAX_TREND_DAYS} hari."]},
                )
            )

        rows = await self.payment_repo.list_active_paid_between(
            datetime.combine(start, time.min), datetime.combine(end, time.max)
        )
        totals: Dict[date, Decimal] = defaultdict(lambda: Decimal("0"))
        for paid_at, amount in rows:
            totals[paid_at.date()] += amount

        points = []
        day = start
        while day <= end:
            points.append(DailyPaymentDTO(day=day, total=totals.get(day, Decimal("0"))))
            day += timedelta(days=1)

        return Return.ok(DailyPaymentTrendsDTO(date_from=start, date_to=end, points=points))
