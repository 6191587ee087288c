"""Debt cycle listings"""

from typing import List, Optional
from libs.result import Result, Return
from src.app.repositories.debt_cycle_repository import DebtCycleRepository
from src.app.use_cases.pagination import build_pagination, page_offset
from .dtos import DebtCycleDTO, DebtCycleListDTO, PublicDebtDTO, PublicDebtListDTO


class ListDebtCycles:
    """
    Paged cycles with customer name, newest first

    search filters by case-insensitive customer-name substring.
    """

    def __init__(self, cycle_repo: DebtCycleRepository):
        self.cycle_repo = cycle_repo

    async def execute(
        self, search: Optional[str] = None, page: int = 1, page_size: int = 7
    ) -> Result[DebtCycleListDTO]:
        records, total = await self.cycle_repo.list_with_customer(
            search=search or None,
            limit=page_size,
            offset=page_offset(page, page_size),
        )
        return Return.ok(
            DebtCycleListDTO(
                items=[DebtCycleDTO.from_record(record) for record in records],
                pagination=build_pagination(page, page_size, total),
            )
        )


class ListOpenCycles:
    """Unpaid cycles for payment-entry pickers, capped at max_limit rows"""

    def __init__(self, cycle_repo: DebtCycleRepository, max_limit: int = 50):
        self.cycle_repo = cycle_repo
        self.max_limit = max_limit

    async def execute(
        self, search: Optional[str] = None, limit: Optional[int] = None
    ) -> Result[List[DebtCycleDTO]]:
        limit = min(limit or self.max_limit, self.max_limit)
        records = await self.cycle_repo.list_open_with_customer(search=search or None, limit=limit)
        return Return.ok([DebtCycleDTO.from_record(record) for record in records])


class ListPublicDebts:
    """Unauthenticated listing: customer name, total and settlement state only"""

    def __init__(self, cycle_repo: DebtCycleRepository):
        self.cycle_repo = cycle_repo

    async def execute(
        self, search: Optional[str] = None, page: int = 1, page_size: int = 7
    ) -> Result[PublicDebtListDTO]:
        records, total = await self.cycle_repo.list_with_customer(
            search=search or None,
            limit=page_size,
            offset=page_offset(page, page_size),
        )
        return Return.ok(
            PublicDebtListDTO(
                items=[
                    PublicDebtDTO(
                        customer_name=record.customer_name,
                        total=record.cycle.total,
                        is_paid=record.cycle.is_paid,
                        paid_at=record.cycle.paid_at,
                    )
                    for record in records
                ],
                pagination=build_pagination(page, page_size, total),
            )
        )
