"""Debt Repository Interface

Debt line items are append-only; they are never updated.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from src.domain.debt import Debt


class DebtRepository(ABC):
    """Repository interface for Debt line items"""

    @abstractmethod
    async def create(self, debt: Debt) -> Debt:
        pass

    @abstractmethod
    async def get_by_id(self, debt_id: str) -> Optional[Debt]:
        pass

    @abstractmethod
    async def list_by_cycle(self, cycle_id: str) -> List[Debt]:
        """Line items of a cycle, oldest first (by date, then creation)"""
        pass

    @abstractmethod
    async def sum_by_cycle(self, cycle_id: str) -> Decimal:
        pass

    @abstractmethod
    async def sum_amount(
        self, date_from: Optional[datetime] = None, date_to: Optional[datetime] = None
    ) -> Decimal:
        """Sum of all line items, optionally restricted to a debt-date range"""
        pass

    @abstractmethod
    async def delete(self, debt: Debt) -> None:
        pass

    @abstractmethod
    async def delete_by_cycle(self, cycle_id: str) -> int:
        """Delete every line item of a cycle; returns the number removed"""
        pass
