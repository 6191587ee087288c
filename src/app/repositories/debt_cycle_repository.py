"""Debt Cycle Repository Interface

Defines the contract for debt cycle persistence operations. Writes that
touch total or is_paid are single conditional SQL statements so concurrent
requests cannot lose updates.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple
from src.domain.debt_cycle import DebtCycle


@dataclass
class CycleRecord:
    """Debt cycle joined with its customer's name"""
    cycle: DebtCycle
    customer_name: str


class DebtCycleRepository(ABC):
    """Repository interface for DebtCycle persistence"""

    @abstractmethod
    async def get_by_id(self, cycle_id: str, for_update: bool = False) -> Optional[DebtCycle]:
        pass

    @abstractmethod
    async def get_open_by_customer(
        self, customer_id: str, for_update: bool = False
    ) -> Optional[DebtCycle]:
        """
        Retrieve the customer's open (unpaid) cycle

        Args:
            customer_id: Customer identifier
            for_update: If True, lock the row with SELECT FOR UPDATE

        Returns:
            DebtCycle if the customer has an open cycle, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, cycle: DebtCycle) -> DebtCycle:
        """
        Insert a new cycle

        Raises:
            IntegrityError: the customer already has an open cycle
        """
        pass

    @abstractmethod
    async def increment_total(self, cycle_id: str, amount: Decimal) -> Decimal:
        """
        Atomically add amount to the cycle total

        Returns:
            The new total
        """
        pass

    @abstractmethod
    async def mark_paid(self, cycle_id: str, paid_at: datetime) -> bool:
        """
        Flip is_paid False -> True

        Returns:
            True if this call settled the cycle, False if it was already paid
        """
        pass

    @abstractmethod
    async def list_with_customer(
        self, search: Optional[str] = None, limit: int = 7, offset: int = 0
    ) -> Tuple[List[CycleRecord], int]:
        """
        List cycles newest first with customer names

        Args:
            search: Case-insensitive customer-name substring

        Returns:
            Tuple of (records, total matching rows)
        """
        pass

    @abstractmethod
    async def list_open_with_customer(
        self, search: Optional[str] = None, limit: int = 50
    ) -> List[CycleRecord]:
        pass

    @abstractmethod
    async def list_by_customer(self, customer_id: str) -> List[DebtCycle]:
        pass

    @abstractmethod
    async def list_open(self) -> List[DebtCycle]:
        pass

    @abstractmethod
    async def list_open_by_customers(self, customer_ids: List[str]) -> List[DebtCycle]:
        pass

    @abstractmethod
    async def count_customers_with_paid_cycle(self) -> int:
        pass

    @abstractmethod
    async def delete(self, cycle: DebtCycle) -> None:
        pass
