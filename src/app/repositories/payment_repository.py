"""Payment Repository Interface

Defines the contract for payment persistence operations. "Active" means
not soft-deleted.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional, Tuple
from src.domain.debt_cycle import DebtCycle
from src.domain.payment import Payment


@dataclass
class PaymentRecord:
    """Payment joined with its cycle, customer name and paid line item amount"""
    payment: Payment
    cycle: DebtCycle
    customer_name: str
    debt_amount: Optional[Decimal] = None


class PaymentRepository(ABC):
    """Repository interface for Payment persistence"""

    @abstractmethod
    async def create(self, payment: Payment) -> Payment:
        pass

    @abstractmethod
    async def get_by_id(self, payment_id: str) -> Optional[Payment]:
        """Retrieve a payment whether or not it is soft-deleted"""
        pass

    @abstractmethod
    async def soft_delete(self, payment_id: str, deleted_at: datetime) -> None:
        pass

    @abstractmethod
    async def sum_active_by_debt(self, cycle_id: str) -> Dict[str, Decimal]:
        """
        Active payment totals per debt line item of a cycle

        Returns:
            Mapping debt_id -> paid amount (debts without payments are absent)
        """
        pass

    @abstractmethod
    async def sum_active_for_debt(self, debt_id: str) -> Decimal:
        pass

    @abstractmethod
    async def sum_active_by_cycle(self, cycle_ids: List[str]) -> Dict[str, Decimal]:
        pass

    @abstractmethod
    async def list_active_with_context(self, search: Optional[str] = None) -> List[PaymentRecord]:
        """
        All active payments with cycle/customer context

        Args:
            search: Case-insensitive customer-name substring
        """
        pass

    @abstractmethod
    async def list_deleted_with_context(self) -> List[PaymentRecord]:
        """Soft-deleted payments, most recently paid first"""
        pass

    @abstractmethod
    async def sum_active_amount(
        self, paid_from: Optional[datetime] = None, paid_to: Optional[datetime] = None
    ) -> Decimal:
        pass

    @abstractmethod
    async def list_active_paid_between(
        self, paid_from: datetime, paid_to: datetime
    ) -> List[Tuple[datetime, Decimal]]:
        """(paid_at, amount) of active payments inside the range"""
        pass

    @abstractmethod
    async def delete_by_debt(self, debt_id: str) -> int:
        """Hard-delete every payment allocated to a debt line item"""
        pass

    @abstractmethod
    async def delete_by_cycle(self, cycle_id: str) -> int:
        pass

    @abstractmethod
    async def purge_deleted_before(self, cutoff: datetime) -> int:
        """
        Hard-delete payments soft-deleted at or before cutoff

        Returns:
            Number of rows removed
        """
        pass
