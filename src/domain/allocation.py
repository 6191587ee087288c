"""Oldest-first payment allocation

Pure bookkeeping used by the allocation settlement policy: an incoming
amount is spread over outstanding debt line items, oldest first.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Sequence


@dataclass(frozen=True)
class OutstandingDebt:
    """Debt line item with its unpaid balance"""
    debt_id: str
    balance: Decimal


@dataclass(frozen=True)
class Allocation:
    """Part of a payment assigned to one debt line item"""
    debt_id: str
    amount: Decimal
    remaining: Decimal


class ExcessPaymentError(ValueError):
    """Raised when the amount exceeds the total outstanding balance"""

    def __init__(self, amount: Decimal, outstanding: Decimal):
        super().__init__(f"amount={amount} exceeds outstanding={outstanding}")
        self.amount = amount
        self.outstanding = outstanding


def total_outstanding(outstanding: Sequence[OutstandingDebt]) -> Decimal:
    return sum((item.balance for item in outstanding if item.balance > 0), Decimal("0"))


def allocate_oldest_first(
    outstanding: Sequence[OutstandingDebt], amount: Decimal
) -> List[Allocation]:
    """
    Spread amount over outstanding debts in the given (oldest-first) order

    Args:
        outstanding: Debts ordered oldest first
        amount: Positive amount received

    Returns:
        One Allocation per debt touched, in order

    Raises:
        ExcessPaymentError: amount is larger than everything still owed
    """
    owed = total_outstanding(outstanding)
    if amount > owed:
        raise ExcessPaymentError(amount, owed)

    allocations: List[Allocation] = []
    left = amount
    for item in outstanding:
        if left <= 0:
            break
        if item.balance <= 0:
            continue
        paid = min(item.balance, left)
        allocations.append(
            Allocation(debt_id=item.debt_id, amount=paid, remaining=item.balance - paid)
        )
        left -= paid

    return allocations
