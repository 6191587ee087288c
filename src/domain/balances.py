"""Derived balances for payment listings

Read-only computations, recomputed on every listing and never stored.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Dict, Iterable, List


@dataclass(frozen=True)
class PaymentLine:
    """A non-deleted payment and the amount of the group it pays into

    group_id is the debt line item for allocated payments, otherwise the cycle.
    """
    payment_id: str
    group_id: str
    group_amount: Decimal
    amount: Decimal
    paid_at: datetime
    created_at: datetime


def running_remaining(lines: Iterable[PaymentLine]) -> Dict[str, Decimal]:
    """
    Balance left in each payment's group right after that payment

    Payments inside a group are applied in paid_at order, then created_at.

    Returns:
        Mapping payment_id -> remaining balance
    """
    groups: Dict[str, List[PaymentLine]] = defaultdict(list)
    for line in lines:
        groups[line.group_id].append(line)

    remaining: Dict[str, Decimal] = {}
    for group in groups.values():
        group.sort(key=lambda line: (line.paid_at, line.created_at))
        balance = group[0].group_amount
        for line in group:
            balance -= line.amount
            remaining[line.payment_id] = balance
    return remaining


def cycle_outstanding(total: Decimal, is_paid: bool, paid_sum: Decimal) -> Decimal:
    """Amount still owed on a cycle; a settled cycle owes nothing"""
    if is_paid:
        return Decimal("0")
    return max(total - paid_sum, Decimal("0"))
