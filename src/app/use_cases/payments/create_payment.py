"""Settlement policy selection

A deployment runs exactly one policy, chosen by SETTLEMENT_POLICY.
"""

from enum import Enum
from typing import Union
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.debt_cycle_repository import DebtCycleRepository
from src.app.repositories.debt_repository import DebtRepository
from src.app.repositories.payment_repository import PaymentRepository
from src.app.services.unit_of_work import UnitOfWork
from .allocate_payment import AllocatePayment
from .settle_cycle import SettleCycle


class SettlementPolicy(str, Enum):
    CYCLE = "cycle"
    ALLOCATION = "allocation"


def create_payment_use_case(
    policy: Union[SettlementPolicy, str],
    uow: UnitOfWork,
    customer_repo: CustomerRepository,
    cycle_repo: DebtCycleRepository,
    debt_repo: DebtRepository,
    payment_repo: PaymentRepository,
) -> Union[SettleCycle, AllocatePayment]:
    """
    Build the CreatePayment use case for the configured policy

    Raises:
        ValueError: Unknown policy
    """
    policy = SettlementPolicy(policy)
    if policy is SettlementPolicy.ALLOCATION:
        return AllocatePayment(uow, customer_repo, cycle_repo, debt_repo, payment_repo)
    return SettleCycle(uow, customer_repo, cycle_repo, payment_repo)
