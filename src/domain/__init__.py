from .base import BaseModel, generate_uuid
from .admin import Admin, Role
from .customer import Customer
from .debt_cycle import DebtCycle
from .debt import Debt
from .payment import Payment
from .allocation import Allocation, OutstandingDebt, ExcessPaymentError, allocate_oldest_first
from .balances import PaymentLine, running_remaining, cycle_outstanding

__all__ = [
    "BaseModel",
    "generate_uuid",
    "Admin",
    "Role",
    "Customer",
    "DebtCycle",
    "Debt",
    "Payment",
    "Allocation",
    "OutstandingDebt",
    "ExcessPaymentError",
    "allocate_oldest_first",
    "PaymentLine",
    "running_remaining",
    "cycle_outstanding",
]
