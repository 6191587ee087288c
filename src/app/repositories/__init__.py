from .admin_repository import AdminRepository
from .customer_repository import CustomerRepository
from .debt_cycle_repository import DebtCycleRepository, CycleRecord
from .debt_repository import DebtRepository
from .payment_repository import PaymentRepository, PaymentRecord

__all__ = [
    "AdminRepository",
    "CustomerRepository",
    "DebtCycleRepository",
    "CycleRecord",
    "DebtRepository",
    "PaymentRepository",
    "PaymentRecord",
]
