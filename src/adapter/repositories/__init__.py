from .admin_repository import SqlAlchemyAdminRepository
from .customer_repository import SqlAlchemyCustomerRepository
from .debt_cycle_repository import SqlAlchemyDebtCycleRepository
from .debt_repository import SqlAlchemyDebtRepository
from .payment_repository import SqlAlchemyPaymentRepository

__all__ = [
    "SqlAlchemyAdminRepository",
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyDebtCycleRepository",
    "SqlAlchemyDebtRepository",
    "SqlAlchemyPaymentRepository",
]
