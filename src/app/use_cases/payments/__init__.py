"""Payment settlement use cases"""
from .settle_cycle import SettleCycle
from .allocate_payment import AllocatePayment
from .create_payment import SettlementPolicy, create_payment_use_case
from .delete_payment import DeletePayment
from .list_payments import ListPayments, ListDeletedPayments
from .purge_deleted_payments import PurgeDeletedPayments
from .dtos import (
    CreatePaymentCommandDTO,
    PaymentDTO,
    PaymentResultDTO,
    PaymentListItemDTO,
    PaymentListDTO,
    DeletedPaymentDTO,
    PurgeResultDTO,
)

__all__ = [
    "SettleCycle",
    "AllocatePayment",
    "SettlementPolicy",
    "create_payment_use_case",
    "DeletePayment",
    "ListPayments",
    "ListDeletedPayments",
    "PurgeDeletedPayments",
    "CreatePaymentCommandDTO",
    "PaymentDTO",
    "PaymentResultDTO",
    "PaymentListItemDTO",
    "PaymentListDTO",
    "DeletedPaymentDTO",
    "PurgeResultDTO",
]
