"""Data Transfer Objects for Payment Use Cases"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from src.app.use_cases.pagination import PaginationDTO
from src.domain.payment import Payment


class CreatePaymentCommandDTO(BaseModel):
    """
    Command DTO for recording a payment

    Used as input to SettleCycle and AllocatePayment use cases.
    """

    customer_id: str = Field(..., description="Paying customer")
    amount: Decimal = Field(..., gt=0, description="Amount received (must be > 0)")
    paid_at: datetime = Field(..., description="When the payment was received (not in the future)")

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": "0b7e9a52-7a0c-4a56-a8e1-4a1f6a1d2c11",
                "amount": "200000.00",
                "paid_at": "2025-06-10T14:00:00",
            }
        }


class PaymentDTO(BaseModel):
    id: str
    cycle_id: str
    customer_id: str
    debt_id: Optional[str] = None
    amount: Decimal
    remaining: Optional[Decimal] = None
    paid_at: datetime
    deleted_at: Optional[datetime] = None
    created_at: datetime

    @classmethod
    def from_payment(cls, payment: Payment) -> "PaymentDTO":
        return cls(
            id=payment.id,
            cycle_id=payment.cycle_id,
            customer_id=payment.customer_id,
            debt_id=payment.debt_id,
            amount=payment.amount,
            remaining=payment.remaining,
            paid_at=payment.paid_at,
            deleted_at=payment.deleted_at,
            created_at=payment.created_at,
        )


class PaymentResultDTO(BaseModel):
    """Outcome of recording a payment under either settlement policy"""

    cycle_id: str
    customer_id: str
    customer_name: str
    total: Decimal = Field(..., description="Cycle total")
    amount: Decimal = Field(..., description="Amount received")
    is_paid: bool = Field(..., description="Cycle settled by this payment")
    paid_at: datetime
    payments: List[PaymentDTO]


class PaymentListItemDTO(BaseModel):
    id: str
    cycle_id: str
    debt_id: Optional[str] = None
    customer_id: str
    customer_name: str
    amount: Decimal
    remaining: Optional[Decimal] = None
    remaining_calculated: Decimal = Field(..., description="Group balance right after this payment")
    total_remaining: Decimal = Field(..., description="Customer's outstanding balance now")
    cycle_total: Decimal
    is_paid: bool
    paid_at: datetime


class PaymentListDTO(BaseModel):
    items: List[PaymentListItemDTO]
    pagination: PaginationDTO


class DeletedPaymentDTO(BaseModel):
    id: str
    customer_id: str
    customer_name: str
    amount: Decimal
    remaining: Optional[Decimal] = None
    total_debt: Decimal = Field(..., description="Amount of the paid line item or cycle")
    paid_at: datetime
    deleted_at: datetime


class PurgeResultDTO(BaseModel):
    purged_count: int
    cutoff: datetime
    execution_time_ms: int
