"""Payment Domain Entity

Recorded settlement amount against a debt cycle (and, under the
allocation policy, against one of its debt line items).
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import CheckConstraint, ForeignKey, Numeric, String
from src.domain.base import BaseModel, generate_uuid


class Payment(BaseModel, table=True):
    """
    Payment - Money received from a customer

    Domain Rules:
    - amount must be positive
    - deleted_at marks a soft delete; soft-deleted rows are excluded from
      balances and listings, and are purged after a retention window
    - debt_id/remaining are set only by oldest-first allocation
    """

    __tablename__ = "payments"
    __table_args__ = (
        CheckConstraint("amount > 0", name="payment_amount_positive"),
        Index("ix_payments_paid_at", "paid_at"),
        Index("ix_payments_deleted_at", "deleted_at"),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique payment identifier (UUID)"
    )

    cycle_id: str = Field(
        sa_column=Column(String(36), ForeignKey("debt_cycles.id"), nullable=False, index=True),
        description="Foreign key to DebtCycle"
    )

    customer_id: str = Field(
        sa_column=Column(String(36), ForeignKey("customers.id"), nullable=False, index=True),
        description="Foreign key to Customer"
    )

    debt_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String(36), ForeignKey("debts.id"), nullable=True, index=True),
        description="Debt line item paid (allocation policy only)"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Paid amount (precision: 18,2)"
    )

    remaining: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 2), nullable=True),
        description="Balance left on the paid line item after this payment"
    )

    paid_at: datetime = Field(
        description="When the money was received"
    )

    deleted_at: Optional[datetime] = Field(
        default=None,
        description="Soft-delete marker"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Record creation timestamp"
    )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
