"""Debt Cycle Domain Entity

One billing period that accumulates a customer's debt until it is settled.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Numeric, String, text
from src.domain.base import BaseModel, generate_uuid


class DebtCycle(BaseModel, table=True):
    """
    Debt Cycle - Open-to-settled billing period for one customer

    Domain Rules:
    - At most one open cycle (is_paid = False) per customer, enforced by a
      partial unique index
    - total equals the sum of the cycle's debt line items while open
    - total only grows while open (line items are appended)
    - is_paid only transitions False -> True, set by payment settlement
    """

    __tablename__ = "debt_cycles"
    __table_args__ = (
        Index(
            "uq_debt_cycles_open_customer",
            "customer_id",
            unique=True,
            sqlite_where=text("is_paid = 0"),
            postgresql_where=text("is_paid = false"),
        ),
        Index("ix_debt_cycles_created_at", "created_at"),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique cycle identifier (UUID)"
    )

    customer_id: str = Field(
        sa_column=Column(String(36), ForeignKey("customers.id"), nullable=False, index=True),
        description="Foreign key to Customer"
    )

    total: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 2), nullable=False, default=0),
        description="Accumulated debt of this cycle (precision: 18,2)"
    )

    is_paid: bool = Field(
        default=False,
        description="True once the cycle has been settled"
    )

    paid_at: Optional[datetime] = Field(
        default=None,
        description="Settlement timestamp"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Cycle creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )

    @property
    def is_open(self) -> bool:
        return not self.is_paid
