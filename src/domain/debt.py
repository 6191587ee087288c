"""Debt Domain Entity

A dated line item added to a customer's open debt cycle.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, ForeignKey, Numeric, String
from src.domain.base import BaseModel, generate_uuid


class Debt(BaseModel, table=True):
    """
    Debt - Immutable line item of a debt cycle

    Domain Rules:
    - amount must be positive
    - never modified after creation, only deleted
    """

    __tablename__ = "debts"
    __table_args__ = (
        CheckConstraint("amount > 0", name="debt_amount_positive"),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique debt identifier (UUID)"
    )

    cycle_id: str = Field(
        sa_column=Column(String(36), ForeignKey("debt_cycles.id"), nullable=False, index=True),
        description="Foreign key to DebtCycle"
    )

    customer_id: str = Field(
        sa_column=Column(String(36), ForeignKey("customers.id"), nullable=False, index=True),
        description="Foreign key to Customer (denormalized for queries)"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Debt amount (precision: 18,2)"
    )

    date: datetime = Field(
        description="Date the debt was incurred"
    )

    note: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Optional free-text note"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Record creation timestamp"
    )
