"""Customer Domain Entity

The shop's debtor. Customers are bookkeeping subjects, not logins.
"""

from datetime import datetime
from sqlmodel import Field, Column
from sqlalchemy import String
from src.domain.base import BaseModel, generate_uuid


class Customer(BaseModel, table=True):
    """
    Customer - Person who owes the shop money

    Domain Rules:
    - Can be deleted only while no open (unpaid) debt cycle exists
    """

    __tablename__ = "customers"

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique customer identifier (UUID)"
    )

    name: str = Field(
        sa_column=Column(String(100), nullable=False, index=True),
        description="Customer name"
    )

    phone: str = Field(
        sa_column=Column(String(20), nullable=False),
        description="Phone number (08xxx or 62xxx)"
    )

    address: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Address"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )
