"""Request schemas for Debt and Payment API"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from . import validators


class CreateDebtRequestSchema(BaseModel):
    """
    Request schema for recording a debt line item

    Used for POST /api/debt endpoint. date defaults to now.
    """

    customer_id: str = Field(..., min_length=1, description="Customer identifier")
    amount: Decimal = Field(..., description="Amount, > 0, at most 2 decimals")
    date: Optional[datetime] = Field(default=None, description="Not in the future")
    note: Optional[str] = Field(default=None, max_length=255, description="Optional note")

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v):
        return validators.amount(v)

    @field_validator("date")
    @classmethod
    def validate_date(cls, v):
        return validators.not_in_future(v) if v is not None else v

    class Config:
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "customer_id": "0b7e9a52-7a0c-4a56-a8e1-4a1f6a1d2c11",
                "amount": "150000",
                "date": "2025-06-01T09:30:00",
                "note": "Beras 25kg",
            }
        }


class CreatePaymentRequestSchema(BaseModel):
    """
    Request schema for recording a payment

    Used for POST /api/payment endpoint. paid_at defaults to now.
    """

    customer_id: str = Field(..., min_length=1, description="Customer identifier")
    amount: Decimal = Field(..., description="Amount, > 0, at most 2 decimals")
    paid_at: Optional[datetime] = Field(default=None, description="Not in the future")

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v):
        return validators.amount(v)

    @field_validator("paid_at")
    @classmethod
    def validate_paid_at(cls, v):
        return validators.not_in_future(v) if v is not None else v

    class Config:
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "customer_id": "0b7e9a52-7a0c-4a56-a8e1-4a1f6a1d2c11",
                "amount": "200000",
                "paid_at": "2025-06-10T14:00:00",
            }
        }
