"""Data Transfer Objects for Dashboard Use Cases"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field


class DashboardCardsDTO(BaseModel):
    total_customers: int
    total_debt: Decimal = Field(..., description="Sum of all debt line items")
    total_paid: Decimal = Field(..., description="Sum of non-deleted payments")
    settled_customers: int = Field(..., description="Customers with at least one settled cycle")


class CompareTotalsDTO(BaseModel):
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    total_debt: Decimal
    total_paid: Decimal


class DailyPaymentDTO(BaseModel):
    day: date
    total: Decimal


class DailyPaymentTrendsDTO(BaseModel):
    date_from: date
    date_to: date
    points: List[DailyPaymentDTO]
