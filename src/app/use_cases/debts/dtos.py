"""Data Transfer Objects for Debt Use Cases"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from src.app.repositories.debt_cycle_repository import CycleRecord
from src.app.use_cases.pagination import PaginationDTO
from src.domain.debt import Debt


class CreateDebtCommandDTO(BaseModel):
    """
    Command DTO for recording a debt line item

    Used as input to CreateDebt use case.
    """

    customer_id: str = Field(..., description="Customer owing the amount")
    amount: Decimal = Field(..., gt=0, description="Line item amount (must be > 0)")
    date: datetime = Field(..., description="When the debt was incurred (not in the future)")
    note: Optional[str] = Field(default=None, max_length=255, description="Free text note")

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": "0b7e9a52-7a0c-4a56-a8e1-4a1f6a1d2c11",
                "amount": "150000.00",
                "date": "2025-06-01T09:30:00",
                "note": "Beras 25kg",
            }
        }


class DebtDTO(BaseModel):
    id: str
    cycle_id: str
    customer_id: str
    amount: Decimal
    date: datetime
    note: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_debt(cls, debt: Debt) -> "DebtDTO":
        return cls(
            id=debt.id,
            cycle_id=debt.cycle_id,
            customer_id=debt.customer_id,
            amount=debt.amount,
            date=debt.date,
            note=debt.note,
            created_at=debt.created_at,
        )


class CreateDebtResponseDTO(BaseModel):
    cycle_id: str
    customer_id: str
    customer_name: str
    total: Decimal = Field(..., description="Cycle total after this line item")
    debt: DebtDTO


class DebtCycleDTO(BaseModel):
    id: str
    customer_id: str
    customer_name: str
    total: Decimal
    is_paid: bool
    paid_at: Optional[datetime] = None
    created_at: datetime

    @classmethod
    def from_record(cls, record: CycleRecord) -> "DebtCycleDTO":
        cycle = record.cycle
        return cls(
            id=cycle.id,
            customer_id=cycle.customer_id,
            customer_name=record.customer_name,
            total=cycle.total,
            is_paid=cycle.is_paid,
            paid_at=cycle.paid_at,
            created_at=cycle.created_at,
        )


class DebtCycleListDTO(BaseModel):
    items: List[DebtCycleDTO]
    pagination: PaginationDTO


class PublicDebtDTO(BaseModel):
    """Cycle row exposed without authentication"""

    customer_name: str
    total: Decimal
    is_paid: bool
    paid_at: Optional[datetime] = None


class PublicDebtListDTO(BaseModel):
    items: List[PublicDebtDTO]
    pagination: PaginationDTO


class DeletedCycleDTO(BaseModel):
    cycle_id: str
    customer_id: str
    debts_deleted: int
    payments_deleted: int


class CycleDiscrepancyDTO(BaseModel):
    """Open cycle whose stored total differs from its line items"""

    cycle_id: str
    customer_id: str
    recorded_total: Decimal
    line_item_total: Decimal
    difference: Decimal


class CycleReconciliationResultDTO(BaseModel):
    total_cycles_checked: int
    discrepancies_found: int
    discrepancies: List[CycleDiscrepancyDTO]
    reconciliation_time: datetime
    execution_time_ms: int
