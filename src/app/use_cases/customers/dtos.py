"""Data Transfer Objects for Customer Use Cases"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from src.domain.customer import Customer


class CreateCustomerCommandDTO(BaseModel):
    """
    Command DTO for creating a customer

    Used as input to CreateCustomer use case.
    """

    name: str = Field(..., description="Customer name")
    phone: str = Field(..., description="Phone number, 08... or 62...")
    address: str = Field(..., description="Address")


class UpdateCustomerCommandDTO(BaseModel):
    """Only fields present in model_fields_set are applied"""

    name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


class CustomerDTO(BaseModel):
    id: str
    name: str
    phone: str
    address: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_customer(cls, customer: Customer) -> "CustomerDTO":
        return cls(
            id=customer.id,
            name=customer.name,
            phone=customer.phone,
            address=customer.address,
            created_at=customer.created_at,
            updated_at=customer.updated_at,
        )


class CustomerOptionDTO(BaseModel):
    """Search result row for pickers"""

    id: str
    name: str
