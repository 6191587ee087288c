"""Request schemas for Customer (User) API"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator
from . import validators


class CreateCustomerRequestSchema(BaseModel):
    """
    Request schema for creating a customer

    Used for POST /api/user endpoint.
    """

    name: str = Field(..., description="Customer name, 3+ chars")
    phone: str = Field(..., description="10-15 digits starting with 08 or 62")
    address: str = Field(..., description="Address, 3+ chars")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return validators.name(v)

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v):
        return validators.phone(v)

    @field_validator("address")
    @classmethod
    def validate_address(cls, v):
        return validators.address(v)

    class Config:
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "name": "Budi Santoso",
                "phone": "081234567890",
                "address": "Jl. Merdeka No. 1",
            }
        }


class UpdateCustomerRequestSchema(BaseModel):
    """Omitted fields stay unchanged"""

    name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return validators.name(v) if v is not None else v

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v):
        return validators.phone(v) if v is not None else v

    @field_validator("address")
    @classmethod
    def validate_address(cls, v):
        return validators.address(v) if v is not None else v

    class Config:
        extra = "forbid"
