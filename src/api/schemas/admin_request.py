"""Request schemas for Admin API"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator
from src.domain.admin import Role
from . import validators


class CreateAdminRequestSchema(BaseModel):
    """
    Request schema for creating an admin

    Used for POST /api/admin endpoint.
    """

    username: str = Field(..., description="3+ chars, letters/digits/underscore, at least one digit")
    email: str = Field(..., description="Email address")
    name: str = Field(..., description="Display name")
    password: str = Field(..., description="6+ chars, no spaces")
    role: Role = Field(default=Role.ADMIN, description="ADMIN or SUPERADMIN")

    @field_validator("username")
    @classmethod
    def validate_username(cls, v):
        return validators.username(v)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        return validators.email(v)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return validators.name(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v):
        return validators.password(v)

    class Config:
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "username": "kasir01",
                "email": "kasir01@example.com",
                "name": "Kasir Satu",
                "password": "rahasia1",
                "role": "ADMIN",
            }
        }


class UpdateAdminRequestSchema(BaseModel):
    """
    Request schema for updating an admin

    Used for PUT /api/admin/{admin_id}. Omitted fields stay unchanged.
    """

    username: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    password: Optional[str] = None
    role: Optional[Role] = None

    @field_validator("username")
    @classmethod
    def validate_username(cls, v):
        return validators.username(v) if v is not None else v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        return validators.email(v) if v is not None else v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return validators.name(v) if v is not None else v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v):
        return validators.password(v) if v is not None else v

    class Config:
        extra = "forbid"
