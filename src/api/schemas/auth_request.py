"""Request schemas for Auth API"""

from pydantic import BaseModel, Field, field_validator


class LoginRequestSchema(BaseModel):
    """
    Request schema for logging in

    Used for POST /api/auth/login endpoint.
    """

    username: str = Field(..., description="Admin username")
    password: str = Field(..., description="Password")

    @field_validator("username")
    @classmethod
    def validate_username(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Username wajib diisi.")
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v):
        if not v:
            raise ValueError("Password wajib diisi.")
        return v

    class Config:
        extra = "forbid"
        json_schema_extra = {
            "example": {"username": "superadmin1", "password": "password123"}
        }
