"""Data Transfer Objects for Auth Use Cases"""

from typing import Optional
from pydantic import BaseModel, Field
from src.domain.admin import Admin, Role


class LoginCommandDTO(BaseModel):
    """
    Command DTO for logging in

    Used as input to Login use case.
    """

    username: str = Field(..., description="Admin username")
    password: str = Field(..., description="Plain-text password")


class AdminProfileDTO(BaseModel):
    """Public admin profile (never carries the password hash)"""

    id: str
    username: str
    name: str
    email: str
    role: str

    @classmethod
    def from_admin(cls, admin: Admin) -> "AdminProfileDTO":
        return cls(
            id=admin.id,
            username=admin.username,
            name=admin.name,
            email=admin.email,
            role=Role.parse(admin.role).value,
        )


class LoginResponseDTO(BaseModel):
    token: str = Field(..., description="Signed session token")
    user: AdminProfileDTO
    expires_in: Optional[int] = Field(default=None, description="Token lifetime in seconds")


class AuthenticatedAdmin(BaseModel):
    """Identity attached to a request that passed access control"""

    id: str
    username: str
    role: Role
