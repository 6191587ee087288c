"""Data Transfer Objects for Admin Use Cases"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.admin import Admin, Role
from src.app.use_cases.pagination import PaginationDTO


class CreateAdminCommandDTO(BaseModel):
    """
    Command DTO for creating an admin

    Used as input to CreateAdmin use case.
    """

    username: str = Field(..., description="Login name (unique)")
    email: str = Field(..., description="Email address (unique)")
    name: str = Field(..., description="Display name")
    password: str = Field(..., description="Plain-text password, hashed before storage")
    role: Role = Field(default=Role.ADMIN, description="ADMIN or SUPERADMIN")


class UpdateAdminCommandDTO(BaseModel):
    """
    Command DTO for updating an admin

    Only fields present in model_fields_set are applied.
    """

    username: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    password: Optional[str] = None
    role: Optional[Role] = None


class AdminDTO(BaseModel):
    id: str
    username: str
    email: str
    name: str
    role: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_admin(cls, admin: Admin) -> "AdminDTO":
        return cls(
            id=admin.id,
            username=admin.username,
            email=admin.email,
            name=admin.name,
            role=Role.parse(admin.role).value,
            created_at=admin.created_at,
            updated_at=admin.updated_at,
        )


class AdminListDTO(BaseModel):
    items: List[AdminDTO]
    pagination: PaginationDTO


class SeedAccountDTO(BaseModel):
    username: str
    email: str
    name: str
    role: Role


class SeedAdminsResultDTO(BaseModel):
    created: List[str] = Field(default_factory=list, description="Usernames inserted")
    updated: List[str] = Field(default_factory=list, description="Usernames refreshed")
