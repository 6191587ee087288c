"""Admin Domain Entity

Staff accounts of the back office. Admins log in; customers never do.
"""

from datetime import datetime
from enum import Enum
from sqlmodel import Field, Column
from sqlalchemy import String
from src.domain.base import BaseModel, generate_uuid


class Role(str, Enum):
    """Closed set of admin roles"""
    ADMIN = "ADMIN"
    SUPERADMIN = "SUPERADMIN"

    @classmethod
    def parse(cls, value) -> "Role":
        """Return the matching Role or raise ValueError for anything unknown"""
        if isinstance(value, cls):
            return value
        return cls(value)


class Admin(BaseModel, table=True):
    """
    Admin - Back office staff account

    Domain Rules:
    - username and email are unique across admins
    - password is stored only as a bcrypt hash
    - role is ADMIN or SUPERADMIN; only SUPERADMIN manages admins
    - an admin cannot delete itself
    """

    __tablename__ = "admins"

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique admin identifier (UUID)"
    )

    username: str = Field(
        sa_column=Column(String(50), nullable=False, unique=True, index=True),
        description="Login name (unique)"
    )

    email: str = Field(
        sa_column=Column(String(255), nullable=False, unique=True, index=True),
        description="Email address (unique)"
    )

    name: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Display name"
    )

    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="bcrypt password hash"
    )

    role: Role = Field(
        default=Role.ADMIN,
        description="Admin role (ADMIN, SUPERADMIN)"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Account creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )
