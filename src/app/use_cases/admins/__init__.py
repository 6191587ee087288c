"""Admin management use cases"""
from .list_admins import ListAdmins
from .create_admin import CreateAdmin
from .update_admin import UpdateAdmin
from .delete_admin import DeleteAdmin
from .seed_admins import SeedAdmins, DEFAULT_ACCOUNTS
from .dtos import (
    CreateAdminCommandDTO,
    UpdateAdminCommandDTO,
    AdminDTO,
    AdminListDTO,
    SeedAccountDTO,
    SeedAdminsResultDTO,
)

__all__ = [
    "ListAdmins",
    "CreateAdmin",
    "UpdateAdmin",
    "DeleteAdmin",
    "SeedAdmins",
    "DEFAULT_ACCOUNTS",
    "CreateAdminCommandDTO",
    "UpdateAdminCommandDTO",
    "AdminDTO",
    "AdminListDTO",
    "SeedAccountDTO",
    "SeedAdminsResultDTO",
]
