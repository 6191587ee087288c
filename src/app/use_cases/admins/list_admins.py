"""List Admins Use Case"""

from typing import Optional
from libs.result import Result, Return
from src.app.repositories.admin_repository import AdminRepository
from src.app.use_cases.pagination import build_pagination, page_offset
from .dtos import AdminDTO, AdminListDTO


class ListAdmins:
    """
    Paged admin listing, newest first

    search matches name, email or username, case-insensitively.
    """

    def __init__(self, admin_repo: AdminRepository):
        self.admin_repo = admin_repo

    async def execute(
        self, search: Optional[str] = None, page: int = 1, page_size: int = 7
    ) -> Result[AdminListDTO]:
        admins, total = await self.admin_repo.list(
            search=search or None,
            limit=page_size,
            offset=page_offset(page, page_size),
        )
        return Return.ok(
            AdminListDTO(
                items=[AdminDTO.from_admin(admin) for admin in admins],
                pagination=build_pagination(page, page_size, total),
            )
        )
