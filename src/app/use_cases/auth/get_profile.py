"""Get Profile Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.admin_repository import AdminRepository
from .dtos import AdminProfileDTO


class GetProfile:
    """
    Re-reads the authenticated admin so a deleted account is reported even
    while its token is still valid.
    """

    def __init__(self, admin_repo: AdminRepository):
        self.admin_repo = admin_repo

    async def execute(self, admin_id: str) -> Result[AdminProfileDTO]:
        admin = await self.admin_repo.get_by_id(admin_id)
        if admin is None:
            return Return.err(Error(code="ADMIN_NOT_FOUND", message="Admin tidak ditemukan"))
        return Return.ok(AdminProfileDTO.from_admin(admin))
