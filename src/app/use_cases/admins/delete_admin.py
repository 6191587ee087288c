"""DeleteAdmin Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.admin_repository import AdminRepository
from src.app.services.session_cache import SessionCache, active_token_key
from src.app.services.unit_of_work import UnitOfWork
from .dtos import AdminDTO

logger = logging.getLogger(__name__)


class DeleteAdmin:
    """
    Use Case: Delete an admin

    Business Rules:
    1. An admin cannot delete itself (SELF_DELETE)
    2. The deleted admin's active session is cleared (best effort)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        admin_repo: AdminRepository,
        session_cache: SessionCache,
    ):
        self.uow = uow
        self.admin_repo = admin_repo
        self.session_cache = session_cache

    async def execute(self, admin_id: str, actor_id: str) -> Result[AdminDTO]:
        if admin_id == actor_id:
            return Return.err(
                Error(
                    code="SELF_DELETE",
                    message="Anda tidak dapat menghapus akun Anda sendiri",
                )
            )

        try:
            admin = await self.admin_repo.get_by_id(admin_id)
            if admin is None:
                return Return.err(Error(code="ADMIN_NOT_FOUND", message="Admin tidak ditemukan"))

            response = AdminDTO.from_admin(admin)
            await self.admin_repo.delete(admin)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DELETE_ADMIN_FAILED",
                    message="Failed to delete admin",
                    reason=str(e),
                )
            )

        try:
            await self.session_cache.delete(active_token_key(admin_id))
        except Exception as e:
            logger.warning(f"Could not clear active session of admin {admin_id}: {e}")

        logger.info(f"Admin {response.username} deleted by {actor_id}")
        return Return.ok(response)
