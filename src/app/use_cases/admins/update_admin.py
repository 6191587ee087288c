"""UpdateAdmin Use Case"""

import logging
from datetime import datetime
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.repositories.admin_repository import AdminRepository
from src.app.services.password_hasher import PasswordHasher
from src.app.services.session_cache import SessionCache, active_token_key
from src.app.services.unit_of_work import UnitOfWork
from ._guards import find_identity_conflict
from .dtos import UpdateAdminCommandDTO, AdminDTO

logger = logging.getLogger(__name__)


class UpdateAdmin:
    """
    Use Case: Update an admin

    Business Rules:
    1. Only fields the caller sent are changed
    2. username and email must not belong to another admin (409)
    3. A password change re-hashes and then deletes token:{admin_id}, which
       forces a new login everywhere. The cache delete is best effort.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        admin_repo: AdminRepository,
        password_hasher: PasswordHasher,
        session_cache: SessionCache,
    ):
        self.uow = uow
        self.admin_repo = admin_repo
        self.password_hasher = password_hasher
        self.session_cache = session_cache

    async def execute(self, admin_id: str, command: UpdateAdminCommandDTO) -> Result[AdminDTO]:
        changes = {
            field: getattr(command, field)
            for field in command.model_fields_set
            if getattr(command, field) is not None
        }

        try:
            admin = await self.admin_repo.get_by_id(admin_id)
            if admin is None:
                return Return.err(Error(code="ADMIN_NOT_FOUND", message="Admin tidak ditemukan"))

            conflict = await find_identity_conflict(
                self.admin_repo,
                changes.get("username"),
                changes.get("email"),
                exclude_id=admin.id,
            )
            if conflict:
                return Return.err(conflict)

            password_changed = "password" in changes
            if password_changed:
                admin.password_hash = self.password_hasher.hash(changes.pop("password"))

            for field, value in changes.items():
                setattr(admin, field, value)
            admin.updated_at = datetime.utcnow()

            updated = await self.admin_repo.update(admin)
            await self.uow.commit()
            response = AdminDTO.from_admin(updated)

        except IntegrityError:
            await self.uow.rollback()
            raise
        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="UPDATE_ADMIN_FAILED",
                    message="Failed to update admin",
                    reason=str(e),
                )
            )

        if password_changed:
            try:
                await self.session_cache.delete(active_token_key(admin_id))
            except Exception as e:
                logger.warning(f"Could not clear active session of admin {admin_id}: {e}")

        return Return.ok(response)
