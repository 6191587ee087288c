"""CreateAdmin Use Case"""

import logging
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.repositories.admin_repository import AdminRepository
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.admin import Admin
from ._guards import find_identity_conflict
from .dtos import CreateAdminCommandDTO, AdminDTO

logger = logging.getLogger(__name__)


class CreateAdmin:
    """
    Use Case: Create a back office admin

    Business Rules:
    1. username and email must not belong to another admin (409)
    2. The password is stored as a hash only
    3. A uniqueness race lost at the database surfaces as IntegrityError,
       translated centrally to 409
    """

    def __init__(
        self,
        uow: UnitOfWork,
        admin_repo: AdminRepository,
        password_hasher: PasswordHasher,
    ):
        self.uow = uow
        self.admin_repo = admin_repo
        self.password_hasher = password_hasher

    async def execute(self, command: CreateAdminCommandDTO) -> Result[AdminDTO]:
        try:
            conflict = await find_identity_conflict(
                self.admin_repo, command.username, command.email
            )
            if conflict:
                return Return.err(conflict)

            admin = Admin(
                username=command.username,
                email=command.email,
                name=command.name,
                password_hash=self.password_hasher.hash(command.password),
                role=command.role,
            )
            created = await self.admin_repo.create(admin)
            await self.uow.commit()

            logger.info(f"Admin {created.username} created with role {created.role}")
            return Return.ok(AdminDTO.from_admin(created))

        except IntegrityError:
            await self.uow.rollback()
            raise
        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_ADMIN_FAILED",
                    message="Failed to create admin",
                    reason=str(e),
                )
            )
