"""SeedAdmins Use Case

Upserts the default back office accounts by username.
"""

import logging
from datetime import datetime
from typing import List, Optional
from libs.result import Result, Return, Error
from src.app.repositories.admin_repository import AdminRepository
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.admin import Admin, Role
from .dtos import SeedAccountDTO, SeedAdminsResultDTO

logger = logging.getLogger(__name__)

DEFAULT_ACCOUNTS = [
    SeedAccountDTO(username="superadmin1", email="superadmin1@example.com", name="Super Admin One", role=Role.SUPERADMIN),
    SeedAccountDTO(username="superadmin2", email="superadmin2@example.com", name="Super Admin Two", role=Role.SUPERADMIN),
    SeedAccountDTO(username="admin1", email="admin1@example.com", name="Admin One", role=Role.ADMIN),
    SeedAccountDTO(username="admin2", email="admin2@example.com", name="Admin Two", role=Role.ADMIN),
]


class SeedAdmins:
    """
    Use Case: Insert or refresh the default admins

    Running it twice leaves the same four accounts.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        admin_repo: AdminRepository,
        password_hasher: PasswordHasher,
        accounts: Optional[List[SeedAccountDTO]] = None,
    ):
        self.uow = uow
        self.admin_repo = admin_repo
        self.password_hasher = password_hasher
        self.accounts = accounts or DEFAULT_ACCOUNTS

    async def execute(self, password: str) -> Result[SeedAdminsResultDTO]:
        result = SeedAdminsResultDTO()

        try:
            for account in self.accounts:
                password_hash = self.password_hasher.hash(password)
                existing = await self.admin_repo.get_by_username(account.username)

                if existing is None:
                    await self.admin_repo.create(
                        Admin(
                            username=account.username,
                            email=account.email,
                            name=account.name,
                            role=account.role,
                            password_hash=password_hash,
                        )
                    )
                    result.created.append(account.username)
                else:
                    existing.email = account.email
                    existing.name = account.name
                    existing.role = account.role
                    existing.password_hash = password_hash
                    existing.updated_at = datetime.utcnow()
                    await self.admin_repo.update(existing)
                    result.updated.append(account.username)

            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Seeding admins failed: {e}")
            return Return.err(
                Error(
                    code="SEED_ADMINS_FAILED",
                    message="Failed to seed admins",
                    reason=str(e),
                )
            )

        logger.info(f"Seeded admins: created={result.created}, updated={result.updated}")
        return Return.ok(result)
