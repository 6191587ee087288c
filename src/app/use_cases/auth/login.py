"""Login Use Case

Checks credentials, issues a session token and records it as the admin's
single active session.
"""

import logging
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.repositories.admin_repository import AdminRepository
from src.app.services.password_hasher import PasswordHasher
from src.app.services.session_cache import SessionCache, active_token_key
from src.app.services.token_service import TokenService, TokenClaims
from src.domain.admin import Role
from .dtos import LoginCommandDTO, LoginResponseDTO, AdminProfileDTO

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Username atau password salah."


class Login:
    """
    Use Case: Log an admin in

    Business Rules:
    1. Unknown username and wrong password fail the same way
    2. No cache write happens for a failed login
    3. A successful login overwrites token:{admin_id}, which retires any
       earlier session of the same admin
    4. The cache write is best effort: a failure is logged and the login
       still succeeds
    """

    def __init__(
        self,
        admin_repo: AdminRepository,
        token_service: TokenService,
        password_hasher: PasswordHasher,
        session_cache: SessionCache,
        fallback_ttl_seconds: int = 3600,
    ):
        self.admin_repo = admin_repo
        self.token_service = token_service
        self.password_hasher = password_hasher
        self.session_cache = session_cache
        self.fallback_ttl_seconds = fallback_ttl_seconds

    async def execute(self, command: LoginCommandDTO) -> Result[LoginResponseDTO]:
        """
        Execute login

        Args:
            command: LoginCommandDTO with username and password

        Returns:
            Result[LoginResponseDTO]: Token and public profile, or error

        Errors:
            INVALID_CREDENTIALS: Unknown username or wrong password
        """
        admin = await self.admin_repo.get_by_username(command.username)
        if admin is None or not self.password_hasher.verify(command.password, admin.password_hash):
            logger.info(f"Failed login attempt for username={command.username!r}")
            return Return.err(
                Error(
                    code="INVALID_CREDENTIALS",
                    message=INVALID_CREDENTIALS_MESSAGE,
                )
            )

        token = self.token_service.issue(
            TokenClaims(id=admin.id, username=admin.username, role=Role.parse(admin.role).value)
        )
        ttl = self.token_service.remaining_ttl(
            token, datetime.utcnow(), self.fallback_ttl_seconds
        )

        try:
            await self.session_cache.set(active_token_key(admin.id), token, ttl)
        except Exception as e:
            logger.warning(f"Could not record active session for admin {admin.id}: {e}")

        logger.info(f"Admin {admin.username} logged in")
        return Return.ok(
            LoginResponseDTO(
                token=token,
                user=AdminProfileDTO.from_admin(admin),
                expires_in=ttl,
            )
        )
