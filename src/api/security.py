"""Access control dependencies

get_current_admin runs the token checks on every protected route;
authorize_role narrows a route to an explicit set of roles.
"""

from typing import Optional
from fastapi import Depends, Request
from libs.result import Error
from src.api.error import ClientError
from src.app.services.session_cache import SessionCache
from src.app.services.token_service import TokenService
from src.app.use_cases.auth import AuthenticateToken, AuthenticatedAdmin
from src.depends import get_config, get_session_cache, get_token_service
from src.domain.admin import Role


def extract_token(request: Request, cookie_name: str) -> Optional[str]:
    """Bearer token from the Authorization header, else the login cookie"""
    authorization = request.headers.get("authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()

    cookie = request.cookies.get(cookie_name)
    if cookie and cookie.strip():
        return cookie.strip()
    return None


async def get_current_admin(
    request: Request,
    config=Depends(get_config),
    token_service: TokenService = Depends(get_token_service),
    session_cache: SessionCache = Depends(get_session_cache),
) -> AuthenticatedAdmin:
    token = extract_token(request, config.TOKEN_COOKIE_NAME)
    if not token:
        raise ClientError(Error(code="MISSING_TOKEN", message="Token tidak ditemukan"))

    result = await AuthenticateToken(token_service, session_cache).execute(token)
    if result.is_err():
        raise ClientError.from_error(result.error)

    request.state.admin = result.value
    return result.value


def authorize_role(*roles: Role):
    """Dependency factory rejecting admins whose role is not in roles (403)"""
    allowed = frozenset(roles)

    async def dependency(
        admin: AuthenticatedAdmin = Depends(get_current_admin),
    ) -> AuthenticatedAdmin:
        if admin.role not in allowed:
            message = (
                "Akses ditolak, hanya Super Admin yang dapat mengakses"
                if allowed == {Role.SUPERADMIN}
                else "Akses ditolak"
            )
            raise ClientError(Error(code="FORBIDDEN", message=message))
        return admin

    return dependency


require_superadmin = authorize_role(Role.SUPERADMIN)
