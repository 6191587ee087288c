"""Auth API Routes

Login, logout and profile of the current admin.
"""

from fastapi import APIRouter, Depends, Request, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.admin_repository import SqlAlchemyAdminRepository
from src.api.error import ClientError
from src.api.schemas.auth_request import LoginRequestSchema
from src.api.schemas.response import ApiResponse, ok
from src.api.security import extract_token, get_current_admin
from src.app.services.password_hasher import PasswordHasher
from src.app.services.session_cache import SessionCache
from src.app.services.token_service import TokenService
from src.app.use_cases.auth import (
    AdminProfileDTO,
    AuthenticatedAdmin,
    GetProfile,
    Login,
    LoginCommandDTO,
    LoginResponseDTO,
    Logout,
)
from src.depends import (
    get_config,
    get_password_hasher,
    get_session,
    get_session_cache,
    get_token_service,
)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/login",
    response_model=ApiResponse[LoginResponseDTO],
    status_code=status.HTTP_200_OK,
    responses={
        401: {
            "description": "Wrong username or password",
            "content": {
                "application/json": {
                    "example": {
                        "success": False,
                        "status": 401,
                        "message": "Username atau password salah.",
                    }
                }
            },
        }
    },
)
async def login(
    request: LoginRequestSchema,
    response: Response,
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
    token_service: TokenService = Depends(get_token_service),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    session_cache: SessionCache = Depends(get_session_cache),
):
    """
    Log an admin in.

    The token is returned in the body and set as the httpOnly cookie
    `pw_token`. A new login retires the admin's previous session.

    **Returns:**
    - 200: token and public profile
    - 401: unknown username or wrong password
    """
    use_case = Login(
        SqlAlchemyAdminRepository(session),
        token_service,
        password_hasher,
        session_cache,
        fallback_ttl_seconds=config.JWT_EXPIRES_MINUTES * 60,
    )
    result = await use_case.execute(
        LoginCommandDTO(username=request.username, password=request.password)
    )
    if result.is_err():
        raise ClientError.from_error(result.error)

    response.set_cookie(
        key=config.TOKEN_COOKIE_NAME,
        value=result.value.token,
        max_age=result.value.expires_in,
        httponly=True,
        secure=config.COOKIE_SECURE,
        samesite=config.COOKIE_SAMESITE,
    )
    return ok(result.value, message="Login berhasil")


@router.get("/me", response_model=ApiResponse[AdminProfileDTO])
async def me(
    admin: AuthenticatedAdmin = Depends(get_current_admin),
    session: AsyncSession = Depends(get_session),
):
    """Profile of the authenticated admin, re-read from the database."""
    result = await GetProfile(SqlAlchemyAdminRepository(session)).execute(admin.id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return ok(result.value, message="Profil pengguna berhasil diambil")


@router.post("/logout", response_model=ApiResponse[None])
async def logout(
    request: Request,
    response: Response,
    config=Depends(get_config),
    token_service: TokenService = Depends(get_token_service),
    session_cache: SessionCache = Depends(get_session_cache),
):
    """
    Revoke the presented token and clear the login cookie.

    Always succeeds, including without a token and when repeated.
    """
    token = extract_token(request, config.TOKEN_COOKIE_NAME)
    await Logout(
        token_service,
        session_cache,
        fallback_ttl_seconds=config.BLACKLIST_FALLBACK_TTL_SECONDS,
    ).execute(token)

    response.delete_cookie(
        key=config.TOKEN_COOKIE_NAME,
        httponly=True,
        secure=config.COOKIE_SECURE,
        samesite=config.COOKIE_SAMESITE,
    )
    return ok(message="Logout berhasil")
