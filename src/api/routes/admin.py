"""Admin API Routes

Admin management, restricted to SUPERADMIN.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.admin_repository import SqlAlchemyAdminRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.schemas.admin_request import CreateAdminRequestSchema, UpdateAdminRequestSchema
from src.api.schemas.response import ApiResponse, ok
from src.api.security import require_superadmin
from src.app.services.password_hasher import PasswordHasher
from src.app.services.session_cache import SessionCache
from src.app.use_cases.admins import (
    AdminDTO,
    CreateAdmin,
    CreateAdminCommandDTO,
    DeleteAdmin,
    ListAdmins,
    UpdateAdmin,
    UpdateAdminCommandDTO,
)
from src.app.use_cases.auth import AuthenticatedAdmin
from src.depends import get_config, get_password_hasher, get_session, get_session_cache

router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(require_superadmin)])


@router.get("", response_model=ApiResponse[list[AdminDTO]])
async def list_admins(
    search: Optional[str] = Query(default=None, description="Name, email or username"),
    page: int = Query(default=1, ge=1),
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """List admins, newest first, paged."""
    result = await ListAdmins(SqlAlchemyAdminRepository(session)).execute(
        search=search, page=page, page_size=config.PAGE_SIZE
    )
    return ok(result.value.items, pagination=result.value.pagination)


@router.post("", response_model=ApiResponse[AdminDTO], status_code=status.HTTP_201_CREATED)
async def create_admin(
    request: CreateAdminRequestSchema,
    session: AsyncSession = Depends(get_session),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Create an admin.

    **Returns:**
    - 201: created admin
    - 409: username or email already used
    """
    use_case = CreateAdmin(
        SqlAlchemyUnitOfWork(session), SqlAlchemyAdminRepository(session), password_hasher
    )
    result = await use_case.execute(CreateAdminCommandDTO(**request.model_dump()))
    if result.is_err():
        raise ClientError.from_error(result.error)
    return ok(
        result.value,
        message=f"{result.value.name} berhasil ditambahkan",
        status_code=status.HTTP_201_CREATED,
    )


@router.put("/{admin_id}", response_model=ApiResponse[AdminDTO])
async def update_admin(
    admin_id: str,
    request: UpdateAdminRequestSchema,
    session: AsyncSession = Depends(get_session),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    session_cache: SessionCache = Depends(get_session_cache),
):
    """
    Update an admin. Only fields sent are changed.

    Changing the password ends the admin's current session.
    """
    use_case = UpdateAdmin(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyAdminRepository(session),
        password_hasher,
        session_cache,
    )
    command = UpdateAdminCommandDTO(**request.model_dump(exclude_unset=True))
    result = await use_case.execute(admin_id, command)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return ok(result.value, message=f"{result.value.name} berhasil diperbarui")


@router.delete("/{admin_id}", response_model=ApiResponse[AdminDTO])
async def delete_admin(
    admin_id: str,
    actor: AuthenticatedAdmin = Depends(require_superadmin),
    session: AsyncSession = Depends(get_session),
    session_cache: SessionCache = Depends(get_session_cache),
):
    """Delete another admin. Deleting yourself is rejected."""
    use_case = DeleteAdmin(
        SqlAlchemyUnitOfWork(session), SqlAlchemyAdminRepository(session), session_cache
    )
    result = await use_case.execute(admin_id, actor_id=actor.id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return ok(result.value, message=f"{result.value.name} berhasil dihapus")
