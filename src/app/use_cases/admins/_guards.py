"""Uniqueness checks shared by CreateAdmin and UpdateAdmin"""

from typing import Optional
from libs.result import Error
from src.app.repositories.admin_repository import AdminRepository


async def find_identity_conflict(
    admin_repo: AdminRepository,
    username: Optional[str],
    email: Optional[str],
    exclude_id: Optional[str] = None,
) -> Optional[Error]:
    """
    Return USERNAME_TAKEN / EMAIL_TAKEN when the value belongs to another admin
    """
    if username is not None:
        owner = await admin_repo.get_by_username(username)
        if owner is not None and owner.id != exclude_id:
            return Error(
                code="USERNAME_TAKEN",
                message=f"Username {username} sudah digunakan",
                details={"username": [f"Username {username} sudah digunakan"]},
            )

    if email is not None:
        owner = await admin_repo.get_by_email(email)
        if owner is not None and owner.id != exclude_id:
            return Error(
                code="EMAIL_TAKEN",
                message=f"Email {email} sudah digunakan",
                details={"email": [f"Email {email} sudah digunakan"]},
            )

    return None
