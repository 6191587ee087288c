"""Admin Repository Interface

Defines the contract for admin account persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from src.domain.admin import Admin


class AdminRepository(ABC):
    """Repository interface for Admin persistence"""

    @abstractmethod
    async def get_by_id(self, admin_id: str) -> Optional[Admin]:
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[Admin]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Admin]:
        pass

    @abstractmethod
    async def list(
        self, search: Optional[str] = None, limit: int = 7, offset: int = 0
    ) -> Tuple[List[Admin], int]:
        """
        List admins, newest first

        Args:
            search: Case-insensitive substring matched against name, email and username
            limit: Page size
            offset: Rows to skip

        Returns:
            Tuple of (admins, total matching rows)
        """
        pass

    @abstractmethod
    async def create(self, admin: Admin) -> Admin:
        pass

    @abstractmethod
    async def update(self, admin: Admin) -> Admin:
        pass

    @abstractmethod
    async def delete(self, admin: Admin) -> None:
        pass
