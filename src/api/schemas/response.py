"""Response envelope shared by every endpoint"""

from typing import Generic, Optional, TypeVar
from pydantic import BaseModel
from src.app.use_cases.pagination import PaginationDTO

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """
    {success, status, message, data, pagination}

    pagination is only set on paged listings.
    """

    success: bool = True
    status: int = 200
    message: str = ""
    data: Optional[T] = None
    pagination: Optional[PaginationDTO] = None


def ok(data=None, message: str = "", status_code: int = 200, pagination=None) -> ApiResponse:
    return ApiResponse(
        success=True,
        status=status_code,
        message=message,
        data=data,
        pagination=pagination,
    )
