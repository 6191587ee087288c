"""Page arithmetic shared by paged list use cases"""

import math
from pydantic import BaseModel, Field


class PaginationDTO(BaseModel):
    current_page: int = Field(..., description="1-based page number")
    total_pages: int = Field(..., description="Number of pages for total_items")
    total_items: int = Field(..., description="Rows matching the filter")


def page_offset(page: int, page_size: int) -> int:
    return (max(page, 1) - 1) * page_size


def build_pagination(page: int, page_size: int, total_items: int) -> PaginationDTO:
    return PaginationDTO(
        current_page=max(page, 1),
        total_pages=math.ceil(total_items / page_size) if page_size > 0 else 0,
        total_items=total_items,
    )
