"""List and search customers"""

from typing import List
from libs.result import Result, Return
from src.app.repositories.customer_repository import CustomerRepository
from .dtos import CustomerDTO, CustomerOptionDTO


class ListCustomers:
    """All customers, newest first"""

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def execute(self) -> Result[List[CustomerDTO]]:
        customers = await self.customer_repo.list_all()
        return Return.ok([CustomerDTO.from_customer(customer) for customer in customers])


class SearchCustomers:
    """Up to `limit` customers whose name contains the query"""

    def __init__(self, customer_repo: CustomerRepository, limit: int = 10):
        self.customer_repo = customer_repo
        self.limit = limit

    async def execute(self, query: str) -> Result[List[CustomerOptionDTO]]:
        query = (query or "").strip()
        if not query:
            return Return.ok([])

        customers = await self.customer_repo.search_by_name(query, limit=self.limit)
        return Return.ok([CustomerOptionDTO(id=c.id, name=c.name) for c in customers])
