"""CreateCustomer and UpdateCustomer Use Cases"""

from datetime import datetime
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.customer import Customer
from .dtos import CreateCustomerCommandDTO, UpdateCustomerCommandDTO, CustomerDTO


class CreateCustomer:
    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, command: CreateCustomerCommandDTO) -> Result[CustomerDTO]:
        try:
            customer = await self.customer_repo.create(
                Customer(name=command.name, phone=command.phone, address=command.address)
            )
            await self.uow.commit()
            return Return.ok(CustomerDTO.from_customer(customer))
        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_CUSTOMER_FAILED",
                    message="Failed to create customer",
                    reason=str(e),
                )
            )


class UpdateCustomer:
    """Applies only the fields the caller sent"""

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(
        self, customer_id: str, command: UpdateCustomerCommandDTO
    ) -> Result[CustomerDTO]:
        try:
            customer = await self.customer_repo.get_by_id(customer_id)
            if customer is None:
                return Return.err(
                    Error(code="CUSTOMER_NOT_FOUND", message="User tidak ditemukan")
                )

            for field in command.model_fields_set:
                value = getattr(command, field)
                if value is not None:
                    setattr(customer, field, value)
            customer.updated_at = datetime.utcnow()

            updated = await self.customer_repo.update(customer)
            await self.uow.commit()
            return Return.ok(CustomerDTO.from_customer(updated))
        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="UPDATE_CUSTOMER_FAILED",
                    message="Failed to update customer",
                    reason=str(e),
                )
            )
