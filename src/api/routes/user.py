"""Customer (User) API Routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyDebtCycleRepository,
    SqlAlchemyDebtRepository,
    SqlAlchemyPaymentRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.schemas.customer_request import (
    CreateCustomerRequestSchema,
    UpdateCustomerRequestSchema,
)
from src.api.schemas.response import ApiResponse, ok
from src.api.security import get_current_admin
from src.app.use_cases.customers import (
    CreateCustomer,
    CreateCustomerCommandDTO,
    CustomerDTO,
    CustomerOptionDTO,
    DeleteCustomer,
    ListCustomers,
    SearchCustomers,
    UpdateCustomer,
    UpdateCustomerCommandDTO,
)
from src.depends import get_session

router = APIRouter(prefix="/user", tags=["User"], dependencies=[Depends(get_current_admin)])


@router.get("", response_model=ApiResponse[list[CustomerDTO]])
async def list_customers(session: AsyncSession = Depends(get_session)):
    """All customers, newest first."""
    result = await ListCustomers(SqlAlchemyCustomerRepository(session)).execute()
    return ok(result.value)


@router.get("/search", response_model=ApiResponse[list[CustomerOptionDTO]])
async def search_customers(
    query: str = Query(default="", description="Name substring"),
    session: AsyncSession = Depends(get_session),
):
    """Up to 10 customers whose name contains `query` (id and name only)."""
    result = await SearchCustomers(SqlAlchemyCustomerRepository(session)).execute(query)
    return ok(result.value)


@router.post("", response_model=ApiResponse[CustomerDTO], status_code=status.HTTP_201_CREATED)
async def create_customer(
    request: CreateCustomerRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """Create a customer."""
    use_case = CreateCustomer(SqlAlchemyUnitOfWork(session), SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(CreateCustomerCommandDTO(**request.model_dump()))
    if result.is_err():
        raise ClientError.from_error(result.error)
    return ok(result.value, message="User berhasil dibuat", status_code=status.HTTP_201_CREATED)


@router.put("/{customer_id}", response_model=ApiResponse[CustomerDTO])
async def update_customer(
    customer_id: str,
    request: UpdateCustomerRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """Update a customer. Only fields sent are changed."""
    use_case = UpdateCustomer(SqlAlchemyUnitOfWork(session), SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(
        customer_id, UpdateCustomerCommandDTO(**request.model_dump(exclude_unset=True))
    )
    if result.is_err():
        raise ClientError.from_error(result.error)
    return ok(result.value, message="User berhasil diperbarui")


@router.delete("/{customer_id}", response_model=ApiResponse[CustomerDTO])
async def delete_customer(customer_id: str, session: AsyncSession = Depends(get_session)):
    """
    Delete a customer together with its settled history.

    **Returns:**
    - 200: deleted
    - 400: the customer still has an unpaid cycle
    - 404: unknown customer
    """
    use_case = DeleteCustomer(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyDebtCycleRepository(session),
        SqlAlchemyDebtRepository(session),
        SqlAlchemyPaymentRepository(session),
    )
    result = await use_case.execute(customer_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return ok(result.value, message="User berhasil dihapus")
