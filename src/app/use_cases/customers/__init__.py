"""Customer management use cases"""
from .list_customers import ListCustomers, SearchCustomers
from .create_customer import CreateCustomer, UpdateCustomer
from .delete_customer import DeleteCustomer
from .dtos import (
    CreateCustomerCommandDTO,
    UpdateCustomerCommandDTO,
    CustomerDTO,
    CustomerOptionDTO,
)

__all__ = [
    "ListCustomers",
    "SearchCustomers",
    "CreateCustomer",
    "UpdateCustomer",
    "DeleteCustomer",
    "CreateCustomerCommandDTO",
    "UpdateCustomerCommandDTO",
    "CustomerDTO",
    "CustomerOptionDTO",
]
