"""Application services: customer lookup use cases (queries)."""

from __future__ import annotations

from shopeasy.application.dto import CustomerDTO
from shopeasy.domain.model.customer import Customer
from shopeasy.domain.repository.customer_repository import CustomerRepository


def to_customer_dto(customer: Customer) -> CustomerDTO:
    return CustomerDTO(
        id=customer.id,
        full_name=customer.full_name,
        email=customer.email,
        created_at=customer.created_at.strftime("%Y-%m-%d"),
    )


class ListCustomersHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self) -> list[CustomerDTO]:
        customers = sorted(self._customer_repo.list_all(), key=lambda c: c.full_name.lower())
        return [to_customer_dto(c) for c in customers]


class ShowCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: int) -> CustomerDTO | None:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            return None
        return to_customer_dto(customer)
