"""JSON-document-backed implementation of CustomerRepository."""

from __future__ import annotations

from shopeasy.domain.model.customer import Customer
from shopeasy.domain.repository.customer_repository import CustomerRepository
from shopeasy.infrastructure.persistence.json_store import JsonStore
from shopeasy.infrastructure.persistence.records import customer_from_raw


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, store: JsonStore) -> None:
        self._store = store

    def get_by_id(self, customer_id: int) -> Customer | None:
        for customer in self.list_all():
            if customer.id == customer_id:
                return customer
        return None

    def list_all(self) -> list[Customer]:
        return [customer_from_raw(raw) for raw in self._store.read()["customers"]]
