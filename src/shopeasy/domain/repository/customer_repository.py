"""Abstract repository for customer lookups."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopeasy.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: int) -> Customer | None:
        """Return a customer by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every registered customer."""
