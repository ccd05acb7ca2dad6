"""Abstract repository for catalog browsing.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopeasy.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_active_by_id(self, product_id: int) -> Product | None:
        """Return an active product by its ID, or None."""

    @abstractmethod
    def list_active(self) -> list[Product]:
        """Return every active product in the catalog."""
