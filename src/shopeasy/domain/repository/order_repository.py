"""Abstract repository for the Order aggregate.

This is the narrow port the ordering use cases depend on.  Besides the
orders themselves it exposes the exact related reads the use cases
need (a batch of products, a customer, display names), so no handler
ever triggers hidden per-row lookups.

Everything done inside an ``atomic()`` block is applied as one unit:
either every write lands or none does.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Collection
from contextlib import AbstractContextManager

from shopeasy.domain.model.customer import Customer
from shopeasy.domain.model.order import Order
from shopeasy.domain.model.order_status import OrderStatus
from shopeasy.domain.model.product import Product


class OrderRepository(ABC):

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Open a unit of work; reads inside it see a consistent snapshot.

        Nested calls join the enclosing unit.
        """

    # --- Related reads --------------------------------------------------------

    @abstractmethod
    def get_products_by_ids(self, product_ids: Collection[int]) -> list[Product]:
        """Return the *active* products among *product_ids* in one read."""

    @abstractmethod
    def save_products(self, products: list[Product]) -> None:
        """Persist updated stock quantities for *products*."""

    @abstractmethod
    def get_customer_by_id(self, customer_id: int) -> Customer | None:
        """Return a customer by ID, or None if not found."""

    @abstractmethod
    def get_customer_names(self, customer_ids: Collection[int]) -> dict[int, str]:
        """Map each known customer ID to its full name."""

    @abstractmethod
    def get_product_names(self, product_ids: Collection[int]) -> dict[int, str]:
        """Map each known product ID to its name, inactive products included."""

    # --- Orders ---------------------------------------------------------------

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order with its items, or None if not found."""

    @abstractmethod
    def list_by_customer(self, customer_id: int) -> list[Order]:
        """Return a customer's orders, newest first."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, newest first."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Insert a new order and its items, assigning their IDs."""

    @abstractmethod
    def update_status(
        self,
        order_id: int,
        expected: OrderStatus,
        new: OrderStatus,
    ) -> bool:
        """Set the status only if it is still *expected*; report whether it was."""
