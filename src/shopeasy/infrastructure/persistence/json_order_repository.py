"""JSON-document-backed implementation of OrderRepository."""

from __future__ import annotations

from collections.abc import Collection
from contextlib import AbstractContextManager

import structlog

from shopeasy.domain.model.customer import Customer
from shopeasy.domain.model.order import Order
from shopeasy.domain.model.order_status import OrderStatus
from shopeasy.domain.model.product import Product
from shopeasy.domain.repository.order_repository import OrderRepository
from shopeasy.infrastructure.persistence.json_store import JsonStore
from shopeasy.infrastructure.persistence.records import (
    customer_from_raw,
    next_id,
    order_from_raw,
    order_to_raw,
    product_from_raw,
)

logger = structlog.get_logger(__name__)


def _newest_first(orders: list[Order]) -> list[Order]:
    return sorted(orders, key=lambda o: (o.ordered_at, o.id or 0), reverse=True)


class JsonOrderRepository(OrderRepository):

    def __init__(self, store: JsonStore) -> None:
        self._store = store

    def atomic(self) -> AbstractContextManager[None]:
        return self._store.transaction()

    # --- Related reads --------------------------------------------------------

    def get_products_by_ids(self, product_ids: Collection[int]) -> list[Product]:
        wanted = set(product_ids)
        return [
            product_from_raw(raw)
            for raw in self._store.read()["products"]
            if raw["id"] in wanted and raw.get("is_active", True)
        ]

    def save_products(self, products: list[Product]) -> None:
        doc = self._store.read()
        stock = {p.id: p.stock_quantity for p in products}
        for raw in doc["products"]:
            if raw["id"] in stock:
                raw["stock_quantity"] = stock.pop(raw["id"])
        if stock:
            raise KeyError(f"Cannot update stock of unknown products: {sorted(stock)}")
        self._store.write(doc)

    def get_customer_by_id(self, customer_id: int) -> Customer | None:
        for raw in self._store.read()["customers"]:
            if raw["id"] == customer_id:
                return customer_from_raw(raw)
        return None

    def get_customer_names(self, customer_ids: Collection[int]) -> dict[int, str]:
        wanted = set(customer_ids)
        return {
            raw["id"]: raw["full_name"]
            for raw in self._store.read()["customers"]
            if raw["id"] in wanted
        }

    def get_product_names(self, product_ids: Collection[int]) -> dict[int, str]:
        wanted = set(product_ids)
        return {
            raw["id"]: raw["name"]
            for raw in self._store.read()["products"]
            if raw["id"] in wanted
        }

    # --- Orders ---------------------------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._store.read()["orders"]:
            if raw["id"] == order_id:
                return order_from_raw(raw)
        return None

    def list_by_customer(self, customer_id: int) -> list[Order]:
        return _newest_first([
            order_from_raw(raw)
            for raw in self._store.read()["orders"]
            if raw["customer_id"] == customer_id
        ])

    def list_all(self) -> list[Order]:
        return _newest_first([order_from_raw(raw) for raw in self._store.read()["orders"]])

    def add(self, order: Order) -> None:
        doc = self._store.read()
        orders = doc["orders"]

        order.id = next_id(orders)
        item_id = next_id([item for raw in orders for item in raw["items"]])
        for item in order.items:
            item.id = item_id
            item_id += 1

        orders.append(order_to_raw(order))
        self._store.write(doc)
        logger.debug("order.inserted", order_id=order.id, items=len(order.items))

    def update_status(
        self,
        order_id: int,
        expected: OrderStatus,
        new: OrderStatus,
    ) -> bool:
        doc = self._store.read()
        for raw in doc["orders"]:
            if raw["id"] != order_id:
                continue
            if raw["status"] != expected.value:
                return False
            raw["status"] = new.value
            self._store.write(doc)
            return True
        return False
