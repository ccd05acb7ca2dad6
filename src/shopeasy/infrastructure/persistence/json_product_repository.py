"""JSON-document-backed implementation of ProductRepository."""

from __future__ import annotations

from shopeasy.domain.model.product import Product
from shopeasy.domain.repository.product_repository import ProductRepository
from shopeasy.infrastructure.persistence.json_store import JsonStore
from shopeasy.infrastructure.persistence.records import product_from_raw


class JsonProductRepository(ProductRepository):

    def __init__(self, store: JsonStore) -> None:
        self._store = store

    def get_active_by_id(self, product_id: int) -> Product | None:
        for product in self.list_active():
            if product.id == product_id:
                return product
        return None

    def list_active(self) -> list[Product]:
        return [
            product_from_raw(raw)
            for raw in self._store.read()["products"]
            if raw.get("is_active", True)
        ]
