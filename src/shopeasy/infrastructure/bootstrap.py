"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from shopeasy.infrastructure.config import Settings, load_settings
from shopeasy.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from shopeasy.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from shopeasy.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from shopeasy.infrastructure.persistence.json_store import JsonStore


@lru_cache(maxsize=None)
def _store_for(data_file: Path) -> JsonStore:
    # One store per file shares its thread lock; the file lock covers other processes.
    return JsonStore(data_file)


def store(settings: Settings | None = None) -> JsonStore:
    settings = settings or load_settings()
    return _store_for(settings.data_file.resolve())


def order_repository(settings: Settings | None = None) -> JsonOrderRepository:
    return JsonOrderRepository(store(settings))


def product_repository(settings: Settings | None = None) -> JsonProductRepository:
    return JsonProductRepository(store(settings))


def customer_repository(settings: Settings | None = None) -> JsonCustomerRepository:
    return JsonCustomerRepository(store(settings))
