"""Demo catalog and customers for development.

Loaded only into an empty store; existing data is never touched.
"""

from __future__ import annotations

from datetime import datetime, timezone

import structlog

from shopeasy.domain.model.customer import Customer
from shopeasy.domain.model.product import Product
from shopeasy.domain.model.value_objects import Money
from shopeasy.infrastructure.persistence.json_store import JsonStore
from shopeasy.infrastructure.persistence.records import customer_to_raw, product_to_raw

logger = structlog.get_logger(__name__)

SEED_DATE = datetime(2026, 1, 1, tzinfo=timezone.utc)


def seed_products() -> list[Product]:
    return [
        Product(
            id=1,
            name="Wireless Mouse",
            description="Ergonomic wireless mouse with adjustable DPI and silent clicks",
            price=Money.of("29.99"),
            stock_quantity=150,
            category="Electronics",
            created_at=SEED_DATE,
        ),
        Product(
            id=2,
            name="Mechanical Keyboard",
            description="Full-size mechanical keyboard with brown switches and RGB backlight",
            price=Money.of("79.99"),
            stock_quantity=75,
            category="Electronics",
            created_at=SEED_DATE,
        ),
        Product(
            id=3,
            name="USB-C Hub",
            description="7-in-1 USB-C hub with HDMI, USB 3.0, SD card reader, and power delivery",
            price=Money.of("45.00"),
            stock_quantity=200,
            category="Accessories",
            created_at=SEED_DATE,
        ),
        Product(
            id=4,
            name="Monitor Stand",
            description="Adjustable aluminum monitor stand with cable management and storage drawer",
            price=Money.of("34.99"),
            stock_quantity=60,
            category="Accessories",
            created_at=SEED_DATE,
        ),
        Product(
            id=5,
            name="Webcam HD",
            description="1080p HD webcam with built-in noise-cancelling microphone and auto-focus",
            price=Money.of("54.99"),
            stock_quantity=90,
            category="Electronics",
            created_at=SEED_DATE,
        ),
        Product(
            id=6,
            name="Python in Action",
            description="Programming guide covering modern Python development patterns",
            price=Money.of("49.99"),
            stock_quantity=30,
            category="Books",
            created_at=SEED_DATE,
        ),
    ]


def seed_customers() -> list[Customer]:
    return [
        Customer(id=1, full_name="Alice Johnson", email="alice@example.com", created_at=SEED_DATE),
        Customer(id=2, full_name="Bob Smith", email="bob@example.com", created_at=SEED_DATE),
        Customer(id=3, full_name="Carol Davis", email="carol@example.com", created_at=SEED_DATE),
    ]


def seed_store(store: JsonStore) -> bool:
    """Fill an empty store with the demo data; return whether anything was written."""
    with store.transaction():
        doc = store.read()
        if doc["products"] or doc["customers"]:
            logger.info("seed.skipped", reason="store not empty")
            return False
        doc["products"] = [product_to_raw(p) for p in seed_products()]
        doc["customers"] = [customer_to_raw(c) for c in seed_customers()]
        store.write(doc)

    logger.info("seed.loaded", products=len(doc["products"]), customers=len(doc["customers"]))
    return True
