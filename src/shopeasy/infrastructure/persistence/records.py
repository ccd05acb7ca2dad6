"""Conversion between domain objects and their JSON records.

Money is stored as a decimal string (never a float) plus its currency.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from shopeasy.domain.model.customer import Customer
from shopeasy.domain.model.order import Order, OrderItem
from shopeasy.domain.model.order_status import OrderStatus
from shopeasy.domain.model.product import Product
from shopeasy.domain.model.value_objects import Money, Quantity


def next_id(records: list[dict]) -> int:
    if not records:
        return 1
    return max(r["id"] for r in records) + 1


# --- Products -----------------------------------------------------------------


def product_to_raw(product: Product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "price": str(product.price.amount),
        "currency": product.price.currency,
        "stock_quantity": product.stock_quantity,
        "category": product.category,
        "is_active": product.is_active,
        "created_at": product.created_at.isoformat(),
    }


def product_from_raw(raw: dict) -> Product:
    return Product(
        id=raw["id"],
        name=raw["name"],
        description=raw.get("description"),
        price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
        stock_quantity=raw["stock_quantity"],
        category=raw["category"],
        is_active=raw.get("is_active", True),
        created_at=datetime.fromisoformat(raw["created_at"]),
    )


# --- Customers ----------------------------------------------------------------


def customer_to_raw(customer: Customer) -> dict:
    return {
        "id": customer.id,
        "full_name": customer.full_name,
        "email": customer.email,
        "created_at": customer.created_at.isoformat(),
    }


def customer_from_raw(raw: dict) -> Customer:
    return Customer(
        id=raw["id"],
        full_name=raw["full_name"],
        email=raw["email"],
        created_at=datetime.fromisoformat(raw["created_at"]),
    )


# --- Orders -------------------------------------------------------------------


def order_to_raw(order: Order) -> dict:
    return {
        "id": order.id,
        "customer_id": order.customer_id,
        "status": order.status.value,
        "ordered_at": order.ordered_at.isoformat(),
        "shipping_address": order.shipping_address,
        "notes": order.notes,
        "items": [
            {
                "id": item.id,
                "product_id": item.product_id,
                "quantity": item.quantity.value,
                "unit_price": str(item.unit_price.amount),
                "currency": item.unit_price.currency,
            }
            for item in order.items
        ],
    }


def order_from_raw(raw: dict) -> Order:
    items = [
        OrderItem(
            id=i["id"],
            product_id=i["product_id"],
            quantity=Quantity(i["quantity"]),
            unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
        )
        for i in raw["items"]
    ]
    return Order(
        id=raw["id"],
        customer_id=raw["customer_id"],
        shipping_address=raw["shipping_address"],
        items=items,
        notes=raw.get("notes"),
        status=OrderStatus(raw["status"]),
        ordered_at=datetime.fromisoformat(raw["ordered_at"]),
    )
