"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between callers (the CLI) and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product ID + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class CreateOrderRequest:
    """Input: everything needed to place an order."""

    customer_id: int
    shipping_address: str
    items: list[OrderItemSpec] = field(default_factory=list)
    notes: str | None = None


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single line item as displayed to the user."""

    product_id: int
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_id: int
    customer_name: str
    status: str
    items: list[OrderItemDTO]
    total: str
    ordered_at: str
    shipping_address: str
    notes: str | None = None


@dataclass(frozen=True)
class ProductDTO:

    id: int
    name: str
    description: str | None
    price: str
    stock_quantity: int
    category: str


@dataclass(frozen=True)
class CustomerDTO:

    id: int
    full_name: str
    email: str
    created_at: str
