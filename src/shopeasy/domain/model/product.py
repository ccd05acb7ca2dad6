"""Product aggregate.

Products live independently of orders. They belong to the catalog; the
only mutation the ordering flow performs on them is a stock decrement.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from shopeasy.domain.exceptions import InsufficientStockError, ValidationError
from shopeasy.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Soft-deleted products keep ``is_active=False`` so historical order
    items can still point at them; they are invisible to browsing and
    to order creation.
    """

    id: int
    name: str
    price: Money
    stock_quantity: int
    category: str
    description: str | None = None
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if self.stock_quantity < 0:
            raise ValidationError(
                f"Stock for {self.name} cannot be negative, got {self.stock_quantity}"
            )
        if not self.category or not self.category.strip():
            raise ValidationError(f"Category is required for {self.name}")

    def has_stock_for(self, quantity: int) -> bool:
        return quantity <= self.stock_quantity

    def decrement_stock(self, quantity: int) -> None:
        """Take *quantity* units out of stock.

        Raises InsufficientStockError rather than letting stock go negative.
        """
        if quantity <= 0:
            raise ValidationError("Stock decrement must be positive")
        if not self.has_stock_for(quantity):
            raise InsufficientStockError(
                product_id=self.id,
                product_name=self.name,
                requested=quantity,
                available=self.stock_quantity,
            )
        self.stock_quantity -= quantity
