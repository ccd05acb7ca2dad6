"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its line items.
All business invariants are enforced here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from shopeasy.domain.exceptions import InvalidTransitionError, ValidationError
from shopeasy.domain.model.order_status import OrderStatus, can_transition
from shopeasy.domain.model.value_objects import Money, Quantity


@dataclass
class OrderItem:
    """Captures the price snapshot of a product at order-creation time.

    Immutable after creation in practice: neither ``quantity`` nor
    ``unit_price`` is ever recomputed from the live product.
    """

    product_id: int
    quantity: Quantity
    unit_price: Money  # locked at order-creation time
    id: int | None = None

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    customer_id: int
    shipping_address: str
    items: list[OrderItem]
    notes: str | None = None
    status: OrderStatus = OrderStatus.PENDING
    ordered_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_id: int,
        shipping_address: str,
        items: list[OrderItem],
        notes: str | None = None,
        ordered_at: datetime | None = None,
    ) -> Order:
        """Create a new Pending order, enforcing all invariants."""
        if not shipping_address or not shipping_address.strip():
            raise ValidationError("Shipping address is required")

        if not items:
            raise ValidationError("Order must contain at least one item")

        if notes is not None and not notes.strip():
            notes = None

        order = Order(
            id=None,
            customer_id=customer_id,
            shipping_address=shipping_address.strip(),
            items=list(items),
            notes=notes,
        )
        if ordered_at is not None:
            order.ordered_at = ordered_at
        return order

    # --- State transitions ----------------------------------------------------

    def transition_to(self, requested: str | OrderStatus) -> OrderStatus:
        """Move the order to *requested* if the lifecycle table allows it.

        Returns the previous status so callers can guard the write.
        """
        if not can_transition(self.status, requested):
            requested_name = requested.value if isinstance(requested, OrderStatus) else str(requested)
            raise InvalidTransitionError(self.status.value, requested_name)

        previous = self.status
        self.status = OrderStatus.parse(requested)  # type: ignore[assignment]
        return previous

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result
