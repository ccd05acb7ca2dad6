"""Order lifecycle state machine.

The permitted transitions live in a single constant table so the policy
can be audited (and unit tested) without any storage in sight.
"""

from __future__ import annotations

from enum import Enum


class OrderStatus(Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    @classmethod
    def parse(cls, name: object) -> OrderStatus | None:
        """Match *name* case-insensitively, returning None when nothing matches."""
        if isinstance(name, OrderStatus):
            return name
        if not isinstance(name, str):
            return None
        return _BY_LOWER_NAME.get(name.lower())

    def allowed_targets(self) -> frozenset[OrderStatus]:
        return ALLOWED_TRANSITIONS[self]

    @property
    def is_terminal(self) -> bool:
        return not ALLOWED_TRANSITIONS[self]


_BY_LOWER_NAME: dict[str, OrderStatus] = {s.value.lower(): s for s in OrderStatus}

ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


def can_transition(current: str | OrderStatus, target: str | OrderStatus) -> bool:
    """Return True if an order in *current* may move to *target*.

    Unknown names are never transitionable; this never raises.
    """
    current_status = OrderStatus.parse(current)
    target_status = OrderStatus.parse(target)
    if current_status is None or target_status is None:
        return False
    return target_status in ALLOWED_TRANSITIONS[current_status]
