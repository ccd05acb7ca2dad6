"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so callers (the CLI today) can catch them uniformly and display user-friendly
messages.  Each subclass carries the structured details a caller needs to
tell "retry with different input" apart from "this order cannot move there".
"""

from __future__ import annotations

from collections.abc import Iterable


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was malformed or a business invariant was violated."""


class EntityNotFoundError(DomainException):
    """One or more requested entities do not exist."""

    def __init__(self, entity: str, ids: Iterable[object]) -> None:
        self.entity = entity
        self.ids = tuple(ids)
        listed = ", ".join(str(i) for i in self.ids)
        label = entity if len(self.ids) == 1 else f"{entity}s"
        super().__init__(f"{label} not found: {listed}")


class InvalidTransitionError(DomainException):
    """The requested status change is not permitted from the current status."""

    def __init__(self, current: str, requested: str) -> None:
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot transition order from {current} to {requested}")


class InsufficientStockError(DomainException):
    """A product does not hold enough stock for the requested quantity."""

    def __init__(
        self,
        product_id: int,
        product_name: str,
        requested: int,
        available: int,
    ) -> None:
        self.product_id = product_id
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for {product_name} "
            f"(need {requested}, have {available} available, short {self.shortfall})"
        )

    @property
    def shortfall(self) -> int:
        return self.requested - self.available
