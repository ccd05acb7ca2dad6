"""Application service: Show Order use case (query)."""

from __future__ import annotations

from shopeasy.application.dto import OrderDTO
from shopeasy.application.projection import OrderProjector
from shopeasy.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo
        self._projector = OrderProjector(order_repo)

    def handle(self, order_id: int) -> OrderDTO | None:
        """Return the order, or None when no such order exists."""
        with self._order_repo.atomic():
            order = self._order_repo.get_by_id(order_id)
            if order is None:
                return None
            return self._projector.project(order)
