"""Application service: Update Order Status use case.

Only the lifecycle state machine is consulted here; stock and prices
are never revisited once an order exists.
"""

from __future__ import annotations

import structlog

from shopeasy.application.dto import OrderDTO
from shopeasy.application.projection import OrderProjector
from shopeasy.domain.exceptions import EntityNotFoundError, InvalidTransitionError
from shopeasy.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo
        self._projector = OrderProjector(order_repo)

    def handle(self, order_id: int, status_name: str) -> OrderDTO:
        log = logger.bind(order_id=order_id, requested=status_name)

        with self._order_repo.atomic():
            order = self._order_repo.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError("Order", [order_id])

            try:
                previous = order.transition_to(status_name)
            except InvalidTransitionError:
                log.warning("order.invalid_transition", current=order.status.value)
                raise

            # Guard against a concurrent writer having moved the order meanwhile.
            if not self._order_repo.update_status(order_id, expected=previous, new=order.status):
                stored = self._order_repo.get_by_id(order_id)
                current = stored.status.value if stored is not None else previous.value
                log.warning("order.status_conflict", current=current)
                raise InvalidTransitionError(current, status_name)

        log.info("order.status_updated", previous=previous.value, status=order.status.value)
        return self._projector.project(order)
