"""Application service: List Orders use cases (queries).

Both listings come back newest first; an empty list simply means
there is nothing to show.
"""

from __future__ import annotations

from shopeasy.application.dto import OrderDTO
from shopeasy.application.projection import OrderProjector
from shopeasy.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo
        self._projector = OrderProjector(order_repo)

    def by_customer(self, customer_id: int) -> list[OrderDTO]:
        with self._order_repo.atomic():
            orders = self._order_repo.list_by_customer(customer_id)
            return self._projector.project_many(orders)

    def all(self) -> list[OrderDTO]:
        with self._order_repo.atomic():
            orders = self._order_repo.list_all()
            return self._projector.project_many(orders)
