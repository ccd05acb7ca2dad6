"""Application service: Create Order use case.

Orchestrates the flow between the repository and the domain model.
This is the only place that coordinates multiple aggregates (Customer
and Product lookups, stock allocation, Order creation), and it does so
inside a single unit of work so stock is never decremented for an
order that was not saved.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

import structlog

from shopeasy.application.dto import CreateOrderRequest, OrderDTO
from shopeasy.application.projection import OrderProjector
from shopeasy.domain.exceptions import EntityNotFoundError, InsufficientStockError, ValidationError
from shopeasy.domain.model.order import Order, OrderItem
from shopeasy.domain.model.value_objects import Quantity
from shopeasy.domain.repository.order_repository import OrderRepository
from shopeasy.domain.service.stock_allocation_service import StockAllocationService

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._order_repo = order_repo
        self._clock = clock
        self._projector = OrderProjector(order_repo)
        self._stock = StockAllocationService()

    def handle(self, request: CreateOrderRequest) -> OrderDTO:
        """Create a new Pending order.

        Steps:
        1. Validate the request shape (items, quantities, address).
        2. Check the customer exists.
        3. Batch-load every requested product; report all missing IDs.
        4. Build OrderItems with *current* prices (snapshot).
        5. Allocate stock (fails before mutating if any product is short).
        6. Persist products and order together, return a DTO.
        """
        quantities = self._validate(request)
        log = logger.bind(customer_id=request.customer_id, lines=len(request.items))

        with self._order_repo.atomic():
            customer = self._order_repo.get_customer_by_id(request.customer_id)
            if customer is None:
                log.info("order.customer_not_found")
                raise EntityNotFoundError("Customer", [request.customer_id])

            requested_ids = list(dict.fromkeys(spec.product_id for spec in request.items))
            products = {
                p.id: p for p in self._order_repo.get_products_by_ids(requested_ids)
            }
            missing = [pid for pid in requested_ids if pid not in products]
            if missing:
                log.info("order.products_not_found", product_ids=missing)
                raise EntityNotFoundError("Product", missing)

            items = [
                OrderItem(
                    product_id=spec.product_id,
                    quantity=qty,
                    unit_price=products[spec.product_id].price,  # <-- price snapshot
                )
                for spec, qty in zip(request.items, quantities)
            ]
            order = Order.create(
                customer_id=customer.id,
                shipping_address=request.shipping_address,
                items=items,
                notes=request.notes,
                ordered_at=self._clock(),
            )

            try:
                touched = self._stock.allocate(order, products)
            except InsufficientStockError as exc:
                log.warning(
                    "order.stock_insufficient",
                    product_id=exc.product_id,
                    requested=exc.requested,
                    available=exc.available,
                )
                raise

            self._order_repo.save_products(touched)
            self._order_repo.add(order)

        log.info("order.created", order_id=order.id, total=str(order.total))
        return self._projector.project(order)

    # --- Validation -----------------------------------------------------------

    @staticmethod
    def _validate(request: CreateOrderRequest) -> list[Quantity]:
        if not request.items:
            raise ValidationError("Order must contain at least one item")
        if not request.shipping_address or not request.shipping_address.strip():
            raise ValidationError("Shipping address is required")
        return [Quantity(spec.quantity) for spec in request.items]
