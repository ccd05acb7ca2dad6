"""Maps stored orders to their outward-facing DTOs.

Names are resolved with one batch read for customers and one for
products per call, however many orders are being projected.
"""

from __future__ import annotations

from shopeasy.application.dto import OrderDTO, OrderItemDTO
from shopeasy.domain.model.order import Order
from shopeasy.domain.repository.order_repository import OrderRepository

UNKNOWN_PRODUCT = "Unknown product"
UNKNOWN_CUSTOMER = "Unknown customer"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


class OrderProjector:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def project(self, order: Order) -> OrderDTO:
        return self.project_many([order])[0]

    def project_many(self, orders: list[Order]) -> list[OrderDTO]:
        if not orders:
            return []

        customer_ids = {order.customer_id for order in orders}
        product_ids = {item.product_id for order in orders for item in order.items}
        customer_names = self._order_repo.get_customer_names(customer_ids)
        product_names = self._order_repo.get_product_names(product_ids)

        return [
            self._to_dto(
                order,
                customer_names.get(order.customer_id, UNKNOWN_CUSTOMER),
                product_names,
            )
            for order in orders
        ]

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(order: Order, customer_name: str, product_names: dict[int, str]) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            customer_id=order.customer_id,
            customer_name=customer_name,
            status=order.status.value,
            items=[
                OrderItemDTO(
                    product_id=item.product_id,
                    # historical items may point at products that are gone
                    product_name=product_names.get(item.product_id, UNKNOWN_PRODUCT),
                    quantity=item.quantity.value,
                    unit_price=str(item.unit_price),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            total=str(order.total),
            ordered_at=order.ordered_at.strftime(TIMESTAMP_FORMAT),
            shipping_address=order.shipping_address,
            notes=order.notes,
        )
