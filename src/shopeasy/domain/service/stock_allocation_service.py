"""Domain service: Stock Allocation.

Takes the stock an order needs out of the products it references.  It
lives in the domain layer because "never sell what you do not have" is
a core business rule, not just orchestration.

The two-phase approach (validate-then-mutate) ensures we never leave
products partially decremented if one of them is short.
"""

from __future__ import annotations

from collections.abc import Mapping

from shopeasy.domain.exceptions import EntityNotFoundError, InsufficientStockError
from shopeasy.domain.model.order import Order
from shopeasy.domain.model.product import Product


class StockAllocationService:

    def allocate(self, order: Order, products: Mapping[int, Product]) -> list[Product]:
        """Decrement stock for every line of *order*.

        Lines for the same product are summed before checking, so an
        order cannot slip past the check by splitting a quantity.

          Phase 1: validate that every product holds enough stock.
                   Fails fast before any mutation.
          Phase 2: decrement each product once.

        Returns the touched products in line order; persisting them is
        the caller's job.
        """
        needed: dict[int, int] = {}
        for line in order.items:
            needed[line.product_id] = needed.get(line.product_id, 0) + line.quantity.value

        # Phase 1: validate everything
        allocations: list[tuple[Product, int]] = []
        for product_id, qty in needed.items():
            product = products.get(product_id)
            if product is None:
                raise EntityNotFoundError("Product", [product_id])
            if not product.has_stock_for(qty):
                raise InsufficientStockError(
                    product_id=product.id,
                    product_name=product.name,
                    requested=qty,
                    available=product.stock_quantity,
                )
            allocations.append((product, qty))

        # Phase 2: mutate
        for product, qty in allocations:
            product.decrement_stock(qty)

        return [product for product, _ in allocations]
