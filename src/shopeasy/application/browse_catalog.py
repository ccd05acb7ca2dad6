"""Application services: catalog browsing use cases (queries).

Only active products are ever visible here.
"""

from __future__ import annotations

from shopeasy.application.dto import ProductDTO
from shopeasy.domain.model.product import Product
from shopeasy.domain.repository.product_repository import ProductRepository


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=str(product.price),
        stock_quantity=product.stock_quantity,
        category=product.category,
    )


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, category: str | None = None) -> list[ProductDTO]:
        """List active products sorted by name, optionally within one category.

        The category match ignores case, so "books" finds "Books".
        """
        products = self._product_repo.list_active()
        if category is not None:
            wanted = category.strip().lower()
            products = [p for p in products if p.category.lower() == wanted]
        return [to_product_dto(p) for p in sorted(products, key=lambda p: p.name.lower())]


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO | None:
        product = self._product_repo.get_active_by_id(product_id)
        if product is None:
            return None
        return to_product_dto(product)


class ListCategoriesHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[str]:
        """Distinct categories of active products, alphabetically."""
        return sorted({p.category for p in self._product_repo.list_active()})
