"""Application service: Show / List Products use cases (queries)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product_to_dto(product)


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, in_stock: bool | None = None) -> list[ProductDTO]:
        """List the catalog, optionally only products with (or without) stock."""
        products = self._product_repo.list_all()
        if in_stock is True:
            products = [p for p in products if p.stock > 0]
        elif in_stock is False:
            products = [p for p in products if p.stock == 0]
        return [product_to_dto(p) for p in products]
