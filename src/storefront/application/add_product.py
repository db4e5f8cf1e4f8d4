"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.variation_aggregator import VariationAggregator

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        aggregator: VariationAggregator,
    ) -> None:
        self._product_repo = product_repo
        self._aggregator = aggregator

    def handle(self, name: str, variations: Sequence[Mapping[str, Any]]) -> ProductDTO:
        """Add a new product to the catalog.

        Price, discounted price and stock are derived from *variations*;
        nothing is saved if any variation is rejected.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not variations:
            raise ValidationError("Product must have at least one variation")

        existing = self._product_repo.get_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Product '{name.strip()}' already exists")

        # Auto-assign ID based on existing products
        all_products = self._product_repo.list_all()
        if all_products:
            next_id = str(max(int(p.id) for p in all_products) + 1)
        else:
            next_id = "1"

        product = Product.create(next_id, name, variations, self._aggregator)
        self._product_repo.save(product)
        logger.info(
            "Product %s '%s' added with %d variation(s), stock=%d",
            product.id, product.name, len(product.variations), product.stock,
        )
        return product_to_dto(product)
