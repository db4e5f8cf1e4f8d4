"""Application service: Update Product use case."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.variation_aggregator import VariationAggregator

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        aggregator: VariationAggregator,
    ) -> None:
        self._product_repo = product_repo
        self._aggregator = aggregator

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        variations: Sequence[Mapping[str, Any]] | None = None,
    ) -> ProductDTO:
        """Rename a product and/or replace its variation list.

        A new variation list replaces the old one wholesale and the
        product's price and stock are recomputed from it.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if name is not None:
            other = self._product_repo.get_by_name(name.strip())
            if other is not None and other.id != product.id:
                raise ValidationError(f"Product '{name.strip()}' already exists")
            product.rename(name)

        if variations is not None:
            product.replace_variations(variations, self._aggregator)

        self._product_repo.save(product)
        logger.info("Product %s updated (price=%s, stock=%d)", product.id, product.price, product.stock)
        return product_to_dto(product)
