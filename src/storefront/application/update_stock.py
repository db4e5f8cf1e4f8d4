"""Application service: Update Variation Stock use case."""

from __future__ import annotations

import logging

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.variation import VariationStatus
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.variation_aggregator import VariationAggregator

logger = logging.getLogger(__name__)


class UpdateVariationStockHandler:

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
        variation_id: str,
        stock: int | None = None,
        status: str | None = None,
    ) -> ProductDTO:
        """Set a variation's stock and/or status.

        Stock 0 marks the variation sold out, restocking a sold-out
        variation makes it available again, and an explicit *status*
        overrides both.  The product totals are recomputed afterwards.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        explicit = VariationStatus.parse(status) if status is not None else None
        product.find_variation(variation_id)

        if stock is None and explicit is None:
            return product_to_dto(product)

        if stock is None:
            # Status-only change: the count stays, no automatic transition
            raws = [v.as_raw() for v in product.variations]
            for raw in raws:
                if raw["id"] == variation_id:
                    raw["status"] = explicit.value
            product.replace_variations(raws, self._aggregator)
        else:
            product.update_variation_stock(variation_id, stock, explicit, self._aggregator)

        self._product_repo.save(product)
        updated = product.find_variation(variation_id)
        logger.info(
            "Stock for product %s variation %s set to %d (%s)",
            product_id, variation_id, updated.stock, updated.status.value,
        )
        return product_to_dto(product)
