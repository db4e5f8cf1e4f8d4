"""Application service: Bulk Stock Update use case.

Each line is applied on its own: a missing product or variation, or a
rejected stock value, is reported in that line's result and the rest
of the batch still goes through.
"""

from __future__ import annotations

import logging

from storefront.application.dto import BulkStockResult, StockUpdateSpec
from storefront.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.variation_aggregator import VariationAggregator

logger = logging.getLogger(__name__)


class BulkUpdateStockHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        aggregator: VariationAggregator,
    ) -> None:
        self._product_repo = product_repo
        self._aggregator = aggregator

    def handle(self, updates: list[StockUpdateSpec]) -> list[BulkStockResult]:
        if not updates:
            raise ValidationError("Updates must be a non-empty list")

        results: list[BulkStockResult] = []
        for spec in updates:
            try:
                self._apply(spec)
            except DomainException as exc:
                logger.warning(
                    "Bulk stock update failed for product %s variation %s: %s",
                    spec.product_id, spec.variation_id, exc,
                )
                results.append(
                    BulkStockResult(spec.product_id, spec.variation_id, False, str(exc))
                )
            else:
                results.append(BulkStockResult(spec.product_id, spec.variation_id, True))

        logger.info(
            "Bulk stock update processed: %d ok, %d failed",
            sum(r.success for r in results),
            sum(not r.success for r in results),
        )
        return results

    def _apply(self, spec: StockUpdateSpec) -> None:
        product = self._product_repo.get_by_id(spec.product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")
        product.update_variation_stock(spec.variation_id, spec.stock, None, self._aggregator)
        self._product_repo.save(product)
