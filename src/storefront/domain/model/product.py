"""Product aggregate.

A product is sold through one or more variations.  Its top-level price,
discounted price and stock are projections of the variation list: they
are rebuilt by a full aggregator pass on every variation change and are
never edited on their own.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Mapping, Sequence

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.value_objects import Money
from storefront.domain.model.variation import Variation, VariationStatus

if TYPE_CHECKING:
    from storefront.domain.service.variation_aggregator import (
        NormalizationResult,
        VariationAggregator,
    )


@dataclass
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new products.  The ``__init__`` is kept
    plain so the repository can reconstitute persisted products without
    re-validating them.
    """

    id: str
    name: str
    variations: list[Variation]
    price: Money
    disc_price: Money
    stock: int

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        product_id: str,
        name: str,
        raw_variations: Sequence[Mapping[str, Any]],
        aggregator: VariationAggregator,
    ) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not raw_variations:
            raise ValidationError("Product must have at least one variation")

        result = aggregator.normalize(raw_variations)
        product = Product(
            id=product_id,
            name=name.strip(),
            variations=[],
            price=result.price,
            disc_price=result.disc_price,
            stock=result.stock,
        )
        product._apply(result)
        return product

    # --- Mutations ------------------------------------------------------------

    def rename(self, new_name: str) -> None:
        if not new_name or not new_name.strip():
            raise ValidationError("Product name is required")
        self.name = new_name.strip()

    def replace_variations(
        self,
        raw_variations: Sequence[Mapping[str, Any]],
        aggregator: VariationAggregator,
    ) -> None:
        """Swap in a new variation list and recompute the aggregates."""
        if not raw_variations:
            raise ValidationError("Product must have at least one variation")
        self._apply(aggregator.normalize(raw_variations))

    def update_variation_stock(
        self,
        variation_id: str,
        stock: int,
        status: VariationStatus | None,
        aggregator: VariationAggregator,
    ) -> Variation:
        """Set one variation's stock, then recompute the whole product.

        Works on copies so a failed recompute leaves the product untouched.
        """
        variations = [replace(v) for v in self.variations]
        target = _find(variations, variation_id)
        target.set_stock(stock, status)
        self._apply(aggregator.normalize([v.as_raw() for v in variations]))
        return self.find_variation(variation_id)

    # --- Queries --------------------------------------------------------------

    def find_variation(self, variation_id: str) -> Variation:
        return _find(self.variations, variation_id)

    # --- Internal helpers -----------------------------------------------------

    def _apply(self, result: NormalizationResult) -> None:
        variations = list(result.variations)
        used = [int(v.id) for v in variations if v.id is not None and v.id.isdigit()]
        next_id = max(used, default=0) + 1
        for variation in variations:
            if variation.id is None:
                variation.id = str(next_id)
                next_id += 1

        self.variations = variations
        self.price = result.price
        self.disc_price = result.disc_price
        self.stock = result.stock


def _find(variations: list[Variation], variation_id: str) -> Variation:
    for variation in variations:
        if variation.id == variation_id:
            return variation
    raise EntityNotFoundError(f"Variation '{variation_id}' not found")
