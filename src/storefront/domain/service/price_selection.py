"""Domain service: picking a product's representative price.

List views need one price per product even though every variation has
its own.  Which variation represents the product is a policy, kept
behind a small interface so it can change without touching callers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.variation import Variation


class PriceSelectionPolicy(ABC):

    name: str

    @abstractmethod
    def select(self, variations: Sequence[Variation]) -> Variation:
        """Return the variation whose prices represent the product."""


class FirstVariationPolicy(PriceSelectionPolicy):
    """The first variation in the list wins, whatever its price."""

    name = "first"

    def select(self, variations: Sequence[Variation]) -> Variation:
        return variations[0]


class LowestPricePolicy(PriceSelectionPolicy):
    """The variation a customer pays least for wins; ties keep list order."""

    name = "lowest"

    def select(self, variations: Sequence[Variation]) -> Variation:
        return min(variations, key=_effective_price)


def _effective_price(variation: Variation):
    if variation.disc_price.is_zero:
        return variation.price.amount
    return variation.disc_price.amount


_POLICIES: dict[str, type[PriceSelectionPolicy]] = {
    FirstVariationPolicy.name: FirstVariationPolicy,
    LowestPricePolicy.name: LowestPricePolicy,
}


def policy_for(name: str) -> PriceSelectionPolicy:
    try:
        return _POLICIES[name.strip().lower()]()
    except KeyError:
        raise ValidationError(
            f"Unknown price selection policy {name!r} "
            f"(expected one of: {', '.join(sorted(_POLICIES))})"
        ) from None
