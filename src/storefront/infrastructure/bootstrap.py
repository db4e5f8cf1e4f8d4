"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.domain.service.price_selection import policy_for
from storefront.domain.service.variation_aggregator import VariationAggregator
from storefront.infrastructure.config import Settings, get_settings
from storefront.infrastructure.persistence.json_commission_repository import (
    JsonCommissionRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def settings() -> Settings:
    return get_settings()


def product_repository() -> JsonProductRepository:
    cfg = settings()
    return JsonProductRepository(cfg.DATA_DIR / "products.json", cfg.CURRENCY)


def commission_repository() -> JsonCommissionRepository:
    return JsonCommissionRepository(settings().DATA_DIR / "commissions.json")


def variation_aggregator() -> VariationAggregator:
    cfg = settings()
    return VariationAggregator(policy_for(cfg.PRICE_SELECTION), cfg.CURRENCY)
