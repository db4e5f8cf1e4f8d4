"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.commission import (
    CommissionCalculation,
    CommissionRule,
    RestaurantCommission,
)
from storefront.domain.model.product import Product

_TIMESTAMP = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class VariationDTO:
    id: str
    name: str
    value: str
    price: str  # formatted, e.g. "₹40.00"
    disc_price: str
    stock: int
    status: str


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: str
    disc_price: str
    stock: int
    variations: list[VariationDTO]


@dataclass(frozen=True)
class StockUpdateSpec:
    """Input: one line of a bulk stock update."""

    product_id: str
    variation_id: str
    stock: int


@dataclass(frozen=True)
class BulkStockResult:
    product_id: str
    variation_id: str
    success: bool
    message: str = ""


@dataclass(frozen=True)
class CommissionRuleDTO:
    type: str
    value: str
    min_order_amount: str
    max_order_amount: str | None


@dataclass(frozen=True)
class CommissionDTO:
    id: int
    restaurant_id: str
    restaurant_name: str
    type: str
    value: str
    notes: str
    status: bool
    rules: list[CommissionRuleDTO]
    updated_at: str


@dataclass(frozen=True)
class CommissionCalculationDTO:
    restaurant_id: str
    order_amount: str
    commission: str
    restaurant_earning: str
    type: str
    value: str
    tiered: bool


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=str(product.price),
        disc_price=str(product.disc_price),
        stock=product.stock,
        variations=[
            VariationDTO(
                id=v.id,  # type: ignore[arg-type]
                name=v.name,
                value=v.value,
                price=str(v.price),
                disc_price=str(v.disc_price),
                stock=v.stock,
                status=v.status.value,
            )
            for v in product.variations
        ],
    )


def _rule_to_dto(rule: CommissionRule) -> CommissionRuleDTO:
    return CommissionRuleDTO(
        type=rule.type.value,
        value=str(rule.value),
        min_order_amount=str(rule.min_order_amount),
        max_order_amount=(
            str(rule.max_order_amount) if rule.max_order_amount is not None else None
        ),
    )


def commission_to_dto(commission: RestaurantCommission) -> CommissionDTO:
    return CommissionDTO(
        id=commission.id,  # type: ignore[arg-type]
        restaurant_id=commission.restaurant_id,
        restaurant_name=commission.restaurant_name,
        type=commission.config.type.value,
        value=str(commission.config.value),
        notes=commission.config.notes,
        status=commission.config.status,
        rules=[_rule_to_dto(rule) for rule in commission.rules],
        updated_at=commission.updated_at.strftime(_TIMESTAMP),
    )


def calculation_to_dto(
    restaurant_id: str, calculation: CommissionCalculation
) -> CommissionCalculationDTO:
    return CommissionCalculationDTO(
        restaurant_id=restaurant_id,
        order_amount=str(calculation.order_amount),
        commission=str(calculation.commission),
        restaurant_earning=str(calculation.restaurant_earning),
        type=calculation.type.value,
        value=str(calculation.value),
        tiered=calculation.rule is not None,
    )
