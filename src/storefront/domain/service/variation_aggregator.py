"""Domain service: Variation Aggregator.

Turns the raw variation records submitted by sellers into normalized
Variation entities and derives the product-level price, discounted
price and total stock from them.

The service is pure: it reads only its input and returns a fresh
result, so it is safe to share between threads.  It runs in three
passes (normalize, validate, aggregate) and produces nothing if any
variation fails.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from storefront.domain.exceptions import (
    InvalidDiscount,
    MalformedVariation,
    ValidationError,
)
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.model.variation import (
    DEFAULT_VARIATION_NAME,
    Variation,
    VariationStatus,
    parse_stock,
)
from storefront.domain.service.price_selection import (
    FirstVariationPolicy,
    PriceSelectionPolicy,
)

RawVariation = Mapping[str, Any]


@dataclass(frozen=True)
class NormalizationResult:
    variations: tuple[Variation, ...]
    price: Money
    disc_price: Money
    stock: int


class VariationAggregator:

    def __init__(
        self,
        policy: PriceSelectionPolicy | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._policy = policy or FirstVariationPolicy()
        self._currency = currency

    def normalize(self, raw_variations: Sequence[RawVariation]) -> NormalizationResult:
        """Normalize *raw_variations* and compute the product aggregates.

        Raises MalformedVariation when a variation has nothing to display,
        and InvalidDiscount when a discounted price exceeds its price.
        """
        if not raw_variations:
            raise ValidationError("Product must have at least one variation")

        # Pass 1: normalize every record, in input order
        variations = [
            self._normalize_one(position, raw)
            for position, raw in enumerate(raw_variations)
        ]

        # Pass 2: validate discounts before anything is aggregated
        for raw, variation in zip(raw_variations, variations):
            if variation.disc_price > variation.price:
                raise InvalidDiscount(
                    _display_label(raw),
                    variation.disc_price.amount,
                    variation.price.amount,
                )

        # Pass 3: aggregate
        representative = self._policy.select(variations)
        return NormalizationResult(
            variations=tuple(variations),
            price=representative.price,
            disc_price=representative.disc_price,
            stock=sum(v.stock for v in variations),
        )

    # --- Internal helpers -----------------------------------------------------

    def _normalize_one(self, position: int, raw: RawVariation) -> Variation:
        value = _text(raw.get("value")) or _text(raw.get("title"))
        if value is None:
            raise MalformedVariation(position)

        price = raw.get("price")
        if price is None or price == "":
            raise ValidationError(f"Price is required for variation {value}")
        price = Money.of(price, self._currency)
        if price.is_zero:
            raise ValidationError(
                f"Price must be greater than zero for variation {value}"
            )

        disc_price = raw.get("discPrice")
        if disc_price is None or disc_price == "":
            disc_price = Money.zero(self._currency)
        else:
            disc_price = Money.of(disc_price, self._currency)

        stock = parse_stock(raw.get("stock"))
        if stock < 0:
            raise ValidationError(
                f"Stock cannot be negative for variation {value}, got {stock}"
            )

        status = raw.get("status")
        raw_id = raw.get("id") or raw.get("_id")
        return Variation(
            id=str(raw_id) if raw_id is not None else None,
            name=raw.get("name") or DEFAULT_VARIATION_NAME,
            value=value,
            price=price,
            disc_price=disc_price,
            stock=stock,
            status=VariationStatus.parse(status) if status else VariationStatus.AVAILABLE,
        )


def _text(raw: object) -> str | None:
    if raw is None:
        return None
    return str(raw).strip() or None


def _display_label(raw: RawVariation) -> str | None:
    return _text(raw.get("title")) or _text(raw.get("value"))
