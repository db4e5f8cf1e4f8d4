"""Variation entity: one purchasable option of a product (e.g. "500 g").

Variations are owned by the Product aggregate and are only ever mutated
through it, so the product's derived price and stock stay in step.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

DEFAULT_VARIATION_NAME = "Variation"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class VariationStatus(Enum):
    AVAILABLE = "Available"
    SOLD_OUT = "Sold out"

    @classmethod
    def parse(cls, raw: object) -> VariationStatus:
        if isinstance(raw, cls):
            return raw
        text = str(raw).strip().lower()
        for status in cls:
            if status.value.lower() == text:
                return status
        raise ValidationError(
            f"Unknown variation status {raw!r} "
            f"(expected one of: {', '.join(s.value for s in cls)})"
        )


def parse_stock(raw: object) -> int:
    """Parse a stock count the lenient way the storefront forms submit it.

    Reads the leading integer of the input ("3", " 12 kg", 4.9 -> 4);
    anything without one, including ``None``, counts as 0.
    """
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return 0
    return int(match.group(1))


@dataclass
class Variation:
    """A single option of a product with its own price and stock.

    Invariants (checked by the aggregator, not on construction, so a
    persisted product can always be reloaded):
    - ``disc_price <= price``
    - ``stock >= 0``
    """

    id: str | None
    name: str
    value: str
    price: Money
    disc_price: Money
    stock: int
    status: VariationStatus = VariationStatus.AVAILABLE

    def set_stock(self, stock: int, status: VariationStatus | None = None) -> None:
        """Change the stock count, keeping ``status`` in step.

        Only the Sold out <-> Available pair transitions automatically.
        An explicit *status* always wins over the automatic transition.
        """
        if stock < 0:
            raise ValidationError(f"Stock cannot be negative, got {stock}")
        self.stock = stock
        if stock == 0:
            self.status = VariationStatus.SOLD_OUT
        elif self.status == VariationStatus.SOLD_OUT:
            self.status = VariationStatus.AVAILABLE
        if status is not None:
            self.status = status

    def as_raw(self) -> dict[str, Any]:
        """Return the variation in the shape the aggregator accepts."""
        return {
            "id": self.id,
            "name": self.name,
            "value": self.value,
            "price": str(self.price.amount),
            "discPrice": str(self.disc_price.amount),
            "stock": self.stock,
            "status": self.status.value,
        }
