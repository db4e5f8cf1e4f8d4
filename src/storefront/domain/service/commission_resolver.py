"""Domain service: Commission Resolver.

Validates commission input coming from the back office and turns it
into immutable CommissionConfig / CommissionRule values.  Checks run in
a fixed order (value, then type, then type-specific bounds) so the same
bad input always produces the same error.
"""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from typing import Any, Mapping

from storefront.domain.exceptions import (
    MissingOrInvalidValue,
    OutOfRange,
    UnknownCommissionType,
    ValidationError,
)
from storefront.domain.model.commission import (
    CommissionConfig,
    CommissionRule,
    CommissionType,
)
from storefront.domain.model.value_objects import parse_decimal

PERCENTAGE_MIN = Decimal("0")
PERCENTAGE_MAX = Decimal("100")


def validate(
    commission_type: object,
    value: object,
    notes: str | None = None,
    status: bool = True,
) -> CommissionConfig:
    """Validate a ``{type, value}`` pair and return the resulting config."""
    kind, amount = _resolve(commission_type, value)
    return CommissionConfig(type=kind, value=amount, notes=notes or "", status=status)


def validate_rule(raw: Mapping[str, Any]) -> CommissionRule:
    """Validate one order-amount tier."""
    kind, amount = _resolve(raw.get("type"), raw.get("value"))

    min_order = parse_decimal(raw.get("minOrderAmount"))
    if min_order is None or min_order < 0:
        raise MissingOrInvalidValue(raw.get("minOrderAmount"), field="minOrderAmount")

    max_order = None
    if raw.get("maxOrderAmount") is not None:
        max_order = parse_decimal(raw.get("maxOrderAmount"))
        if max_order is None:
            raise MissingOrInvalidValue(raw.get("maxOrderAmount"), field="maxOrderAmount")
        if max_order <= min_order:
            raise ValidationError("maxOrderAmount must be greater than minOrderAmount")

    return CommissionRule(
        type=kind,
        value=amount,
        min_order_amount=min_order,
        max_order_amount=max_order,
    )


def validate_rules(raw_rules: list[Mapping[str, Any]] | None) -> list[CommissionRule]:
    if raw_rules is None:
        return []
    if not isinstance(raw_rules, list):
        raise ValidationError("Commission rules must be a list")
    return [validate_rule(raw) for raw in raw_rules]


def toggle_status(config: CommissionConfig) -> CommissionConfig:
    """Flip the enabled flag; type and value are left as they are."""
    return replace(config, status=not config.status)


def _resolve(commission_type: object, value: object) -> tuple[CommissionType, Decimal]:
    amount = parse_decimal(value)
    if amount is None or amount < 0:
        raise MissingOrInvalidValue(value)

    try:
        kind = CommissionType(commission_type)
    except ValueError:
        raise UnknownCommissionType(commission_type) from None

    if kind == CommissionType.PERCENTAGE and not PERCENTAGE_MIN <= amount <= PERCENTAGE_MAX:
        raise OutOfRange(amount, PERCENTAGE_MIN, PERCENTAGE_MAX)
    return kind, amount
