"""RestaurantCommission aggregate: what the platform charges a restaurant.

Each restaurant has at most one commission record.  It holds a default
commission plus optional order-amount tiers that override the default
for orders falling inside their range.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


class CommissionType(Enum):
    PERCENTAGE = "percentage"
    AMOUNT = "amount"


@dataclass(frozen=True)
class CommissionConfig:
    """A validated commission setting.

    Build it through ``commission_resolver.validate()``; the constructor
    does not re-check bounds so that a disabled config may keep the
    historical value it was saved with.
    """

    type: CommissionType
    value: Decimal
    notes: str = ""
    status: bool = True

    def charge_on(self, order_amount: Money) -> Money:
        if self.type == CommissionType.PERCENTAGE:
            return order_amount.percent(self.value)
        return Money(self.value, order_amount.currency)

    def __str__(self) -> str:
        if self.type == CommissionType.PERCENTAGE:
            return f"{self.value}%"
        return f"{self.value} flat"


@dataclass(frozen=True)
class CommissionRule:
    """An order-amount tier: orders in ``[min, max)`` use this commission."""

    type: CommissionType
    value: Decimal
    min_order_amount: Decimal
    max_order_amount: Decimal | None = None

    def matches(self, order_amount: Decimal) -> bool:
        if order_amount < self.min_order_amount:
            return False
        return self.max_order_amount is None or order_amount < self.max_order_amount


@dataclass(frozen=True)
class CommissionCalculation:
    order_amount: Money
    commission: Money
    type: CommissionType
    value: Decimal
    rule: CommissionRule | None  # None when the default commission applied

    @property
    def restaurant_earning(self) -> Money:
        return Money(
            max(self.order_amount.amount - self.commission.amount, Decimal("0")),
            self.order_amount.currency,
        )


@dataclass
class RestaurantCommission:
    """Aggregate root for a restaurant's commission setup."""

    id: int | None
    restaurant_id: str
    restaurant_name: str
    config: CommissionConfig
    rules: list[CommissionRule] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_enabled(self) -> bool:
        return self.config.status

    def reconfigure(
        self,
        config: CommissionConfig | None = None,
        rules: list[CommissionRule] | None = None,
    ) -> None:
        if config is not None:
            self.config = config
        if rules is not None:
            self.rules = list(rules)
        self._touch()

    def calculate(self, order_amount: Money) -> CommissionCalculation:
        """Work out the commission owed on an order of *order_amount*.

        The first matching tier wins; otherwise the default applies.
        A disabled commission charges nothing.
        """
        rule = self.rule_for(order_amount.amount)
        commission_type = rule.type if rule else self.config.type
        value = rule.value if rule else self.config.value

        if not self.is_enabled:
            charged = Money.zero(order_amount.currency)
        elif rule is not None:
            charged = CommissionConfig(rule.type, rule.value).charge_on(order_amount)
        else:
            charged = self.config.charge_on(order_amount)

        return CommissionCalculation(
            order_amount=order_amount,
            commission=charged,
            type=commission_type,
            value=value,
            rule=rule,
        )

    def rule_for(self, order_amount: Decimal) -> CommissionRule | None:
        if order_amount < 0:
            raise ValidationError("Order amount cannot be negative")
        for rule in self.rules:
            if rule.matches(order_amount):
                return rule
        return None

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
