"""Application service: Calculate Commission use case (query).

Works out what the platform keeps from an order placed with a given
restaurant, using that restaurant's tiers or default commission.
"""

from __future__ import annotations

from typing import Any

from storefront.application.dto import CommissionCalculationDTO, calculation_to_dto
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money, parse_decimal
from storefront.domain.repository.commission_repository import CommissionRepository


class CalculateCommissionHandler:

    def __init__(
        self,
        commission_repo: CommissionRepository,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._commission_repo = commission_repo
        self._currency = currency

    def handle(self, restaurant_id: str, order_amount: Any) -> CommissionCalculationDTO:
        if not restaurant_id:
            raise ValidationError("Restaurant ID and order amount are required")

        amount = parse_decimal(order_amount)
        if amount is None or amount < 0:
            raise ValidationError("Order amount must be a valid positive number")

        commission = self._commission_repo.get_by_restaurant(restaurant_id)
        if commission is None:
            raise EntityNotFoundError("Commission not found for this restaurant")

        calculation = commission.calculate(Money(amount, self._currency))
        return calculation_to_dto(restaurant_id, calculation)
