"""Application service: Create Restaurant Commission use case."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from storefront.application.dto import CommissionDTO, commission_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.commission import RestaurantCommission
from storefront.domain.repository.commission_repository import CommissionRepository
from storefront.domain.service import commission_resolver

logger = logging.getLogger(__name__)


class CreateCommissionHandler:

    def __init__(self, commission_repo: CommissionRepository) -> None:
        self._commission_repo = commission_repo

    def handle(
        self,
        restaurant_id: str,
        restaurant_name: str,
        commission_type: str,
        value: Any,
        notes: str | None = None,
        status: bool = True,
        rules: list[Mapping[str, Any]] | None = None,
    ) -> CommissionDTO:
        """Attach a commission to a restaurant that does not have one yet."""
        if not restaurant_id or not restaurant_id.strip():
            raise ValidationError("Restaurant ID is required")
        if not restaurant_name or not restaurant_name.strip():
            raise ValidationError("Restaurant name is required")

        if self._commission_repo.get_by_restaurant(restaurant_id.strip()) is not None:
            raise ValidationError(
                "Commission already exists for this restaurant. Use update instead."
            )

        config = commission_resolver.validate(commission_type, value, notes, status)
        commission = RestaurantCommission(
            id=None,
            restaurant_id=restaurant_id.strip(),
            restaurant_name=restaurant_name.strip(),
            config=config,
            rules=commission_resolver.validate_rules(rules),
        )
        self._commission_repo.save(commission)
        logger.info(
            "Commission #%s created for restaurant %s: %s",
            commission.id, commission.restaurant_id, config,
        )
        return commission_to_dto(commission)
