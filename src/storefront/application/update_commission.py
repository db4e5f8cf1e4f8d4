"""Application service: Update Restaurant Commission use case."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping

from storefront.application.dto import CommissionDTO, commission_to_dto
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.repository.commission_repository import CommissionRepository
from storefront.domain.service import commission_resolver

logger = logging.getLogger(__name__)


class UpdateCommissionHandler:

    def __init__(self, commission_repo: CommissionRepository) -> None:
        self._commission_repo = commission_repo

    def handle(
        self,
        commission_id: int,
        commission_type: str | None = None,
        value: Any = None,
        notes: str | None = None,
        status: bool | None = None,
        rules: list[Mapping[str, Any]] | None = None,
    ) -> CommissionDTO:
        """Change any of a commission's settings; omitted ones are kept.

        Type and value must be given together.
        """
        commission = self._commission_repo.get_by_id(commission_id)
        if commission is None:
            raise EntityNotFoundError(f"Restaurant commission #{commission_id} not found")

        old = commission.config
        config = old
        if commission_type is not None or value is not None:
            if commission_type is None or value is None:
                raise ValidationError("Default commission must have type and value")
            config = commission_resolver.validate(
                commission_type, value, old.notes, old.status
            )
        if notes is not None:
            config = replace(config, notes=notes)
        if status is not None:
            config = replace(config, status=status)

        new_rules = commission_resolver.validate_rules(rules) if rules is not None else None
        commission.reconfigure(config=config, rules=new_rules)
        self._commission_repo.save(commission)

        if (old.type, old.value) != (config.type, config.value):
            logger.info(
                "Commission #%s for restaurant %s changed from %s to %s",
                commission.id, commission.restaurant_id, old, config,
            )
        return commission_to_dto(commission)
