"""Application service: Toggle Commission Status use case."""

from __future__ import annotations

import logging

from storefront.application.dto import CommissionDTO, commission_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.commission_repository import CommissionRepository
from storefront.domain.service.commission_resolver import toggle_status

logger = logging.getLogger(__name__)


class ToggleCommissionHandler:

    def __init__(self, commission_repo: CommissionRepository) -> None:
        self._commission_repo = commission_repo

    def handle(self, commission_id: int) -> CommissionDTO:
        commission = self._commission_repo.get_by_id(commission_id)
        if commission is None:
            raise EntityNotFoundError(f"Restaurant commission #{commission_id} not found")

        commission.reconfigure(config=toggle_status(commission.config))
        self._commission_repo.save(commission)
        logger.info(
            "Commission #%s %s",
            commission.id, "enabled" if commission.is_enabled else "disabled",
        )
        return commission_to_dto(commission)
