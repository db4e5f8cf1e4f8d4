"""Application service: Show / List Commissions use cases (queries)."""

from __future__ import annotations

from storefront.application.dto import CommissionDTO, commission_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.commission_repository import CommissionRepository


class ShowCommissionHandler:

    def __init__(self, commission_repo: CommissionRepository) -> None:
        self._commission_repo = commission_repo

    def handle(self, restaurant_id: str) -> CommissionDTO:
        commission = self._commission_repo.get_by_restaurant(restaurant_id)
        if commission is None:
            raise EntityNotFoundError("Commission not found for this restaurant")
        return commission_to_dto(commission)


class ListCommissionsHandler:

    def __init__(self, commission_repo: CommissionRepository) -> None:
        self._commission_repo = commission_repo

    def handle(
        self,
        status: bool | None = None,
        search: str | None = None,
    ) -> list[CommissionDTO]:
        """List commissions, newest first, optionally filtered.

        *search* matches restaurant name or ID, case-insensitively.
        """
        commissions = self._commission_repo.list_all()
        if status is not None:
            commissions = [c for c in commissions if c.is_enabled == status]
        if search:
            needle = search.lower()
            commissions = [
                c for c in commissions
                if needle in c.restaurant_name.lower() or needle in c.restaurant_id.lower()
            ]
        commissions.sort(key=lambda c: c.created_at, reverse=True)
        return [commission_to_dto(c) for c in commissions]
