"""Abstract repository for RestaurantCommission aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.commission import RestaurantCommission


class CommissionRepository(ABC):

    @abstractmethod
    def get_by_id(self, commission_id: int) -> RestaurantCommission | None:
        """Return a commission by its ID, or None if not found."""

    @abstractmethod
    def get_by_restaurant(self, restaurant_id: str) -> RestaurantCommission | None:
        """Return the commission set up for a restaurant, or None."""

    @abstractmethod
    def list_all(self) -> list[RestaurantCommission]:
        """Return every commission record."""

    @abstractmethod
    def save(self, commission: RestaurantCommission) -> None:
        """Persist a new or updated commission, assigning an ID if new."""
