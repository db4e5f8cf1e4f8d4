"""JSON-file-backed implementation of CommissionRepository."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.commission import (
    CommissionConfig,
    CommissionRule,
    CommissionType,
    RestaurantCommission,
)
from storefront.domain.repository.commission_repository import CommissionRepository

logger = logging.getLogger(__name__)


class JsonCommissionRepository(CommissionRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CommissionRepository interface ---------------------------------------

    def get_by_id(self, commission_id: int) -> RestaurantCommission | None:
        for raw in self._load_raw():
            if raw["id"] == commission_id:
                return self._to_domain(raw)
        return None

    def get_by_restaurant(self, restaurant_id: str) -> RestaurantCommission | None:
        for raw in self._load_raw():
            if raw["restaurant_id"] == restaurant_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[RestaurantCommission]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, commission: RestaurantCommission) -> None:
        commissions = self._load_raw()

        if commission.id is None:
            commission.id = max((c["id"] for c in commissions), default=0) + 1

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(commissions):
            if raw["id"] == commission.id:
                commissions[i] = self._to_raw(commission)
                replaced = True
                break
        if not replaced:
            commissions.append(self._to_raw(commission))

        self._persist_raw(commissions)
        logger.debug("Saved commission #%s to %s", commission.id, self._file_path)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(commission: RestaurantCommission) -> dict:
        config = commission.config
        return {
            "id": commission.id,
            "restaurant_id": commission.restaurant_id,
            "restaurant_name": commission.restaurant_name,
            "default_commission": {"type": config.type.value, "value": str(config.value)},
            "notes": config.notes,
            "status": config.status,
            "rules": [
                {
                    "type": rule.type.value,
                    "value": str(rule.value),
                    "min_order_amount": str(rule.min_order_amount),
                    "max_order_amount": (
                        str(rule.max_order_amount)
                        if rule.max_order_amount is not None
                        else None
                    ),
                }
                for rule in commission.rules
            ],
            "created_at": commission.created_at.isoformat(),
            "updated_at": commission.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> RestaurantCommission:
        default = raw["default_commission"]
        rules = [
            CommissionRule(
                type=CommissionType(r["type"]),
                value=Decimal(r["value"]),
                min_order_amount=Decimal(r["min_order_amount"]),
                max_order_amount=(
                    Decimal(r["max_order_amount"])
                    if r.get("max_order_amount") is not None
                    else None
                ),
            )
            for r in raw.get("rules", [])
        ]
        return RestaurantCommission(
            id=raw["id"],
            restaurant_id=raw["restaurant_id"],
            restaurant_name=raw["restaurant_name"],
            config=CommissionConfig(
                type=CommissionType(default["type"]),
                value=Decimal(default["value"]),
                notes=raw.get("notes", ""),
                status=raw.get("status", True),
            ),
            rules=rules,
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, commissions: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(commissions, indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
