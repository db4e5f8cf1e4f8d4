"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.model.variation import Variation, VariationStatus
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path, currency: str = DEFAULT_CURRENCY) -> None:
        self._file_path = file_path
        self._currency = currency
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if product.name.lower() == name.lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)
        logger.debug("Saved product %s to %s", product.id, self._file_path)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["id"]: self._to_domain(item) for item in raw}

    def _to_domain(self, item: dict) -> Product:
        currency = item.get("currency", self._currency)

        def money(source: dict, key: str) -> Money:
            return Money(Decimal(source[key]), currency)

        return Product(
            id=item["id"],
            name=item["name"],
            variations=[
                Variation(
                    id=v["id"],
                    name=v["name"],
                    value=v["value"],
                    price=money(v, "price"),
                    disc_price=money(v, "discPrice"),
                    stock=v["stock"],
                    status=VariationStatus(v["status"]),
                )
                for v in item["variations"]
            ],
            price=money(item, "price"),
            disc_price=money(item, "discPrice"),
            stock=item["stock"],
        )

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "price": str(p.price.amount),
                "discPrice": str(p.disc_price.amount),
                "currency": p.price.currency,
                "stock": p.stock,
                "variations": [
                    {
                        "id": v.id,
                        "name": v.name,
                        "value": v.value,
                        "price": str(v.price.amount),
                        "discPrice": str(v.disc_price.amount),
                        "stock": v.stock,
                        "status": v.status.value,
                    }
                    for v in p.variations
                ],
            }
            for p in products.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
