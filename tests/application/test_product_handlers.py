"""Integration tests for the product and stock use cases."""

import pytest

from storefront.application.add_product import AddProductHandler
from storefront.application.bulk_update_stock import BulkUpdateStockHandler
from storefront.application.dto import StockUpdateSpec
from storefront.application.show_product import ListProductsHandler, ShowProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.application.update_stock import UpdateVariationStockHandler
from storefront.domain.exceptions import (
    EntityNotFoundError,
    InvalidDiscount,
    ValidationError,
)
from storefront.domain.service.variation_aggregator import VariationAggregator
from tests.fakes import FakeProductRepository

AGG = VariationAggregator()

TOMATO = [
    {"title": "500 g", "price": 40, "discPrice": 35, "stock": "3"},
    {"title": "1 kg", "price": 75, "stock": 2},
]


def _setup():
    repo = FakeProductRepository()
    AddProductHandler(repo, AGG).handle("Tomato", TOMATO)
    return repo


class TestAddProduct:

    def test_product_is_saved_with_aggregates(self):
        repo = FakeProductRepository()
        dto = AddProductHandler(repo, AGG).handle("Tomato", TOMATO)

        assert dto.id == "1"
        assert dto.price == "₹40.00"
        assert dto.disc_price == "₹35.00"
        assert dto.stock == 5
        assert [v.value for v in dto.variations] == ["500 g", "1 kg"]
        assert repo.get_by_id("1").stock == 5

    def test_ids_increment(self):
        repo = _setup()
        dto = AddProductHandler(repo, AGG).handle("Onion", [{"value": "1 kg", "price": 30}])
        assert dto.id == "2"

    def test_duplicate_name_rejected(self):
        repo = _setup()
        with pytest.raises(ValidationError, match="already exists"):
            AddProductHandler(repo, AGG).handle("tomato", TOMATO)

    def test_no_variations_rejected(self):
        with pytest.raises(ValidationError, match="at least one variation"):
            AddProductHandler(FakeProductRepository(), AGG).handle("Tomato", [])

    def test_invalid_discount_saves_nothing(self):
        repo = FakeProductRepository()
        with pytest.raises(InvalidDiscount, match="Large"):
            AddProductHandler(repo, AGG).handle("Potato", [
                {"title": "Small", "price": 100, "stock": "3"},
                {"value": "Large", "price": 150, "discPrice": 170, "stock": "2"},
            ])
        assert repo.list_all() == []
        assert repo.saves == 0


class TestUpdateProduct:

    def test_replace_variations_recomputes(self):
        repo = _setup()
        dto = UpdateProductHandler(repo, AGG).handle(
            "1", variations=[{"value": "2 kg", "price": 140, "discPrice": 130, "stock": 8}],
        )
        assert dto.price == "₹140.00"
        assert dto.disc_price == "₹130.00"
        assert dto.stock == 8

    def test_rename_only_keeps_variations(self):
        repo = _setup()
        dto = UpdateProductHandler(repo, AGG).handle("1", name="Cherry Tomato")
        assert dto.name == "Cherry Tomato"
        assert dto.stock == 5

    def test_rename_to_existing_name_rejected(self):
        repo = _setup()
        AddProductHandler(repo, AGG).handle("Onion", [{"value": "1 kg", "price": 30}])
        with pytest.raises(ValidationError, match="already exists"):
            UpdateProductHandler(repo, AGG).handle("1", name="Onion")

    def test_empty_variations_rejected(self):
        repo = _setup()
        with pytest.raises(ValidationError, match="at least one variation"):
            UpdateProductHandler(repo, AGG).handle("1", variations=[])

    def test_missing_product(self):
        with pytest.raises(EntityNotFoundError, match="not found"):
            UpdateProductHandler(FakeProductRepository(), AGG).handle("42", name="x")


class TestUpdateVariationStock:

    def test_zero_stock_sells_out(self):
        repo = _setup()
        dto = UpdateVariationStockHandler(repo, AGG).handle("1", "1", stock=0)
        assert dto.variations[0].status == "Sold out"
        assert dto.stock == 2

    def test_restock_makes_available(self):
        repo = _setup()
        handler = UpdateVariationStockHandler(repo, AGG)
        handler.handle("1", "1", stock=0)
        dto = handler.handle("1", "1", stock=5)
        assert dto.variations[0].status == "Available"
        assert dto.stock == 7

    def test_explicit_status_wins(self):
        repo = _setup()
        dto = UpdateVariationStockHandler(repo, AGG).handle(
            "1", "1", stock=5, status="Sold out",
        )
        assert dto.variations[0].stock == 5
        assert dto.variations[0].status == "Sold out"

    def test_status_only_keeps_stock(self):
        repo = _setup()
        dto = UpdateVariationStockHandler(repo, AGG).handle("1", "2", status="Sold out")
        assert dto.variations[1].stock == 2
        assert dto.variations[1].status == "Sold out"

    def test_nothing_to_change_saves_nothing(self):
        repo = _setup()
        saves = repo.saves
        UpdateVariationStockHandler(repo, AGG).handle("1", "2")
        assert repo.saves == saves

    def test_unknown_variation(self):
        repo = _setup()
        with pytest.raises(EntityNotFoundError, match="Variation"):
            UpdateVariationStockHandler(repo, AGG).handle("1", "9", stock=1)

    def test_unknown_status(self):
        repo = _setup()
        with pytest.raises(ValidationError, match="Unknown variation status"):
            UpdateVariationStockHandler(repo, AGG).handle("1", "1", status="Gone")


class TestBulkUpdateStock:

    def test_each_line_is_independent(self):
        repo = _setup()
        results = BulkUpdateStockHandler(repo, AGG).handle([
            StockUpdateSpec("1", "1", 0),
            StockUpdateSpec("1", "9", 5),
            StockUpdateSpec("99", "1", 3),
            StockUpdateSpec("1", "2", 6),
        ])

        assert [r.success for r in results] == [True, False, False, True]
        assert "Variation '9' not found" in results[1].message
        assert results[2].message == "Product not found"

        product = repo.get_by_id("1")
        assert product.stock == 6
        assert product.find_variation("1").status.value == "Sold out"

    def test_missing_product_is_not_found(self):
        handler = BulkUpdateStockHandler(_setup(), AGG)
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            handler._apply(StockUpdateSpec("99", "1", 3))

    def test_negative_stock_reported(self):
        repo = _setup()
        results = BulkUpdateStockHandler(repo, AGG).handle([StockUpdateSpec("1", "1", -4)])
        assert results[0].success is False
        assert "cannot be negative" in results[0].message
        assert repo.get_by_id("1").stock == 5

    def test_empty_batch_rejected(self):
        with pytest.raises(ValidationError, match="non-empty"):
            BulkUpdateStockHandler(FakeProductRepository(), AGG).handle([])


class TestQueries:

    def test_show(self):
        repo = _setup()
        assert ShowProductHandler(repo).handle("1").name == "Tomato"

    def test_show_missing(self):
        with pytest.raises(EntityNotFoundError):
            ShowProductHandler(FakeProductRepository()).handle("1")

    def test_list_filters_on_stock(self):
        repo = _setup()
        AddProductHandler(repo, AGG).handle("Onion", [{"value": "1 kg", "price": 30, "stock": 0}])
        handler = ListProductsHandler(repo)
        assert [p.name for p in handler.handle()] == ["Tomato", "Onion"]
        assert [p.name for p in handler.handle(in_stock=True)] == ["Tomato"]
        assert [p.name for p in handler.handle(in_stock=False)] == ["Onion"]
