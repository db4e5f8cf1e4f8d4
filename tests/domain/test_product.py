"""Unit tests for the Product aggregate."""

import pytest

from storefront.domain.exceptions import (
    EntityNotFoundError,
    InvalidDiscount,
    ValidationError,
)
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.model.variation import Variation, VariationStatus
from storefront.domain.service.variation_aggregator import VariationAggregator

AGG = VariationAggregator()


def _tomatoes():
    return Product.create(
        "1",
        "  Tomato  ",
        [
            {"title": "500 g", "price": 40, "discPrice": 35, "stock": "3"},
            {"title": "1 kg", "price": 75, "stock": 2},
        ],
        AGG,
    )


class TestCreate:

    def test_derived_fields(self):
        product = _tomatoes()
        assert product.name == "Tomato"
        assert product.price == Money.of("40")
        assert product.disc_price == Money.of("35")
        assert product.stock == 5

    def test_variation_ids_are_assigned_in_order(self):
        assert [v.id for v in _tomatoes().variations] == ["1", "2"]

    def test_existing_ids_are_kept_and_new_ones_follow(self):
        product = Product.create(
            "1", "Onion",
            [{"id": "4", "value": "1 kg", "price": 30}, {"value": "2 kg", "price": 55}],
            AGG,
        )
        assert [v.id for v in product.variations] == ["4", "5"]

    def test_name_required(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product.create("1", "  ", [{"value": "x", "price": 1}], AGG)

    def test_variations_required(self):
        with pytest.raises(ValidationError, match="at least one variation"):
            Product.create("1", "Onion", [], AGG)


class TestReplaceVariations:

    def test_aggregates_follow_new_list(self):
        product = _tomatoes()
        product.replace_variations([{"value": "2 kg", "price": 140, "stock": 8}], AGG)
        assert product.price == Money.of("140")
        assert product.disc_price == Money.zero()
        assert product.stock == 8
        assert len(product.variations) == 1

    def test_empty_list_rejected(self):
        product = _tomatoes()
        with pytest.raises(ValidationError, match="at least one variation"):
            product.replace_variations([], AGG)
        assert product.stock == 5


class TestUpdateVariationStock:

    def test_stock_total_is_recomputed(self):
        product = _tomatoes()
        product.update_variation_stock("2", 10, None, AGG)
        assert product.stock == 13
        assert product.find_variation("2").stock == 10

    def test_zero_stock_sells_out_variation(self):
        product = _tomatoes()
        variation = product.update_variation_stock("1", 0, None, AGG)
        assert variation.status == VariationStatus.SOLD_OUT
        assert product.stock == 2

    def test_explicit_status_wins(self):
        product = _tomatoes()
        variation = product.update_variation_stock("1", 5, VariationStatus.SOLD_OUT, AGG)
        assert variation.stock == 5
        assert variation.status == VariationStatus.SOLD_OUT

    def test_unknown_variation(self):
        product = _tomatoes()
        with pytest.raises(EntityNotFoundError, match="Variation '9' not found"):
            product.update_variation_stock("9", 1, None, AGG)

    def test_failed_recompute_leaves_product_untouched(self):
        # A legacy record saved before discounts were validated
        product = Product(
            id="1",
            name="Legacy",
            variations=[
                Variation("1", "Size", "Small", Money.of("10"), Money.of("12"), 3),
            ],
            price=Money.of("10"),
            disc_price=Money.of("12"),
            stock=3,
        )
        with pytest.raises(InvalidDiscount):
            product.update_variation_stock("1", 0, None, AGG)
        assert product.stock == 3
        assert product.variations[0].stock == 3
        assert product.variations[0].status == VariationStatus.AVAILABLE
