"""Unit tests for the Variation entity and its stock/status coupling."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money
from storefront.domain.model.variation import Variation, VariationStatus, parse_stock


def _variation(stock=5, status=VariationStatus.AVAILABLE):
    return Variation(
        id="1",
        name="Weight",
        value="500 g",
        price=Money.of("40"),
        disc_price=Money.zero(),
        stock=stock,
        status=status,
    )


class TestParseStock:

    @pytest.mark.parametrize("raw, expected", [
        ("3", 3),
        (7, 7),
        (" 12 kg", 12),
        (4.9, 4),
        ("-2", -2),
    ])
    def test_leading_integer_is_read(self, raw, expected):
        assert parse_stock(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "lots", "kg 12", True])
    def test_unparseable_counts_as_zero(self, raw):
        assert parse_stock(raw) == 0


class TestVariationStatus:

    def test_parse_is_case_insensitive(self):
        assert VariationStatus.parse("sold out") == VariationStatus.SOLD_OUT
        assert VariationStatus.parse("Available") == VariationStatus.AVAILABLE

    def test_parse_passes_members_through(self):
        assert VariationStatus.parse(VariationStatus.SOLD_OUT) == VariationStatus.SOLD_OUT

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError, match="Unknown variation status"):
            VariationStatus.parse("Discontinued")


class TestSetStock:

    def test_zero_stock_marks_sold_out(self):
        v = _variation(stock=5)
        v.set_stock(0)
        assert v.stock == 0
        assert v.status == VariationStatus.SOLD_OUT

    def test_restock_of_sold_out_makes_available(self):
        v = _variation(stock=0, status=VariationStatus.SOLD_OUT)
        v.set_stock(5)
        assert v.status == VariationStatus.AVAILABLE

    def test_restock_leaves_available_alone(self):
        v = _variation(stock=2)
        v.set_stock(9)
        assert v.status == VariationStatus.AVAILABLE

    def test_explicit_status_wins_over_restock(self):
        v = _variation(stock=0, status=VariationStatus.SOLD_OUT)
        v.set_stock(5, VariationStatus.SOLD_OUT)
        assert v.stock == 5
        assert v.status == VariationStatus.SOLD_OUT

    def test_explicit_status_wins_over_zero_stock(self):
        v = _variation(stock=5)
        v.set_stock(0, VariationStatus.AVAILABLE)
        assert v.status == VariationStatus.AVAILABLE

    def test_negative_stock_rejected(self):
        v = _variation(stock=5)
        with pytest.raises(ValidationError, match="cannot be negative"):
            v.set_stock(-1)
        assert v.stock == 5

    def test_as_raw_shape(self):
        assert _variation().as_raw() == {
            "id": "1",
            "name": "Weight",
            "value": "500 g",
            "price": "40",
            "discPrice": "0",
            "stock": 5,
            "status": "Available",
        }
