"""Unit tests for the response envelope."""

import json

from storefront.application.dto import StockUpdateSpec
from storefront.application.envelope import Envelope
from storefront.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    InvalidDiscount,
)


class TestEnvelope:

    def test_ok_wraps_dataclasses(self):
        env = Envelope.ok("done", StockUpdateSpec("1", "2", 3), created=True)
        assert env.status_code == 201
        assert env.body() == {
            "success": True,
            "message": "done",
            "data": {"product_id": "1", "variation_id": "2", "stock": 3},
        }

    def test_ok_without_data_omits_key(self):
        assert "data" not in Envelope.ok("done").body()

    def test_lists_are_converted(self):
        env = Envelope.ok("many", [StockUpdateSpec("1", "2", 3)])
        assert env.data == [{"product_id": "1", "variation_id": "2", "stock": 3}]

    def test_validation_error_is_400(self):
        env = Envelope.from_error(InvalidDiscount("Large", 170, 150))
        assert env.status_code == 400
        assert env.success is False
        assert "Large" in env.message

    def test_not_found_is_404(self):
        assert Envelope.from_error(EntityNotFoundError("gone")).status_code == 404

    def test_other_domain_errors_are_500(self):
        assert Envelope.from_error(DomainException("boom")).status_code == 500

    def test_json_keeps_unicode(self):
        text = Envelope.ok("₹ prices").to_json()
        assert json.loads(text) == {"success": True, "message": "₹ prices"}
        assert "₹" in text
