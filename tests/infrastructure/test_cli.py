"""Smoke tests for the click command line."""

import json

import pytest
from click.testing import CliRunner

from storefront.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("STOREFRONT_LOG_LEVEL", "ERROR")
    runner = CliRunner()

    def _run(*args):
        return runner.invoke(cli, list(args))

    return _run


def _add_tomato(run):
    return run(
        "product", "add", "--name", "Tomato",
        "--variation", '{"title": "500 g", "price": 40, "discPrice": 35, "stock": "3"}',
        "--variation", '{"title": "1 kg", "price": 75, "stock": 2}',
        "--json",
    )


class TestProductCommands:

    def test_add_prints_envelope(self, run):
        result = _add_tomato(run)
        assert result.exit_code == 0, result.output
        body = json.loads(result.stdout)
        assert body["success"] is True
        assert body["data"]["stock"] == 5
        assert body["data"]["price"] == "₹40.00"

    def test_invalid_discount_fails_with_envelope(self, run):
        result = run(
            "product", "add", "--name", "Potato",
            "--variation", '{"value": "Large", "price": 150, "discPrice": 170}',
            "--json",
        )
        assert result.exit_code == 1
        body = json.loads(result.stdout)
        assert body["success"] is False
        assert "Large" in body["message"]

    def test_bad_json_is_a_plain_error(self, run):
        result = run("product", "add", "--name", "Potato", "--variation", "{oops")
        assert result.exit_code == 1
        assert "Invalid variation JSON" in result.output

    def test_stock_update_and_list(self, run):
        _add_tomato(run)
        result = run("product", "stock", "--id", "1", "--variation", "1", "--stock", "0")
        assert result.exit_code == 0, result.output
        assert "Sold out" in result.output

        listing = run("product", "list")
        assert "Tomato" in listing.output

    def test_bulk_stock_reports_each_line(self, run):
        _add_tomato(run)
        result = run(
            "product", "bulk-stock",
            "--update", "1", "1", "7",
            "--update", "1", "9", "1",
            "--json",
        )
        assert result.exit_code == 0, result.output
        body = json.loads(result.stdout)
        assert [r["success"] for r in body["data"]] == [True, False]

    def test_show_missing_product(self, run):
        result = run("product", "show", "--id", "42")
        assert result.exit_code == 1
        assert "not found" in result.output


class TestCommissionCommands:

    def test_create_calculate_toggle(self, run):
        created = run(
            "commission", "create",
            "--restaurant-id", "REST-001", "--restaurant-name", "Spice Garden",
            "--type", "percentage", "--value", "10",
        )
        assert created.exit_code == 0, created.output
        assert "Commission #1" in created.output

        calc = run("commission", "calculate", "--restaurant-id", "REST-001", "--amount", "250", "--json")
        assert json.loads(calc.stdout)["data"]["commission"] == "₹25.00"

        toggled = run("commission", "toggle", "--id", "1")
        assert "disabled" in toggled.output

    def test_out_of_range_percentage(self, run):
        result = run(
            "commission", "create",
            "--restaurant-id", "REST-001", "--restaurant-name", "Spice Garden",
            "--type", "percentage", "--value", "101", "--json",
        )
        assert result.exit_code == 1
        assert json.loads(result.stdout)["success"] is False

    def test_list_empty(self, run):
        result = run("commission", "list")
        assert result.exit_code == 0
        assert "No commissions found." in result.output


class TestSettings:

    def test_invalid_log_level_is_a_plain_error(self, run, monkeypatch):
        monkeypatch.setenv("STOREFRONT_LOG_LEVEL", "loud")
        result = run("commission", "list")
        assert result.exit_code == 1
        assert "LOG_LEVEL must be one of" in result.output
