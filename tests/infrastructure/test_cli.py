"""End-to-end tests for the command-line interface."""

import json
import re

import pytest
from click.testing import CliRunner

from pos.infrastructure.cli.main import cli


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "products.json").write_text(json.dumps([
        {"id": "1", "name": "Espresso", "price": "50.00", "category": "Coffee"},
        {"id": "2", "name": "Cheesecake", "price": "120.00", "category": "Desserts"},
    ]), encoding="utf-8")
    return tmp_path


def _run(data_dir, *args, **env):
    runner = CliRunner()
    environ = {"POS_DATA_DIR": str(data_dir), "POS_LOCALE": "en_US", **env}
    return runner.invoke(cli, list(args), env=environ)


class TestProductCommands:

    def test_list(self, data_dir):
        result = _run(data_dir, "product", "list")
        assert result.exit_code == 0, result.output
        assert "Espresso" in result.output
        assert "Cheesecake" in result.output

    def test_list_by_category(self, data_dir):
        result = _run(data_dir, "product", "list", "--category", "Desserts")
        assert "Cheesecake" in result.output
        assert "Espresso" not in result.output

    def test_categories(self, data_dir):
        result = _run(data_dir, "product", "categories")
        assert result.output.split() == ["Coffee", "Desserts"]


class TestSaleAndHistory:

    def test_checkout_then_show_and_export(self, data_dir):
        result = _run(data_dir, "sale", "checkout", "--operator", "op-1", "--items", "1:2,2:1")
        assert result.exit_code == 0, result.output
        assert "completed" in result.output
        assert "220.00" in result.output

        result = _run(data_dir, "history", "show", "--period", "daily")
        assert result.exit_code == 0, result.output
        assert "Total Sales" in result.output
        assert "220.00" in result.output
        # two lines (2 x Espresso, 1 x Cheesecake) rather than three units
        assert re.search(r"\s2\s+CZK\s?220\.00", result.output)

        result = _run(data_dir, "history", "export", "--period", "daily", "--output", str(data_dir))
        assert result.exit_code == 0, result.output
        assert (data_dir / "sales-report-daily.pdf").read_bytes().startswith(b"%PDF")

    def test_unknown_product(self, data_dir):
        result = _run(data_dir, "sale", "checkout", "--operator", "op-1", "--items", "9:1")
        assert result.exit_code == 1
        assert "Product not found" in result.output
        sales_file = data_dir / "sales.json"
        assert not sales_file.exists() or json.loads(sales_file.read_text(encoding="utf-8")) == []

    def test_bad_quantity(self, data_dir):
        result = _run(data_dir, "sale", "checkout", "--operator", "op-1", "--items", "1:x")
        assert result.exit_code == 2

    def test_empty_history(self, data_dir):
        result = _run(data_dir, "history", "show", "--period", "monthly")
        assert result.exit_code == 0
        assert "No sales data available" in result.output


class TestConfiguration:

    def test_configured_currency_applies_to_catalog(self, data_dir):
        result = _run(
            data_dir, "sale", "checkout", "--operator", "op-1", "--items", "1:2,2:1",
            POS_CURRENCY="EUR",
        )
        assert result.exit_code == 0, result.output
        assert "€220.00" in result.output

        result = _run(data_dir, "history", "show", "--period", "daily", POS_CURRENCY="EUR")
        assert result.exit_code == 0, result.output
        assert "€220.00" in result.output

    def test_unusable_data_dir_is_reported(self, tmp_path):
        not_a_dir = tmp_path / "blocker"
        not_a_dir.write_text("", encoding="utf-8")

        result = _run(not_a_dir, "history", "show", "--period", "daily")
        assert result.exit_code == 1
        assert "Failed to load sales history" in result.output

    def test_unusable_data_dir_on_checkout(self, tmp_path):
        not_a_dir = tmp_path / "blocker"
        not_a_dir.write_text("", encoding="utf-8")

        result = _run(not_a_dir, "sale", "checkout", "--operator", "op-1", "--items", "1:1")
        assert result.exit_code == 1
        assert "Cannot create products file" in result.output

    def test_unusable_data_dir_on_product_list(self, tmp_path):
        not_a_dir = tmp_path / "blocker"
        not_a_dir.write_text("", encoding="utf-8")

        result = _run(not_a_dir, "product", "list")
        assert result.exit_code == 1
        assert "Failed to load products" in result.output
