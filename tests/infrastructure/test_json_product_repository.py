"""Tests for the read-only JSON product repository."""

import json

import pytest

from pos.domain.exceptions import PersistenceError
from pos.domain.model.value_objects import Money
from pos.infrastructure.persistence.json_product_repository import JsonProductRepository


def _write(path, products):
    path.write_text(json.dumps(products), encoding="utf-8")


class TestJsonProductRepository:

    def test_lists_in_file_order(self, tmp_path):
        path = tmp_path / "products.json"
        _write(path, [
            {"id": "2", "name": "Croissant", "price": "45.00", "category": "Bakery"},
            {"id": "1", "name": "Espresso", "price": "50.00", "currency": "CZK", "category": "Coffee"},
        ])
        products = JsonProductRepository(path).list_all()
        assert [p.id for p in products] == ["2", "1"]
        assert products[1].price == Money.of("50")

    def test_get_by_id(self, tmp_path):
        path = tmp_path / "products.json"
        _write(path, [{"id": 7, "name": "Water", "price": 35, "category": "Drinks"}])
        repo = JsonProductRepository(path)
        assert repo.get_by_id("7").name == "Water"
        assert repo.get_by_id("8") is None

    def test_missing_file_is_empty_catalog(self, tmp_path):
        assert JsonProductRepository(tmp_path / "products.json").list_all() == []

    def test_negative_price_is_a_persistence_error(self, tmp_path):
        path = tmp_path / "products.json"
        _write(path, [{"id": "1", "name": "Broken", "price": "-1"}])
        with pytest.raises(PersistenceError):
            JsonProductRepository(path).list_all()

    def test_default_currency_for_entries_without_one(self, tmp_path):
        path = tmp_path / "products.json"
        _write(path, [
            {"id": "1", "name": "Espresso", "price": "2.50"},
            {"id": "2", "name": "Tea", "price": "40", "currency": "CZK"},
        ])
        products = JsonProductRepository(path, default_currency="EUR").list_all()
        assert products[0].price == Money.of("2.50", "EUR")
        assert products[1].price == Money.of("40", "CZK")

    def test_unusable_location_is_a_persistence_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(PersistenceError, match="Cannot create products file"):
            JsonProductRepository(blocker / "products.json")
