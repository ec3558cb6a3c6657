"""Tests for environment-driven settings and the composition root."""

import json
from pathlib import Path

from pos.domain.model.value_objects import Money
from pos.infrastructure import bootstrap
from pos.infrastructure.bootstrap import Settings


class TestSettingsFromEnv:

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.locale == "cs_CZ"
        assert settings.currency == "CZK"
        assert settings.data_dir.name == "data"

    def test_overrides(self, tmp_path):
        settings = Settings.from_env({
            "POS_DATA_DIR": str(tmp_path),
            "POS_LOCALE": "de_DE",
            "POS_CURRENCY": "EUR",
        })
        assert settings.data_dir == Path(tmp_path)
        assert settings.locale == "de_DE"
        assert settings.currency == "EUR"

    def test_blank_values_fall_back_to_defaults(self):
        settings = Settings.from_env({"POS_LOCALE": "", "POS_CURRENCY": ""})
        assert settings.locale == "cs_CZ"
        assert settings.currency == "CZK"


class TestCompositionRoot:

    def test_product_repository_prices_in_configured_currency(self, tmp_path, monkeypatch):
        (tmp_path / "products.json").write_text(json.dumps([
            {"id": "1", "name": "Espresso", "price": "2.50", "category": "Coffee"},
        ]), encoding="utf-8")
        monkeypatch.setenv("POS_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("POS_CURRENCY", "EUR")

        [product] = bootstrap.product_repository().list_all()
        assert product.price == Money.of("2.50", "EUR")

    def test_sale_repository_uses_data_dir(self, tmp_path, monkeypatch):
        monkeypatch.setenv("POS_DATA_DIR", str(tmp_path))
        bootstrap.sale_repository()
        assert (tmp_path / "sales.json").exists()
