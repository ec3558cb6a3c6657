"""Unit tests for the read-only Product model."""

from dataclasses import FrozenInstanceError

import pytest

from pos.domain.exceptions import ValidationError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money


class TestProduct:

    def test_valid_product(self):
        p = Product(id="1", name="Espresso", price=Money.of("50"), category="Coffee")
        assert p.category == "Coffee"

    def test_blank_id_rejected(self):
        with pytest.raises(ValidationError, match="ID is required"):
            Product(id="", name="Espresso", price=Money.of("50"))

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product(id="1", name="  ", price=Money.of("50"))

    def test_price_must_be_money(self):
        with pytest.raises(ValidationError, match="must be Money"):
            Product(id="1", name="Espresso", price="50")  # type: ignore[arg-type]

    def test_frozen(self):
        p = Product(id="1", name="Espresso", price=Money.of("50"))
        with pytest.raises(FrozenInstanceError):
            p.price = Money.of("60")  # type: ignore[misc]
