"""JSON-file-backed implementation of ProductRepository (read-only)."""

from __future__ import annotations

import json
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path

from pos.domain.exceptions import DomainException, PersistenceError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import DEFAULT_CURRENCY, Money
from pos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path, default_currency: str = DEFAULT_CURRENCY) -> None:
        self._file_path = file_path
        self._default_currency = default_currency
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for product in self._load():
            if product.id == product_id:
                return product
        return None

    def list_all(self) -> list[Product]:
        return self._load()

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            products = [
                Product(
                    id=str(item["id"]),
                    name=item["name"],
                    price=Money(
                        Decimal(str(item["price"])),
                        item.get("currency", self._default_currency),
                    ),
                    category=item.get("category", ""),
                )
                for item in raw
            ]
        except (OSError, ValueError, KeyError, TypeError, InvalidOperation, DomainException) as exc:
            logger.error("Failed to load products from %s: %s", self._file_path, exc)
            raise PersistenceError(f"Cannot read products: {exc}") from exc

        logger.debug("Loaded %d products from %s", len(products), self._file_path)
        return products

    def _ensure_file(self) -> None:
        try:
            if not self._file_path.exists():
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            logger.error("Cannot create product catalog at %s: %s", self._file_path, exc)
            raise PersistenceError(f"Cannot create products file: {exc}") from exc
