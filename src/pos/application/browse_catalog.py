"""Application service: Browse Catalog use case (query).

Filtering by category is a read over the catalog. It never touches a cart.
"""

from __future__ import annotations

from pos.application.dto import CatalogView
from pos.domain.model.product import Product
from pos.domain.repository.product_repository import ProductRepository

ALL_CATEGORIES = "all"


class BrowseCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, category: str | None = None) -> CatalogView:
        """List products ordered by category, optionally narrowed to one.

        ``None`` or ``"all"`` shows every product. Categories are always
        derived from the full catalog so the caller can switch tabs.
        """
        products = sorted(self._product_repo.list_all(), key=lambda p: p.category)
        categories = self._distinct_categories(products)

        if category is not None and category != ALL_CATEGORIES:
            products = [p for p in products if p.category == category]

        return CatalogView(products=products, categories=categories)

    @staticmethod
    def _distinct_categories(products: list[Product]) -> list[str]:
        seen: dict[str, None] = {}
        for product in products:
            seen.setdefault(product.category, None)
        return list(seen)
