"""Abstract repository for catalog products.

Defined in the domain layer so the domain never depends on
infrastructure. The engine only reads the catalog; creating and editing
products is the catalog owner's job.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in catalog order."""
