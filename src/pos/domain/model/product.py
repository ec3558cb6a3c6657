"""Product as seen by the transaction engine.

Products are owned by the catalog. The engine only reads them, so the
model is frozen: a cart or a sale can never change a catalog entry.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog."""

    id: str
    name: str
    price: Money
    category: str = ""

    def __post_init__(self) -> None:
        if not self.id or not str(self.id).strip():
            raise ValidationError("Product ID is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if not isinstance(self.price, Money):
            raise ValidationError(
                f"Product price must be Money, got {type(self.price).__name__}"
            )
