"""Cart aggregate: the operator's in-memory selection.

The cart owns its lines. Totals are always derived from the lines, so
there is no stored total that could drift out of sync.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.exceptions import ValidationError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity


@dataclass
class CartLine:
    """One product in the cart and how many units of it were picked."""

    product: Product
    quantity: Quantity

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def unit_price(self) -> Money:
        return self.product.price

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


class Cart:
    """Insertion-ordered collection of cart lines, at most one per product.

    Invariants:
    - every line has a quantity >= 1
    - ``total()`` equals the sum of unit price x quantity over all lines
    - ``item_count()`` equals the sum of quantities over all lines
    """

    def __init__(self, currency: str = DEFAULT_CURRENCY) -> None:
        self.currency = currency
        self._lines: dict[str, CartLine] = {}

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: Product) -> None:
        """Add one unit of *product*, appending a new line if needed."""
        if product.price.currency != self.currency:
            raise ValidationError(
                f"Cannot add {product.name} priced in {product.price.currency} "
                f"to a {self.currency} cart"
            )
        line = self._lines.get(product.id)
        if line is None:
            self._lines[product.id] = CartLine(product=product, quantity=Quantity(1))
        else:
            line.quantity = line.quantity.increment()

    def remove_item(self, product_id: str) -> None:
        """Take one unit of a product out; drop the line at zero.

        Unknown product IDs are ignored.
        """
        line = self._lines.get(product_id)
        if line is None:
            return
        if line.quantity.value > 1:
            line.quantity = Quantity(line.quantity.value - 1)
        else:
            del self._lines[product_id]

    def clear(self) -> None:
        self._lines.clear()

    # --- Derived reads --------------------------------------------------------

    def total(self) -> Money:
        return Money.sum((line.line_total for line in self._lines.values()), self.currency)

    def item_count(self) -> int:
        return sum(line.quantity.value for line in self._lines.values())

    def quantity_of(self, product_id: str) -> int:
        line = self._lines.get(product_id)
        return line.quantity.value if line is not None else 0

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return f"Cart(lines={len(self)}, items={self.item_count()}, total={self.total()})"
