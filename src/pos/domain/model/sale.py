"""Sale aggregate: the immutable record of a completed checkout.

A sale keeps its own copy of every line (price, name, quantity) taken at
checkout time, so later catalog edits never change recorded history.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from pos.domain.exceptions import ValidationError
from pos.domain.model.cart import Cart, CartLine
from pos.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class SaleLine:
    """Frozen snapshot of a cart line."""

    product_id: str
    product_name: str
    unit_price: Money  # locked at checkout time
    quantity: Quantity

    def __post_init__(self) -> None:
        if not self.product_id:
            raise ValidationError("Sale line requires a product ID")
        if not self.product_name or not self.product_name.strip():
            raise ValidationError(f"Sale line for product '{self.product_id}' has no name")
        if not isinstance(self.unit_price, Money):
            raise ValidationError("Sale line unit price must be Money")
        if not isinstance(self.quantity, Quantity):
            raise ValidationError("Sale line quantity must be a Quantity")

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @staticmethod
    def from_cart_line(line: CartLine) -> SaleLine:
        return SaleLine(
            product_id=line.product.id,
            product_name=line.product.name,
            unit_price=line.product.price,
            quantity=line.quantity,
        )


def snapshot_cart(cart: Cart) -> tuple[SaleLine, ...]:
    """Freeze every line of *cart*, preserving insertion order."""
    return tuple(SaleLine.from_cart_line(line) for line in cart.lines)


def total_of(lines: tuple[SaleLine, ...], currency: str) -> Money:
    return Money.sum((line.line_total for line in lines), currency)


@dataclass(frozen=True)
class Sale:
    """A persisted sale.

    ``id`` and ``created_at`` are assigned by the repository on insert.
    The constructor refuses a total that does not match the lines.
    """

    id: str
    lines: tuple[SaleLine, ...]
    total: Money
    operator_id: str
    created_at: datetime

    def __post_init__(self) -> None:
        if not self.lines:
            raise ValidationError("Sale must contain at least one line")
        if self.created_at.tzinfo is None:
            raise ValidationError("Sale timestamp must be timezone-aware")
        expected = total_of(self.lines, self.total.currency)
        if expected != self.total:
            raise ValidationError(
                f"Sale total {self.total} does not match line items ({expected})"
            )
