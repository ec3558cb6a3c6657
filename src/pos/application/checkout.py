"""Application service: Checkout use case.

Turns the operator's cart into an immutable Sale. The cart is cleared
only after the repository confirms the insert; on failure it is left
exactly as it was so the operator can retry. No retries happen here.
"""

from __future__ import annotations

from pos.domain.exceptions import (
    CheckoutFailedError,
    EmptyCartError,
    PersistenceError,
    ValidationError,
)
from pos.domain.model.cart import Cart
from pos.domain.model.sale import snapshot_cart, total_of
from pos.domain.repository.sale_repository import SaleRepository


class CheckoutService:

    def __init__(self, sale_repo: SaleRepository) -> None:
        self._sale_repo = sale_repo

    def commit(self, cart: Cart, operator_id: str) -> str:
        """Persist *cart* as a sale and return the new sale ID.

        Steps:
        1. Reject an empty cart before touching persistence.
        2. Freeze the lines and compute the total from them.
        3. Insert the sale in a single call.
        4. Clear the cart once the insert succeeded.
        """
        if cart.is_empty:
            raise EmptyCartError("Cart is empty")
        if not operator_id or not operator_id.strip():
            raise ValidationError("Operator ID is required")

        lines = snapshot_cart(cart)
        total = total_of(lines, cart.currency)

        try:
            sale = self._sale_repo.insert(lines, total, operator_id.strip())
        except PersistenceError as exc:
            raise CheckoutFailedError(f"Failed to process sale: {exc}") from exc

        cart.clear()
        return sale.id
