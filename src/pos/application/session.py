"""Per-terminal session state.

The UI layer creates one TerminalSession per signed-in operator and hands
it to whatever needs the cart. Nothing in the package holds a cart
globally.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pos.application.checkout import CheckoutService
from pos.domain.exceptions import ValidationError
from pos.domain.model.cart import Cart


@dataclass
class TerminalSession:
    operator_id: str
    cart: Cart = field(default_factory=Cart)

    def __post_init__(self) -> None:
        if not self.operator_id or not self.operator_id.strip():
            raise ValidationError("Operator ID is required")

    def checkout(self, service: CheckoutService) -> str:
        """Commit this session's cart on behalf of its operator."""
        return service.commit(self.cart, self.operator_id)
