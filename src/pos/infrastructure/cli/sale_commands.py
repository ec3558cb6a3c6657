"""CLI commands for ringing up a sale."""

from __future__ import annotations

import click

from pos.application.checkout import CheckoutService
from pos.application.dto import CartItemSpec
from pos.application.session import TerminalSession
from pos.domain.exceptions import DomainException, EntityNotFoundError, PersistenceError
from pos.domain.model.cart import Cart
from pos.domain.repository.product_repository import ProductRepository
from pos.infrastructure.bootstrap import product_repository, sale_repository, settings
from pos.infrastructure.reporting.formatting import format_money


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse '1:2,7:1' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        product_id, sep, qty_str = pair.rpartition(":")
        if not sep:
            product_id, qty_str = pair, "1"
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        if qty <= 0:
            raise click.BadParameter(
                f"Quantity for product '{product_id}' must be positive."
            )
        specs.append(CartItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _fill_cart(cart: Cart, specs: list[CartItemSpec], products: ProductRepository) -> None:
    """Add each product to the cart one unit at a time, like a till button."""
    for spec in specs:
        product = products.get_by_id(spec.product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{spec.product_id}'")
        for _ in range(spec.quantity):
            cart.add_item(product)


@click.command("checkout")
@click.option("--operator", required=True, help="Operator ID recorded on the sale.")
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
def sale_checkout(operator: str, items: str) -> None:
    """Build a cart and commit it as a sale."""
    specs = _parse_items(items)
    config = settings()

    try:
        session = TerminalSession(operator_id=operator, cart=Cart(config.currency))
        _fill_cart(session.cart, specs, product_repository())
        summary = [(line.product.name, line.quantity.value, line.line_total) for line in session.cart.lines]
        total = session.cart.total()
        sale_id = session.checkout(CheckoutService(sale_repository()))
    except (DomainException, PersistenceError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Sale {sale_id} completed")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Total':>14}")
    click.echo(f"  {'-'*45}")
    for name, qty, line_total in summary:
        click.echo(f"  {name:<24} {qty:>5} {format_money(line_total, config.locale):>14}")
    click.echo(f"  {'-'*45}")
    click.echo(f"  {'Sale Total':<30} {format_money(total, config.locale):>14}")
