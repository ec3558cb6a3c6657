"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from pos.application.browse_catalog import ALL_CATEGORIES, BrowseCatalogHandler
from pos.domain.exceptions import PersistenceError
from pos.infrastructure.bootstrap import product_repository, settings
from pos.infrastructure.reporting.formatting import format_money


def _browse(category: str | None):
    try:
        handler = BrowseCatalogHandler(product_repo=product_repository())
        return handler.handle(category)
    except PersistenceError as exc:
        raise click.ClickException(f"Failed to load products: {exc}")


@click.command("list")
@click.option("--category", default=ALL_CATEGORIES, show_default=True, help="Only show this category.")
def product_list(category: str) -> None:
    """List products, grouped by category."""
    view = _browse(category)

    if not view.products:
        click.echo("No products found.")
        return

    locale = settings().locale
    click.echo(f"{'ID':<8} {'Name':<24} {'Category':<16} {'Price':>14}")
    click.echo("-" * 65)
    for p in view.products:
        click.echo(f"{p.id:<8} {p.name:<24} {p.category:<16} {format_money(p.price, locale):>14}")


@click.command("categories")
def product_categories() -> None:
    """List the categories present in the catalog."""
    view = _browse(None)
    if not view.categories:
        click.echo("No categories found.")
        return
    for category in view.categories:
        click.echo(category)
