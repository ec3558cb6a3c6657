import logging

import click

from pos.infrastructure.cli.history_commands import history_export, history_show
from pos.infrastructure.cli.product_commands import product_categories, product_list
from pos.infrastructure.cli.sale_commands import sale_checkout


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """POS: point-of-sale terminal"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Browse the product catalog."""


@cli.group()
def sale() -> None:
    """Ring up sales."""


@cli.group()
def history() -> None:
    """Review and export sales history."""


# Register subcommands
product.add_command(product_list)
product.add_command(product_categories)
sale.add_command(sale_checkout)
history.add_command(history_show)
history.add_command(history_export)
