"""CLI commands for sales history and report export."""

from __future__ import annotations

from pathlib import Path

import click

from pos.application.dto import HistoryResult
from pos.application.sales_history import HistoryAggregator
from pos.domain.exceptions import DomainException, PersistenceError
from pos.domain.model.period import Period
from pos.infrastructure.bootstrap import report_renderer, sale_repository, settings
from pos.infrastructure.reporting.formatting import format_day, format_money, format_timestamp

_PERIOD_CHOICE = click.Choice([p.value for p in Period], case_sensitive=False)


def _load(period: str) -> HistoryResult:
    try:
        aggregator = HistoryAggregator(sale_repository(), currency=settings().currency)
        return aggregator.query(period)
    except PersistenceError as exc:
        raise click.ClickException(f"Failed to load sales history: {exc}")
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("show")
@click.option("--period", type=_PERIOD_CHOICE, default=Period.DAILY.value, show_default=True)
def history_show(period: str) -> None:
    """Show sales for the current day, week or month."""
    result = _load(period)
    locale = settings().locale

    click.echo(
        f"Period: {format_day(result.range.start, locale)} - {format_day(result.range.end, locale)}"
    )
    if result.is_empty:
        click.echo("No sales data available for this period.")
        return

    click.echo()
    click.echo(f"  {'Date':<20} {'Lines':>6} {'Total':>14}")
    click.echo(f"  {'-'*42}")
    for s in result.sales:
        click.echo(
            f"  {format_timestamp(s.created_at, locale):<20} {len(s.lines):>6} "
            f"{format_money(s.total, locale):>14}"
        )
    click.echo(f"  {'-'*42}")
    click.echo(f"  {'Total Sales':<27} {format_money(result.total, locale):>14}")


@click.command("export")
@click.option("--period", type=_PERIOD_CHOICE, default=Period.DAILY.value, show_default=True)
@click.option(
    "--output",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory to write the report into.",
)
def history_export(period: str, output_dir: Path) -> None:
    """Export the period's sales as a PDF report."""
    result = _load(period)
    try:
        target = report_renderer().export(
            output_dir, result.period, result.sales, result.range, result.total
        )
    except OSError as exc:
        raise click.ClickException(f"Failed to write report: {exc}")

    click.echo(f"Report written to {target}")
