"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from purplehaze.application.list_products import ListProductsHandler
from purplehaze.domain.exceptions import DomainException
from purplehaze.infrastructure.bootstrap import catalog_provider
from purplehaze.infrastructure.cli.age_commands import ensure_verified


@click.command("list")
@click.option("--category", default=None, help="Only show this category ('all' for everything).")
def product_list(category: str | None) -> None:
    """List products in the catalog."""
    ensure_verified()
    handler = ListProductsHandler(catalog_provider())

    try:
        catalog = handler.handle(category=category)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Categories: {', '.join(c.upper() for c in catalog.categories)}")
    click.echo()

    if not catalog.products:
        click.echo("No products found in this category.")
        return

    click.echo(f"{'ID':<38} {'Name':<24} {'Category':<18} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 100)
    for p in catalog.products:
        stock = str(p.stock) if p.in_stock else "OUT"
        click.echo(f"{p.id:<38} {p.name:<24} {p.category:<18} {p.price:>10} {stock:>6}")
