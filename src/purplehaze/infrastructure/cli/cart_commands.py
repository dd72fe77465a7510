"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from purplehaze.application.add_to_cart import AddToCartHandler
from purplehaze.application.dto import CartDTO
from purplehaze.application.show_cart import ShowCartHandler
from purplehaze.application.update_cart import (
    ClearCartHandler,
    RemoveFromCartHandler,
    UpdateQuantityHandler,
)
from purplehaze.domain.exceptions import DomainException
from purplehaze.domain.service.cart_store import CartStore
from purplehaze.infrastructure.bootstrap import cart_store, catalog_provider
from purplehaze.infrastructure.cli.age_commands import ensure_verified


def _badge(store: CartStore) -> None:
    click.echo(f"[cart: {store.total_items} item(s), {store.total_price}]")


def _store() -> CartStore:
    ensure_verified()
    store = cart_store()
    store.subscribe(_badge)
    return store


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID to add.")
def cart_add(product_id: str) -> None:
    """Add one unit of a product to the cart."""
    store = _store()
    catalog = catalog_provider()

    try:
        listed = catalog.get_by_id(product_id)
        if listed is not None and not listed.in_stock:
            raise click.ClickException(f"{listed.name} is out of stock.")
        product = AddToCartHandler(catalog, store).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added to cart! {product.name} has been added to your cart.")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID to remove.")
def cart_remove(product_id: str) -> None:
    """Remove a product from the cart."""
    if not RemoveFromCartHandler(_store()).handle(product_id):
        click.echo(f"Product '{product_id}' is not in your cart.")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID to update.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes).")
def cart_update(product_id: str, quantity: int) -> None:
    """Set the quantity of a product in the cart."""
    try:
        present = UpdateQuantityHandler(_store()).handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not present:
        click.echo(f"Product '{product_id}' is not in your cart.")


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart."""
    ClearCartHandler(_store()).handle()


@click.command("show")
def cart_show() -> None:
    """Show the cart contents and total."""
    ensure_verified()
    display_cart(ShowCartHandler(cart_store()).handle())


def display_cart(dto: CartDTO) -> None:
    if not dto.items:
        click.echo("CART EMPTY. Add some products to get started.")
        return

    count = len(dto.items)
    click.echo(f"{count} item{'s' if count != 1 else ''} in your cart")
    click.echo()
    click.echo(f"  {'Product':<24} {'Category':<18} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*71}")
    for item in dto.items:
        click.echo(
            f"  {item.name:<24} {item.category:<18} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*71}")
    click.echo(f"  {'TOTAL':<48} {dto.total_price:>22}")
