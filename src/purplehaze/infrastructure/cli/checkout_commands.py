"""CLI command for placing an order."""

from __future__ import annotations

import click

from purplehaze.application.checkout import CheckoutHandler
from purplehaze.domain.exceptions import DomainException, SinkFailure
from purplehaze.infrastructure.bootstrap import cart_store, identity_provider, order_sink
from purplehaze.infrastructure.cli.age_commands import ensure_verified


@click.command("checkout")
def checkout() -> None:
    """Place an order for everything in the cart."""
    ensure_verified()
    handler = CheckoutHandler(
        cart_store=cart_store(),
        identity_provider=identity_provider(),
        order_sink=order_sink(),
    )

    try:
        dto = handler.handle()
    except SinkFailure as exc:
        raise click.ClickException(f"Checkout failed. {exc} Your cart has been kept.")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order placed! Your order #{dto.short_id} has been confirmed.")
    click.echo(f"Total paid: {dto.total}  (status={dto.status})")
