"""CLI commands for the age gate."""

from __future__ import annotations

import click

from purplehaze.infrastructure.bootstrap import age_gate


def ensure_verified() -> None:
    """Stop the command unless the shopper has confirmed their age."""
    if not age_gate().is_verified:
        raise click.ClickException(
            "You must be 18 or older to browse. Run 'purplehaze age verify' first."
        )


@click.command("verify")
def age_verify() -> None:
    """Confirm you are 18 or older."""
    age_gate().verify()
    click.echo("Age verified. Welcome to Purple Haze.")


@click.command("deny")
@click.pass_context
def age_deny(ctx: click.Context) -> None:
    """Decline the age check and leave the store."""
    exit_url = age_gate().deny()
    click.echo(f"Sorry, you must be 18 or older. Redirecting to {exit_url}")
    ctx.exit(1)


@click.command("status")
def age_status() -> None:
    """Show whether the age check has been passed this session."""
    verified = age_gate().is_verified
    click.echo("Age verified." if verified else "Age not verified.")
