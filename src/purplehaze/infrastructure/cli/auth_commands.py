"""CLI commands for signing in and out."""

from __future__ import annotations

import click

from purplehaze.application.authenticate import (
    SignInHandler,
    SignOutHandler,
    SignUpHandler,
)
from purplehaze.domain.exceptions import DomainException
from purplehaze.infrastructure.bootstrap import identity_provider


@click.command("signin")
@click.option("--email", required=True, help="Account email.")
@click.option("--password", required=True, prompt=True, hide_input=True, help="Account password.")
def auth_signin(email: str, password: str) -> None:
    """Sign in to your account."""
    handler = SignInHandler(identity_provider())

    try:
        identity = handler.handle(email=email, password=password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Welcome back, {identity.email}!")


@click.command("signup")
@click.option("--email", required=True, help="Account email.")
@click.option(
    "--password", required=True, prompt=True, hide_input=True,
    confirmation_prompt=True, help="Account password (6+ characters).",
)
def auth_signup(email: str, password: str) -> None:
    """Create a new account."""
    handler = SignUpHandler(identity_provider())

    try:
        identity = handler.handle(email=email, password=password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Account created for {identity.email}. Welcome to Purple Haze.")


@click.command("signout")
def auth_signout() -> None:
    """Sign out of your account."""
    SignOutHandler(identity_provider()).handle()
    click.echo("Signed out.")


@click.command("whoami")
def auth_whoami() -> None:
    """Show who is signed in."""
    identity = identity_provider().current_identity()
    if identity is None:
        click.echo("Not signed in.")
        return
    click.echo(f"Signed in as {identity.email}")
