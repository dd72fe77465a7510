"""CLI command for ending the browsing session."""

from __future__ import annotations

import click

from purplehaze.application.end_session import EndSessionHandler
from purplehaze.infrastructure.bootstrap import identity_provider, session_storage


@click.command("end")
def session_end() -> None:
    """Sign out and forget the cart and age check."""
    EndSessionHandler(identity_provider(), session_storage()).handle()
    click.echo("Session ended. Come back soon.")
