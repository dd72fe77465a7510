import click

from purplehaze.infrastructure.cli.age_commands import age_deny, age_status, age_verify
from purplehaze.infrastructure.cli.auth_commands import (
    auth_signin,
    auth_signout,
    auth_signup,
    auth_whoami,
)
from purplehaze.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from purplehaze.infrastructure.cli.checkout_commands import checkout
from purplehaze.infrastructure.cli.product_commands import product_list
from purplehaze.infrastructure.cli.session_commands import session_end


@click.group()
def cli() -> None:
    """Purple Haze — premium organic herbal products"""


@cli.group()
def age() -> None:
    """Age verification."""


@cli.group()
def auth() -> None:
    """Sign in, sign up, sign out."""


@cli.group()
def product() -> None:
    """Browse products."""


@cli.group()
def cart() -> None:
    """Manage your cart."""


@cli.group()
def session() -> None:
    """Manage the browsing session."""


# Register subcommands
age.add_command(age_verify)
age.add_command(age_deny)
age.add_command(age_status)
auth.add_command(auth_signin)
auth.add_command(auth_signup)
auth.add_command(auth_signout)
auth.add_command(auth_whoami)
product.add_command(product_list)
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_update)
cart.add_command(cart_clear)
cart.add_command(cart_show)
cli.add_command(checkout)
session.add_command(session_end)
