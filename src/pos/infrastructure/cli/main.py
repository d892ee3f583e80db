import logging

import click

from pos.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_edit,
    cart_quantity,
    cart_remove,
    cart_set,
    cart_show,
)
from pos.infrastructure.cli.checkout_commands import bill_show, checkout, sales_today
from pos.infrastructure.cli.expense_commands import (
    expense_add,
    expense_delete,
    expense_edit,
    expense_list,
)
from pos.infrastructure.cli.menu_commands import menu_add, menu_list, menu_update
from pos.infrastructure.cli.settings_commands import settings_set, settings_show


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output.")
def cli(verbose: bool) -> None:
    """POS: restaurant point of sale"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def cart() -> None:
    """Build the open order."""


@cli.group()
def menu() -> None:
    """Manage menu items."""


@cli.group()
def settings() -> None:
    """Manage store settings."""


@cli.group()
def bill() -> None:
    """Look up saved bills."""


@cli.group()
def sales() -> None:
    """Sales figures."""


@cli.group()
def expense() -> None:
    """Record and review expenses."""


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_edit)
cart.add_command(cart_quantity)
cart.add_command(cart_remove)
cart.add_command(cart_set)
cart.add_command(cart_show)
menu.add_command(menu_add)
menu.add_command(menu_list)
menu.add_command(menu_update)
settings.add_command(settings_set)
settings.add_command(settings_show)
bill.add_command(bill_show)
sales.add_command(sales_today)
expense.add_command(expense_add)
expense.add_command(expense_delete)
expense.add_command(expense_edit)
expense.add_command(expense_list)
cli.add_command(checkout)
