"""CLI commands for the menu."""

from __future__ import annotations

import click

from pos.application.add_menu_item import AddMenuItemHandler
from pos.application.dto import format_amount
from pos.application.update_menu_item import UpdateMenuItemHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import menu_repository


@click.command("add")
@click.option("--name", required=True, help="Item name.")
@click.option("--price", required=True, help="Price (e.g. 450).")
@click.option("--category", required=True, help="Menu category.")
@click.option("--description", default=None, help="Optional description.")
def menu_add(name: str, price: str, category: str, description: str | None) -> None:
    """Add a new item to the menu."""
    handler = AddMenuItemHandler(menu_repo=menu_repository())

    try:
        item = handler.handle(
            name=name, price=price, category=category, description=description
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Menu item #{item.id} '{item.item_name}' added at {format_amount(item.price)}")


@click.command("list")
@click.option("--all", "show_all", is_flag=True, default=False, help="Include unavailable items.")
def menu_list(show_all: bool) -> None:
    """List menu items."""
    repo = menu_repository()
    items = repo.list_all() if show_all else repo.list_available()

    if not items:
        click.echo("No menu items found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Category':<14} {'Price':>12}")
    click.echo("-" * 59)
    for i in items:
        name = i.item_name if i.is_available else f"{i.item_name} (off)"
        click.echo(f"{i.id:<6} {name:<24} {i.category:<14} {format_amount(i.price):>12}")


@click.command("update")
@click.option("--id", "item_id", required=True, help="Menu item ID.")
@click.option("--price", default=None, help="New price.")
@click.option("--available/--unavailable", default=None, help="Put on or take off the menu.")
def menu_update(item_id: str, price: str | None, available: bool | None) -> None:
    """Update an item's price or availability."""
    handler = UpdateMenuItemHandler(menu_repo=menu_repository())

    try:
        item = handler.handle(item_id=item_id, new_price=price, available=available)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    state = "available" if item.is_available else "unavailable"
    click.echo(f"Menu item #{item.id} now {format_amount(item.price)}, {state}")
