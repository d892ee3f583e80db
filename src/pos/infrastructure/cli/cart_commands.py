"""CLI commands for the open cart."""

from __future__ import annotations

import click

from pos.application.add_to_cart import AddToCartHandler
from pos.application.dto import CartDTO, cart_to_dto, format_amount
from pos.application.edit_cart_line import (
    ChangeQuantityHandler,
    EditLineHandler,
    RemoveFromCartHandler,
)
from pos.domain.model.value_objects import OrderType, PaymentMethod
from pos.infrastructure.bootstrap import menu_repository
from pos.infrastructure.cli.session import open_cart


def display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying the cart."""
    if not dto.items:
        click.echo("Cart is empty.")
        return

    header = f"{dto.order_type}  /  {dto.payment_method}"
    if dto.customer_name:
        header += f"  /  {dto.customer_name}"
    if dto.customer_phone:
        header += f" ({dto.customer_phone})"
    click.echo(header)
    click.echo()
    click.echo(f"  {'ID':<6} {'Item':<20} {'Qty':>5} {'Price':>12} {'Total':>14}")
    click.echo(f"  {'-'*61}")
    for item in dto.items:
        click.echo(
            f"  {item.item_id:<6} {item.name:<20} {item.quantity:>5} "
            f"{item.unit_price:>12} {item.total_price:>14}"
        )
        if item.note or item.extra_charge:
            extra = f" (+{item.extra_charge})" if item.extra_charge else ""
            click.echo(f"  {'':<6} {(item.note or '') + extra}")
    click.echo(f"  {'-'*61}")
    click.echo(f"  {'Subtotal':<27} {dto.subtotal:>34}")
    click.echo(f"  {'Discount':<27} {dto.discount:>34}")
    if dto.tax_label:
        click.echo(f"  {'Tax (' + dto.tax_label + ')':<27} {dto.tax:>34}")
    click.echo(f"  {'Delivery':<27} {dto.delivery_charge:>34}")
    click.echo(f"  {'Total':<27} {dto.total:>34}")
    click.echo(f"  {'Amount paid':<27} {dto.amount_paid:>34}")


@click.command("add")
@click.option("--id", "item_id", required=True, help="Menu item ID.")
def cart_add(item_id: str) -> None:
    """Add one unit of a menu item to the cart."""
    handler = AddToCartHandler(menu_repo=menu_repository())

    with open_cart() as (cart, _):
        existing = cart.find_line(item_id)
        line = handler.handle(cart, item_id)

    if existing is not None:
        click.echo(f"{line.name} quantity increased to {line.quantity}")
    else:
        click.echo(f"{line.name} added to cart")


@click.command("remove")
@click.option("--id", "item_id", required=True, help="Menu item ID.")
def cart_remove(item_id: str) -> None:
    """Remove a line from the cart."""
    with open_cart() as (cart, _):
        RemoveFromCartHandler().handle(cart, item_id)

    click.echo(f"Item {item_id} removed.")


@click.command("qty")
@click.option("--id", "item_id", required=True, help="Menu item ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes).")
def cart_quantity(item_id: str, quantity: int) -> None:
    """Set the quantity of a cart line."""
    with open_cart() as (cart, _):
        line = ChangeQuantityHandler().handle(cart, item_id, quantity)

    if line is None:
        click.echo(f"Item {item_id} removed.")
    else:
        click.echo(f"{line.name} x{line.quantity} = {format_amount(line.total_price)}")


@click.command("edit")
@click.option("--id", "item_id", required=True, help="Menu item ID.")
@click.option("--note", default=None, help="Kitchen instruction ('' clears it).")
@click.option("--extra", default=None, help="Per-unit extra charge (e.g. 50).")
def cart_edit(item_id: str, note: str | None, extra: str | None) -> None:
    """Set a line's note and/or extra charge."""
    if note is None and extra is None:
        raise click.ClickException("Nothing to change: pass --note and/or --extra")

    with open_cart() as (cart, _):
        line = EditLineHandler().handle(cart, item_id, note=note, extra_charge=extra)

    click.echo(f"{line.name}: total {format_amount(line.total_price)}")


@click.command("set")
@click.option("--customer", default=None, help="Customer name.")
@click.option("--phone", default=None, help="Customer phone.")
@click.option(
    "--order-type",
    default=None,
    type=click.Choice([t.value for t in OrderType]),
    help="Order type.",
)
@click.option(
    "--payment",
    default=None,
    type=click.Choice([m.value for m in PaymentMethod]),
    help="Payment method.",
)
@click.option("--discount", default=None, help="Discount amount.")
@click.option("--paid", default=None, help="Amount tendered.")
@click.option("--delivery", default=None, help="Delivery charge.")
def cart_set(
    customer: str | None,
    phone: str | None,
    order_type: str | None,
    payment: str | None,
    discount: str | None,
    paid: str | None,
    delivery: str | None,
) -> None:
    """Set order-level details."""
    with open_cart() as (cart, _):
        if customer is not None:
            cart.set_customer_name(customer)
        if phone is not None:
            cart.set_customer_phone(phone)
        if order_type is not None:
            cart.set_order_type(order_type)
        if payment is not None:
            cart.set_payment_method(payment)
        if discount is not None:
            cart.set_discount(discount)
        if paid is not None:
            cart.set_amount_paid(paid)
        if delivery is not None:
            cart.set_delivery_charge(delivery)
        dto = cart_to_dto(cart)

    display_cart(dto)


@click.command("show")
def cart_show() -> None:
    """Show the open cart with its totals."""
    with open_cart() as (cart, _):
        dto = cart_to_dto(cart)

    display_cart(dto)


@click.command("clear")
def cart_clear() -> None:
    """Discard the open order."""
    with open_cart() as (cart, _):
        cart.clear()

    click.echo("Cart cleared.")
