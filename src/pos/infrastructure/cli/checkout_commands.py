"""CLI commands for checkout and bill history."""

from __future__ import annotations

from datetime import datetime, timezone

import click

from pos.application.checkout import CheckoutHandler
from pos.application.daily_sales import DailySalesHandler
from pos.application.dto import format_amount
from pos.application.show_bill import ShowBillHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import (
    bill_printer,
    bill_repository,
    expense_repository,
)
from pos.infrastructure.cli.session import open_cart


@click.command("checkout")
@click.option(
    "--cashier",
    envvar="POS_CASHIER",
    default=None,
    help="Operator recorded as created_by (env: POS_CASHIER).",
)
@click.option("--no-print", is_flag=True, default=False, help="Skip receipt and KOT.")
def checkout(cashier: str | None, no_print: bool) -> None:
    """Save the open cart as a bill and print the receipt and KOT."""
    handler = CheckoutHandler(
        bill_repo=bill_repository(),
        printer=None if no_print else bill_printer(),
    )

    with open_cart(for_checkout=True) as (cart, settings):
        result = handler.handle(cart, created_by=cashier, settings=settings)

    bill = result.bill
    click.echo(f"Bill {bill.bill_number} saved  (total {format_amount(bill.total)})")
    if bill.change_returned > 0:
        click.echo(f"Change: {format_amount(bill.change_returned)}")
    if not no_print and not result.printed:
        click.echo("Printing failed; the bill is saved.", err=True)


@click.command("show")
@click.option("--number", "bill_number", required=True, help="Full bill number.")
def bill_show(bill_number: str) -> None:
    """Show a saved bill."""
    handler = ShowBillHandler(bill_repo=bill_repository())

    try:
        dto = handler.handle(bill_number)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Bill {dto.bill_number}  (#{dto.display_number}, {dto.order_type})")
    click.echo(f"Created:  {dto.created_at}")
    if dto.customer_name:
        click.echo(f"Customer: {dto.customer_name}")
    click.echo()
    click.echo(f"  {'Item':<20} {'Qty':>5} {'Price':>12} {'Total':>14}")
    click.echo(f"  {'-'*54}")
    for item in dto.items:
        click.echo(
            f"  {item.item_name:<20} {item.quantity:>5} {item.unit_price:>12} {item.total_price:>14}"
        )
    click.echo(f"  {'-'*54}")
    click.echo(f"  {'Subtotal':<27} {dto.subtotal:>27}")
    click.echo(f"  {'Discount':<27} {dto.discount:>27}")
    click.echo(f"  {'Tax':<27} {dto.tax:>27}")
    click.echo(f"  {'Total':<27} {dto.total:>27}")
    click.echo(f"  {'Paid (' + dto.payment_method + ')':<27} {dto.amount_paid:>27}")
    click.echo(f"  {'Change':<27} {dto.change_returned:>27}")


@click.command("today")
@click.option(
    "--date",
    "day",
    default=None,
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Day to summarise (default: today, UTC).",
)
def sales_today(day: datetime | None) -> None:
    """Show revenue, bill count, expenses and net for a day."""
    handler = DailySalesHandler(
        bill_repo=bill_repository(), expense_repo=expense_repository()
    )

    try:
        dto = handler.handle(day.date() if day else datetime.now(timezone.utc).date())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{dto.day}: {dto.bill_count} bill(s), revenue {dto.revenue}")
    click.echo(f"Expenses: {dto.expense_total}  Net: {dto.net_profit}")
