"""CLI commands for expenses."""

from __future__ import annotations

from datetime import date, datetime

import click

from pos.application.add_expense import AddExpenseHandler
from pos.application.dto import format_amount
from pos.application.edit_expense import DeleteExpenseHandler, EditExpenseHandler
from pos.application.list_expenses import PERIODS, ListExpensesHandler
from pos.domain.exceptions import DomainException
from pos.domain.model.expense import ExpensePaymentMethod
from pos.infrastructure.bootstrap import expense_repository

DATE = click.DateTime(formats=["%Y-%m-%d"])
METHODS = click.Choice([m.value for m in ExpensePaymentMethod], case_sensitive=False)


def _day(value: datetime | None) -> date | None:
    return value.date() if value else None


@click.command("add")
@click.option("--description", required=True, help="What the money was spent on.")
@click.option("--amount", required=True, help="Amount paid (e.g. 1500).")
@click.option("--date", "day", default=None, type=DATE, help="Expense date (default: today).")
@click.option("--category", default="General", show_default=True, help="Expense category.")
@click.option("--method", default="cash", type=METHODS, show_default=True, help="Payment method.")
@click.option("--paid-to", default=None, help="Vendor or person paid.")
@click.option("--cashier", envvar="POS_CASHIER", default=None, help="Recorded as created_by (env: POS_CASHIER).")
def expense_add(
    description: str,
    amount: str,
    day: datetime | None,
    category: str,
    method: str,
    paid_to: str | None,
    cashier: str | None,
) -> None:
    """Record an expense."""
    handler = AddExpenseHandler(expense_repo=expense_repository())

    try:
        expense = handler.handle(
            description=description,
            amount=amount,
            expense_date=_day(day),
            category=category,
            payment_method=method,
            paid_to=paid_to,
            created_by=cashier,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Expense #{expense.id} recorded: {format_amount(expense.amount)} "
        f"on {expense.date.isoformat()}"
    )


@click.command("edit")
@click.option("--id", "expense_id", required=True, help="Expense ID.")
@click.option("--description", default=None, help="New description.")
@click.option("--amount", default=None, help="New amount.")
@click.option("--date", "day", default=None, type=DATE, help="New date.")
@click.option("--category", default=None, help="New category.")
@click.option("--method", default=None, type=METHODS, help="New payment method.")
@click.option("--paid-to", default=None, help="New payee (empty string clears it).")
def expense_edit(
    expense_id: str,
    description: str | None,
    amount: str | None,
    day: datetime | None,
    category: str | None,
    method: str | None,
    paid_to: str | None,
) -> None:
    """Change a recorded expense."""
    handler = EditExpenseHandler(expense_repo=expense_repository())

    try:
        expense = handler.handle(
            expense_id=expense_id,
            description=description,
            amount=amount,
            expense_date=_day(day),
            category=category,
            payment_method=method,
            paid_to=paid_to,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Expense #{expense.id} updated: {format_amount(expense.amount)}")


@click.command("delete")
@click.option("--id", "expense_id", required=True, help="Expense ID.")
@click.confirmation_option(prompt="Delete this expense permanently?")
def expense_delete(expense_id: str) -> None:
    """Delete an expense."""
    handler = DeleteExpenseHandler(expense_repo=expense_repository())

    try:
        handler.handle(expense_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Expense #{expense_id} deleted")


@click.command("list")
@click.option("--period", default="today", type=click.Choice(PERIODS), show_default=True)
@click.option("--from", "start", default=None, type=DATE, help="Range start (overrides --period).")
@click.option("--to", "end", default=None, type=DATE, help="Range end (overrides --period).")
@click.option("--search", default=None, help="Match description or payee.")
def expense_list(
    period: str,
    start: datetime | None,
    end: datetime | None,
    search: str | None,
) -> None:
    """List expenses for a period."""
    handler = ListExpensesHandler(expense_repo=expense_repository())

    try:
        if start or end:
            if not (start and end):
                raise click.UsageError("--from and --to must be given together")
            dto = handler.handle(start.date(), end.date(), search=search)
        else:
            dto = handler.handle_period(period, search=search)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dto.expenses:
        click.echo(f"No expenses from {dto.start} to {dto.end}.")
        return

    click.echo(f"{'ID':<5} {'Date':<11} {'Category':<12} {'Description':<24} {'Method':<7} {'Amount':>14}")
    click.echo("-" * 78)
    for e in dto.expenses:
        click.echo(
            f"{e.expense_id:<5} {e.date:<11} {e.category[:12]:<12} "
            f"{e.description[:24]:<24} {e.payment_method:<7} {e.amount:>14}"
        )
    click.echo("-" * 78)
    click.echo(f"{len(dto.expenses)} record(s), total {dto.total}")
