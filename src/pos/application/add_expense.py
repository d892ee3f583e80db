"""Application service: Add Expense use case."""

from __future__ import annotations

from datetime import date, datetime, timezone

from pos.domain.exceptions import ValidationError
from pos.domain.model.expense import DEFAULT_CATEGORY, Expense, ExpensePaymentMethod
from pos.domain.model.value_objects import to_amount
from pos.domain.repository.expense_repository import ExpenseRepository


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def check_not_future(expense_date: date, today: date) -> None:
    if expense_date > today:
        raise ValidationError(
            f"Expense date {expense_date.isoformat()} is in the future"
        )


class AddExpenseHandler:

    def __init__(self, expense_repo: ExpenseRepository) -> None:
        self._expense_repo = expense_repo

    def handle(
        self,
        description: str,
        amount: str,
        expense_date: date | None = None,
        category: str = DEFAULT_CATEGORY,
        payment_method: str = ExpensePaymentMethod.CASH.value,
        paid_to: str | None = None,
        created_by: str | None = None,
        today: date | None = None,
    ) -> Expense:
        """Record an expense. The date defaults to today and may not be later."""
        today = today or utc_today()
        expense_date = expense_date or today
        check_not_future(expense_date, today)

        all_expenses = self._expense_repo.list_all()
        next_id = str(max((int(e.id) for e in all_expenses), default=0) + 1)

        expense = Expense(
            id=next_id,
            date=expense_date,
            description=description,
            amount=to_amount(amount),
            category=category,
            payment_method=ExpensePaymentMethod.parse(payment_method),
            paid_to=paid_to,
            created_by=created_by,
        )
        self._expense_repo.save(expense)
        return expense
