"""Application service: Edit and Delete Expense use cases."""

from __future__ import annotations

from datetime import date

from pos.application.add_expense import check_not_future, utc_today
from pos.domain.exceptions import EntityNotFoundError
from pos.domain.model.expense import Expense, ExpensePaymentMethod
from pos.domain.model.value_objects import to_amount
from pos.domain.repository.expense_repository import ExpenseRepository


def _require_expense(repo: ExpenseRepository, expense_id: str) -> Expense:
    expense = repo.get_by_id(expense_id)
    if expense is None:
        raise EntityNotFoundError(f"Expense with ID '{expense_id}' not found")
    return expense


class EditExpenseHandler:

    def __init__(self, expense_repo: ExpenseRepository) -> None:
        self._expense_repo = expense_repo

    def handle(
        self,
        expense_id: str,
        description: str | None = None,
        amount: str | None = None,
        expense_date: date | None = None,
        category: str | None = None,
        payment_method: str | None = None,
        paid_to: str | None = None,
        today: date | None = None,
    ) -> Expense:
        """Change any of an expense's fields; ``None`` keeps the current value.

        Pass ``paid_to=""`` to clear the payee.
        """
        expense = _require_expense(self._expense_repo, expense_id)

        new_date = expense_date or expense.date
        if expense_date is not None:
            check_not_future(new_date, today or utc_today())

        expense.revise(
            expense_date=new_date,
            description=expense.description if description is None else description,
            amount=expense.amount if amount is None else to_amount(amount),
            category=expense.category if category is None else category,
            payment_method=(
                expense.payment_method
                if payment_method is None
                else ExpensePaymentMethod.parse(payment_method)
            ),
            paid_to=expense.paid_to if paid_to is None else paid_to,
        )
        self._expense_repo.save(expense)
        return expense


class DeleteExpenseHandler:

    def __init__(self, expense_repo: ExpenseRepository) -> None:
        self._expense_repo = expense_repo

    def handle(self, expense_id: str) -> None:
        _require_expense(self._expense_repo, expense_id)
        self._expense_repo.delete(expense_id)
