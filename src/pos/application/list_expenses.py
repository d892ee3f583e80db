"""Application service: List Expenses use case (query).

Periods follow the expense screen: today, this week (Monday to Sunday),
this month, or an explicit range.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta

from pos.application.add_expense import utc_today
from pos.application.dto import ExpenseListDTO, expense_to_dto, format_amount
from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import ZERO
from pos.domain.repository.expense_repository import ExpenseRepository

PERIODS = ("today", "week", "month")


def period_range(period: str, today: date) -> tuple[date, date]:
    if period == "today":
        return today, today
    if period == "week":
        start = today - timedelta(days=today.weekday())
        return start, start + timedelta(days=6)
    if period == "month":
        last = calendar.monthrange(today.year, today.month)[1]
        return today.replace(day=1), today.replace(day=last)
    raise ValidationError(f"Unknown period {period!r} (expected one of: {', '.join(PERIODS)})")


class ListExpensesHandler:

    def __init__(self, expense_repo: ExpenseRepository) -> None:
        self._expense_repo = expense_repo

    def handle(
        self,
        start: date,
        end: date,
        search: str | None = None,
    ) -> ExpenseListDTO:
        """Expenses dated ``start``..``end`` inclusive, newest first.

        ``search`` matches description or payee, case-insensitively, and
        the total covers only the matching rows.
        """
        if start > end:
            raise ValidationError("Start date must not be after end date")

        expenses = self._expense_repo.list_between(start, end)
        if search:
            needle = search.lower()
            expenses = [
                e for e in expenses
                if needle in e.description.lower()
                or (e.paid_to and needle in e.paid_to.lower())
            ]

        return ExpenseListDTO(
            start=start.isoformat(),
            end=end.isoformat(),
            expenses=[expense_to_dto(e) for e in expenses],
            total=format_amount(sum((e.amount for e in expenses), ZERO)),
        )

    def handle_period(self, period: str, today: date | None = None, search: str | None = None) -> ExpenseListDTO:
        start, end = period_range(period, today or utc_today())
        return self.handle(start, end, search=search)
