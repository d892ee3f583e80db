"""Application service: Daily Sales use case (query).

The running revenue figure shown beside the billing screen. Given an
expense repository it also reports the day's expenses and what is left
of the revenue after them.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone

from pos.application.dto import DailySalesDTO, format_amount
from pos.domain.model.value_objects import ZERO
from pos.domain.repository.bill_repository import BillRepository
from pos.domain.repository.expense_repository import ExpenseRepository


class DailySalesHandler:

    def __init__(
        self,
        bill_repo: BillRepository,
        expense_repo: ExpenseRepository | None = None,
    ) -> None:
        self._bill_repo = bill_repo
        self._expense_repo = expense_repo

    def handle(self, day: date) -> DailySalesDTO:
        """Sum bill totals for one UTC calendar day."""
        start = datetime.combine(day, time.min, tzinfo=timezone.utc)
        end = start + timedelta(days=1)
        bills = self._bill_repo.list_created_between(start, end)
        revenue = sum((b.total for b in bills), ZERO)

        if self._expense_repo is None:
            return DailySalesDTO(
                day=day.isoformat(),
                bill_count=len(bills),
                revenue=format_amount(revenue),
            )

        expenses = sum(
            (e.amount for e in self._expense_repo.list_between(day, day)), ZERO
        )
        return DailySalesDTO(
            day=day.isoformat(),
            bill_count=len(bills),
            revenue=format_amount(revenue),
            expense_total=format_amount(expenses),
            net_profit=format_amount(revenue - expenses),
        )
