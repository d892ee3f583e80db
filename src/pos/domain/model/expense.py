"""Expense aggregate.

Money paid out of the till or the bank: ingredients, gas, wages. Expenses
are recorded against a calendar date, independent of bills, and are the
cost side of the daily profit figure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import ZERO

DEFAULT_CATEGORY = "General"


class ExpensePaymentMethod(Enum):
    CASH = "cash"
    BANK = "bank"
    CARD = "card"

    @staticmethod
    def parse(value: str | ExpensePaymentMethod) -> ExpensePaymentMethod:
        if isinstance(value, ExpensePaymentMethod):
            return value
        try:
            return ExpensePaymentMethod(value.strip().lower())
        except ValueError as exc:
            choices = ", ".join(m.value for m in ExpensePaymentMethod)
            raise ValidationError(
                f"Unknown expense payment method {value!r} (expected one of: {choices})"
            ) from exc


@dataclass
class Expense:
    id: str
    date: date
    description: str
    amount: Decimal
    category: str = DEFAULT_CATEGORY
    payment_method: ExpensePaymentMethod = ExpensePaymentMethod.CASH
    paid_to: str | None = None
    created_by: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        self._validate()

    def revise(
        self,
        expense_date: date,
        description: str,
        amount: Decimal,
        category: str,
        payment_method: ExpensePaymentMethod,
        paid_to: str | None,
    ) -> None:
        """Replace the editable fields in one go, then re-validate.

        The record is only changed if every new value is acceptable.
        """
        revised = Expense(
            id=self.id,
            date=expense_date,
            description=description,
            amount=amount,
            category=category,
            payment_method=payment_method,
            paid_to=paid_to,
            created_by=self.created_by,
            created_at=self.created_at,
        )
        self.date = revised.date
        self.description = revised.description
        self.amount = revised.amount
        self.category = revised.category
        self.payment_method = revised.payment_method
        self.paid_to = revised.paid_to
        self.updated_at = datetime.now(timezone.utc)

    def _validate(self) -> None:
        self.description = (self.description or "").strip()
        if not self.description:
            raise ValidationError("Expense description is required")
        if self.amount <= ZERO:
            raise ValidationError("Expense amount must be greater than zero")
        self.category = (self.category or "").strip() or DEFAULT_CATEGORY
        self.paid_to = (self.paid_to or "").strip() or None
