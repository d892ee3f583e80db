"""Unit tests for the Expense aggregate."""

from datetime import date
from decimal import Decimal

import pytest

from pos.domain.exceptions import ValidationError
from pos.domain.model.expense import Expense, ExpensePaymentMethod


def _expense(**overrides) -> Expense:
    fields = dict(
        id="1",
        date=date(2024, 5, 1),
        description="Chicken 5kg",
        amount=Decimal("1500"),
    )
    fields.update(overrides)
    return Expense(**fields)


class TestCreate:

    def test_defaults(self):
        expense = _expense()
        assert expense.category == "General"
        assert expense.payment_method == ExpensePaymentMethod.CASH
        assert expense.paid_to is None
        assert expense.updated_at is None

    def test_text_is_trimmed_and_blank_payee_dropped(self):
        expense = _expense(description="  Gas  ", category="  ", paid_to="   ")
        assert expense.description == "Gas"
        assert expense.category == "General"
        assert expense.paid_to is None

    @pytest.mark.parametrize("amount", ["0", "-10"])
    def test_amount_must_be_positive(self, amount):
        with pytest.raises(ValidationError, match="greater than zero"):
            _expense(amount=Decimal(amount))

    def test_description_required(self):
        with pytest.raises(ValidationError, match="description is required"):
            _expense(description=" ")


class TestRevise:

    def test_replaces_fields_and_stamps_update(self):
        expense = _expense()
        expense.revise(
            expense_date=date(2024, 5, 2),
            description="Chicken 6kg",
            amount=Decimal("1800"),
            category="Meat",
            payment_method=ExpensePaymentMethod.BANK,
            paid_to="Butcher",
        )
        assert expense.amount == Decimal("1800")
        assert expense.category == "Meat"
        assert expense.paid_to == "Butcher"
        assert expense.updated_at is not None

    def test_invalid_revision_leaves_record_unchanged(self):
        expense = _expense()
        with pytest.raises(ValidationError):
            expense.revise(
                expense_date=date(2024, 5, 2),
                description="Chicken 6kg",
                amount=Decimal("0"),
                category="Meat",
                payment_method=ExpensePaymentMethod.CARD,
                paid_to=None,
            )
        assert expense.description == "Chicken 5kg"
        assert expense.amount == Decimal("1500")
        assert expense.updated_at is None


class TestPaymentMethod:

    def test_parse(self):
        assert ExpensePaymentMethod.parse(" Bank ") == ExpensePaymentMethod.BANK

    def test_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Unknown expense payment method"):
            ExpensePaymentMethod.parse("mobile")
