"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Amounts are
preformatted for display.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pos.domain.model.bill import Bill, BillLine
from pos.domain.model.cart import Cart, CartLine
from pos.domain.model.expense import Expense

CURRENCY_SYMBOL = "Rs."


def format_amount(amount: Decimal) -> str:
    """``Decimal("1234.5")`` -> ``"Rs. 1,234.50"``; negatives keep their sign."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL} {abs(amount):,.2f}"


@dataclass(frozen=True)
class CartLineDTO:
    item_id: str
    name: str
    quantity: int
    unit_price: str
    extra_charge: str | None
    note: str | None
    total_price: str


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineDTO]
    customer_name: str
    customer_phone: str
    order_type: str
    payment_method: str
    subtotal: str
    discount: str
    tax: str
    delivery_charge: str
    total: str
    amount_paid: str
    tax_label: str | None


@dataclass(frozen=True)
class BillLineDTO:
    item_name: str
    quantity: int
    unit_price: str
    total_price: str


@dataclass(frozen=True)
class BillDTO:
    bill_number: str
    display_number: str
    customer_name: str | None
    customer_phone: str | None
    order_type: str
    payment_method: str
    items: list[BillLineDTO]
    subtotal: str
    discount: str
    tax: str
    total: str
    amount_paid: str
    change_returned: str
    created_by: str | None
    created_at: str


@dataclass(frozen=True)
class DailySalesDTO:
    day: str
    bill_count: int
    revenue: str
    expense_total: str | None = None
    net_profit: str | None = None


@dataclass(frozen=True)
class ExpenseDTO:
    expense_id: str
    date: str
    category: str
    description: str
    amount: str
    payment_method: str
    paid_to: str | None


@dataclass(frozen=True)
class ExpenseListDTO:
    start: str
    end: str
    expenses: list[ExpenseDTO]
    total: str


# --- Mapping ------------------------------------------------------------------


def cart_line_to_dto(line: CartLine) -> CartLineDTO:
    return CartLineDTO(
        item_id=line.id,
        name=line.name,
        quantity=line.quantity,
        unit_price=format_amount(line.unit_price),
        extra_charge=format_amount(line.extra_charge) if line.extra_charge else None,
        note=line.note or None,
        total_price=format_amount(line.total_price),
    )


def cart_to_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        items=[cart_line_to_dto(line) for line in cart.items],
        customer_name=cart.customer_name,
        customer_phone=cart.customer_phone,
        order_type=cart.order_type.value,
        payment_method=cart.payment_method.value,
        subtotal=format_amount(cart.subtotal),
        discount=format_amount(cart.discount),
        tax=format_amount(cart.tax),
        delivery_charge=format_amount(cart.delivery_charge),
        total=format_amount(cart.total),
        amount_paid=format_amount(cart.amount_paid),
        tax_label=f"{cart.tax_percentage.normalize():f}%" if cart.tax_enabled else None,
    )


def bill_to_dto(bill: Bill, lines: list[BillLine]) -> BillDTO:
    return BillDTO(
        bill_number=bill.bill_number,
        display_number=bill.display_number,
        customer_name=bill.customer_name,
        customer_phone=bill.customer_phone,
        order_type=bill.order_type.value,
        payment_method=bill.payment_method.value,
        items=[
            BillLineDTO(
                item_name=line.item_name,
                quantity=line.quantity,
                unit_price=format_amount(line.unit_price),
                total_price=format_amount(line.total_price),
            )
            for line in lines
        ],
        subtotal=format_amount(bill.subtotal),
        discount=format_amount(bill.discount),
        tax=format_amount(bill.tax),
        total=format_amount(bill.total),
        amount_paid=format_amount(bill.amount_paid),
        change_returned=format_amount(bill.change_returned),
        created_by=bill.created_by,
        created_at=bill.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def expense_to_dto(expense: Expense) -> ExpenseDTO:
    return ExpenseDTO(
        expense_id=expense.id,
        date=expense.date.isoformat(),
        category=expense.category,
        description=expense.description,
        amount=format_amount(expense.amount),
        payment_method=expense.payment_method.value,
        paid_to=expense.paid_to,
    )
