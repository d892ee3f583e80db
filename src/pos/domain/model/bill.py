"""Bill: the persisted record of a completed sale.

A Bill is written once at checkout and never modified afterwards, so it
is modelled as a frozen dataclass. The repository hands back a copy with
``id`` filled in.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from pos.domain.model.cart import Cart, CartLine
from pos.domain.model.value_objects import ZERO, OrderType, PaymentMethod


def short_bill_number(bill_number: str | None) -> str:
    """Return the running-number segment shown on receipts.

    ``BILL-20240501-000123`` becomes ``000123``.
    """
    if not bill_number:
        return "000"
    return bill_number.split("-")[-1] or "000"


@dataclass(frozen=True)
class BillLine:
    """A sold item as stored alongside its bill."""

    bill_id: int | None
    item_name: str
    quantity: int
    unit_price: Decimal
    total_price: Decimal

    @staticmethod
    def from_cart_line(bill_id: int | None, line: CartLine) -> BillLine:
        return BillLine(
            bill_id=bill_id,
            item_name=line.name,
            quantity=line.quantity,
            unit_price=line.unit_price,
            total_price=line.total_price,
        )


@dataclass(frozen=True)
class Bill:
    bill_number: str
    customer_name: str | None
    customer_phone: str | None
    order_type: OrderType
    subtotal: Decimal
    discount: Decimal
    tax: Decimal
    total: Decimal
    payment_method: PaymentMethod
    amount_paid: Decimal
    change_returned: Decimal
    created_by: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def from_cart(cart: Cart, bill_number: str, created_by: str | None = None) -> Bill:
        """Snapshot the cart's figures into a new, unsaved bill.

        An untendered cart (``amount_paid == 0``) is recorded as paid in
        full with no change.
        """
        total = cart.total
        change = cart.amount_paid - total if cart.amount_paid > ZERO else ZERO
        return Bill(
            bill_number=bill_number,
            customer_name=cart.customer_name.strip() or None,
            customer_phone=cart.customer_phone.strip() or None,
            order_type=cart.order_type,
            subtotal=cart.subtotal,
            discount=cart.discount,
            tax=cart.tax,
            total=total,
            payment_method=cart.payment_method,
            amount_paid=cart.amount_paid or total,
            change_returned=max(change, ZERO),
            created_by=created_by,
        )

    # --- Computed properties --------------------------------------------------

    @property
    def display_number(self) -> str:
        return short_bill_number(self.bill_number)

    @property
    def delivery_charge(self) -> Decimal:
        """Delivery is not stored as a column; it is whatever the total
        holds beyond subtotal, tax and discount.

        A total clamped at zero no longer carries that information, so
        such bills report no delivery charge.
        """
        if self.total <= ZERO:
            return ZERO
        return self.total - self.subtotal - self.tax + self.discount


@dataclass(frozen=True)
class BillSnapshot:
    """Read-only view of a finished sale handed to the printers.

    ``items`` are copies of the cart lines, so notes and extra charges
    survive even though the persisted line items do not carry them. The
    delivery charge is taken from the cart as entered.
    """

    bill: Bill
    items: tuple[CartLine, ...]
    delivery_charge: Decimal = ZERO

    @staticmethod
    def capture(bill: Bill, cart: Cart) -> BillSnapshot:
        return BillSnapshot(
            bill=bill,
            items=tuple(copy.copy(line) for line in cart.items),
            delivery_charge=cart.delivery_charge,
        )

    @property
    def total_quantity(self) -> int:
        return sum(line.quantity for line in self.items)
