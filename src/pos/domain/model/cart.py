"""Cart aggregate: the order being rung up at one terminal.

The Cart owns its lines and the order-level fields (customer, order type,
payment, discount, tender, delivery) and derives subtotal, tax and total
on every read. It belongs to a single terminal session; nothing here is
shared or locked.

None of the operations raise for an unknown line id or a quantity below
one: those calls are no-ops. Input that is structurally invalid (an amount
that is not a number, an unknown order type) is rejected by the value
object coercion helpers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from pos.domain.model.value_objects import (
    ZERO,
    CatalogRef,
    OrderType,
    PaymentMethod,
    round_cents,
    to_amount,
)

DEFAULT_ORDER_TYPE = OrderType.TAKEAWAY
DEFAULT_PAYMENT_METHOD = PaymentMethod.CASH


@dataclass
class CartLine:
    """One ordered item, keyed by the menu item id.

    ``name`` and ``unit_price`` are captured when the item is first added
    and never re-synced with the catalog. ``total_price`` is stored, not
    computed on read: every mutator must call ``reprice()``.
    """

    id: str
    name: str
    unit_price: Decimal
    quantity: int = 1
    extra_charge: Decimal = ZERO
    note: str | None = None
    total_price: Decimal = field(init=False)

    def __post_init__(self) -> None:
        self.reprice()

    @property
    def rate(self) -> Decimal:
        """Per-unit price including the staff surcharge."""
        return self.unit_price + self.extra_charge

    def reprice(self) -> None:
        self.total_price = self.quantity * self.rate


@dataclass
class Cart:
    """Aggregate root for the in-progress order.

    Tax configuration is store-level: it survives ``clear()`` and is
    expected to be loaded from settings when the session starts.
    """

    items: list[CartLine] = field(default_factory=list)
    customer_name: str = ""
    customer_phone: str = ""
    order_type: OrderType = DEFAULT_ORDER_TYPE
    payment_method: PaymentMethod = DEFAULT_PAYMENT_METHOD
    discount: Decimal = ZERO
    amount_paid: Decimal = ZERO
    delivery_charge: Decimal = ZERO
    tax_enabled: bool = False
    tax_percentage: Decimal = ZERO

    # --- Line operations ------------------------------------------------------

    def add_item(self, ref: CatalogRef) -> CartLine:
        """Add one unit of a catalog item.

        A repeat add bumps the existing line and keeps its first-added
        name and price; the values on ``ref`` are ignored.
        """
        line = self.find_line(ref.id)
        if line is not None:
            line.quantity += 1
            line.reprice()
            return line

        line = CartLine(id=ref.id, name=ref.name, unit_price=ref.unit_price)
        self.items.append(line)
        return line

    def remove_item(self, item_id: str) -> None:
        self.items = [line for line in self.items if line.id != item_id]

    def update_quantity(self, item_id: str, quantity: int) -> None:
        """Set a line's quantity. Values below 1 are ignored, not clamped.

        Callers that decrement from 1 should use ``remove_item`` instead.
        """
        if quantity < 1:
            return
        line = self.find_line(item_id)
        if line is None:
            return
        line.quantity = quantity
        line.reprice()

    def update_item_note(self, item_id: str, note: str | None) -> None:
        line = self.find_line(item_id)
        if line is not None:
            line.note = note

    def update_item_extra_charge(
        self, item_id: str, amount: str | float | int | Decimal
    ) -> None:
        """Set the per-unit surcharge. Negative amounts are not rejected."""
        line = self.find_line(item_id)
        if line is None:
            return
        line.extra_charge = to_amount(amount)
        line.reprice()

    def find_line(self, item_id: str) -> CartLine | None:
        for line in self.items:
            if line.id == item_id:
                return line
        return None

    # --- Order-level setters --------------------------------------------------

    def set_customer_name(self, name: str) -> None:
        self.customer_name = name

    def set_customer_phone(self, phone: str) -> None:
        self.customer_phone = phone

    def set_order_type(self, order_type: str | OrderType) -> None:
        self.order_type = OrderType.parse(order_type)

    def set_payment_method(self, method: str | PaymentMethod) -> None:
        self.payment_method = PaymentMethod.parse(method)

    def set_discount(self, amount: str | float | int | Decimal) -> None:
        self.discount = to_amount(amount)

    def set_amount_paid(self, amount: str | float | int | Decimal) -> None:
        self.amount_paid = to_amount(amount)

    def set_delivery_charge(self, amount: str | float | int | Decimal) -> None:
        self.delivery_charge = to_amount(amount)

    def set_tax_config(
        self, enabled: bool, percentage: str | float | int | Decimal
    ) -> None:
        self.tax_enabled = enabled
        self.tax_percentage = to_amount(percentage)

    def clear(self) -> None:
        """Drop all lines and reset the order fields. Tax config is kept."""
        self.items = []
        self.customer_name = ""
        self.customer_phone = ""
        self.order_type = DEFAULT_ORDER_TYPE
        self.payment_method = DEFAULT_PAYMENT_METHOD
        self.discount = ZERO
        self.amount_paid = ZERO
        self.delivery_charge = ZERO

    # --- Computed properties --------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def subtotal(self) -> Decimal:
        return sum((line.total_price for line in self.items), ZERO)

    @property
    def tax(self) -> Decimal:
        """Tax on the discounted subtotal, rounded to cents.

        The taxable base is not clamped: a discount larger than the
        subtotal yields a negative tax. ``total`` is clamped instead.
        """
        if not self.tax_enabled:
            return ZERO
        base = self.subtotal - self.discount
        return round_cents(base * self.tax_percentage / 100)

    @property
    def total(self) -> Decimal:
        gross = self.subtotal + self.tax - self.discount + self.delivery_charge
        return max(ZERO, gross)
