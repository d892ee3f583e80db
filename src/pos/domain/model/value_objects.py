"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values never reach the cart.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum

from pos.domain.exceptions import ValidationError

ZERO = Decimal("0")
CENT = Decimal("0.01")


def to_amount(value: str | float | int | Decimal) -> Decimal:
    """Coerce a caller-supplied amount to Decimal.

    Floats go through ``str()`` so 0.1 stays 0.1 instead of its binary
    expansion.
    """
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValidationError(f"Invalid amount: {value!r}")
    return amount


def round_cents(amount: Decimal) -> Decimal:
    """Round to two decimal places, halves going toward positive infinity.

    ``0.005`` becomes ``0.01`` and ``-0.005`` becomes ``0.00``, the way a
    till rounds with ``floor(x + 0.5)``.
    """
    if amount < ZERO:
        # Adding ZERO turns a -0.00 result into 0.00.
        return -(-amount).quantize(CENT, rounding=ROUND_HALF_DOWN) + ZERO
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


class OrderType(Enum):
    DINE_IN = "dine-in"
    TAKEAWAY = "takeaway"
    DELIVERY = "delivery"

    @staticmethod
    def parse(value: str | OrderType) -> OrderType:
        if isinstance(value, OrderType):
            return value
        try:
            return OrderType(value.strip().lower())
        except ValueError as exc:
            choices = ", ".join(t.value for t in OrderType)
            raise ValidationError(
                f"Unknown order type {value!r} (expected one of: {choices})"
            ) from exc


class PaymentMethod(Enum):
    CASH = "cash"
    CARD = "card"
    MOBILE = "mobile"

    @staticmethod
    def parse(value: str | PaymentMethod) -> PaymentMethod:
        if isinstance(value, PaymentMethod):
            return value
        try:
            return PaymentMethod(value.strip().lower())
        except ValueError as exc:
            choices = ", ".join(m.value for m in PaymentMethod)
            raise ValidationError(
                f"Unknown payment method {value!r} (expected one of: {choices})"
            ) from exc


@dataclass(frozen=True)
class CatalogRef:
    """What the menu browser hands to the cart: id, display name, price.

    Validated here, at the edge, so the cart itself never has to raise.
    """

    id: str
    name: str
    unit_price: Decimal

    def __post_init__(self) -> None:
        if not self.id or not str(self.id).strip():
            raise ValidationError("Catalog item id is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Catalog item name is required")
        if not isinstance(self.unit_price, Decimal):
            raise ValidationError(
                f"Unit price must be a Decimal, got {type(self.unit_price).__name__}"
            )
        if self.unit_price < ZERO:
            raise ValidationError(
                f"Unit price cannot be negative, got {self.unit_price}"
            )

    @staticmethod
    def of(id: str, name: str, unit_price: str | float | int | Decimal) -> CatalogRef:
        """Convenient factory that coerces the price to Decimal safely."""
        return CatalogRef(id=str(id), name=name, unit_price=to_amount(unit_price))
