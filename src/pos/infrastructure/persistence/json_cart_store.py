"""JSON-file-backed implementation of CartStore.

Keeps the open order of one terminal between CLI invocations. Cached
line totals are not written; they are recomputed when lines are rebuilt.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Decimal, InvalidOperation
from pathlib import Path

from filelock import Timeout

from pos.domain.exceptions import CheckoutInProgressError, PersistenceError
from pos.domain.model.cart import Cart, CartLine
from pos.domain.model.value_objects import OrderType, PaymentMethod
from pos.domain.repository.cart_store import CartStore
from pos.infrastructure.persistence.file_lock import lock_for
from pos.infrastructure.persistence.json_file import ensure_file, load_json, persist_json


class JsonCartStore(CartStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_file(self._file_path, empty="{}")

    def load(self) -> Cart:
        raw = load_json(self._file_path)
        if not raw:
            return Cart()
        try:
            return self._to_domain(raw)
        except (KeyError, TypeError, ValueError, InvalidOperation) as exc:
            raise PersistenceError(
                f"Cannot read {self._file_path.name}: {exc!r}"
            ) from exc

    def save(self, cart: Cart) -> None:
        persist_json(
            self._file_path,
            {
                "items": [
                    {
                        "id": line.id,
                        "name": line.name,
                        "unit_price": str(line.unit_price),
                        "quantity": line.quantity,
                        "extra_charge": str(line.extra_charge),
                        "note": line.note,
                    }
                    for line in cart.items
                ],
                "customer_name": cart.customer_name,
                "customer_phone": cart.customer_phone,
                "order_type": cart.order_type.value,
                "payment_method": cart.payment_method.value,
                "discount": str(cart.discount),
                "amount_paid": str(cart.amount_paid),
                "delivery_charge": str(cart.delivery_charge),
            },
        )

    @contextmanager
    def checkout_guard(self) -> Iterator[None]:
        # Never waits: a second checkout of the same cart is refused.
        lock = lock_for(self._file_path, timeout=0)
        try:
            lock.acquire()
        except Timeout as exc:
            raise CheckoutInProgressError(
                "A checkout is already running on this terminal"
            ) from exc
        try:
            yield
        finally:
            lock.release()

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        return Cart(
            items=[
                CartLine(
                    id=line["id"],
                    name=line["name"],
                    unit_price=Decimal(line["unit_price"]),
                    quantity=line["quantity"],
                    extra_charge=Decimal(line.get("extra_charge", "0")),
                    note=line.get("note"),
                )
                for line in raw.get("items", [])
            ],
            customer_name=raw.get("customer_name", ""),
            customer_phone=raw.get("customer_phone", ""),
            order_type=OrderType(raw.get("order_type", OrderType.TAKEAWAY.value)),
            payment_method=PaymentMethod(
                raw.get("payment_method", PaymentMethod.CASH.value)
            ),
            discount=Decimal(raw.get("discount", "0")),
            amount_paid=Decimal(raw.get("amount_paid", "0")),
            delivery_charge=Decimal(raw.get("delivery_charge", "0")),
        )
