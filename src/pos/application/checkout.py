"""Application service: Checkout use case.

Turns the open cart into a persisted bill. The steps run strictly in
order and each must succeed before the next starts:

1. allocate a bill number
2. insert the bill row
3. insert the bill's line items
4. clear the cart, then print the receipt and the kitchen ticket

If any of steps 1-3 fails the cart is left exactly as it was so the
operator can retry. A failure in step 3 leaves a bill row without items;
its number is reported so the record can be reconciled by hand.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pos.application.printing import BillPrinter
from pos.domain.exceptions import (
    BillItemsPersistenceError,
    BillNumberAllocationError,
    BillPersistenceError,
    CheckoutInProgressError,
    EmptyCartError,
    PersistenceError,
    PrintError,
)
from pos.domain.model.bill import Bill, BillLine, BillSnapshot
from pos.domain.model.cart import Cart
from pos.domain.model.settings import StoreSettings
from pos.domain.repository.bill_repository import BillRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutResult:
    snapshot: BillSnapshot
    printed: bool

    @property
    def bill(self) -> Bill:
        return self.snapshot.bill


class CheckoutHandler:
    """One instance per terminal.

    The instance refuses a second checkout while one is running, so a
    repeated "print bill" action cannot submit the same order twice.
    """

    def __init__(
        self,
        bill_repo: BillRepository,
        printer: BillPrinter | None = None,
    ) -> None:
        self._bill_repo = bill_repo
        self._printer = printer
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def handle(
        self,
        cart: Cart,
        created_by: str | None = None,
        settings: StoreSettings | None = None,
    ) -> CheckoutResult:
        if cart.is_empty:
            raise EmptyCartError("Cart is empty")
        if self._in_flight:
            raise CheckoutInProgressError("A checkout is already in progress")

        self._in_flight = True
        try:
            return self._checkout(cart, created_by, settings or StoreSettings())
        finally:
            self._in_flight = False

    # --- Pipeline -------------------------------------------------------------

    def _checkout(
        self,
        cart: Cart,
        created_by: str | None,
        settings: StoreSettings,
    ) -> CheckoutResult:
        try:
            bill_number = self._bill_repo.allocate_bill_number()
        except PersistenceError as exc:
            logger.error("Bill number allocation failed: %s", exc)
            raise BillNumberAllocationError(
                "Failed to generate bill number. Please retry."
            ) from exc

        try:
            bill = self._bill_repo.create_bill(
                Bill.from_cart(cart, bill_number, created_by)
            )
        except PersistenceError as exc:
            logger.error("Saving bill %s failed: %s", bill_number, exc)
            raise BillPersistenceError("Failed to save bill. Please retry.") from exc

        lines = [BillLine.from_cart_line(bill.id, line) for line in cart.items]
        try:
            self._bill_repo.create_bill_lines(lines)
        except PersistenceError as exc:
            logger.error("Saving items of bill %s failed: %s", bill_number, exc)
            raise BillItemsPersistenceError(
                f"Items failed to record. Note bill number: {bill_number}",
                bill_number=bill_number,
            ) from exc

        snapshot = BillSnapshot.capture(bill, cart)
        cart.clear()
        logger.info(
            "Bill %s saved: %d line(s), total %s",
            bill_number,
            len(snapshot.items),
            bill.total,
        )

        return CheckoutResult(snapshot=snapshot, printed=self._print(snapshot, settings))

    def _print(self, snapshot: BillSnapshot, settings: StoreSettings) -> bool:
        """Receipt first, then the kitchen ticket.

        The sale is already recorded, so a printer fault is reported
        rather than raised.
        """
        if self._printer is None:
            return False
        try:
            self._printer.print_receipt(snapshot, settings)
            self._printer.print_kitchen_ticket(snapshot)
        except PrintError as exc:
            logger.warning(
                "Printing bill %s failed: %s", snapshot.bill.bill_number, exc
            )
            return False
        return True
