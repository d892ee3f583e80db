"""JSON-file-backed implementation of BillRepository.

Bills, their line items and the bill-number sequence live in three
files so a failed item write leaves the bill row in place, the same
partial state a remote backend would leave.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

from pos.domain.model.bill import Bill, BillLine
from pos.domain.model.value_objects import OrderType, PaymentMethod
from pos.domain.repository.bill_repository import BillRepository
from pos.infrastructure.persistence.file_lock import DEFAULT_TIMEOUT, locked
from pos.infrastructure.persistence.json_file import ensure_file, load_json, persist_json

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "BILL"


class JsonBillRepository(BillRepository):

    def __init__(
        self,
        data_dir: Path,
        prefix: str = DEFAULT_PREFIX,
        lock_timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._bills_path = data_dir / "bills.json"
        self._items_path = data_dir / "bill_items.json"
        self._sequence_path = data_dir / "bill_sequence.json"
        self._prefix = prefix
        self._lock_timeout = lock_timeout
        ensure_file(self._bills_path)
        ensure_file(self._items_path)
        ensure_file(self._sequence_path, empty='{"last": 0}')

    # --- BillRepository interface ---------------------------------------------

    def allocate_bill_number(self) -> str:
        """Take the next running number.

        The read and the write happen under one file lock, so terminals
        sharing the data directory never receive the same number.
        """
        with locked(self._sequence_path, timeout=self._lock_timeout):
            sequence = load_json(self._sequence_path)
            running = int(sequence.get("last", 0)) + 1
            persist_json(self._sequence_path, {"last": running})

        today = datetime.now(timezone.utc).strftime("%Y%m%d")
        bill_number = f"{self._prefix}-{today}-{running:06d}"
        logger.debug("Allocated bill number %s", bill_number)
        return bill_number

    def create_bill(self, bill: Bill) -> Bill:
        with locked(self._bills_path, timeout=self._lock_timeout):
            bills = load_json(self._bills_path)
            next_id = max((raw["id"] for raw in bills), default=0) + 1
            stored = replace(bill, id=next_id)
            bills.append(self._to_raw(stored))
            persist_json(self._bills_path, bills)
        return stored

    def create_bill_lines(self, lines: list[BillLine]) -> None:
        with locked(self._items_path, timeout=self._lock_timeout):
            items = load_json(self._items_path)
            items.extend(self._line_to_raw(line) for line in lines)
            persist_json(self._items_path, items)

    def get_by_number(self, bill_number: str) -> Bill | None:
        for raw in load_json(self._bills_path):
            if raw["bill_number"] == bill_number:
                return self._to_domain(raw)
        return None

    def list_lines(self, bill_id: int) -> list[BillLine]:
        return [
            self._line_to_domain(raw)
            for raw in load_json(self._items_path)
            if raw["bill_id"] == bill_id
        ]

    def list_created_between(self, start: datetime, end: datetime) -> list[Bill]:
        bills = [self._to_domain(raw) for raw in load_json(self._bills_path)]
        return [b for b in bills if start <= b.created_at < end]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(bill: Bill) -> dict:
        return {
            "id": bill.id,
            "bill_number": bill.bill_number,
            "customer_name": bill.customer_name,
            "customer_phone": bill.customer_phone,
            "order_type": bill.order_type.value,
            "subtotal": str(bill.subtotal),
            "discount": str(bill.discount),
            "tax": str(bill.tax),
            "total": str(bill.total),
            "payment_method": bill.payment_method.value,
            "amount_paid": str(bill.amount_paid),
            "change_returned": str(bill.change_returned),
            "created_by": bill.created_by,
            "created_at": bill.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Bill:
        return Bill(
            id=raw["id"],
            bill_number=raw["bill_number"],
            customer_name=raw.get("customer_name"),
            customer_phone=raw.get("customer_phone"),
            order_type=OrderType(raw["order_type"]),
            subtotal=Decimal(raw["subtotal"]),
            discount=Decimal(raw["discount"]),
            tax=Decimal(raw["tax"]),
            total=Decimal(raw["total"]),
            payment_method=PaymentMethod(raw["payment_method"]),
            amount_paid=Decimal(raw["amount_paid"]),
            change_returned=Decimal(raw["change_returned"]),
            created_by=raw.get("created_by"),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    @staticmethod
    def _line_to_raw(line: BillLine) -> dict:
        return {
            "bill_id": line.bill_id,
            "item_name": line.item_name,
            "quantity": line.quantity,
            "unit_price": str(line.unit_price),
            "total_price": str(line.total_price),
        }

    @staticmethod
    def _line_to_domain(raw: dict) -> BillLine:
        return BillLine(
            bill_id=raw["bill_id"],
            item_name=raw["item_name"],
            quantity=raw["quantity"],
            unit_price=Decimal(raw["unit_price"]),
            total_price=Decimal(raw["total_price"]),
        )
