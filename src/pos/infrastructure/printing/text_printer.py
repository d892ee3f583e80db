"""Plain-text receipt and kitchen ticket for 80mm thermal printers.

Both tickets are 42 monospace columns wide. Lines are built by the
``render_*`` functions and written by ``TextBillPrinter`` to any text
stream (stdout by default, or a printer device opened as a file).
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TextIO

import click

from pos.application.printing import BillPrinter
from pos.domain.exceptions import PrintError
from pos.domain.model.bill import BillSnapshot
from pos.domain.model.settings import StoreSettings

WIDTH = 42
NAME_COLS = 22
QTY_COLS = 4
RATE_COLS = 8
TOTAL_COLS = 8


def wrap_text(text: str | None, width: int) -> list[str]:
    """Upper-case and wrap at word boundaries.

    A single word longer than ``width`` gets a line to itself rather than
    being split.
    """
    if not text:
        return [""]
    lines: list[str] = []
    current = ""
    for word in str(text).upper().split():
        candidate = f"{current} {word}" if current else word
        if len(candidate) <= width:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines or [""]


def format_number(amount: Decimal) -> str:
    """Whole rupees with thousands separators: ``1234.5`` -> ``1,235``."""
    return f"{amount.quantize(Decimal('1'), rounding=ROUND_HALF_UP):,}"


def _pair(left: str, right: str) -> str:
    return f"{left}{right:>{WIDTH - len(left)}}"


def _rupees(amount: Decimal) -> str:
    return f"Rs. {format_number(amount)}"


def render_receipt(snapshot: BillSnapshot, settings: StoreSettings) -> list[str]:
    bill = snapshot.bill
    created = bill.created_at.astimezone()
    out: list[str] = []

    # Header
    out.append(settings.restaurant_name.upper().center(WIDTH).rstrip())
    for line in settings.address.splitlines():
        out.append(line.strip().center(WIDTH).rstrip())
    phones = " | ".join(p for p in (settings.phone1, settings.phone2) if p)
    if phones:
        out.append(f"Ph: {phones}".center(WIDTH).rstrip())
    out.append("")

    # Bill info
    out.append(_pair(f"Bill No: {bill.display_number}", bill.order_type.value.upper()))
    out.append(
        _pair(f"Date: {created.strftime('%d %b %Y')}", created.strftime("%I:%M %p"))
    )
    if bill.customer_name:
        out.append(f"Customer: {bill.customer_name}")
    if bill.customer_phone:
        out.append(f"Phone: {bill.customer_phone}")

    # Items
    out.append("-" * WIDTH)
    out.append(
        f"{'ITEM':<{NAME_COLS}}{'QTY':>{QTY_COLS}}"
        f"{'RATE':>{RATE_COLS}}{'TOTAL':>{TOTAL_COLS}}"
    )
    out.append("-" * WIDTH)
    for item in snapshot.items:
        name_lines = wrap_text(item.name, NAME_COLS)
        for name_line in name_lines[:-1]:
            out.append(name_line)
        out.append(
            f"{name_lines[-1]:<{NAME_COLS}}{item.quantity:>{QTY_COLS}}"
            f"{format_number(item.rate):>{RATE_COLS}}"
            f"{format_number(item.total_price):>{TOTAL_COLS}}"
        )
    out.append(_pair(f"Items: {len(snapshot.items)}", f"Qty: {snapshot.total_quantity}"))

    # Totals
    out.append(_pair("Subtotal:", _rupees(bill.subtotal)))
    if bill.discount > 0:
        out.append(_pair("Discount:", f"-{_rupees(bill.discount)}"))
    if bill.tax > 0:
        pct = f"{settings.tax_percentage.normalize():f}"
        out.append(_pair(f"Tax ({pct}%):", _rupees(bill.tax)))
    if snapshot.delivery_charge > 0:
        out.append(_pair("Delivery:", _rupees(snapshot.delivery_charge)))
    out.append("-" * WIDTH)
    out.append(_pair("NET TOTAL:", _rupees(bill.total)))

    # Payment
    out.append("")
    out.append(_pair("Payment:", bill.payment_method.value.upper()))
    out.append(_pair("Amount Paid:", _rupees(bill.amount_paid)))
    if bill.change_returned > 0:
        out.append(_pair("Change:", _rupees(bill.change_returned)))

    out.append("=" * WIDTH)
    out.append(settings.footer.center(WIDTH).rstrip())
    return out


def render_kitchen_ticket(snapshot: BillSnapshot) -> list[str]:
    bill = snapshot.bill
    created = bill.created_at.astimezone()
    out = [
        "KITCHEN ORDER".center(WIDTH).rstrip(),
        f"Bill No: {bill.display_number}".center(WIDTH).rstrip(),
        "=" * WIDTH,
        _pair(bill.order_type.value.upper(), created.strftime("%I:%M %p")),
        "-" * WIDTH,
    ]
    for item in snapshot.items:
        name_lines = wrap_text(item.name, WIDTH - 4)
        out.append(f"{item.quantity:<3} {name_lines[0]}")
        out.extend(f"    {line}" for line in name_lines[1:])
        if item.note:
            out.append(f"    MOD: {item.note.upper()}")
    out.append("=" * WIDTH)
    out.append(_pair(f"TOTAL ITEMS: {len(snapshot.items)}", f"QTY: {snapshot.total_quantity}"))
    out.append("End of Kitchen Ticket".upper().center(WIDTH).rstrip())
    return out


class TextBillPrinter(BillPrinter):

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def print_receipt(self, snapshot: BillSnapshot, settings: StoreSettings) -> None:
        self._write(render_receipt(snapshot, settings))

    def print_kitchen_ticket(self, snapshot: BillSnapshot) -> None:
        self._write(render_kitchen_ticket(snapshot))

    def _write(self, lines: list[str]) -> None:
        try:
            for line in lines:
                click.echo(line, file=self._stream)
            click.echo(file=self._stream)
        except OSError as exc:
            raise PrintError(f"Printer output failed: {exc}") from exc
