"""Tests for the plain-text receipt and kitchen ticket."""

import io
from decimal import Decimal

import pytest

from pos.domain.exceptions import PrintError
from pos.domain.model.bill import Bill, BillSnapshot
from pos.domain.model.cart import Cart
from pos.domain.model.settings import StoreSettings
from pos.domain.model.value_objects import CatalogRef
from pos.infrastructure.printing.text_printer import (
    WIDTH,
    TextBillPrinter,
    format_number,
    render_kitchen_ticket,
    render_receipt,
    wrap_text,
)


def _snapshot() -> BillSnapshot:
    cart = Cart()
    cart.set_tax_config(True, 10)
    cart.add_item(CatalogRef.of("1", "Double Patty Cheese Burger With Jalapenos", "850"))
    cart.add_item(CatalogRef.of("2", "Fries", "200"))
    cart.add_item(CatalogRef.of("2", "Fries", "200"))
    cart.update_item_extra_charge("1", 50)
    cart.update_item_note("2", "extra salt")
    cart.set_discount(100)
    cart.set_delivery_charge(150)
    cart.set_order_type("delivery")
    cart.set_customer_name("Sana")
    cart.set_amount_paid(2000)
    bill = Bill.from_cart(cart, "BILL-20240501-000042")
    return BillSnapshot.capture(bill, cart)


SETTINGS = StoreSettings(
    restaurant_name="Khan Grill",
    address="Main Boulevard",
    phone1="042-111",
    tax_enabled=True,
    tax_percentage=Decimal("10"),
    footer="Come again!",
)


class TestWrapText:

    def test_wraps_at_word_boundaries(self):
        assert wrap_text("double patty cheese burger", 12) == ["DOUBLE PATTY", "CHEESE", "BURGER"]

    def test_long_word_kept_whole(self):
        assert wrap_text("supercalifragilistic", 5) == ["SUPERCALIFRAGILISTIC"]

    def test_empty(self):
        assert wrap_text("", 10) == [""]
        assert wrap_text(None, 10) == [""]


class TestFormatNumber:

    @pytest.mark.parametrize(
        "amount, expected",
        [("1234.5", "1,235"), ("999.49", "999"), ("0", "0"), ("1000000", "1,000,000")],
    )
    def test_whole_rupees(self, amount, expected):
        assert format_number(Decimal(amount)) == expected


class TestReceipt:

    def test_lines_fit_the_paper(self):
        assert all(len(line) <= WIDTH for line in render_receipt(_snapshot(), SETTINGS))

    def test_contents(self):
        text = "\n".join(render_receipt(_snapshot(), SETTINGS))

        assert "KHAN GRILL" in text
        assert "Ph: 042-111" in text
        assert "Bill No: 000042" in text
        assert "DELIVERY" in text
        assert "Customer: Sana" in text
        # wrapped name; rate includes the extra charge
        assert "DOUBLE PATTY CHEESE" in text
        assert "BURGER WITH JALAPENOS    1     900     900" in text
        assert "Items: 2" in text and "Qty: 3" in text
        assert "Discount:" in text and "-Rs. 100" in text
        assert "Tax (10%):" in text and "Rs. 120" in text
        assert "Delivery:" in text and "Rs. 150" in text
        assert "NET TOTAL:" in text and "Rs. 1,470" in text
        assert "Change:" in text and "Rs. 530" in text
        assert text.rstrip().endswith("Come again!")

    def test_optional_rows_omitted(self):
        cart = Cart()
        cart.add_item(CatalogRef.of("1", "Tea", "80"))
        snapshot = BillSnapshot.capture(Bill.from_cart(cart, "B-000001"), cart)

        text = "\n".join(render_receipt(snapshot, StoreSettings()))

        for label in ("Discount:", "Tax (", "Delivery:", "Change:", "Customer:"):
            assert label not in text

    def test_over_discount_prints_no_delivery(self):
        cart = Cart()
        cart.set_tax_config(True, 10)
        cart.add_item(CatalogRef.of("1", "Tea", "100"))
        cart.set_discount(500)
        snapshot = BillSnapshot.capture(Bill.from_cart(cart, "B-000001"), cart)

        text = "\n".join(render_receipt(snapshot, SETTINGS))

        assert "Delivery:" not in text
        assert "NET TOTAL:" in text


class TestKitchenTicket:

    def test_contents(self):
        lines = render_kitchen_ticket(_snapshot())
        text = "\n".join(lines)

        assert "KITCHEN ORDER" in text
        assert "Bill No: 000042" in text
        assert "2   FRIES" in text
        assert "MOD: EXTRA SALT" in text
        assert "TOTAL ITEMS: 2" in text and "QTY: 3" in text
        assert "Rs." not in text
        assert all(len(line) <= WIDTH for line in lines)


class TestTextBillPrinter:

    def test_writes_both_tickets(self):
        stream = io.StringIO()
        printer = TextBillPrinter(stream)

        printer.print_receipt(_snapshot(), SETTINGS)
        printer.print_kitchen_ticket(_snapshot())

        out = stream.getvalue()
        assert out.index("NET TOTAL") < out.index("KITCHEN ORDER")

    def test_output_error_becomes_print_error(self):
        class BrokenStream(io.StringIO):
            def write(self, s):
                raise OSError("printer offline")

        with pytest.raises(PrintError, match="printer offline"):
            TextBillPrinter(BrokenStream()).print_kitchen_ticket(_snapshot())
