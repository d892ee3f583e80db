"""Unit tests for the Cart aggregate and its pricing rules."""

from decimal import Decimal

import pytest

from pos.domain.exceptions import ValidationError
from pos.domain.model.cart import Cart, CartLine
from pos.domain.model.value_objects import CatalogRef, OrderType, PaymentMethod


def _ref(item_id: str = "a", name: str = "Zinger Burger", price: str = "500") -> CatalogRef:
    return CatalogRef.of(item_id, name, price)


def _cart_with_subtotal(amount: str, tax_pct: str = "10") -> Cart:
    cart = Cart()
    cart.add_item(_ref(price=amount))
    cart.set_tax_config(True, tax_pct)
    return cart


class TestAddItem:

    def test_new_item_appends_line_with_quantity_one(self):
        cart = Cart()
        line = cart.add_item(_ref(price="500"))
        assert len(cart.items) == 1
        assert line.quantity == 1
        assert line.total_price == Decimal("500")

    def test_repeat_add_increments_existing_line(self):
        cart = Cart()
        cart.add_item(_ref())
        cart.add_item(_ref())
        cart.add_item(_ref())
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 3
        assert cart.items[0].total_price == Decimal("1500")

    def test_repeat_add_keeps_first_price_and_name(self):
        cart = Cart()
        cart.add_item(_ref(name="Zinger", price="500"))
        cart.add_item(_ref(name="Zinger Deluxe", price="650"))
        line = cart.items[0]
        assert line.name == "Zinger"
        assert line.unit_price == Decimal("500")
        assert line.total_price == Decimal("1000")

    def test_repeat_add_keeps_extra_charge(self):
        cart = Cart()
        cart.add_item(_ref(price="500"))
        cart.update_item_extra_charge("a", 50)
        cart.add_item(_ref(price="500"))
        assert cart.items[0].total_price == Decimal("1100")

    def test_insertion_order_is_display_order(self):
        cart = Cart()
        cart.add_item(_ref("b", "Fries", "200"))
        cart.add_item(_ref("a", "Burger", "500"))
        cart.add_item(_ref("b", "Fries", "200"))
        assert [line.id for line in cart.items] == ["b", "a"]


class TestRemoveItem:

    def test_removes_line(self):
        cart = Cart()
        cart.add_item(_ref("a"))
        cart.add_item(_ref("b"))
        cart.remove_item("a")
        assert [line.id for line in cart.items] == ["b"]

    def test_remove_twice_is_a_no_op(self):
        cart = Cart()
        cart.add_item(_ref("a"))
        cart.add_item(_ref("b"))
        cart.remove_item("a")
        cart.remove_item("a")
        assert [line.id for line in cart.items] == ["b"]

    def test_remove_unknown_id_is_a_no_op(self):
        cart = Cart()
        cart.remove_item("missing")
        assert cart.items == []


class TestUpdateQuantity:

    def test_sets_quantity_and_reprices(self):
        cart = Cart()
        cart.add_item(_ref(price="500"))
        cart.update_quantity("a", 4)
        assert cart.items[0].quantity == 4
        assert cart.items[0].total_price == Decimal("2000")

    @pytest.mark.parametrize("quantity", [0, -1, -10])
    def test_below_one_is_a_no_op(self, quantity):
        cart = Cart()
        cart.add_item(_ref(price="500"))
        cart.add_item(_ref(price="500"))
        cart.update_quantity("a", quantity)
        assert cart.items[0].quantity == 2
        assert cart.items[0].total_price == Decimal("1000")

    def test_unknown_id_is_a_no_op(self):
        cart = Cart()
        cart.add_item(_ref())
        cart.update_quantity("missing", 5)
        assert cart.items[0].quantity == 1


class TestNotesAndExtras:

    def test_note_does_not_change_price(self):
        cart = Cart()
        cart.add_item(_ref(price="500"))
        cart.update_item_note("a", "no onions")
        assert cart.items[0].note == "no onions"
        assert cart.items[0].total_price == Decimal("500")

    def test_extra_charge_is_per_unit(self):
        cart = Cart()
        cart.add_item(_ref(price="500"))
        cart.update_quantity("a", 2)
        cart.update_item_extra_charge("a", "50")
        assert cart.items[0].extra_charge == Decimal("50")
        assert cart.items[0].total_price == Decimal("1100")

    def test_negative_extra_charge_is_accepted(self):
        cart = Cart()
        cart.add_item(_ref(price="500"))
        cart.update_item_extra_charge("a", -100)
        assert cart.items[0].total_price == Decimal("400")

    def test_extra_charge_on_unknown_id_is_a_no_op(self):
        cart = Cart()
        cart.update_item_extra_charge("missing", 50)
        assert cart.items == []


class TestTax:

    def test_disabled_tax_is_zero(self):
        cart = _cart_with_subtotal("1000")
        cart.set_tax_config(False, 10)
        assert cart.tax == Decimal("0")
        assert cart.total == Decimal("1000")

    def test_tax_on_full_subtotal(self):
        cart = _cart_with_subtotal("1000")
        assert cart.tax == Decimal("100.00")
        assert cart.total == Decimal("1100")

    def test_tax_is_on_discounted_subtotal(self):
        cart = _cart_with_subtotal("1000")
        cart.set_discount(200)
        assert cart.tax == Decimal("80.00")
        assert cart.total == Decimal("880")

    def test_tax_rounds_half_up_to_cents(self):
        # 0.25 * 5% = 0.0125 -> 0.01; 0.3 * 5% = 0.015 -> 0.02
        assert _cart_with_subtotal("0.25", "5").tax == Decimal("0.01")
        assert _cart_with_subtotal("0.3", "5").tax == Decimal("0.02")

    def test_config_change_applies_immediately(self):
        cart = _cart_with_subtotal("1000")
        assert cart.tax == Decimal("100.00")
        cart.set_tax_config(True, "16")
        assert cart.tax == Decimal("160.00")

    def test_over_discount_gives_negative_tax_but_zero_total(self):
        cart = _cart_with_subtotal("100")
        cart.set_discount(500)
        assert cart.tax == Decimal("-40.00")
        assert cart.total == Decimal("0")


class TestTotal:

    def test_delivery_charge_is_added(self):
        cart = Cart()
        cart.add_item(_ref(price="500"))
        cart.set_delivery_charge(150)
        assert cart.total == Decimal("650")

    def test_total_never_negative(self):
        cart = Cart()
        cart.add_item(_ref(price="100"))
        cart.set_discount(10_000)
        assert cart.total == Decimal("0")

    def test_empty_cart_totals_are_zero(self):
        cart = Cart()
        assert cart.subtotal == Decimal("0")
        assert cart.total == Decimal("0")
        assert cart.is_empty


class TestOrderFields:

    def test_defaults(self):
        cart = Cart()
        assert cart.order_type == OrderType.TAKEAWAY
        assert cart.payment_method == PaymentMethod.CASH
        assert cart.customer_name == ""

    def test_setters_parse_strings(self):
        cart = Cart()
        cart.set_order_type("dine-in")
        cart.set_payment_method("card")
        cart.set_amount_paid("2000")
        assert cart.order_type == OrderType.DINE_IN
        assert cart.payment_method == PaymentMethod.CARD
        assert cart.amount_paid == Decimal("2000")

    def test_unknown_order_type_rejected(self):
        with pytest.raises(ValidationError, match="Unknown order type"):
            Cart().set_order_type("drive-thru")

    def test_non_numeric_discount_rejected(self):
        with pytest.raises(ValidationError, match="Invalid amount"):
            Cart().set_discount("ten")


class TestClear:

    def test_resets_order_but_keeps_tax_config(self):
        cart = _cart_with_subtotal("1000", "16")
        cart.set_customer_name("Ayesha")
        cart.set_customer_phone("0300-1234567")
        cart.set_order_type("delivery")
        cart.set_payment_method("mobile")
        cart.set_discount(50)
        cart.set_amount_paid(2000)
        cart.set_delivery_charge(100)

        cart.clear()

        assert cart.items == []
        assert cart.customer_name == ""
        assert cart.customer_phone == ""
        assert cart.order_type == OrderType.TAKEAWAY
        assert cart.payment_method == PaymentMethod.CASH
        assert cart.discount == Decimal("0")
        assert cart.amount_paid == Decimal("0")
        assert cart.delivery_charge == Decimal("0")
        assert cart.tax_enabled is True
        assert cart.tax_percentage == Decimal("16")


class TestEndToEndScenario:

    def test_add_extra_quantity_remove(self):
        cart = Cart()

        cart.add_item(_ref(price="500"))
        assert (cart.items[0].quantity, cart.items[0].total_price) == (1, Decimal("500"))

        cart.add_item(_ref(price="500"))
        assert (cart.items[0].quantity, cart.items[0].total_price) == (2, Decimal("1000"))

        cart.update_item_extra_charge("a", 50)
        assert cart.items[0].total_price == Decimal("1100")

        cart.update_quantity("a", 3)
        assert cart.items[0].total_price == Decimal("1650")

        cart.remove_item("a")
        assert cart.items == []
        assert cart.subtotal == Decimal("0")


class TestCartLine:

    def test_total_is_computed_on_construction(self):
        line = CartLine(
            id="a",
            name="Fries",
            unit_price=Decimal("200"),
            quantity=3,
            extra_charge=Decimal("20"),
        )
        assert line.total_price == Decimal("660")
        assert line.rate == Decimal("220")
