"""End-to-end tests of the ``pos`` CLI against a temporary data directory."""

import re

import pytest
from click.testing import CliRunner

from pos.infrastructure.cli.main import cli
from pos.infrastructure.persistence.file_lock import lock_for


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setenv("POS_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("POS_CASHIER", raising=False)
    runner = CliRunner()

    def _run(*args: str):
        return runner.invoke(cli, list(args))

    return _run


@pytest.fixture
def stocked(run):
    assert run("settings", "set", "--key", "tax_enabled", "--value", "true").exit_code == 0
    assert run("settings", "set", "--key", "tax_percentage", "--value", "10").exit_code == 0
    assert run("menu", "add", "--name", "Zinger Burger", "--price", "500", "--category", "Burgers").exit_code == 0
    assert run("menu", "add", "--name", "Fries", "--price", "200", "--category", "Sides").exit_code == 0
    return run


class TestCartCommands:

    def test_add_twice_increments(self, stocked):
        assert "added to cart" in stocked("cart", "add", "--id", "1").output
        result = stocked("cart", "add", "--id", "1")
        assert "quantity increased to 2" in result.output

    def test_show_applies_tax_from_settings(self, stocked):
        stocked("cart", "add", "--id", "1")
        stocked("cart", "add", "--id", "1")
        stocked("cart", "edit", "--id", "1", "--extra", "50", "--note", "no mayo")

        out = stocked("cart", "show").output

        assert "Rs. 1,100.00" in out
        assert "Tax (10%)" in out
        assert "Rs. 110.00" in out
        assert "Rs. 1,210.00" in out
        assert "no mayo" in out

    def test_quantity_zero_removes(self, stocked):
        stocked("cart", "add", "--id", "2")
        assert "removed" in stocked("cart", "qty", "--id", "2", "--quantity", "0").output
        assert "Cart is empty." in stocked("cart", "show").output

    def test_unknown_menu_item(self, stocked):
        result = stocked("cart", "add", "--id", "42")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_bad_discount_leaves_cart_unchanged(self, stocked):
        stocked("cart", "add", "--id", "2")
        result = stocked("cart", "set", "--discount", "lots")
        assert result.exit_code == 1
        assert "Invalid amount" in result.output
        assert "Rs. 200.00" in stocked("cart", "show").output

    def test_clear(self, stocked):
        stocked("cart", "add", "--id", "1")
        stocked("cart", "clear")
        assert "Cart is empty." in stocked("cart", "show").output


class TestCheckoutCommand:

    def test_empty_cart_rejected(self, stocked):
        result = stocked("checkout")
        assert result.exit_code == 1
        assert "Cart is empty" in result.output

    def test_checkout_prints_and_clears(self, stocked):
        stocked("cart", "add", "--id", "1")
        stocked("cart", "add", "--id", "2")
        stocked("cart", "set", "--customer", "Hina", "--paid", "1000", "--order-type", "dine-in")

        result = stocked("checkout", "--cashier", "ali")

        assert result.exit_code == 0, result.output
        assert "NET TOTAL:" in result.output
        assert "KITCHEN ORDER" in result.output
        assert "Change: Rs. 230.00" in result.output
        number = re.search(r"Bill (BILL-\d{8}-\d{6}) saved", result.output).group(1)
        assert "Cart is empty." in stocked("cart", "show").output

        shown = stocked("bill", "show", "--number", number).output
        assert "Hina" in shown
        assert "Zinger Burger" in shown
        assert "Rs. 770.00" in shown

    def test_cashier_from_environment(self, stocked, monkeypatch, tmp_path):
        monkeypatch.setenv("POS_CASHIER", "night-shift")
        stocked("cart", "add", "--id", "2")
        assert stocked("checkout", "--no-print").exit_code == 0
        assert '"created_by": "night-shift"' in (tmp_path / "bills.json").read_text()

    def test_sales_today(self, stocked):
        stocked("cart", "add", "--id", "2")
        stocked("checkout", "--no-print")
        out = stocked("sales", "today").output
        assert "1 bill(s), revenue Rs. 220.00" in out

    def test_second_checkout_refused_while_one_is_running(self, stocked, tmp_path):
        stocked("cart", "add", "--id", "2")

        with lock_for(tmp_path / "cart.json"):
            result = stocked("checkout", "--no-print")

        assert result.exit_code == 1
        assert "already running" in result.output
        assert "Rs. 200.00" in stocked("cart", "show").output
        assert not (tmp_path / "bills.json").read_text().strip("[]\n ")
        assert stocked("checkout", "--no-print").exit_code == 0


class TestMenuAndSettingsCommands:

    def test_menu_list_hides_unavailable(self, stocked):
        stocked("menu", "update", "--id", "2", "--unavailable")
        out = stocked("menu", "list").output
        assert "Zinger Burger" in out
        assert "Fries" not in out
        assert "Fries (off)" in stocked("menu", "list", "--all").output

    def test_bad_tax_percentage_rejected(self, run):
        result = run("settings", "set", "--key", "tax_percentage", "--value", "150")
        assert result.exit_code == 1
        assert "between 0 and 100" in result.output

    def test_settings_show(self, stocked):
        out = stocked("settings", "show").output
        assert "tax_percentage" in out and "10" in out


class TestExpenseCommands:

    def test_add_list_edit_delete(self, run):
        result = run("expense", "add", "--description", "Chicken 5kg", "--amount", "1500",
                     "--paid-to", "Butcher")
        assert result.exit_code == 0, result.output
        assert "Expense #1 recorded: Rs. 1,500.00" in result.output

        run("expense", "add", "--description", "Gas", "--amount", "900", "--method", "bank")
        listed = run("expense", "list").output
        assert "Chicken 5kg" in listed and "bank" in listed
        assert "2 record(s), total Rs. 2,400.00" in listed

        assert run("expense", "edit", "--id", "2", "--amount", "950").exit_code == 0
        assert run("expense", "delete", "--id", "1", "--yes").exit_code == 0
        assert "1 record(s), total Rs. 950.00" in run("expense", "list").output

    def test_search(self, run):
        run("expense", "add", "--description", "Chicken", "--amount", "1500", "--paid-to", "Butcher")
        run("expense", "add", "--description", "Gas", "--amount", "900")
        out = run("expense", "list", "--period", "month", "--search", "butcher").output
        assert "Chicken" in out and "Gas" not in out

    def test_zero_amount_rejected(self, run):
        result = run("expense", "add", "--description", "Gas", "--amount", "0")
        assert result.exit_code == 1
        assert "greater than zero" in result.output

    def test_unknown_expense(self, run):
        result = run("expense", "edit", "--id", "7", "--amount", "10")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_empty_range(self, run):
        out = run("expense", "list", "--from", "2001-01-01", "--to", "2001-01-31").output
        assert "No expenses from 2001-01-01 to 2001-01-31." in out

    def test_sales_today_reports_net(self, stocked):
        stocked("cart", "add", "--id", "2")
        stocked("checkout", "--no-print")
        stocked("expense", "add", "--description", "Ice", "--amount", "50")

        out = stocked("sales", "today").output

        assert "revenue Rs. 220.00" in out
        assert "Expenses: Rs. 50.00  Net: Rs. 170.00" in out
