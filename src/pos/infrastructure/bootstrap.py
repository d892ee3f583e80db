"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Configuration comes from the environment:

- ``POS_DATA_DIR``: where the JSON files live (default ``<repo>/data``)
- ``POS_BILL_PREFIX``: leading segment of bill numbers (default ``BILL``)
"""

from __future__ import annotations

import os
from pathlib import Path

from pos.infrastructure.persistence.json_bill_repository import (
    DEFAULT_PREFIX,
    JsonBillRepository,
)
from pos.infrastructure.persistence.json_cart_store import JsonCartStore
from pos.infrastructure.persistence.json_expense_repository import (
    JsonExpenseRepository,
)
from pos.infrastructure.persistence.json_menu_repository import JsonMenuRepository
from pos.infrastructure.persistence.json_settings_repository import (
    JsonSettingsRepository,
)
from pos.infrastructure.printing.text_printer import TextBillPrinter

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    return Path(os.environ.get("POS_DATA_DIR") or _DEFAULT_DATA_DIR)


def bill_repository() -> JsonBillRepository:
    prefix = os.environ.get("POS_BILL_PREFIX") or DEFAULT_PREFIX
    return JsonBillRepository(data_dir(), prefix=prefix)


def menu_repository() -> JsonMenuRepository:
    return JsonMenuRepository(data_dir() / "menu_items.json")


def settings_repository() -> JsonSettingsRepository:
    return JsonSettingsRepository(data_dir() / "settings.json")


def cart_store() -> JsonCartStore:
    return JsonCartStore(data_dir() / "cart.json")


def bill_printer() -> TextBillPrinter:
    return TextBillPrinter()


def expense_repository() -> JsonExpenseRepository:
    return JsonExpenseRepository(data_dir() / "expenses.json")
