"""Printing port: where finished bills go after checkout."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.bill import BillSnapshot
from pos.domain.model.settings import StoreSettings


class BillPrinter(ABC):
    """Renders a bill snapshot for the customer and for the kitchen.

    Implementations raise ``PrintError`` when output fails.
    """

    @abstractmethod
    def print_receipt(self, snapshot: BillSnapshot, settings: StoreSettings) -> None:
        """Print the customer receipt."""

    @abstractmethod
    def print_kitchen_ticket(self, snapshot: BillSnapshot) -> None:
        """Print the kitchen order ticket (KOT)."""
