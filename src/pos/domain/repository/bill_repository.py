"""Abstract repository for Bill records.

Defined in the domain layer so the checkout workflow never depends on
infrastructure. Implementations report backend failures as
``PersistenceError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from pos.domain.model.bill import Bill, BillLine


class BillRepository(ABC):

    @abstractmethod
    def allocate_bill_number(self) -> str:
        """Reserve the next unique bill number.

        The final ``-`` separated segment is a decimal running number.
        Numbers are never reused, even when the bill is not saved.
        """

    @abstractmethod
    def create_bill(self, bill: Bill) -> Bill:
        """Insert a bill row and return it with its ``id`` assigned."""

    @abstractmethod
    def create_bill_lines(self, lines: list[BillLine]) -> None:
        """Insert the line items of a bill in one call."""

    @abstractmethod
    def get_by_number(self, bill_number: str) -> Bill | None:
        """Return a bill by its full number, or None if not found."""

    @abstractmethod
    def list_lines(self, bill_id: int) -> list[BillLine]:
        """Return the line items stored for a bill."""

    @abstractmethod
    def list_created_between(self, start: datetime, end: datetime) -> list[Bill]:
        """Return bills with ``start <= created_at < end``."""
