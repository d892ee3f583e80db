"""Abstract repository for the Expense aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from pos.domain.model.expense import Expense


class ExpenseRepository(ABC):

    @abstractmethod
    def get_by_id(self, expense_id: str) -> Expense | None:
        """Return an expense by its ID, or None if not found."""

    @abstractmethod
    def list_between(self, start: date, end: date) -> list[Expense]:
        """Return expenses dated ``start`` to ``end`` inclusive, newest first."""

    @abstractmethod
    def list_all(self) -> list[Expense]:
        """Return every expense."""

    @abstractmethod
    def save(self, expense: Expense) -> None:
        """Persist a new or updated expense."""

    @abstractmethod
    def delete(self, expense_id: str) -> None:
        """Remove an expense. Unknown IDs are ignored."""
