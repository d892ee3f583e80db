"""JSON-file-backed implementation of ExpenseRepository."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

from pos.domain.model.expense import Expense, ExpensePaymentMethod
from pos.domain.repository.expense_repository import ExpenseRepository
from pos.infrastructure.persistence.file_lock import locked
from pos.infrastructure.persistence.json_file import ensure_file, load_json, persist_json


class JsonExpenseRepository(ExpenseRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_file(self._file_path)

    # --- ExpenseRepository interface ------------------------------------------

    def get_by_id(self, expense_id: str) -> Expense | None:
        return self._load().get(expense_id)

    def list_between(self, start: date, end: date) -> list[Expense]:
        found = [e for e in self._load().values() if start <= e.date <= end]
        return sorted(found, key=lambda e: (e.date, e.created_at), reverse=True)

    def list_all(self) -> list[Expense]:
        return list(self._load().values())

    def save(self, expense: Expense) -> None:
        with locked(self._file_path):
            expenses = self._load()
            expenses[expense.id] = expense
            self._persist(expenses)

    def delete(self, expense_id: str) -> None:
        with locked(self._file_path):
            expenses = self._load()
            if expenses.pop(expense_id, None) is not None:
                self._persist(expenses)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Expense]:
        return {
            raw["id"]: Expense(
                id=raw["id"],
                date=date.fromisoformat(raw["date"]),
                description=raw["description"],
                amount=Decimal(raw["amount"]),
                category=raw.get("category"),
                payment_method=ExpensePaymentMethod(raw["payment_method"]),
                paid_to=raw.get("paid_to"),
                created_by=raw.get("created_by"),
                created_at=datetime.fromisoformat(raw["created_at"]),
                updated_at=(
                    datetime.fromisoformat(raw["updated_at"])
                    if raw.get("updated_at")
                    else None
                ),
            )
            for raw in load_json(self._file_path)
        }

    def _persist(self, expenses: dict[str, Expense]) -> None:
        raw = [
            {
                "id": e.id,
                "date": e.date.isoformat(),
                "description": e.description,
                "amount": str(e.amount),
                "category": e.category,
                "payment_method": e.payment_method.value,
                "paid_to": e.paid_to,
                "created_by": e.created_by,
                "created_at": e.created_at.isoformat(),
                "updated_at": e.updated_at.isoformat() if e.updated_at else None,
            }
            for e in expenses.values()
        ]
        persist_json(self._file_path, raw)
