"""JSON-file-backed implementation of MenuRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from pos.domain.model.menu_item import MenuItem
from pos.domain.repository.menu_repository import MenuRepository
from pos.infrastructure.persistence.json_file import ensure_file, load_json, persist_json


class JsonMenuRepository(MenuRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_file(self._file_path)

    # --- MenuRepository interface ---------------------------------------------

    def get_by_id(self, item_id: str) -> MenuItem | None:
        return self._load().get(item_id)

    def get_by_name(self, name: str) -> MenuItem | None:
        for item in self._load().values():
            if item.item_name.lower() == name.lower():
                return item
        return None

    def list_all(self) -> list[MenuItem]:
        return list(self._load().values())

    def list_available(self) -> list[MenuItem]:
        items = [i for i in self._load().values() if i.is_available]
        return sorted(items, key=lambda i: i.category.lower())

    def save(self, item: MenuItem) -> None:
        items = self._load()
        items[item.id] = item
        self._persist(items)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, MenuItem]:
        return {
            raw["id"]: MenuItem(
                id=raw["id"],
                item_name=raw["item_name"],
                category=raw["category"],
                price=Decimal(raw["price"]),
                is_available=raw.get("is_available", True),
                description=raw.get("description"),
            )
            for raw in load_json(self._file_path)
        }

    def _persist(self, items: dict[str, MenuItem]) -> None:
        raw = [
            {
                "id": i.id,
                "item_name": i.item_name,
                "category": i.category,
                "price": str(i.price),
                "is_available": i.is_available,
                "description": i.description,
            }
            for i in items.values()
        ]
        persist_json(self._file_path, raw)
