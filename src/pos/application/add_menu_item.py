"""Application service: Add Menu Item use case."""

from __future__ import annotations

from pos.domain.exceptions import ValidationError
from pos.domain.model.menu_item import MenuItem
from pos.domain.model.value_objects import ZERO, to_amount
from pos.domain.repository.menu_repository import MenuRepository


class AddMenuItemHandler:

    def __init__(self, menu_repo: MenuRepository) -> None:
        self._menu_repo = menu_repo

    def handle(
        self,
        name: str,
        price: str,
        category: str,
        description: str | None = None,
    ) -> MenuItem:
        """Add a new item to the menu."""
        if not name or not name.strip():
            raise ValidationError("Item name is required")
        if not category or not category.strip():
            raise ValidationError("Category is required")

        existing = self._menu_repo.get_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Menu item '{name}' already exists")

        amount = to_amount(price)
        if amount <= ZERO:
            raise ValidationError("Menu item price must be greater than zero")

        # Auto-assign ID based on existing items
        all_items = self._menu_repo.list_all()
        if all_items:
            next_id = str(max(int(i.id) for i in all_items) + 1)
        else:
            next_id = "1"

        item = MenuItem(
            id=next_id,
            item_name=name.strip(),
            category=category.strip(),
            price=amount,
            description=description,
        )
        self._menu_repo.save(item)
        return item
