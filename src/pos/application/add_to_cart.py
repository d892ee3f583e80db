"""Application service: Add To Cart use case.

Resolves a menu item and hands its catalog reference to the cart. The
cart decides whether that appends a line or bumps an existing one.
"""

from __future__ import annotations

from pos.domain.exceptions import EntityNotFoundError, ValidationError
from pos.domain.model.cart import Cart, CartLine
from pos.domain.repository.menu_repository import MenuRepository


class AddToCartHandler:

    def __init__(self, menu_repo: MenuRepository) -> None:
        self._menu_repo = menu_repo

    def handle(self, cart: Cart, item_id: str) -> CartLine:
        item = self._menu_repo.get_by_id(item_id)
        if item is None:
            raise EntityNotFoundError(f"Menu item with ID '{item_id}' not found")
        if not item.is_available:
            raise ValidationError(f"'{item.item_name}' is not available")

        return cart.add_item(item.to_catalog_ref())
