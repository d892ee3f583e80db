"""Application services that edit an existing cart line.

The cart treats unknown ids as no-ops; these handlers report them so the
operator gets feedback.
"""

from __future__ import annotations

from decimal import Decimal

from pos.domain.exceptions import EntityNotFoundError
from pos.domain.model.cart import Cart, CartLine


def _require_line(cart: Cart, item_id: str) -> CartLine:
    line = cart.find_line(item_id)
    if line is None:
        raise EntityNotFoundError(f"No line for item '{item_id}' in the cart")
    return line


class ChangeQuantityHandler:

    def handle(self, cart: Cart, item_id: str, quantity: int) -> CartLine | None:
        """Set a line's quantity; anything below 1 removes the line.

        Returns the updated line, or None when it was removed.
        """
        line = _require_line(cart, item_id)
        if quantity < 1:
            cart.remove_item(item_id)
            return None
        cart.update_quantity(item_id, quantity)
        return line


class EditLineHandler:

    def handle(
        self,
        cart: Cart,
        item_id: str,
        note: str | None = None,
        extra_charge: str | Decimal | None = None,
    ) -> CartLine:
        """Set the note and/or the per-unit extra charge of a line.

        An empty note clears it.
        """
        line = _require_line(cart, item_id)
        if note is not None:
            cart.update_item_note(item_id, note.strip() or None)
        if extra_charge is not None:
            cart.update_item_extra_charge(item_id, extra_charge)
        return line


class RemoveFromCartHandler:

    def handle(self, cart: Cart, item_id: str) -> None:
        _require_line(cart, item_id)
        cart.remove_item(item_id)
