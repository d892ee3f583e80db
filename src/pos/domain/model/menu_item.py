"""MenuItem aggregate.

Menu items live independently of carts and bills. Prices change and
items go on and off the menu without affecting orders already rung up.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import ZERO, CatalogRef


@dataclass
class MenuItem:
    """A dish or drink on the menu."""

    id: str
    item_name: str
    category: str
    price: Decimal
    is_available: bool = True
    description: str | None = None

    def update_price(self, new_price: Decimal) -> None:
        """Change the menu price.

        Lines already in a cart keep the price they were added at.
        """
        if new_price <= ZERO:
            raise ValidationError("Menu item price must be greater than zero")
        self.price = new_price

    def to_catalog_ref(self) -> CatalogRef:
        return CatalogRef(id=self.id, name=self.item_name, unit_price=self.price)
