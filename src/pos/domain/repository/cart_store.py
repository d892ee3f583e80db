"""Abstract store for the open cart of a terminal.

Only order state is kept. Tax configuration is store-level and is
loaded from settings each time a session opens.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from pos.domain.model.cart import Cart


class CartStore(ABC):

    @abstractmethod
    def load(self) -> Cart:
        """Return the open cart, or a new empty one."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the open cart."""

    @abstractmethod
    def checkout_guard(self) -> AbstractContextManager[None]:
        """Hold the cart exclusively for one checkout.

        Entering raises ``CheckoutInProgressError`` if another checkout
        already holds this cart, in this process or any other.
        """
