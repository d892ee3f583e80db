"""Abstract repository for MenuItem aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.menu_item import MenuItem


class MenuRepository(ABC):

    @abstractmethod
    def get_by_id(self, item_id: str) -> MenuItem | None:
        """Return a menu item by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> MenuItem | None:
        """Return a menu item by name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[MenuItem]:
        """Return every menu item."""

    @abstractmethod
    def list_available(self) -> list[MenuItem]:
        """Return items currently on sale, ordered by category."""

    @abstractmethod
    def save(self, item: MenuItem) -> None:
        """Persist a new or updated menu item."""
