"""Abstract repository for the key/value settings table."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SettingsRepository(ABC):

    @abstractmethod
    def get_all(self) -> dict[str, str]:
        """Return every setting as ``{setting_key: setting_value}``."""

    @abstractmethod
    def save(self, key: str, value: str) -> None:
        """Insert or overwrite one setting."""
