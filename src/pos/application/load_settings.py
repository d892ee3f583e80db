"""Application service: Load Settings use case.

Runs when a terminal session opens. Reads every setting pair and pushes
the tax configuration into the cart.
"""

from __future__ import annotations

from pos.domain.model.cart import Cart
from pos.domain.model.settings import StoreSettings
from pos.domain.repository.settings_repository import SettingsRepository


class LoadSettingsHandler:

    def __init__(self, settings_repo: SettingsRepository) -> None:
        self._settings_repo = settings_repo

    def handle(self, cart: Cart) -> StoreSettings:
        settings = StoreSettings.from_mapping(self._settings_repo.get_all())
        cart.set_tax_config(settings.tax_enabled, settings.tax_percentage)
        return settings
