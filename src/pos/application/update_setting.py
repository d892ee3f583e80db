"""Application service: Update Setting use case."""

from __future__ import annotations

from pos.domain.exceptions import ValidationError
from pos.domain.model.settings import (
    KNOWN_KEYS,
    TAX_ENABLED,
    TAX_PERCENTAGE,
    parse_tax_percentage,
)
from pos.domain.repository.settings_repository import SettingsRepository


class UpdateSettingHandler:

    def __init__(self, settings_repo: SettingsRepository) -> None:
        self._settings_repo = settings_repo

    def handle(self, key: str, value: str) -> None:
        """Validate and store one setting.

        Tax values are checked here so a bad rate never reaches a
        terminal at session load.
        """
        if key not in KNOWN_KEYS:
            raise ValidationError(
                f"Unknown setting '{key}' (expected one of: {', '.join(KNOWN_KEYS)})"
            )

        if key == TAX_ENABLED:
            value = value.strip().lower()
            if value not in ("true", "false"):
                raise ValidationError("tax_enabled must be 'true' or 'false'")
        elif key == TAX_PERCENTAGE:
            parse_tax_percentage(value)
            value = value.strip()

        self._settings_repo.save(key, value)
